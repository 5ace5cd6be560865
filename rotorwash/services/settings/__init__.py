from rotorwash.services.settings.field_renderer import FieldRenderer, HtmlFieldRenderer
from rotorwash.services.settings.page_composer import Notice, PageState, SettingsPageComposer
from rotorwash.services.settings.registry import FieldRegistry
from rotorwash.services.settings.settings_store import SettingsStore

__all__ = [
    "FieldRegistry",
    "FieldRenderer",
    "HtmlFieldRenderer",
    "Notice",
    "PageState",
    "SettingsPageComposer",
    "SettingsStore",
]
