"""
Settings page composer.

Builds the full settings form from the registered sections and runs the
submit cycle. The page is either being viewed or being submitted; a
submission always ends with the page viewed again, carrying either a
confirmation banner or error banners.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Sequence

from markupsafe import Markup

from rotorwash.core.exceptions import PersistenceUnavailableError, ValidationError
from rotorwash.core.logging import get_logger
from rotorwash.schemas.settings import FieldDefinition, SettingsBlob, SettingsSection
from rotorwash.services.base.service_result import ServiceResult
from rotorwash.services.settings.field_renderer import FieldRenderer, HtmlFieldRenderer
from rotorwash.services.settings.registry import FieldRegistry
from rotorwash.services.settings.settings_store import SettingsStore
from rotorwash.services.settings.templates import build_environment

logger = get_logger(__name__)

SAVED_MESSAGE = "Settings saved."
INVALID_MESSAGE = "Settings were not saved. Please correct the highlighted fields."
UNAVAILABLE_MESSAGE = "The settings storage is unavailable. Default values are shown."
NOT_SAVED_MESSAGE = "The settings storage is unavailable. Your changes were not saved."


class PageState(str, Enum):
    VIEWING = "viewing"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class Notice:
    """A banner shown above the form."""

    message: str
    level: str = "updated"

    @property
    def css_class(self) -> str:
        return "updated" if self.level == "updated" else "error"


@dataclass(frozen=True)
class _Row:
    field: FieldDefinition
    markup: Markup
    error: Optional[ValidationError]


@dataclass(frozen=True)
class _Block:
    section: SettingsSection
    rows: List[_Row]


class SettingsPageComposer:
    """Renders the settings page and hands submissions to the store."""

    def __init__(
        self,
        store: SettingsStore,
        registry: FieldRegistry,
        option_name: str,
        *,
        renderer: Optional[FieldRenderer] = None,
        page_title: str = "Settings",
        action: str = "",
        submit_label: str = "Save Changes",
    ):
        self.store = store
        self.registry = registry
        self.option_name = option_name
        self.renderer = renderer or HtmlFieldRenderer(option_name)
        self.page_title = page_title
        self.action = action
        self.submit_label = submit_label
        self.env = build_environment()

    def _sections(self, sections: Optional[Iterable[SettingsSection]]) -> Sequence[SettingsSection]:
        return self.registry.get_sections() if sections is None else tuple(sections)

    def render_page(
        self,
        sections: Optional[Iterable[SettingsSection]] = None,
        blob: Optional[Mapping[str, str]] = None,
        *,
        errors: Optional[Mapping[str, ValidationError]] = None,
        notices: Sequence[Notice] = (),
    ) -> Markup:
        """
        Render the whole settings form.

        ``blob`` defaults to the stored values. ``errors`` maps field keys to
        the message shown next to that field.
        """
        if blob is None:
            blob = self.store.load(self.option_name)
        errors = errors or {}
        notices = list(notices)
        if isinstance(blob, SettingsBlob) and blob.fallback:
            notices.append(Notice(UNAVAILABLE_MESSAGE, "error"))

        blocks = []
        for section in self._sections(sections):
            rows = [
                _Row(field, self.renderer.render(field, blob, error=errors.get(field.key)), errors.get(field.key))
                for field in section.fields
            ]
            blocks.append(_Block(section, rows))

        template = self.env.get_template("settings_page.html")
        return Markup(
            template.render(
                page_title=self.page_title,
                notices=notices,
                action=self.action,
                blocks=blocks,
                submit_label=self.submit_label,
            )
        )

    def view(self, sections: Optional[Iterable[SettingsSection]] = None) -> Markup:
        """GET: render the page from the stored values."""
        logger.debug("Rendering settings page", extra={"page_state": PageState.VIEWING.value})
        return self.render_page(sections)

    def handle_submit(
        self,
        sections: Optional[Iterable[SettingsSection]],
        raw_input: Mapping[str, Optional[str]],
    ) -> ServiceResult[SettingsBlob]:
        """
        POST: validate and save ``raw_input``, then re-render.

        On success ``data`` is the freshly reloaded blob. On failure ``data``
        holds the submitted values and ``errors`` every problem found. The
        re-rendered page is in ``metadata["page"]`` either way.
        """
        chosen = self._sections(sections)
        scope = None if sections is None else chosen
        logger.debug("Handling settings submission", extra={"page_state": PageState.SUBMITTING.value})

        try:
            result = self.store.save(self.option_name, raw_input, scope)
        except PersistenceUnavailableError as e:
            logger.error(f"Could not save settings: {e.message}", extra={"option_name": self.option_name})
            submitted = self.store.validate(raw_input, scope)
            page = self.render_page(
                chosen,
                self._over_stored(submitted.data),
                errors=submitted.errors_by_field(),
                notices=[Notice(NOT_SAVED_MESSAGE, "error")],
            )
            return ServiceResult.failure(
                [e, *submitted.errors],
                data=submitted.data,
                metadata={"page": page, "state": PageState.VIEWING},
            )

        if not result.is_success:
            errors_by_field = result.errors_by_field()
            notices = [Notice(INVALID_MESSAGE, "error")]
            notices.extend(
                Notice(f"{self._label(key)}: {error.reason}", "error") for key, error in errors_by_field.items()
            )
            result.metadata.update(
                page=self.render_page(
                    chosen, self._over_stored(result.data), errors=errors_by_field, notices=notices
                ),
                state=PageState.VIEWING,
            )
            return result

        blob = self.store.load(self.option_name)
        page = self.render_page(chosen, blob, notices=[Notice(SAVED_MESSAGE)])
        return ServiceResult.success(
            blob,
            message=SAVED_MESSAGE,
            metadata={"page": page, "state": PageState.VIEWING},
        )

    def _over_stored(self, submitted: Mapping[str, str]) -> SettingsBlob:
        """Submitted values layered over the stored ones, for re-rendering."""
        return SettingsBlob({**self.store.load(self.option_name), **submitted})

    def _label(self, key: str) -> str:
        field = self.registry.get_field(key)
        return field.label if field is not None else key