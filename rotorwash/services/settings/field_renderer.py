"""
Field renderers.

A renderer turns one field definition plus the current values into an
HTML fragment. ``HtmlFieldRenderer`` is the default; the page composer
accepts any ``FieldRenderer`` implementation instead.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from jinja2 import Environment
from markupsafe import Markup

from rotorwash.core.exceptions import ValidationError
from rotorwash.schemas.settings import FieldDefinition, FieldKind, SettingsBlob
from rotorwash.services.settings.templates import build_environment


class FieldRenderer(ABC):
    """Renders the input markup for a single settings field."""

    def __init__(self, option_name: str):
        self.option_name = option_name

    @staticmethod
    def current_value(field: FieldDefinition, blob: Mapping[str, str]) -> str:
        if isinstance(blob, SettingsBlob):
            return blob.value_for(field)
        value = blob.get(field.key)
        return field.default if value is None else str(value)

    @abstractmethod
    def render(
        self,
        field: FieldDefinition,
        blob: Mapping[str, str],
        *,
        error: Optional[ValidationError] = None,
    ) -> Markup:
        ...


class HtmlFieldRenderer(FieldRenderer):
    """Jinja2-backed renderer; every interpolated value is autoescaped."""

    templates = {
        FieldKind.TEXT: "fields/text.html",
        FieldKind.SELECT: "fields/select.html",
    }

    def __init__(self, option_name: str, env: Optional[Environment] = None):
        super().__init__(option_name)
        self.env = env or build_environment()

    def render(
        self,
        field: FieldDefinition,
        blob: Mapping[str, str],
        *,
        error: Optional[ValidationError] = None,
    ) -> Markup:
        template = self.env.get_template(self.templates[field.kind])
        return Markup(
            template.render(
                field=field,
                value=self.current_value(field, blob),
                option_name=self.option_name,
                error=error,
            )
        )
