# --- File: rotorwash/schemas/settings.py ---
"""
Settings declaration schemas and the settings blob.

Fields and sections are declared once and never change; the blob is the
current set of string values for one named option.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import Field, field_validator

from rotorwash.schemas.base import FrozenSchema

__all__ = [
    "FieldKind",
    "SelectOption",
    "FieldDefinition",
    "SettingsSection",
    "SettingsBlob",
]


class FieldKind(str, Enum):
    """Input kinds a settings field can be rendered as."""

    TEXT = "text"
    SELECT = "select"


class SelectOption(FrozenSchema):
    """One choice of a select field."""

    value: str = Field(..., description="Submitted and stored value")
    label: str = Field(..., description="Text shown to the administrator")
    title: Optional[str] = Field(default=None, description="Tooltip, e.g. a currency symbol")


class FieldDefinition(FrozenSchema):
    """
    One configurable value.

    ``options`` only applies to select fields and keeps declaration order.
    A select's ``default`` may be left empty to mean "nothing chosen".
    """

    key: str = Field(..., min_length=1, description="Key inside the settings blob")
    label: str = Field(..., description="Label shown next to the input")
    kind: FieldKind = Field(default=FieldKind.TEXT)
    options: Tuple[SelectOption, ...] = Field(default=())
    default: str = Field(default="")
    size: int = Field(default=40, ge=1, description="Width of text inputs")
    help_text: Optional[str] = Field(default=None)

    @field_validator("options", mode="before")
    @classmethod
    def coerce_options(cls, v: Any) -> Any:
        """Accept ``(value, label)`` / ``(value, label, title)`` pairs"""
        if v is None:
            return ()
        coerced = []
        for option in v:
            if isinstance(option, (tuple, list)):
                value, label, *rest = option
                coerced.append({"value": value, "label": label, "title": rest[0] if rest else None})
            else:
                coerced.append(option)
        return tuple(coerced)

    def option_values(self) -> Tuple[str, ...]:
        return tuple(option.value for option in self.options)

    def accepts(self, value: str) -> bool:
        """Whether ``value`` may be stored for this field."""
        if self.kind is FieldKind.SELECT:
            return value in self.option_values() or value == self.default
        return True


class SettingsSection(FrozenSchema):
    """A display grouping of related fields."""

    id: str = Field(..., min_length=1)
    title: str
    description: Tuple[str, ...] = Field(default=(), description="Plain-text paragraphs")
    fields: Tuple[FieldDefinition, ...] = Field(default=())

    @field_validator("description", mode="before")
    @classmethod
    def split_description(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(p.strip() for p in v.split("\n\n") if p.strip())
        return v


class SettingsBlob(Mapping):
    """
    Read-only mapping of field key to current value.

    ``fallback`` is set when the values are defaults substituted because
    the storage could not be read.
    """

    __slots__ = ("_values", "fallback")

    def __init__(self, values: Optional[Mapping[str, str]] = None, *, fallback: bool = False):
        self._values: Dict[str, str] = dict(values or {})
        self.fallback = fallback

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def value_for(self, field: FieldDefinition) -> str:
        """Stored value for ``field``, or its declared default."""
        return self._values.get(field.key, field.default)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __repr__(self) -> str:
        suffix = ", fallback=True" if self.fallback else ""
        return f"SettingsBlob({self._values!r}{suffix})"
