"""
Field definition registry.

Sections are declared at start-up and the registry is frozen before the
first request; after that it is read-only.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from rotorwash.core.exceptions import (
    DuplicateKeyError,
    InvalidFieldDefinitionError,
    RegistryFrozenError,
)
from rotorwash.core.logging import get_logger
from rotorwash.schemas.settings import FieldDefinition, FieldKind, SettingsSection

logger = get_logger(__name__)


class FieldRegistry:
    """Ordered collection of settings sections and their fields."""

    def __init__(self, sections: Optional[Iterable[SettingsSection]] = None):
        self._sections: Dict[str, SettingsSection] = {}
        self._field_owner: Dict[str, str] = {}
        self._fields: Dict[str, FieldDefinition] = {}
        self._frozen = False
        for section in sections or ():
            self.register_section(section)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "FieldRegistry":
        self._frozen = True
        return self

    def register_section(self, section: SettingsSection) -> SettingsSection:
        """
        Add a section.

        Raises:
            RegistryFrozenError: registration after start-up
            DuplicateKeyError: repeated section id, or a field key already
                declared in this or another section
            InvalidFieldDefinitionError: malformed select options
        """
        if self._frozen:
            raise RegistryFrozenError(section.id)
        if section.id in self._sections:
            raise DuplicateKeyError(section.id)

        seen: Dict[str, str] = {}
        for field in section.fields:
            if field.key in seen:
                raise DuplicateKeyError(field.key, section.id)
            if field.key in self._field_owner:
                raise DuplicateKeyError(field.key, section.id, self._field_owner[field.key])
            self._check_field(field)
            seen[field.key] = section.id

        self._sections[section.id] = section
        self._field_owner.update(seen)
        self._fields.update({field.key: field for field in section.fields})

        logger.debug(
            f"Registered settings section '{section.id}'",
            extra={"section_id": section.id, "field_count": len(section.fields)},
        )
        return section

    @staticmethod
    def _check_field(field: FieldDefinition) -> None:
        if field.kind is FieldKind.SELECT:
            values = field.option_values()
            if not values:
                raise InvalidFieldDefinitionError(field.key, "select fields need at least one option")
            if len(set(values)) != len(values):
                raise InvalidFieldDefinitionError(field.key, "option values must be unique")
        elif field.options:
            raise InvalidFieldDefinitionError(field.key, "only select fields take options")

    def get_sections(self) -> Tuple[SettingsSection, ...]:
        return tuple(self._sections.values())

    def get_section(self, section_id: str) -> Optional[SettingsSection]:
        return self._sections.get(section_id)

    def get_field(self, key: str) -> Optional[FieldDefinition]:
        return self._fields.get(key)

    def fields(self, sections: Optional[Iterable[SettingsSection]] = None) -> List[FieldDefinition]:
        """Fields of the given sections (all sections by default) in display order."""
        chosen = self.get_sections() if sections is None else sections
        return [field for section in chosen for field in section.fields]

    def defaults(self) -> Dict[str, str]:
        return {key: field.default for key, field in self._fields.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._sections)
