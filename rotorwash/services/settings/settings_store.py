"""
Settings store.

Loads and saves the settings blob for a named option through an
``OptionBackend``. Values are validated against the field registry as a
batch: either every submitted field is valid and the whole blob is
replaced, or nothing is written and every problem is reported.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from rotorwash.core.exceptions import PersistenceUnavailableError, ValidationError
from rotorwash.core.logging import get_logger
from rotorwash.repositories.option_backends import OptionBackend
from rotorwash.schemas.settings import FieldDefinition, FieldKind, SettingsBlob, SettingsSection
from rotorwash.services.base.service_result import ServiceResult
from rotorwash.services.settings.registry import FieldRegistry

logger = get_logger(__name__)


class SettingsStore:
    """Owner of the persisted settings blobs."""

    def __init__(self, backend: OptionBackend, registry: FieldRegistry):
        self.backend = backend
        self.registry = registry

    # ------------------------------------------------------------------ #
    # Reading
    # ------------------------------------------------------------------ #
    def load(self, name: str) -> SettingsBlob:
        """
        Current values for ``name``, one entry per declared field.

        A missing option yields the declared defaults. If the backend is
        unavailable the defaults are returned with ``fallback`` set.
        """
        try:
            stored = self._stored(name)
        except PersistenceUnavailableError as e:
            logger.warning(
                f"Falling back to default settings for '{name}': {e.message}",
                extra={"option_name": name},
            )
            return SettingsBlob(self.registry.defaults(), fallback=True)

        return SettingsBlob(self._merge_with_defaults(stored, name))

    def _stored(self, name: str) -> Mapping[str, object]:
        stored = self.backend.get(name)
        if stored is None:
            return {}
        if not isinstance(stored, Mapping):
            logger.warning(
                f"Stored option '{name}' is a {type(stored).__name__}, not a mapping; using defaults",
                extra={"option_name": name},
            )
            return {}
        return stored

    def _merge_with_defaults(self, stored: Mapping[str, object], name: str) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for field in self.registry.fields():
            raw = stored.get(field.key)
            values[field.key] = field.default if raw is None else str(raw)

        unknown = [key for key in stored if key not in self.registry]
        if unknown:
            logger.debug(
                f"Ignoring undeclared keys in option '{name}': {', '.join(sorted(unknown))}",
                extra={"option_name": name},
            )
        return values

    # ------------------------------------------------------------------ #
    # Writing
    # ------------------------------------------------------------------ #
    def validate(
        self,
        raw_input: Mapping[str, Optional[str]],
        sections: Optional[Iterable[SettingsSection]] = None,
    ) -> ServiceResult[SettingsBlob]:
        """
        Clean and check submitted values without writing anything.

        The result's ``data`` holds the cleaned submitted values whether or
        not validation passed.
        """
        cleaned: Dict[str, str] = {}
        errors: List[ValidationError] = []

        for field in self.registry.fields(sections):
            if field.key not in raw_input:
                continue
            value = self._clean(field, raw_input[field.key])
            cleaned[field.key] = value
            if not field.accepts(value):
                errors.append(ValidationError(field.key, "invalid option", value))

        ignored = [key for key in raw_input if key not in self.registry]
        if ignored:
            logger.debug(f"Ignoring undeclared submitted keys: {', '.join(sorted(ignored))}")

        if errors:
            return ServiceResult.failure(errors, data=SettingsBlob(cleaned))
        return ServiceResult.success(SettingsBlob(cleaned))

    @staticmethod
    def _clean(field: FieldDefinition, value: Optional[str]) -> str:
        if value is None:
            return ""
        value = str(value)
        if field.kind is FieldKind.TEXT:
            return value.strip()
        return value

    def save(
        self,
        name: str,
        raw_input: Mapping[str, Optional[str]],
        sections: Optional[Iterable[SettingsSection]] = None,
    ) -> ServiceResult[SettingsBlob]:
        """
        Validate ``raw_input`` and replace the stored blob.

        When ``sections`` is given only their fields are taken from
        ``raw_input``; values of other fields are carried over unchanged.
        On validation failure nothing is written and all errors are
        returned together.

        Raises:
            PersistenceUnavailableError: the backend could not be read or written
        """
        sections = None if sections is None else tuple(sections)
        result = self.validate(raw_input, sections)
        if not result.is_success:
            logger.info(
                f"Rejected settings for '{name}'",
                extra={"option_name": name, "invalid_fields": [e.field for e in result.validation_errors]},
            )
            return result

        new_values = result.data.to_dict()
        if sections is not None:
            scoped = {field.key for field in self.registry.fields(sections)}
            current = self._stored(name)
            carried = {
                key: str(value)
                for key, value in current.items()
                if key in self.registry and key not in scoped and value is not None
            }
            new_values = {**carried, **new_values}

        self.backend.set(name, new_values)
        logger.info(
            f"Saved settings for '{name}'",
            extra={"option_name": name, "field_count": len(new_values)},
        )
        return ServiceResult.success(
            SettingsBlob(self._merge_with_defaults(new_values, name)),
            message="Settings saved.",
        )
