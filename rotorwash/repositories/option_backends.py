"""
Key/value option backends.

The settings store never touches storage per field: it reads and writes
a whole mapping addressed by a single option name. Any object with
``get(name)`` and ``set(name, mapping)`` can serve as the backend.
"""

import copy
import threading
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from rotorwash.core.exceptions import PersistenceUnavailableError
from rotorwash.core.logging import get_logger
from rotorwash.repositories.theme_option_repository import ThemeOptionRepository

logger = get_logger(__name__)


@runtime_checkable
class OptionBackend(Protocol):
    """Storage collaborator addressed by option name."""

    def get(self, name: str) -> Optional[Mapping[str, object]]:
        ...

    def set(self, name: str, value: Mapping[str, object]) -> None:
        ...


class InMemoryOptionBackend:
    """Process-local backend; values are copied in and out."""

    def __init__(self, initial: Optional[Dict[str, Mapping[str, object]]] = None):
        self._options: Dict[str, Dict[str, object]] = {
            name: dict(value) for name, value in (initial or {}).items()
        }
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[Mapping[str, object]]:
        with self._lock:
            value = self._options.get(name)
            return copy.deepcopy(value) if value is not None else None

    def set(self, name: str, value: Mapping[str, object]) -> None:
        with self._lock:
            self._options[name] = copy.deepcopy(dict(value))


class SqlAlchemyOptionBackend:
    """
    Backend storing each option as one JSON row in ``theme_options``.

    Every ``set`` runs in its own transaction. Concurrent writers are not
    coordinated: the last committed write wins. A row created by another
    writer between our read and our insert turns the write into an update.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, name: str) -> Optional[Mapping[str, object]]:
        try:
            with self.session_factory() as session:
                option = ThemeOptionRepository(session).get_by_name(name)
                value = option.value if option is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Database error reading option '{name}': {e}")
            raise PersistenceUnavailableError("read", name, e) from e

        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning(
                f"Option '{name}' holds a {type(value).__name__}, not a mapping; treating it as missing"
            )
            return None
        return dict(value)

    def set(self, name: str, value: Mapping[str, object]) -> None:
        try:
            try:
                self._upsert(name, value)
            except IntegrityError:
                logger.info(f"Option '{name}' was created by another writer; retrying as an update")
                self._upsert(name, value)
        except SQLAlchemyError as e:
            logger.error(f"Database error writing option '{name}': {e}")
            raise PersistenceUnavailableError("write", name, e) from e
        logger.debug(f"Option '{name}' written", extra={"field_count": len(value)})

    def _upsert(self, name: str, value: Mapping[str, object]) -> None:
        with self.session_factory() as session, session.begin():
            ThemeOptionRepository(session).upsert(name, dict(value))
