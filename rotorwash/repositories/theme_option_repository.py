# rotorwash/repositories/theme_option_repository.py
from typing import Any, Dict, Union

from sqlalchemy.orm import Session

from rotorwash.models import ThemeOption
from rotorwash.repositories.base import BaseRepository


class ThemeOptionRepository(BaseRepository[ThemeOption]):
    def __init__(self, session: Session):
        super().__init__(session, ThemeOption)

    def get_by_name(self, name: str) -> Union[ThemeOption, None]:
        stmt = self._base_select().where(ThemeOption.name == name)
        return self.session.execute(stmt).scalar_one_or_none()

    def upsert(self, name: str, value: Dict[str, Any]) -> ThemeOption:
        """Replace the whole value stored under ``name``."""
        existing = self.get_by_name(name)
        if existing is None:
            return self.create({"name": name, "value": dict(value)})
        return self.update(existing, {"value": dict(value)})
