# rotorwash/models/theme_option.py
from typing import Any, Dict

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rotorwash.models.base import Base, TimestampMixin


class ThemeOption(Base, TimestampMixin):
    """
    Named option holding one whole settings blob.
    """
    __tablename__ = "theme_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(191), unique=True, nullable=False)
    value: Mapped[Dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)

    def __repr__(self) -> str:
        return f"ThemeOption(name={self.name!r})"
