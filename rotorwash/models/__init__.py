from rotorwash.models.base import Base, TimestampMixin
from rotorwash.models.theme_option import ThemeOption

__all__ = ["Base", "TimestampMixin", "ThemeOption"]
