from rotorwash.repositories.option_backends import (
    InMemoryOptionBackend,
    OptionBackend,
    SqlAlchemyOptionBackend,
)
from rotorwash.repositories.theme_option_repository import ThemeOptionRepository

__all__ = [
    "InMemoryOptionBackend",
    "OptionBackend",
    "SqlAlchemyOptionBackend",
    "ThemeOptionRepository",
]
