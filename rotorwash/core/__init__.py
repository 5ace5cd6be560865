from rotorwash.core.exceptions import (
    BaseAppException,
    DuplicateKeyError,
    ErrorCode,
    InvalidFieldDefinitionError,
    PersistenceUnavailableError,
    RegistryFrozenError,
    ValidationError,
)
from rotorwash.core.logging import get_logger

__all__ = [
    "BaseAppException",
    "DuplicateKeyError",
    "ErrorCode",
    "InvalidFieldDefinitionError",
    "PersistenceUnavailableError",
    "RegistryFrozenError",
    "ValidationError",
    "get_logger",
]
