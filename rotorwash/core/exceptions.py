"""
Custom Exceptions for the RotorWash theme settings service

This module defines the exception classes used throughout the application
for declaration errors, per-field validation failures and persistence
outages.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Declaration errors
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    REGISTRY_FROZEN = "REGISTRY_FROZEN"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_OPTION = "INVALID_OPTION"

    # Persistence errors
    PERSISTENCE_UNAVAILABLE = "PERSISTENCE_UNAVAILABLE"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Declaration Exceptions
# ========================================

class DuplicateKeyError(BaseAppException):
    """Raised when a section id or field key is declared twice"""

    def __init__(self, key: str, section_id: Optional[str] = None, existing_section_id: Optional[str] = None):
        self.key = key
        self.section_id = section_id
        if existing_section_id and existing_section_id != section_id:
            message = f"Field '{key}' in section '{section_id}' is already declared by section '{existing_section_id}'"
        elif section_id:
            message = f"Field '{key}' is declared twice in section '{section_id}'"
        else:
            message = f"Section '{key}' is already registered"
        super().__init__(
            message,
            ErrorCode.DUPLICATE_ENTRY,
            {"key": key, "section_id": section_id, "existing_section_id": existing_section_id},
        )


class InvalidFieldDefinitionError(BaseAppException):
    """Raised when a field declaration is internally inconsistent"""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(
            f"Invalid definition for field '{key}': {reason}",
            ErrorCode.INVALID_CONFIGURATION,
            {"key": key, "reason": reason},
        )


class RegistryFrozenError(BaseAppException):
    """Raised when declarations are attempted after start-up"""

    def __init__(self, section_id: str):
        super().__init__(
            f"Cannot register section '{section_id}': the registry is frozen",
            ErrorCode.REGISTRY_FROZEN,
            {"section_id": section_id},
        )


# ========================================
# Validation Exceptions
# ========================================

class ValidationError(BaseAppException):
    """
    Validation failure for a single submitted field.

    Instances are collected rather than raised so that every invalid
    field can be reported in one pass.
    """

    def __init__(self, field: str, reason: str = "invalid option", value: Optional[str] = None):
        self.field = field
        self.reason = reason
        self.value = value
        super().__init__(
            f"{field}: {reason}",
            ErrorCode.INVALID_OPTION if reason == "invalid option" else ErrorCode.VALIDATION_ERROR,
            {"field": field, "reason": reason, "value": value},
            status_code=422,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.reason, self.value) == (other.field, other.reason, other.value)

    def __hash__(self) -> int:
        return hash((self.field, self.reason, self.value))


# ========================================
# Persistence Exceptions
# ========================================

class PersistenceUnavailableError(BaseAppException):
    """Raised when the option storage cannot be reached"""

    def __init__(self, operation: str, name: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.name = name
        details: Dict[str, Any] = {"operation": operation, "name": name}
        if cause is not None:
            details["cause"] = type(cause).__name__
        super().__init__(
            f"Settings storage is unavailable ({operation} '{name}')",
            ErrorCode.PERSISTENCE_UNAVAILABLE,
            details,
            status_code=503,
        )


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "DuplicateKeyError",
    "InvalidFieldDefinitionError",
    "RegistryFrozenError",
    "ValidationError",
    "PersistenceUnavailableError",
]
