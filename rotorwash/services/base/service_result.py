"""
Service result patterns for standardized response handling.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from rotorwash.core.exceptions import BaseAppException, ValidationError

TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data; on failure, whatever the caller may still need
            (e.g. the submitted values to re-render)
        errors: Every error collected by the operation
        message: Human-readable status message
        metadata: Additional context information
    """

    is_success: bool
    data: Optional[TData] = None
    errors: List[BaseAppException] = field(default_factory=list)
    message: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(
            is_success=True,
            data=data,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        errors: List[BaseAppException],
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(
            is_success=False,
            data=data,
            errors=list(errors),
            message=message or "; ".join(e.message for e in errors),
            metadata=metadata or {},
        )

    @property
    def validation_errors(self) -> List[ValidationError]:
        return [e for e in self.errors if isinstance(e, ValidationError)]

    def errors_by_field(self) -> Dict[str, ValidationError]:
        """First validation error for each field."""
        by_field: Dict[str, ValidationError] = {}
        for error in self.validation_errors:
            by_field.setdefault(error.field, error)
        return by_field

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.is_success,
            "message": self.message,
            "errors": [e.to_dict()["error"] for e in self.errors],
        }
