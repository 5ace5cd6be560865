# --- File: rotorwash/schemas/base.py ---
"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema", "FrozenSchema"]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class FrozenSchema(BaseModel):
    """Immutable declaration schema; hashable and never reassigned."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=False,
        extra="forbid",
    )
