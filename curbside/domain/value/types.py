"""Domain value objects for Curbside.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import field_validator

from curbside.domain.value.common import RootValueObject


class PostStatus(str, Enum):
    """Availability of a find as a whole."""

    AVAILABLE = "available"
    PARTIAL = "partial"
    TAKEN = "taken"


class ItemStatus(str, Enum):
    """Availability of a single item within a find."""

    AVAILABLE = "available"
    TAKEN = "taken"


class Username(RootValueObject[str]):
    """Unique public username.

    3-50 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters: letters, digits, '_', '.' or '-'"
            )
        return v


def _parse_decimal(v: str) -> Decimal:
    try:
        value = Decimal(v.strip())
    except InvalidOperation:
        raise ValueError(f"Not a decimal number: {v!r}")
    if not value.is_finite():
        raise ValueError(f"Not a decimal number: {v!r}")
    return value


class Latitude(RootValueObject[str]):
    """Latitude kept as decimal text so storage never rounds it."""

    @field_validator("root")
    @classmethod
    def validate_latitude(cls, v: str) -> str:
        """Validate latitude is a decimal in [-90, 90]."""
        if not -90 <= _parse_decimal(v) <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        return v.strip()


class Longitude(RootValueObject[str]):
    """Longitude kept as decimal text so storage never rounds it."""

    @field_validator("root")
    @classmethod
    def validate_longitude(cls, v: str) -> str:
        """Validate longitude is a decimal in [-180, 180]."""
        if not -180 <= _parse_decimal(v) <= 180:
            raise ValueError("Longitude must be between -180 and 180")
        return v.strip()
