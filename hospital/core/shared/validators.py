"""
Shared Validators

Field validation utilities used by every entity and value object.
"""

import re
from datetime import date, datetime
from typing import Any

from hospital.core.domain.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


class Validator:
    """Base validator class."""

    @staticmethod
    def required(value: Any, field_name: str = "field") -> Any:
        """Validate that value is not None or empty."""
        if value is None:
            raise ValidationError(f"{field_name} is required", field=field_name)
        if isinstance(value, str) and not value.strip():
            raise ValidationError(f"{field_name} cannot be empty", field=field_name)
        return value

    @staticmethod
    def max_length(value: str, max_len: int, field_name: str = "field") -> str:
        """Validate maximum string length."""
        if len(value) > max_len:
            raise ValidationError(
                f"{field_name} must be at most {max_len} characters",
                field=field_name,
                details={"max_length": max_len, "length": len(value)},
            )
        return value

    @classmethod
    def required_text(cls, value: str | None, max_len: int, field_name: str = "field") -> str:
        """Validate a mandatory, trimmed and bounded string."""
        cls.required(value, field_name)
        assert value is not None
        return cls.max_length(value.strip(), max_len, field_name)

    @classmethod
    def optional_text(cls, value: str | None, max_len: int, field_name: str = "field") -> str | None:
        """Validate an optional bounded string; blank values become None."""
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        return cls.max_length(value, max_len, field_name)

    @classmethod
    def not_in_future(cls, value: date | None, field_name: str = "date") -> date:
        """Validate that a calendar date is present and not after today."""
        cls.required(value, field_name)
        if isinstance(value, datetime):
            value = value.date()
        elif not isinstance(value, date):
            raise ValidationError(f"{field_name} must be a date", field=field_name)
        if value > date.today():
            raise ValidationError(f"{field_name} cannot be in the future", field=field_name)
        return value

    @classmethod
    def email(cls, value: str | None, field_name: str = "email", max_len: int = 100) -> str:
        """Validate email presence, length and format."""
        address = cls.required_text(value, max_len, field_name)
        if not EMAIL_PATTERN.match(address):
            raise ValidationError(
                f"Invalid email format: {address}",
                field=field_name,
                details={"value": address},
            )
        return address

    @staticmethod
    def is_valid_email(value: str | None) -> bool:
        """Check if email is valid without raising."""
        return bool(value) and EMAIL_PATTERN.match(value.strip()) is not None
