"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self

from hospital.core.shared import validators


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates the ``local@domain.tld`` shape and trims surrounding whitespace.
    """

    address: str

    def _validate(self) -> None:
        object.__setattr__(self, "address", validators.Validator.email(self.address, "email", max_len=100))

    def get_domain(self) -> str:
        """Get email domain."""
        return self.address.split("@")[1]

    def __str__(self) -> str:
        return self.address


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")
