"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from hospital.core.domain.entities import AggregateRoot, Entity
from hospital.core.domain.exceptions import (
    ConcurrencyError,
    DomainException,
    DuplicateKeyError,
    EntityInUseError,
    InvalidArgumentError,
    InvalidDateError,
    InvalidOperationError,
    InvalidTransitionError,
    NotFoundError,
    SlotConflictError,
    ValidationError,
)
from hospital.core.domain.value_objects import Email, StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    # Value Objects
    "ValueObject",
    "Email",
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationError",
    "InvalidDateError",
    "InvalidArgumentError",
    "NotFoundError",
    "DuplicateKeyError",
    "SlotConflictError",
    "InvalidOperationError",
    "InvalidTransitionError",
    "EntityInUseError",
    "ConcurrencyError",
]
