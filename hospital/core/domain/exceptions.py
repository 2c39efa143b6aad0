"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are raised by entities, value objects and use cases, and are surfaced
unchanged to the calling layer.
"""

from datetime import datetime
from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "SLOT_CONFLICT")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for boundary responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """
    Raised when a field is missing, malformed or out of range.

    Use for invalid entity states, value object creation failures, etc.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = "VALIDATION_ERROR",
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, code, details)
        self.field = field


class InvalidDateError(ValidationError):
    """Raised when an appointment timestamp is not strictly in the future."""

    def __init__(self, value: datetime, message: str | None = None):
        self.value = value
        msg = message or f"Appointment date {value.isoformat(sep=' ')} must be in the future"
        super().__init__(
            msg,
            field="scheduled_at",
            details={"value": value.isoformat()},
            code="INVALID_DATE",
        )


class InvalidArgumentError(ValidationError):
    """Raised when a required argument is missing or unusable."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        msg = message or f"Argument '{argument}' is required"
        super().__init__(msg, field=argument, code="INVALID_ARGUMENT")


class NotFoundError(DomainException):
    """
    Raised when a referenced entity does not exist.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateKeyError(DomainException):
    """Raised when a unique natural key is already registered."""

    def __init__(self, entity_type: str, key_name: str, key: Any, message: str | None = None):
        self.entity_type = entity_type
        self.key_name = key_name
        self.key = key
        msg = message or f"{entity_type} with {key_name} '{key}' already exists"
        super().__init__(
            msg,
            "DUPLICATE_KEY",
            {"entity_type": entity_type, "key_name": key_name, "key": str(key)},
        )


class SlotConflictError(DomainException):
    """Raised when a doctor already has a scheduled appointment at the requested time."""

    def __init__(
        self,
        doctor_id: int,
        scheduled_at: datetime,
        doctor_name: str | None = None,
        message: str | None = None,
    ):
        self.doctor_id = doctor_id
        self.scheduled_at = scheduled_at
        self.doctor_name = doctor_name
        who = doctor_name or f"Doctor {doctor_id}"
        msg = message or f"{who} already has an appointment scheduled at {scheduled_at.isoformat(sep=' ')}"
        details: dict[str, Any] = {
            "doctor_id": doctor_id,
            "scheduled_at": scheduled_at.isoformat(),
        }
        if doctor_name:
            details["doctor_name"] = doctor_name
        super().__init__(msg, "SLOT_CONFLICT", details)


class InvalidOperationError(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(
        self,
        operation: str,
        current_state: str,
        message: str | None = None,
        code: str = "INVALID_OPERATION",
        details: dict[str, Any] | None = None,
    ):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        details = {**(details or {}), "operation": operation, "current_state": current_state}
        super().__init__(msg, code, details)


class InvalidTransitionError(InvalidOperationError):
    """Raised when a status change is not allowed by the appointment lifecycle."""

    def __init__(self, current_state: str, requested_state: str, message: str | None = None):
        self.requested_state = requested_state
        msg = message or f"Cannot change appointment status from '{current_state}' to '{requested_state}'"
        super().__init__(
            "change_status",
            current_state,
            message=msg,
            code="INVALID_TRANSITION",
            details={"requested_state": requested_state},
        )


class EntityInUseError(DomainException):
    """Raised when an entity cannot be removed because other records reference it."""

    def __init__(self, entity_type: str, entity_id: Any, referenced_by: str, count: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.referenced_by = referenced_by
        self.count = count
        super().__init__(
            f"{entity_type} {entity_id} cannot be deleted: referenced by {count} {referenced_by}",
            "ENTITY_IN_USE",
            {
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "referenced_by": referenced_by,
                "count": count,
            },
        )


class ConcurrencyError(DomainException):
    """Raised when there's a concurrency conflict (optimistic locking)."""

    def __init__(self, entity_type: str, entity_id: Any, expected_version: int | None = None, actual_version: int | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Concurrency conflict for {entity_type} {entity_id}: the record was modified by another transaction",
            "CONCURRENCY_CONFLICT",
            {
                "entity_type": entity_type,
                "entity_id": str(entity_id),
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )
