"""
Unit tests for the domain exception taxonomy.
"""

from datetime import datetime

import pytest

from hospital.core.domain import (
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

WHEN = datetime(2030, 1, 1, 10, 0)


@pytest.mark.unit
@pytest.mark.parametrize(
    "error,code,parent",
    [
        (ValidationError("bad", field="x"), "VALIDATION_ERROR", DomainException),
        (InvalidDateError(WHEN), "INVALID_DATE", ValidationError),
        (InvalidArgumentError("doctor_id"), "INVALID_ARGUMENT", ValidationError),
        (NotFoundError("Patient", 3), "ENTITY_NOT_FOUND", DomainException),
        (DuplicateKeyError("Patient", "national_id", "123"), "DUPLICATE_KEY", DomainException),
        (SlotConflictError(1, WHEN), "SLOT_CONFLICT", DomainException),
        (InvalidOperationError("reschedule", "attended"), "INVALID_OPERATION", DomainException),
        (InvalidTransitionError("attended", "cancelled"), "INVALID_TRANSITION", InvalidOperationError),
        (EntityInUseError("Doctor", 1, "appointments", 2), "ENTITY_IN_USE", DomainException),
        (ConcurrencyError("Appointment", 4, 1, 2), "CONCURRENCY_CONFLICT", DomainException),
    ],
)
def test_codes_and_hierarchy(error, code, parent):
    assert error.code == code
    assert isinstance(error, parent)
    assert error.to_dict()["error"] == code
    assert error.to_dict()["message"] == str(error)


@pytest.mark.unit
def test_errors_carry_their_context():
    not_found = NotFoundError("Doctor", 42)
    duplicate = DuplicateKeyError("Doctor", "license_number", "COL-1")
    transition = InvalidTransitionError("attended", "cancelled")
    in_use = EntityInUseError("Doctor", 1, "appointments", 3)

    assert not_found.entity_type == "Doctor"
    assert not_found.details["entity_id"] == "42"
    assert duplicate.key == "COL-1"
    assert transition.details == {
        "requested_state": "cancelled",
        "operation": "change_status",
        "current_state": "attended",
    }
    assert in_use.count == 3
    assert "3 appointments" in in_use.message
