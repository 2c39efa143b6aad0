"""
Unit tests for the appointment lifecycle state machine.
"""

from datetime import datetime

import pytest

from hospital.core.domain import InvalidArgumentError, InvalidOperationError, InvalidTransitionError, ValidationError
from hospital.domains.healthcare.domain.entities import Appointment
from hospital.domains.healthcare.domain.value_objects import AppointmentStatus

WHEN = datetime(2030, 3, 11, 10, 30)


def make_appointment(**overrides) -> Appointment:
    data = {"patient_id": 1, "doctor_id": 2, "scheduled_at": WHEN, "reason": "Check-up"}
    data.update(overrides)
    return Appointment(**data)


# ============================================================================
# AppointmentStatus
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "current,target,allowed",
    [
        (AppointmentStatus.SCHEDULED, AppointmentStatus.ATTENDED, True),
        (AppointmentStatus.SCHEDULED, AppointmentStatus.CANCELLED, True),
        (AppointmentStatus.SCHEDULED, AppointmentStatus.SCHEDULED, False),
        (AppointmentStatus.ATTENDED, AppointmentStatus.CANCELLED, False),
        (AppointmentStatus.ATTENDED, AppointmentStatus.SCHEDULED, False),
        (AppointmentStatus.CANCELLED, AppointmentStatus.ATTENDED, False),
        (AppointmentStatus.CANCELLED, AppointmentStatus.SCHEDULED, False),
    ],
)
def test_transition_table(current, target, allowed):
    assert current.can_transition_to(target) is allowed


@pytest.mark.unit
def test_terminal_states_and_slot_occupation():
    assert not AppointmentStatus.SCHEDULED.is_terminal()
    assert AppointmentStatus.ATTENDED.is_terminal()
    assert AppointmentStatus.CANCELLED.is_terminal()

    assert AppointmentStatus.SCHEDULED.occupies_slot()
    assert not AppointmentStatus.ATTENDED.occupies_slot()
    assert not AppointmentStatus.CANCELLED.occupies_slot()


@pytest.mark.unit
def test_status_enum_has_exactly_three_members():
    assert AppointmentStatus.values() == ["scheduled", "attended", "cancelled"]


@pytest.mark.unit
def test_parse_is_case_insensitive():
    assert AppointmentStatus.parse(" Attended ") is AppointmentStatus.ATTENDED
    assert AppointmentStatus.parse("CANCELLED") is AppointmentStatus.CANCELLED


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "finished"])
def test_parse_rejects_missing_or_unknown(value):
    with pytest.raises(InvalidArgumentError):
        AppointmentStatus.parse(value)


# ============================================================================
# Appointment.change_status
# ============================================================================


@pytest.mark.unit
def test_new_appointment_starts_scheduled():
    appointment = make_appointment()

    assert appointment.status is AppointmentStatus.SCHEDULED
    assert appointment.occupies_slot()


@pytest.mark.unit
def test_attend_then_cancel_is_rejected():
    # Arrange
    appointment = make_appointment()

    # Act
    previous = appointment.change_status("attended")

    # Assert
    assert previous is AppointmentStatus.SCHEDULED
    assert appointment.status is AppointmentStatus.ATTENDED
    with pytest.raises(InvalidTransitionError) as exc_info:
        appointment.cancel()
    assert exc_info.value.current_state == "attended"
    assert exc_info.value.requested_state == "cancelled"
    assert exc_info.value.code == "INVALID_TRANSITION"
    assert appointment.status is AppointmentStatus.ATTENDED


@pytest.mark.unit
def test_same_state_transition_is_rejected():
    appointment = make_appointment()

    with pytest.raises(InvalidTransitionError):
        appointment.change_status(AppointmentStatus.SCHEDULED)


@pytest.mark.unit
def test_terminal_state_rejects_every_target():
    appointment = make_appointment()
    appointment.cancel()

    for target in AppointmentStatus:
        with pytest.raises(InvalidTransitionError):
            appointment.change_status(target)


@pytest.mark.unit
def test_change_status_requires_target():
    appointment = make_appointment()

    with pytest.raises(InvalidArgumentError):
        appointment.change_status(None)
    assert appointment.status is AppointmentStatus.SCHEDULED


# ============================================================================
# Appointment fields, rescheduling and equality
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("missing", ["patient_id", "doctor_id", "scheduled_at"])
def test_required_references(missing):
    with pytest.raises(InvalidArgumentError) as exc_info:
        make_appointment(**{missing: None})
    assert exc_info.value.field == missing


@pytest.mark.unit
def test_reason_length_is_bounded():
    make_appointment(reason="x" * 200)

    with pytest.raises(ValidationError) as exc_info:
        make_appointment(reason="x" * 201)
    assert exc_info.value.field == "reason"


@pytest.mark.unit
def test_reschedule_only_while_scheduled():
    appointment = make_appointment()
    later = datetime(2030, 3, 12, 8, 0)

    assert appointment.reschedule(later) is True
    assert appointment.scheduled_at == later
    assert appointment.reschedule(later) is False

    appointment.attend()
    with pytest.raises(InvalidOperationError):
        appointment.reschedule(datetime(2030, 3, 13, 8, 0))
    with pytest.raises(InvalidOperationError):
        appointment.update_reason("Too late")


@pytest.mark.unit
def test_equality_is_structural_and_ignores_id():
    first = make_appointment(id=1, reason="A")
    second = make_appointment(id=99, reason="B", status="cancelled")
    other_time = make_appointment(id=1, scheduled_at=datetime(2030, 3, 11, 11, 0))

    assert first == second
    assert hash(first) == hash(second)
    assert first != other_time
    assert len({first, second, other_time}) == 2


@pytest.mark.unit
def test_summary_dict():
    summary = make_appointment(id=5).to_summary_dict()

    assert summary["status"] == "scheduled"
    assert summary["scheduled_at"] == WHEN.isoformat()
    assert summary["doctor_id"] == 2
