"""
Appointment Entity for Healthcare Domain

Represents a medical appointment with scheduling and status tracking.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from hospital.core.domain import (
    AggregateRoot,
    InvalidArgumentError,
    InvalidOperationError,
    InvalidTransitionError,
)
from hospital.core.shared.validators import Validator

from ..value_objects.appointment_status import AppointmentStatus, Slot

REASON_MAX = 200


@dataclass(eq=False)
class Appointment(AggregateRoot[int]):
    """
    Appointment aggregate root for healthcare domain.

    Two appointments are equal when they book the same patient with the same
    doctor at the same instant, whatever their surrogate ids.

    Example:
        ```python
        appointment = Appointment(
            patient_id=1,
            doctor_id=7,
            scheduled_at=datetime(2030, 1, 15, 10, 0),
            reason="Annual check-up",
        )
        appointment.attend()
        ```
    """

    patient_id: int | None = None
    doctor_id: int | None = None
    scheduled_at: datetime | None = None
    status: AppointmentStatus | str = AppointmentStatus.SCHEDULED
    reason: str | None = None

    def __post_init__(self):
        """Validate appointment after initialization."""
        if self.patient_id is None:
            raise InvalidArgumentError("patient_id")
        if self.doctor_id is None:
            raise InvalidArgumentError("doctor_id")
        if self.scheduled_at is None:
            raise InvalidArgumentError("scheduled_at")
        self.status = AppointmentStatus.parse(self.status)
        self.reason = Validator.optional_text(self.reason, REASON_MAX, "reason")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Appointment):
            return False
        return (self.scheduled_at, self.patient_id, self.doctor_id) == (
            other.scheduled_at,
            other.patient_id,
            other.doctor_id,
        )

    def __hash__(self) -> int:
        return hash((self.scheduled_at, self.patient_id, self.doctor_id))

    @property
    def slot(self) -> Slot:
        """The doctor/time pair this appointment books."""
        assert self.doctor_id is not None and self.scheduled_at is not None
        return Slot(doctor_id=self.doctor_id, scheduled_at=self.scheduled_at)

    @property
    def current_status(self) -> AppointmentStatus:
        return AppointmentStatus.parse(self.status)

    def occupies_slot(self) -> bool:
        return self.current_status.occupies_slot()

    # Status Transitions

    def change_status(self, new_status: AppointmentStatus | str | None) -> AppointmentStatus:
        """
        Move the appointment to ``new_status``.

        Args:
            new_status: Target status or its name (case-insensitive)

        Returns:
            The previous status

        Raises:
            InvalidArgumentError: Target missing or not a known status
            InvalidTransitionError: Move not allowed from the current status
        """
        target = AppointmentStatus.parse(new_status)
        current = self.current_status
        if not current.can_transition_to(target):
            raise InvalidTransitionError(current.value, target.value)
        self.status = target
        self.touch()
        return current

    def attend(self) -> None:
        """Mark the patient as seen."""
        self.change_status(AppointmentStatus.ATTENDED)

    def cancel(self) -> None:
        """Cancel the appointment, freeing the slot."""
        self.change_status(AppointmentStatus.CANCELLED)

    # Rescheduling

    def ensure_modifiable(self, operation: str) -> None:
        if self.current_status is not AppointmentStatus.SCHEDULED:
            raise InvalidOperationError(
                operation=operation,
                current_state=self.current_status.value,
                message=f"Only scheduled appointments can be modified (current status: {self.current_status.value})",
            )

    def reschedule(self, new_scheduled_at: datetime | None) -> bool:
        """
        Move the appointment to another instant.

        Returns:
            True when the timestamp actually changed
        """
        self.ensure_modifiable("reschedule")
        if new_scheduled_at is None:
            raise InvalidArgumentError("scheduled_at")
        if new_scheduled_at == self.scheduled_at:
            return False
        self.scheduled_at = new_scheduled_at
        self.touch()
        return True

    def update_reason(self, reason: str | None) -> None:
        self.ensure_modifiable("update_reason")
        self.reason = Validator.optional_text(reason, REASON_MAX, "reason")
        self.touch()

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "doctor_id": self.doctor_id,
            "scheduled_at": self.scheduled_at.isoformat() if self.scheduled_at else None,
            "status": self.current_status.value,
            "reason": self.reason,
        }

    def __repr__(self) -> str:
        return (
            f"Appointment(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id}, "
            f"scheduled_at={self.scheduled_at}, status={self.current_status.value})"
        )
