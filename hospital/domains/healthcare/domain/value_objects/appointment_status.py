"""
Healthcare Domain Value Objects

Status enums and value objects for the healthcare domain.
"""

from dataclasses import dataclass
from datetime import datetime

from hospital.core.domain import InvalidArgumentError, StatusEnum, ValueObject

# Allowed status moves; the empty lists mark terminal states.
_APPOINTMENT_TRANSITIONS: dict[str, list[str]] = {
    "scheduled": ["attended", "cancelled"],
    "attended": [],
    "cancelled": [],
}


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - SCHEDULED -> ATTENDED, CANCELLED
    - ATTENDED -> (terminal)
    - CANCELLED -> (terminal)
    """

    SCHEDULED = "scheduled"
    ATTENDED = "attended"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status.value in _APPOINTMENT_TRANSITIONS.get(self.value, [])

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return not _APPOINTMENT_TRANSITIONS.get(self.value)

    def occupies_slot(self) -> bool:
        """Only scheduled appointments block the doctor's calendar."""
        return self is AppointmentStatus.SCHEDULED

    @classmethod
    def parse(cls, value: "AppointmentStatus | str | None") -> "AppointmentStatus":
        """Coerce a status or its name; unusable input raises InvalidArgumentError."""
        if value is None:
            raise InvalidArgumentError("status", "Target status is required")
        if isinstance(value, AppointmentStatus):
            return value
        try:
            return cls.from_string(value)
        except (ValueError, AttributeError):
            raise InvalidArgumentError(
                "status",
                f"Unknown appointment status '{value}'; expected one of {', '.join(cls.values())}",
            ) from None


class DoctorSpecialty(StatusEnum):
    """Medical specialties."""

    GENERAL_PRACTICE = "general_practice"
    CARDIOLOGY = "cardiology"
    DERMATOLOGY = "dermatology"
    EMERGENCY = "emergency"
    ENDOCRINOLOGY = "endocrinology"
    GASTROENTEROLOGY = "gastroenterology"
    GYNECOLOGY = "gynecology"
    NEUROLOGY = "neurology"
    ONCOLOGY = "oncology"
    OPHTHALMOLOGY = "ophthalmology"
    ORTHOPEDICS = "orthopedics"
    PEDIATRICS = "pediatrics"
    PSYCHIATRY = "psychiatry"
    PULMONOLOGY = "pulmonology"
    RADIOLOGY = "radiology"
    SURGERY = "surgery"
    UROLOGY = "urology"


class DoctorDeletionPolicy(StatusEnum):
    """What deleting a doctor that still has appointments does."""

    RESTRICT = "restrict"  # refuse while appointments reference the doctor
    CASCADE = "cascade"  # delete the doctor's appointments first


@dataclass(frozen=True)
class Slot(ValueObject):
    """
    A doctor's calendar position.

    Two appointments share a slot when both the doctor and the exact
    timestamp match; there are no durations.
    """

    doctor_id: int
    scheduled_at: datetime

    def _validate(self) -> None:
        if self.doctor_id is None:
            raise InvalidArgumentError("doctor_id")
        if self.scheduled_at is None:
            raise InvalidArgumentError("scheduled_at")

    def __str__(self) -> str:
        return f"doctor {self.doctor_id} @ {self.scheduled_at.isoformat(sep=' ', timespec='minutes')}"
