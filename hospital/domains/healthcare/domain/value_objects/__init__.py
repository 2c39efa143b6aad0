"""Healthcare value objects."""

from hospital.domains.healthcare.domain.value_objects.appointment_status import (
    AppointmentStatus,
    DoctorDeletionPolicy,
    DoctorSpecialty,
    Slot,
)

__all__ = [
    "AppointmentStatus",
    "DoctorDeletionPolicy",
    "DoctorSpecialty",
    "Slot",
]
