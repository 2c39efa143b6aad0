"""
Healthcare Domain Layer

Entities, value objects and domain services of the hospital records context.
"""

from hospital.domains.healthcare.domain.entities import Appointment, Doctor, MedicalHistory, Patient
from hospital.domains.healthcare.domain.services import SchedulingService
from hospital.domains.healthcare.domain.value_objects import (
    AppointmentStatus,
    DoctorDeletionPolicy,
    DoctorSpecialty,
    Slot,
)

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "Doctor",
    "DoctorDeletionPolicy",
    "DoctorSpecialty",
    "MedicalHistory",
    "Patient",
    "SchedulingService",
    "Slot",
]
