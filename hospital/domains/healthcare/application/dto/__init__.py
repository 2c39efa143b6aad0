"""
Healthcare Application DTOs

Request objects accepted by the healthcare use cases.
"""

from dataclasses import dataclass
from datetime import date, datetime

from hospital.domains.healthcare.domain.value_objects.appointment_status import (
    AppointmentStatus,
    DoctorSpecialty,
)


# ==================== Patient DTOs ====================


@dataclass
class RegisterPatientRequest:
    """Fields of a new patient"""

    full_name: str
    national_id: str
    date_of_birth: date
    email: str
    phone: str | None = None


@dataclass
class UpdatePatientRequest:
    """Replacement fields for an existing patient"""

    patient_id: int
    full_name: str
    national_id: str
    date_of_birth: date
    email: str
    phone: str | None = None


# ==================== Doctor DTOs ====================


@dataclass
class RegisterDoctorRequest:
    """Fields of a new doctor"""

    full_name: str
    license_number: str
    specialty: DoctorSpecialty | str
    email: str


@dataclass
class UpdateDoctorRequest:
    """Replacement fields for an existing doctor"""

    doctor_id: int
    full_name: str
    license_number: str
    specialty: DoctorSpecialty | str
    email: str


# ==================== Medical History DTOs ====================


@dataclass
class MedicalHistoryRequest:
    """Notes of a patient's medical history"""

    patient_id: int
    allergies: str | None = None
    background: str | None = None
    observations: str | None = None


# ==================== Appointment DTOs ====================


@dataclass
class ScheduleAppointmentRequest:
    """Request for booking an appointment"""

    patient_id: int | None
    doctor_id: int | None
    scheduled_at: datetime | None
    reason: str | None = None


@dataclass
class RescheduleAppointmentRequest:
    """New timestamp and/or reason for a scheduled appointment"""

    appointment_id: int
    scheduled_at: datetime | None = None
    reason: str | None = None


@dataclass
class ChangeAppointmentStatusRequest:
    """Requested lifecycle move"""

    appointment_id: int
    status: AppointmentStatus | str | None


__all__ = [
    "RegisterPatientRequest",
    "UpdatePatientRequest",
    "RegisterDoctorRequest",
    "UpdateDoctorRequest",
    "MedicalHistoryRequest",
    "ScheduleAppointmentRequest",
    "RescheduleAppointmentRequest",
    "ChangeAppointmentStatusRequest",
]
