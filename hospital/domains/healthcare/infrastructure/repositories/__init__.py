"""
Healthcare Repositories

SQLAlchemy implementations of the healthcare repository ports.
"""

from hospital.domains.healthcare.infrastructure.repositories.appointment_repository import (
    SQLAlchemyAppointmentRepository,
)
from hospital.domains.healthcare.infrastructure.repositories.doctor_repository import SQLAlchemyDoctorRepository
from hospital.domains.healthcare.infrastructure.repositories.medical_history_repository import (
    SQLAlchemyMedicalHistoryRepository,
)
from hospital.domains.healthcare.infrastructure.repositories.patient_repository import SQLAlchemyPatientRepository

__all__ = [
    "SQLAlchemyAppointmentRepository",
    "SQLAlchemyDoctorRepository",
    "SQLAlchemyMedicalHistoryRepository",
    "SQLAlchemyPatientRepository",
]
