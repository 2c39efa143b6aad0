"""SQLAlchemy persistence models for the healthcare context."""

from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import (
    AppointmentModel,
    DoctorModel,
    MedicalHistoryModel,
    PatientModel,
)

__all__ = [
    "AppointmentModel",
    "DoctorModel",
    "MedicalHistoryModel",
    "PatientModel",
]
