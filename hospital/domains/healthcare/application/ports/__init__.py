"""
Healthcare Application Ports

Repository interfaces implemented by the infrastructure layer.
"""

from hospital.domains.healthcare.application.ports.appointment_repository import IAppointmentRepository
from hospital.domains.healthcare.application.ports.doctor_repository import IDoctorRepository
from hospital.domains.healthcare.application.ports.medical_history_repository import IMedicalHistoryRepository
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository

__all__ = [
    "IAppointmentRepository",
    "IDoctorRepository",
    "IMedicalHistoryRepository",
    "IPatientRepository",
]
