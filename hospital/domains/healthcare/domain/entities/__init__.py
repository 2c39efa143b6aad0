"""
Healthcare Domain Entities

Business entities with identity and lifecycle for the healthcare domain.
"""

from hospital.domains.healthcare.domain.entities.appointment import Appointment
from hospital.domains.healthcare.domain.entities.doctor import Doctor
from hospital.domains.healthcare.domain.entities.medical_history import MedicalHistory
from hospital.domains.healthcare.domain.entities.patient import Patient

__all__ = [
    "Patient",
    "Doctor",
    "MedicalHistory",
    "Appointment",
]
