"""
Healthcare Use Cases

Application layer use cases for healthcare domain.
"""

from hospital.domains.healthcare.application.use_cases.appointment_queries import (
    CountAppointmentsByStatusUseCase,
    FindAppointmentsByDateRangeUseCase,
    GetAppointmentUseCase,
    ListAppointmentsByStatusUseCase,
    ListAppointmentsUseCase,
    ListPatientAppointmentsUseCase,
    ListScheduledAppointmentsInRangeUseCase,
    ListUpcomingDoctorAppointmentsUseCase,
)
from hospital.domains.healthcare.application.use_cases.appointment_use_cases import (
    ChangeAppointmentStatusUseCase,
    CheckSlotAvailabilityUseCase,
    RescheduleAppointmentUseCase,
    ScheduleAppointmentUseCase,
)
from hospital.domains.healthcare.application.use_cases.deletion_use_cases import (
    DeleteAppointmentUseCase,
    DeleteDoctorUseCase,
    DeleteMedicalHistoryUseCase,
    DeletePatientUseCase,
)
from hospital.domains.healthcare.application.use_cases.doctor_use_cases import (
    GetDoctorUseCase,
    ListDoctorsUseCase,
    RegisterDoctorUseCase,
    UpdateDoctorUseCase,
)
from hospital.domains.healthcare.application.use_cases.medical_history_use_cases import (
    CreateMedicalHistoryUseCase,
    GetMedicalHistoryUseCase,
    SaveMedicalHistoryUseCase,
    UpdateMedicalHistoryUseCase,
)
from hospital.domains.healthcare.application.use_cases.patient_use_cases import (
    GetPatientUseCase,
    ListPatientsUseCase,
    RegisterPatientUseCase,
    UpdatePatientUseCase,
)

__all__ = [
    # Patients
    "RegisterPatientUseCase",
    "UpdatePatientUseCase",
    "GetPatientUseCase",
    "ListPatientsUseCase",
    # Doctors
    "RegisterDoctorUseCase",
    "UpdateDoctorUseCase",
    "GetDoctorUseCase",
    "ListDoctorsUseCase",
    # Medical histories
    "CreateMedicalHistoryUseCase",
    "UpdateMedicalHistoryUseCase",
    "SaveMedicalHistoryUseCase",
    "GetMedicalHistoryUseCase",
    # Scheduling
    "CheckSlotAvailabilityUseCase",
    "ScheduleAppointmentUseCase",
    "RescheduleAppointmentUseCase",
    "ChangeAppointmentStatusUseCase",
    # Appointment queries
    "GetAppointmentUseCase",
    "ListAppointmentsUseCase",
    "ListPatientAppointmentsUseCase",
    "ListUpcomingDoctorAppointmentsUseCase",
    "FindAppointmentsByDateRangeUseCase",
    "ListScheduledAppointmentsInRangeUseCase",
    "ListAppointmentsByStatusUseCase",
    "CountAppointmentsByStatusUseCase",
    # Deletion
    "DeleteAppointmentUseCase",
    "DeletePatientUseCase",
    "DeleteDoctorUseCase",
    "DeleteMedicalHistoryUseCase",
]
