"""
Healthcare Domain Container.

Single Responsibility: Wire all healthcare domain dependencies.

Every ``create_*`` method takes the session of the current unit of work, so
all repositories built for one operation share its transaction:

    ```python
    container = HealthcareContainer()
    async with transactional_session() as db:
        appointment = await container.create_schedule_appointment_use_case(db).execute(request)
    ```
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from hospital.config.settings import Settings, get_settings
from hospital.domains.healthcare.application.use_cases import (
    ChangeAppointmentStatusUseCase,
    CheckSlotAvailabilityUseCase,
    CountAppointmentsByStatusUseCase,
    CreateMedicalHistoryUseCase,
    DeleteAppointmentUseCase,
    DeleteDoctorUseCase,
    DeleteMedicalHistoryUseCase,
    DeletePatientUseCase,
    FindAppointmentsByDateRangeUseCase,
    GetAppointmentUseCase,
    GetDoctorUseCase,
    GetMedicalHistoryUseCase,
    GetPatientUseCase,
    ListAppointmentsByStatusUseCase,
    ListAppointmentsUseCase,
    ListDoctorsUseCase,
    ListPatientAppointmentsUseCase,
    ListPatientsUseCase,
    ListScheduledAppointmentsInRangeUseCase,
    ListUpcomingDoctorAppointmentsUseCase,
    RegisterDoctorUseCase,
    RegisterPatientUseCase,
    RescheduleAppointmentUseCase,
    SaveMedicalHistoryUseCase,
    ScheduleAppointmentUseCase,
    UpdateDoctorUseCase,
    UpdateMedicalHistoryUseCase,
    UpdatePatientUseCase,
)
from hospital.domains.healthcare.domain.services.scheduling_service import Clock, SchedulingService
from hospital.domains.healthcare.domain.value_objects.appointment_status import DoctorDeletionPolicy
from hospital.domains.healthcare.infrastructure.repositories import (
    SQLAlchemyAppointmentRepository,
    SQLAlchemyDoctorRepository,
    SQLAlchemyMedicalHistoryRepository,
    SQLAlchemyPatientRepository,
)

logger = logging.getLogger(__name__)


class HealthcareContainer:
    """
    Healthcare domain container.

    Single Responsibility: Create healthcare repositories and use cases.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        clock: Clock = datetime.now,
        deletion_policy: DoctorDeletionPolicy | None = None,
    ):
        """
        Initialize healthcare container.

        Args:
            settings: Application settings (defaults to the cached instance)
            clock: Source of the current time for scheduling rules
            deletion_policy: Overrides ``DOCTOR_DELETION_POLICY``
        """
        self.settings = settings or get_settings()
        self.clock = clock
        self.deletion_policy = deletion_policy or DoctorDeletionPolicy.from_string(
            self.settings.DOCTOR_DELETION_POLICY
        )
        self.scheduling_service = SchedulingService(clock=clock)
        logger.debug(f"HealthcareContainer ready (doctor deletion policy: {self.deletion_policy.value})")

    # ==================== REPOSITORIES ====================

    def create_patient_repository(self, db: AsyncSession) -> SQLAlchemyPatientRepository:
        """Create Patient Repository."""
        return SQLAlchemyPatientRepository(session=db)

    def create_doctor_repository(self, db: AsyncSession) -> SQLAlchemyDoctorRepository:
        """Create Doctor Repository."""
        return SQLAlchemyDoctorRepository(session=db)

    def create_medical_history_repository(self, db: AsyncSession) -> SQLAlchemyMedicalHistoryRepository:
        """Create Medical History Repository."""
        return SQLAlchemyMedicalHistoryRepository(session=db)

    def create_appointment_repository(self, db: AsyncSession) -> SQLAlchemyAppointmentRepository:
        """Create Appointment Repository."""
        return SQLAlchemyAppointmentRepository(session=db)

    # ==================== PATIENTS ====================

    def create_register_patient_use_case(self, db: AsyncSession) -> RegisterPatientUseCase:
        return RegisterPatientUseCase(self.create_patient_repository(db))

    def create_update_patient_use_case(self, db: AsyncSession) -> UpdatePatientUseCase:
        return UpdatePatientUseCase(self.create_patient_repository(db))

    def create_get_patient_use_case(self, db: AsyncSession) -> GetPatientUseCase:
        return GetPatientUseCase(self.create_patient_repository(db))

    def create_list_patients_use_case(self, db: AsyncSession) -> ListPatientsUseCase:
        return ListPatientsUseCase(self.create_patient_repository(db))

    def create_delete_patient_use_case(self, db: AsyncSession) -> DeletePatientUseCase:
        """Create DeletePatientUseCase with dependencies."""
        return DeletePatientUseCase(
            patient_repository=self.create_patient_repository(db),
            history_repository=self.create_medical_history_repository(db),
            appointment_repository=self.create_appointment_repository(db),
        )

    # ==================== DOCTORS ====================

    def create_register_doctor_use_case(self, db: AsyncSession) -> RegisterDoctorUseCase:
        return RegisterDoctorUseCase(self.create_doctor_repository(db))

    def create_update_doctor_use_case(self, db: AsyncSession) -> UpdateDoctorUseCase:
        return UpdateDoctorUseCase(self.create_doctor_repository(db))

    def create_get_doctor_use_case(self, db: AsyncSession) -> GetDoctorUseCase:
        return GetDoctorUseCase(self.create_doctor_repository(db))

    def create_list_doctors_use_case(self, db: AsyncSession) -> ListDoctorsUseCase:
        return ListDoctorsUseCase(self.create_doctor_repository(db), clock=self.clock)

    def create_delete_doctor_use_case(self, db: AsyncSession) -> DeleteDoctorUseCase:
        """Create DeleteDoctorUseCase with the configured policy."""
        return DeleteDoctorUseCase(
            doctor_repository=self.create_doctor_repository(db),
            appointment_repository=self.create_appointment_repository(db),
            policy=self.deletion_policy,
        )

    # ==================== MEDICAL HISTORIES ====================

    def create_create_medical_history_use_case(self, db: AsyncSession) -> CreateMedicalHistoryUseCase:
        return CreateMedicalHistoryUseCase(
            history_repository=self.create_medical_history_repository(db),
            patient_repository=self.create_patient_repository(db),
        )

    def create_update_medical_history_use_case(self, db: AsyncSession) -> UpdateMedicalHistoryUseCase:
        return UpdateMedicalHistoryUseCase(self.create_medical_history_repository(db))

    def create_save_medical_history_use_case(self, db: AsyncSession) -> SaveMedicalHistoryUseCase:
        return SaveMedicalHistoryUseCase(
            history_repository=self.create_medical_history_repository(db),
            patient_repository=self.create_patient_repository(db),
        )

    def create_get_medical_history_use_case(self, db: AsyncSession) -> GetMedicalHistoryUseCase:
        return GetMedicalHistoryUseCase(
            history_repository=self.create_medical_history_repository(db),
            patient_repository=self.create_patient_repository(db),
        )

    def create_delete_medical_history_use_case(self, db: AsyncSession) -> DeleteMedicalHistoryUseCase:
        return DeleteMedicalHistoryUseCase(self.create_medical_history_repository(db))

    # ==================== SCHEDULING ====================

    def create_check_slot_availability_use_case(self, db: AsyncSession) -> CheckSlotAvailabilityUseCase:
        return CheckSlotAvailabilityUseCase(self.create_appointment_repository(db), self.scheduling_service)

    def create_schedule_appointment_use_case(self, db: AsyncSession) -> ScheduleAppointmentUseCase:
        """Create ScheduleAppointmentUseCase with dependencies."""
        return ScheduleAppointmentUseCase(
            appointment_repository=self.create_appointment_repository(db),
            patient_repository=self.create_patient_repository(db),
            doctor_repository=self.create_doctor_repository(db),
            scheduling_service=self.scheduling_service,
        )

    def create_reschedule_appointment_use_case(self, db: AsyncSession) -> RescheduleAppointmentUseCase:
        return RescheduleAppointmentUseCase(
            appointment_repository=self.create_appointment_repository(db),
            doctor_repository=self.create_doctor_repository(db),
            scheduling_service=self.scheduling_service,
        )

    def create_change_appointment_status_use_case(self, db: AsyncSession) -> ChangeAppointmentStatusUseCase:
        return ChangeAppointmentStatusUseCase(self.create_appointment_repository(db))

    def create_delete_appointment_use_case(self, db: AsyncSession) -> DeleteAppointmentUseCase:
        return DeleteAppointmentUseCase(self.create_appointment_repository(db))

    # ==================== APPOINTMENT QUERIES ====================

    def create_get_appointment_use_case(self, db: AsyncSession) -> GetAppointmentUseCase:
        return GetAppointmentUseCase(self.create_appointment_repository(db))

    def create_list_appointments_use_case(self, db: AsyncSession) -> ListAppointmentsUseCase:
        return ListAppointmentsUseCase(self.create_appointment_repository(db))

    def create_list_patient_appointments_use_case(self, db: AsyncSession) -> ListPatientAppointmentsUseCase:
        return ListPatientAppointmentsUseCase(self.create_appointment_repository(db))

    def create_list_upcoming_doctor_appointments_use_case(
        self, db: AsyncSession
    ) -> ListUpcomingDoctorAppointmentsUseCase:
        return ListUpcomingDoctorAppointmentsUseCase(self.create_appointment_repository(db), clock=self.clock)

    def create_find_appointments_by_date_range_use_case(
        self, db: AsyncSession
    ) -> FindAppointmentsByDateRangeUseCase:
        return FindAppointmentsByDateRangeUseCase(self.create_appointment_repository(db))

    def create_list_scheduled_appointments_in_range_use_case(
        self, db: AsyncSession
    ) -> ListScheduledAppointmentsInRangeUseCase:
        return ListScheduledAppointmentsInRangeUseCase(self.create_appointment_repository(db))

    def create_list_appointments_by_status_use_case(self, db: AsyncSession) -> ListAppointmentsByStatusUseCase:
        return ListAppointmentsByStatusUseCase(self.create_appointment_repository(db))

    def create_count_appointments_by_status_use_case(self, db: AsyncSession) -> CountAppointmentsByStatusUseCase:
        return CountAppointmentsByStatusUseCase(self.create_appointment_repository(db))
