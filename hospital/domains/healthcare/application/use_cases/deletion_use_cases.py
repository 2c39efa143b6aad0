"""
Deletion Use Cases

Ownership rules applied when records are removed:

- a patient owns its medical history and its appointments (cascade);
- a doctor is only referenced by appointments (policy driven);
- an appointment owns nothing.

Each use case must run inside one ``transactional_session`` so a failure
midway leaves every row in place.
"""

import logging

from hospital.core.domain import EntityInUseError
from hospital.domains.healthcare.application.ports.appointment_repository import IAppointmentRepository
from hospital.domains.healthcare.application.ports.doctor_repository import IDoctorRepository
from hospital.domains.healthcare.application.ports.medical_history_repository import IMedicalHistoryRepository
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository
from hospital.domains.healthcare.domain.value_objects.appointment_status import DoctorDeletionPolicy

logger = logging.getLogger(__name__)


class DeleteAppointmentUseCase:
    """Remove one appointment; its patient and doctor are untouched."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self, appointment_id: int) -> bool:
        deleted = await self.appointment_repo.delete(appointment_id)
        if deleted:
            logger.info(f"Appointment deleted: {appointment_id}")
        return deleted


class DeletePatientUseCase:
    """
    Remove a patient together with everything it owns.

    The medical history and all appointments (any status) go first, then the
    patient row. Doctors are never touched.
    """

    def __init__(
        self,
        patient_repository: IPatientRepository,
        history_repository: IMedicalHistoryRepository,
        appointment_repository: IAppointmentRepository,
    ):
        self.patient_repo = patient_repository
        self.history_repo = history_repository
        self.appointment_repo = appointment_repository

    async def execute(self, patient_id: int) -> bool:
        """
        Returns:
            True if the patient was deleted, False if it did not exist
        """
        patient = await self.patient_repo.find_by_id(patient_id)
        if patient is None:
            return False

        had_history = await self.history_repo.delete(patient_id)
        removed_appointments = await self.appointment_repo.delete_by_patient(patient_id)
        await self.patient_repo.delete(patient_id)

        logger.info(
            f"Patient deleted: {patient_id}; "
            f"removed {removed_appointments} appointment(s), history removed: {had_history}"
        )
        return True


class DeleteDoctorUseCase:
    """Remove a doctor according to the configured deletion policy."""

    def __init__(
        self,
        doctor_repository: IDoctorRepository,
        appointment_repository: IAppointmentRepository,
        policy: DoctorDeletionPolicy = DoctorDeletionPolicy.RESTRICT,
    ):
        self.doctor_repo = doctor_repository
        self.appointment_repo = appointment_repository
        self.policy = policy

    async def execute(self, doctor_id: int) -> bool:
        """
        Returns:
            True if the doctor was deleted, False if it did not exist

        Raises:
            EntityInUseError: Policy is restrict and appointments reference the doctor
        """
        doctor = await self.doctor_repo.find_by_id(doctor_id)
        if doctor is None:
            return False

        referencing = await self.appointment_repo.count_by_doctor(doctor_id)
        if referencing:
            if self.policy is DoctorDeletionPolicy.RESTRICT:
                logger.warning(f"Refused to delete doctor {doctor_id}: {referencing} appointment(s) reference it")
                raise EntityInUseError("Doctor", doctor_id, "appointments", referencing)
            removed = await self.appointment_repo.delete_by_doctor(doctor_id)
            logger.info(f"Removed {removed} appointment(s) of doctor {doctor_id}")

        await self.doctor_repo.delete(doctor_id)
        logger.info(f"Doctor deleted: {doctor_id} ({doctor.license_number})")
        return True


class DeleteMedicalHistoryUseCase:
    """Remove only a patient's medical history."""

    def __init__(self, history_repository: IMedicalHistoryRepository):
        self.history_repo = history_repository

    async def execute(self, patient_id: int) -> bool:
        deleted = await self.history_repo.delete(patient_id)
        if deleted:
            logger.info(f"Medical history deleted for patient {patient_id}")
        return deleted
