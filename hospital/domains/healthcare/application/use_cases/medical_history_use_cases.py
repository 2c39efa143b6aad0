"""
Medical History Use Cases

A patient has at most one medical history, keyed by the patient's id.
"""

import logging

from hospital.core.domain import DuplicateKeyError, NotFoundError
from hospital.domains.healthcare.application.dto import MedicalHistoryRequest
from hospital.domains.healthcare.application.ports.medical_history_repository import IMedicalHistoryRepository
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository
from hospital.domains.healthcare.domain.entities.medical_history import MedicalHistory

logger = logging.getLogger(__name__)


class CreateMedicalHistoryUseCase:
    """Open the medical history of a patient that has none yet."""

    def __init__(
        self,
        history_repository: IMedicalHistoryRepository,
        patient_repository: IPatientRepository,
    ):
        self.history_repo = history_repository
        self.patient_repo = patient_repository

    async def execute(self, request: MedicalHistoryRequest) -> MedicalHistory:
        """
        Raises:
            NotFoundError: The patient does not exist
            DuplicateKeyError: The patient already has a history
            ValidationError: A note exceeds its length bound
        """
        if await self.patient_repo.find_by_id(request.patient_id) is None:
            raise NotFoundError("Patient", request.patient_id)
        if await self.history_repo.exists(request.patient_id):
            logger.warning(f"Rejected medical history: patient {request.patient_id} already has one")
            raise DuplicateKeyError("MedicalHistory", "patient_id", request.patient_id)

        history = MedicalHistory(
            id=request.patient_id,
            allergies=request.allergies,
            background=request.background,
            observations=request.observations,
        )
        saved = await self.history_repo.save(history)
        logger.info(f"Medical history created for patient {request.patient_id}")
        return saved


class UpdateMedicalHistoryUseCase:
    """Overwrite the notes of an existing history."""

    def __init__(self, history_repository: IMedicalHistoryRepository):
        self.history_repo = history_repository

    async def execute(self, request: MedicalHistoryRequest) -> MedicalHistory:
        """
        Raises:
            NotFoundError: The patient has no history
            ValidationError: A note exceeds its length bound
        """
        history = await self.history_repo.find_by_patient_id(request.patient_id)
        if history is None:
            raise NotFoundError("MedicalHistory", request.patient_id)

        history.update_notes(request.allergies, request.background, request.observations)
        saved = await self.history_repo.save(history)
        logger.info(f"Medical history updated for patient {request.patient_id}")
        return saved


class SaveMedicalHistoryUseCase:
    """Create the history when missing, otherwise update it."""

    def __init__(
        self,
        history_repository: IMedicalHistoryRepository,
        patient_repository: IPatientRepository,
    ):
        self.create = CreateMedicalHistoryUseCase(history_repository, patient_repository)
        self.update = UpdateMedicalHistoryUseCase(history_repository)
        self.history_repo = history_repository

    async def execute(self, request: MedicalHistoryRequest) -> MedicalHistory:
        if await self.history_repo.exists(request.patient_id):
            return await self.update.execute(request)
        return await self.create.execute(request)


class GetMedicalHistoryUseCase:
    """Medical history lookups; absent histories yield None."""

    def __init__(
        self,
        history_repository: IMedicalHistoryRepository,
        patient_repository: IPatientRepository,
    ):
        self.history_repo = history_repository
        self.patient_repo = patient_repository

    async def execute(self, patient_id: int) -> MedicalHistory | None:
        return await self.history_repo.find_by_patient_id(patient_id)

    async def by_national_id(self, national_id: str | None) -> MedicalHistory | None:
        if national_id is None or not national_id.strip():
            return None
        patient = await self.patient_repo.find_by_national_id(national_id.strip())
        if patient is None or patient.id is None:
            return None
        return await self.history_repo.find_by_patient_id(patient.id)

    async def exists(self, patient_id: int) -> bool:
        return await self.history_repo.exists(patient_id)
