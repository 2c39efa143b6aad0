"""
Patient Directory Use Cases

Registration, update and lookup of patients.
"""

from hospital.core.domain import DuplicateKeyError, NotFoundError
from hospital.core.shared.logger import get_use_case_logger
from hospital.domains.healthcare.application.dto import RegisterPatientRequest, UpdatePatientRequest
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository
from hospital.domains.healthcare.domain.entities.patient import Patient

logger = get_use_case_logger("patient_directory")


class RegisterPatientUseCase:
    """
    Use case for registering patients.

    Single Responsibility: Only handles patient registration
    Dependency Inversion: Depends on interfaces, not implementations
    """

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, request: RegisterPatientRequest) -> Patient:
        """
        Validate and store a new patient.

        Args:
            request: Patient fields

        Returns:
            The stored patient with its id

        Raises:
            ValidationError: A field is missing or malformed
            DuplicateKeyError: The national ID is already registered
        """
        patient = Patient(
            full_name=request.full_name,
            national_id=request.national_id,
            date_of_birth=request.date_of_birth,
            phone=request.phone,
            email=request.email,
        )

        if await self.patient_repo.exists_by_national_id(patient.national_id):
            logger.warning("Rejected patient registration: national ID already exists", national_id=patient.national_id)
            raise DuplicateKeyError("Patient", "national_id", patient.national_id)

        saved = await self.patient_repo.save(patient)
        logger.info(f"Patient registered: {saved.id}", patient_id=saved.id, national_id=saved.national_id)
        return saved


class UpdatePatientUseCase:
    """Use case for editing a registered patient."""

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, request: UpdatePatientRequest) -> Patient:
        """
        Replace a patient's fields.

        The uniqueness check only runs when the national ID changes.

        Raises:
            NotFoundError: Unknown patient id
            ValidationError: A field is missing or malformed
            DuplicateKeyError: The new national ID belongs to another patient
        """
        patient = await self.patient_repo.find_by_id(request.patient_id)
        if patient is None:
            raise NotFoundError("Patient", request.patient_id)

        previous_key = patient.national_id
        patient.update_details(
            full_name=request.full_name,
            national_id=request.national_id,
            date_of_birth=request.date_of_birth,
            phone=request.phone,
            email=request.email,
        )

        if patient.national_id != previous_key and await self.patient_repo.exists_by_national_id(
            patient.national_id
        ):
            logger.warning(
                f"Rejected patient update {patient.id}: national ID already exists", national_id=patient.national_id
            )
            raise DuplicateKeyError("Patient", "national_id", patient.national_id)

        saved = await self.patient_repo.save(patient)
        logger.info(f"Patient updated: {saved.id}", patient_id=saved.id)
        return saved


class GetPatientUseCase:
    """Patient lookups. Missing patients yield None, never an error."""

    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self, patient_id: int) -> Patient | None:
        return await self.patient_repo.find_by_id(patient_id)

    async def by_national_id(self, national_id: str | None) -> Patient | None:
        """Find by natural key; blank keys return None."""
        if national_id is None or not national_id.strip():
            return None
        return await self.patient_repo.find_by_national_id(national_id.strip())


class ListPatientsUseCase:
    def __init__(self, patient_repository: IPatientRepository):
        self.patient_repo = patient_repository

    async def execute(self) -> list[Patient]:
        return await self.patient_repo.list_all()
