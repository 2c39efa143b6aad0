"""
Doctor Directory Use Cases

Registration, update and lookup of doctors.
"""

import logging
from datetime import datetime

from hospital.core.domain import DuplicateKeyError, InvalidArgumentError, NotFoundError
from hospital.domains.healthcare.application.dto import RegisterDoctorRequest, UpdateDoctorRequest
from hospital.domains.healthcare.application.ports.doctor_repository import IDoctorRepository
from hospital.domains.healthcare.domain.entities.doctor import Doctor
from hospital.domains.healthcare.domain.services.scheduling_service import Clock
from hospital.domains.healthcare.domain.value_objects.appointment_status import DoctorSpecialty

logger = logging.getLogger(__name__)


class RegisterDoctorUseCase:
    """
    Use case for registering doctors.

    Single Responsibility: Only handles doctor registration
    Dependency Inversion: Depends on interfaces, not implementations
    """

    def __init__(self, doctor_repository: IDoctorRepository):
        self.doctor_repo = doctor_repository

    async def execute(self, request: RegisterDoctorRequest) -> Doctor:
        """
        Validate and store a new doctor.

        Raises:
            ValidationError: A field is missing or malformed
            DuplicateKeyError: The license number is already registered
        """
        doctor = Doctor(
            full_name=request.full_name,
            license_number=request.license_number,
            specialty=request.specialty,
            email=request.email,
        )

        if await self.doctor_repo.exists_by_license_number(doctor.license_number):
            logger.warning(f"Rejected doctor registration: license {doctor.license_number} already exists")
            raise DuplicateKeyError("Doctor", "license_number", doctor.license_number)

        saved = await self.doctor_repo.save(doctor)
        logger.info(f"Doctor registered: {saved.id} ({saved.license_number}, {saved.specialty.value})")
        return saved


class UpdateDoctorUseCase:
    """Use case for editing a registered doctor."""

    def __init__(self, doctor_repository: IDoctorRepository):
        self.doctor_repo = doctor_repository

    async def execute(self, request: UpdateDoctorRequest) -> Doctor:
        """
        Replace a doctor's fields.

        The uniqueness check only runs when the license number changes.

        Raises:
            NotFoundError: Unknown doctor id
            ValidationError: A field is missing or malformed
            DuplicateKeyError: The new license number belongs to another doctor
        """
        doctor = await self.doctor_repo.find_by_id(request.doctor_id)
        if doctor is None:
            raise NotFoundError("Doctor", request.doctor_id)

        previous_license = doctor.license_number
        doctor.update_details(
            full_name=request.full_name,
            license_number=request.license_number,
            specialty=request.specialty,
            email=request.email,
        )

        if doctor.license_number != previous_license and await self.doctor_repo.exists_by_license_number(
            doctor.license_number
        ):
            logger.warning(f"Rejected doctor update {doctor.id}: license {doctor.license_number} already exists")
            raise DuplicateKeyError("Doctor", "license_number", doctor.license_number)

        saved = await self.doctor_repo.save(doctor)
        logger.info(f"Doctor updated: {saved.id}")
        return saved


class GetDoctorUseCase:
    """Doctor lookups. Missing doctors yield None, never an error."""

    def __init__(self, doctor_repository: IDoctorRepository):
        self.doctor_repo = doctor_repository

    async def execute(self, doctor_id: int) -> Doctor | None:
        return await self.doctor_repo.find_by_id(doctor_id)

    async def by_license_number(self, license_number: str | None) -> Doctor | None:
        """Find by natural key; blank keys return None."""
        if license_number is None or not license_number.strip():
            return None
        return await self.doctor_repo.find_by_license_number(license_number.strip())


class ListDoctorsUseCase:
    """Doctor listings."""

    def __init__(self, doctor_repository: IDoctorRepository, clock: Clock = datetime.now):
        self.doctor_repo = doctor_repository
        self.clock = clock

    async def execute(self) -> list[Doctor]:
        return await self.doctor_repo.list_all()

    async def by_specialty(self, specialty: DoctorSpecialty | str | None) -> list[Doctor]:
        """
        Doctors of one specialty.

        Raises:
            InvalidArgumentError: Missing or unknown specialty
        """
        if specialty is None:
            raise InvalidArgumentError("specialty")
        if not isinstance(specialty, DoctorSpecialty):
            try:
                specialty = DoctorSpecialty.from_string(specialty)
            except ValueError:
                raise InvalidArgumentError("specialty", f"Unknown specialty '{specialty}'") from None
        return await self.doctor_repo.find_by_specialty(specialty)

    async def with_upcoming_appointments(self) -> list[Doctor]:
        """Doctors with at least one appointment at or after now."""
        return await self.doctor_repo.find_with_appointments_from(self.clock())
