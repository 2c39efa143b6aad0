"""
Doctor Repository Implementation

SQLAlchemy implementation of IDoctorRepository.
"""

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hospital.core.domain import DuplicateKeyError, NotFoundError
from hospital.domains.healthcare.application.ports.doctor_repository import IDoctorRepository
from hospital.domains.healthcare.domain.entities.doctor import Doctor
from hospital.domains.healthcare.domain.value_objects.appointment_status import DoctorSpecialty
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import (
    DOCTOR_LICENSE_INDEX,
    AppointmentModel,
    DoctorModel,
)
from hospital.domains.healthcare.infrastructure.repositories.integrity import translate_integrity_error

logger = logging.getLogger(__name__)


class SQLAlchemyDoctorRepository(IDoctorRepository):
    """
    SQLAlchemy implementation of doctor repository.

    Handles all doctor data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, doctor_id: int) -> Doctor | None:
        """Find doctor by ID."""
        result = await self.session.execute(select(DoctorModel).where(DoctorModel.id == doctor_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_license_number(self, license_number: str) -> Doctor | None:
        """Find doctor by license number."""
        result = await self.session.execute(
            select(DoctorModel).where(DoctorModel.license_number == license_number.strip())
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists_by_license_number(self, license_number: str) -> bool:
        result = await self.session.execute(
            select(func.count())
            .select_from(DoctorModel)
            .where(DoctorModel.license_number == license_number.strip())
        )
        return result.scalar_one() > 0

    async def list_all(self) -> list[Doctor]:
        result = await self.session.execute(select(DoctorModel).order_by(DoctorModel.full_name, DoctorModel.id))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_by_specialty(self, specialty: DoctorSpecialty) -> list[Doctor]:
        """Find doctors by specialty."""
        result = await self.session.execute(
            select(DoctorModel)
            .where(DoctorModel.specialty == specialty)
            .order_by(DoctorModel.full_name, DoctorModel.id)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def find_with_appointments_from(self, moment: datetime) -> list[Doctor]:
        """Find doctors having any appointment at or after ``moment``."""
        upcoming = select(AppointmentModel.doctor_id).where(AppointmentModel.scheduled_at >= moment)
        result = await self.session.execute(
            select(DoctorModel).where(DoctorModel.id.in_(upcoming)).order_by(DoctorModel.full_name, DoctorModel.id)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, doctor: Doctor) -> Doctor:
        """Save or update doctor."""
        if doctor.id is not None:
            result = await self.session.execute(select(DoctorModel).where(DoctorModel.id == doctor.id))
            model = result.scalar_one_or_none()
            if model is None:
                raise NotFoundError("Doctor", doctor.id)
            self._update_model(model, doctor)
        else:
            model = self._to_model(doctor)
            self.session.add(model)

        try:
            await self.session.flush()
        except IntegrityError as e:
            domain_error = translate_integrity_error(
                e,
                [
                    (
                        (DOCTOR_LICENSE_INDEX, "doctors.license_number"),
                        lambda: DuplicateKeyError("Doctor", "license_number", doctor.license_number),
                    )
                ],
            )
            if domain_error is None:
                raise
            raise domain_error from e

        return self._to_entity(model)

    async def delete(self, doctor_id: int) -> bool:
        """Delete doctor."""
        result = await self.session.execute(select(DoctorModel).where(DoctorModel.id == doctor_id))
        model = result.scalar_one_or_none()
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.flush()
        return True

    # Mapping methods

    def _to_entity(self, model: DoctorModel) -> Doctor:
        return Doctor(
            id=model.id,  # type: ignore[arg-type]
            full_name=model.full_name,  # type: ignore[arg-type]
            license_number=model.license_number,  # type: ignore[arg-type]
            specialty=model.specialty,  # type: ignore[arg-type]
            email=model.email,  # type: ignore[arg-type]
            created_at=model.created_at,  # type: ignore[arg-type]
            updated_at=model.updated_at,  # type: ignore[arg-type]
        )

    def _to_model(self, doctor: Doctor) -> DoctorModel:
        return DoctorModel(
            full_name=doctor.full_name,
            license_number=doctor.license_number,
            specialty=doctor.specialty,
            email=doctor.email_address,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )

    def _update_model(self, model: DoctorModel, doctor: Doctor) -> None:
        model.full_name = doctor.full_name  # type: ignore[assignment]
        model.license_number = doctor.license_number  # type: ignore[assignment]
        model.specialty = doctor.specialty  # type: ignore[assignment]
        model.email = doctor.email_address  # type: ignore[assignment]
