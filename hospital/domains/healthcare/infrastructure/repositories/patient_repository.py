"""
Patient Repository Implementation

SQLAlchemy implementation of IPatientRepository.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hospital.core.domain import DuplicateKeyError, NotFoundError
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository
from hospital.domains.healthcare.domain.entities.patient import Patient
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import (
    PATIENT_NATIONAL_ID_INDEX,
    PatientModel,
)
from hospital.domains.healthcare.infrastructure.repositories.integrity import translate_integrity_error

logger = logging.getLogger(__name__)


class SQLAlchemyPatientRepository(IPatientRepository):
    """
    SQLAlchemy implementation of patient repository.

    Handles all patient data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, patient_id: int) -> Patient | None:
        """Find patient by ID."""
        result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_national_id(self, national_id: str) -> Patient | None:
        """Find patient by national ID."""
        result = await self.session.execute(
            select(PatientModel).where(PatientModel.national_id == national_id.strip())
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists_by_national_id(self, national_id: str) -> bool:
        result = await self.session.execute(
            select(func.count()).select_from(PatientModel).where(PatientModel.national_id == national_id.strip())
        )
        return result.scalar_one() > 0

    async def list_all(self) -> list[Patient]:
        result = await self.session.execute(select(PatientModel).order_by(PatientModel.full_name, PatientModel.id))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, patient: Patient) -> Patient:
        """Save or update patient."""
        if patient.id is not None:
            result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient.id))
            model = result.scalar_one_or_none()
            if model is None:
                raise NotFoundError("Patient", patient.id)
            self._update_model(model, patient)
        else:
            model = self._to_model(patient)
            self.session.add(model)

        try:
            await self.session.flush()
        except IntegrityError as e:
            domain_error = translate_integrity_error(
                e,
                [
                    (
                        (PATIENT_NATIONAL_ID_INDEX, "patients.national_id"),
                        lambda: DuplicateKeyError("Patient", "national_id", patient.national_id),
                    )
                ],
            )
            if domain_error is None:
                raise
            raise domain_error from e

        return self._to_entity(model)

    async def delete(self, patient_id: int) -> bool:
        """Delete patient."""
        result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient_id))
        model = result.scalar_one_or_none()
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.flush()
        return True

    # Mapping methods

    def _to_entity(self, model: PatientModel) -> Patient:
        """Convert model to entity."""
        return Patient(
            id=model.id,  # type: ignore[arg-type]
            full_name=model.full_name,  # type: ignore[arg-type]
            national_id=model.national_id,  # type: ignore[arg-type]
            date_of_birth=model.date_of_birth,  # type: ignore[arg-type]
            phone=model.phone,  # type: ignore[arg-type]
            email=model.email,  # type: ignore[arg-type]
            created_at=model.created_at,  # type: ignore[arg-type]
            updated_at=model.updated_at,  # type: ignore[arg-type]
        )

    def _to_model(self, patient: Patient) -> PatientModel:
        """Convert entity to model."""
        return PatientModel(
            full_name=patient.full_name,
            national_id=patient.national_id,
            date_of_birth=patient.date_of_birth,
            phone=patient.phone,
            email=patient.email_address,
            created_at=patient.created_at,
            updated_at=patient.updated_at,
        )

    def _update_model(self, model: PatientModel, patient: Patient) -> None:
        """Update model from entity."""
        model.full_name = patient.full_name  # type: ignore[assignment]
        model.national_id = patient.national_id  # type: ignore[assignment]
        model.date_of_birth = patient.date_of_birth  # type: ignore[assignment]
        model.phone = patient.phone  # type: ignore[assignment]
        model.email = patient.email_address  # type: ignore[assignment]
