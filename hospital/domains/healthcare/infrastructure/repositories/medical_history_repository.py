"""
Medical History Repository Implementation

SQLAlchemy implementation of IMedicalHistoryRepository.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hospital.core.domain import NotFoundError
from hospital.domains.healthcare.application.ports.medical_history_repository import IMedicalHistoryRepository
from hospital.domains.healthcare.domain.entities.medical_history import MedicalHistory
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import MedicalHistoryModel
from hospital.domains.healthcare.infrastructure.repositories.integrity import translate_integrity_error

logger = logging.getLogger(__name__)


class SQLAlchemyMedicalHistoryRepository(IMedicalHistoryRepository):
    """SQLAlchemy implementation of the medical history repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_model(self, patient_id: int) -> MedicalHistoryModel | None:
        result = await self.session.execute(
            select(MedicalHistoryModel).where(MedicalHistoryModel.patient_id == patient_id)
        )
        return result.scalar_one_or_none()

    async def find_by_patient_id(self, patient_id: int) -> MedicalHistory | None:
        model = await self._get_model(patient_id)
        return self._to_entity(model) if model else None

    async def exists(self, patient_id: int) -> bool:
        return await self._get_model(patient_id) is not None

    async def save(self, history: MedicalHistory) -> MedicalHistory:
        """Insert or update the history keyed by its patient id."""
        model = await self._get_model(history.patient_id)
        if model is None:
            model = MedicalHistoryModel(
                patient_id=history.patient_id,
                created_at=history.created_at,
                updated_at=history.updated_at,
            )
            self.session.add(model)
        model.allergies = history.allergies  # type: ignore[assignment]
        model.background = history.background  # type: ignore[assignment]
        model.observations = history.observations  # type: ignore[assignment]

        try:
            await self.session.flush()
        except IntegrityError as e:
            # The only foreign key is the owning patient
            domain_error = translate_integrity_error(
                e,
                [(("foreign key",), lambda: NotFoundError("Patient", history.patient_id))],
            )
            if domain_error is None:
                raise
            raise domain_error from e

        return self._to_entity(model)

    async def delete(self, patient_id: int) -> bool:
        model = await self._get_model(patient_id)
        if model is None:
            return False
        await self.session.delete(model)
        await self.session.flush()
        return True

    def _to_entity(self, model: MedicalHistoryModel) -> MedicalHistory:
        return MedicalHistory(
            id=model.patient_id,  # type: ignore[arg-type]
            allergies=model.allergies,  # type: ignore[arg-type]
            background=model.background,  # type: ignore[arg-type]
            observations=model.observations,  # type: ignore[arg-type]
            created_at=model.created_at,  # type: ignore[arg-type]
            updated_at=model.updated_at,  # type: ignore[arg-type]
        )
