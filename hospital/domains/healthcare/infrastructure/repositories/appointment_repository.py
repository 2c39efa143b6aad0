"""
Appointment Repository Implementation

SQLAlchemy implementation of IAppointmentRepository.
"""

import logging
from datetime import datetime

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from hospital.core.domain import ConcurrencyError, NotFoundError, SlotConflictError
from hospital.domains.healthcare.application.ports.appointment_repository import IAppointmentRepository
from hospital.domains.healthcare.domain.entities.appointment import Appointment
from hospital.domains.healthcare.domain.value_objects.appointment_status import AppointmentStatus
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import (
    SLOT_INDEX_NAME,
    AppointmentModel,
)
from hospital.domains.healthcare.infrastructure.repositories.integrity import translate_integrity_error

logger = logging.getLogger(__name__)


class SQLAlchemyAppointmentRepository(IAppointmentRepository):
    """
    SQLAlchemy implementation of appointment repository.

    Handles all appointment data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, appointment_id: int) -> Appointment | None:
        """Find appointment by ID."""
        result = await self.session.execute(select(AppointmentModel).where(AppointmentModel.id == appointment_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Appointment]:
        return await self._fetch(
            select(AppointmentModel).order_by(AppointmentModel.scheduled_at.desc(), AppointmentModel.id.desc())
        )

    async def find_by_patient(self, patient_id: int) -> list[Appointment]:
        """Find appointments for a patient, newest first."""
        return await self._fetch(
            select(AppointmentModel)
            .where(AppointmentModel.patient_id == patient_id)
            .order_by(AppointmentModel.scheduled_at.desc(), AppointmentModel.id.desc())
        )

    async def find_by_doctor_from(self, doctor_id: int, moment: datetime) -> list[Appointment]:
        """Find a doctor's appointments from ``moment`` on, oldest first."""
        return await self._fetch(
            select(AppointmentModel)
            .where(
                AppointmentModel.doctor_id == doctor_id,
                AppointmentModel.scheduled_at >= moment,
            )
            .order_by(AppointmentModel.scheduled_at, AppointmentModel.id)
        )

    async def find_in_range(
        self,
        start: datetime,
        end: datetime,
        status: AppointmentStatus | None = None,
    ) -> list[Appointment]:
        """Find appointments within an inclusive timestamp range."""
        query = select(AppointmentModel).where(AppointmentModel.scheduled_at.between(start, end))

        if status:
            query = query.where(AppointmentModel.status == status)

        query = query.order_by(AppointmentModel.scheduled_at, AppointmentModel.id)
        return await self._fetch(query)

    async def find_by_status(self, status: AppointmentStatus) -> list[Appointment]:
        return await self._fetch(
            select(AppointmentModel)
            .where(AppointmentModel.status == status)
            .order_by(AppointmentModel.scheduled_at, AppointmentModel.id)
        )

    async def find_by_slot(self, doctor_id: int, scheduled_at: datetime) -> list[Appointment]:
        """Find every appointment of a doctor at an exact timestamp."""
        return await self._fetch(
            select(AppointmentModel).where(
                AppointmentModel.doctor_id == doctor_id,
                AppointmentModel.scheduled_at == scheduled_at,
            )
        )

    async def count_by_status(self) -> dict[AppointmentStatus, int]:
        """Count appointments by status."""
        result = await self.session.execute(
            select(AppointmentModel.status, func.count()).group_by(AppointmentModel.status)
        )
        counts = {status: 0 for status in AppointmentStatus}
        for status, count in result.all():
            counts[AppointmentStatus(status)] = count
        return counts

    async def count_by_doctor(self, doctor_id: int) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(AppointmentModel).where(AppointmentModel.doctor_id == doctor_id)
        )
        return result.scalar_one()

    async def save(self, appointment: Appointment) -> Appointment:
        """Save or update appointment."""
        if appointment.id is not None:
            result = await self.session.execute(
                select(AppointmentModel).where(AppointmentModel.id == appointment.id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                raise NotFoundError("Appointment", appointment.id)
            if model.version != appointment.version:
                raise ConcurrencyError(
                    "Appointment",
                    appointment.id,
                    expected_version=appointment.version,
                    actual_version=model.version,  # type: ignore[arg-type]
                )
            self._update_model(model, appointment)
        else:
            model = self._to_model(appointment)
            self.session.add(model)

        try:
            await self.session.flush()
        except StaleDataError as e:
            logger.warning(f"Stale appointment {appointment.id}: {e}")
            raise ConcurrencyError("Appointment", appointment.id, expected_version=appointment.version) from e
        except IntegrityError as e:
            assert appointment.doctor_id is not None and appointment.scheduled_at is not None
            domain_error = translate_integrity_error(
                e,
                [
                    (
                        (SLOT_INDEX_NAME, "appointments.scheduled_at"),
                        lambda: SlotConflictError(appointment.doctor_id, appointment.scheduled_at),
                    )
                ],
            )
            if domain_error is None:
                raise
            raise domain_error from e

        return self._to_entity(model)

    async def delete(self, appointment_id: int) -> bool:
        """Delete appointment."""
        result = await self.session.execute(select(AppointmentModel).where(AppointmentModel.id == appointment_id))
        model = result.scalar_one_or_none()
        if model is None:
            return False
        await self.session.delete(model)
        try:
            await self.session.flush()
        except StaleDataError as e:
            raise ConcurrencyError("Appointment", appointment_id) from e
        return True

    async def delete_by_patient(self, patient_id: int) -> int:
        result = await self.session.execute(
            delete(AppointmentModel).where(AppointmentModel.patient_id == patient_id)
        )
        return result.rowcount or 0

    async def delete_by_doctor(self, doctor_id: int) -> int:
        result = await self.session.execute(
            delete(AppointmentModel).where(AppointmentModel.doctor_id == doctor_id)
        )
        return result.rowcount or 0

    async def _fetch(self, query) -> list[Appointment]:
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    # Mapping methods

    def _to_entity(self, model: AppointmentModel) -> Appointment:
        """Convert model to entity."""
        return Appointment(
            id=model.id,  # type: ignore[arg-type]
            patient_id=model.patient_id,  # type: ignore[arg-type]
            doctor_id=model.doctor_id,  # type: ignore[arg-type]
            scheduled_at=model.scheduled_at,  # type: ignore[arg-type]
            status=model.status,  # type: ignore[arg-type]
            reason=model.reason,  # type: ignore[arg-type]
            version=model.version,  # type: ignore[arg-type]
            created_at=model.created_at,  # type: ignore[arg-type]
            updated_at=model.updated_at,  # type: ignore[arg-type]
        )

    def _to_model(self, appointment: Appointment) -> AppointmentModel:
        """Convert entity to model."""
        return AppointmentModel(
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            scheduled_at=appointment.scheduled_at,
            status=appointment.current_status,
            reason=appointment.reason,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )

    def _update_model(self, model: AppointmentModel, appointment: Appointment) -> None:
        """Update model from entity."""
        model.scheduled_at = appointment.scheduled_at  # type: ignore[assignment]
        model.status = appointment.current_status  # type: ignore[assignment]
        model.reason = appointment.reason  # type: ignore[assignment]
