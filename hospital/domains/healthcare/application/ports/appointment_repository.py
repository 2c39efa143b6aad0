"""
Appointment Repository Port

Interface for appointment data access following Clean Architecture.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from hospital.domains.healthcare.domain.entities.appointment import Appointment
from hospital.domains.healthcare.domain.value_objects.appointment_status import AppointmentStatus


@runtime_checkable
class IAppointmentRepository(Protocol):
    """
    Appointment repository interface.

    Defines the contract for appointment data access operations.

    Example:
        ```python
        class SQLAlchemyAppointmentRepository(IAppointmentRepository):
            async def find_by_id(self, appointment_id: int) -> Appointment | None:
                # SQLAlchemy implementation
                pass
        ```
    """

    async def find_by_id(self, appointment_id: int) -> Appointment | None:
        """
        Find appointment by ID.

        Args:
            appointment_id: Unique appointment identifier

        Returns:
            Appointment if found, None otherwise
        """
        ...

    async def list_all(self) -> list[Appointment]:
        """All appointments, newest first."""
        ...

    async def find_by_patient(self, patient_id: int) -> list[Appointment]:
        """A patient's appointments, newest first."""
        ...

    async def find_by_doctor_from(self, doctor_id: int, moment: datetime) -> list[Appointment]:
        """
        Find a doctor's appointments at or after ``moment``.

        Args:
            doctor_id: Doctor ID
            moment: Inclusive lower bound

        Returns:
            Appointments of any status, oldest first
        """
        ...

    async def find_in_range(
        self,
        start: datetime,
        end: datetime,
        status: AppointmentStatus | None = None,
    ) -> list[Appointment]:
        """
        Find appointments with ``start <= scheduled_at <= end``.

        Args:
            start: Inclusive lower bound
            end: Inclusive upper bound
            status: Optional status filter

        Returns:
            Appointments, oldest first
        """
        ...

    async def find_by_status(self, status: AppointmentStatus) -> list[Appointment]:
        """Appointments in ``status``, oldest first."""
        ...

    async def find_by_slot(self, doctor_id: int, scheduled_at: datetime) -> list[Appointment]:
        """
        Find every appointment of a doctor at an exact timestamp.

        All statuses are returned; the scheduling rule decides which of them
        still occupy the slot.
        """
        ...

    async def count_by_status(self) -> dict[AppointmentStatus, int]:
        """
        Count appointments per status.

        Returns:
            One entry per status, zero when there are none
        """
        ...

    async def count_by_doctor(self, doctor_id: int) -> int:
        ...

    async def save(self, appointment: Appointment) -> Appointment:
        """
        Insert a new appointment or update an existing one.

        Raises:
            SlotConflictError: Another scheduled appointment holds the slot
            ConcurrencyError: The row changed since it was read
            NotFoundError: Updating an appointment that no longer exists
        """
        ...

    async def delete(self, appointment_id: int) -> bool:
        """
        Delete appointment.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def delete_by_patient(self, patient_id: int) -> int:
        """Delete every appointment of a patient; returns the number removed."""
        ...

    async def delete_by_doctor(self, doctor_id: int) -> int:
        """Delete every appointment of a doctor; returns the number removed."""
        ...
