"""
Scheduling Service for Healthcare Domain

Domain service holding the appointment conflict rule.
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from hospital.core.domain import InvalidArgumentError, InvalidDateError, SlotConflictError

from ..entities.appointment import Appointment
from ..value_objects.appointment_status import Slot

Clock = Callable[[], datetime]


class SchedulingService:
    """
    Domain service for appointment scheduling.

    Handles:
    - Rejecting timestamps that are not in the future
    - Conflict detection on a doctor's exact timestamp

    A slot is taken only by an appointment still in SCHEDULED status;
    attended and cancelled appointments free it.

    Example:
        ```python
        service = SchedulingService(clock=lambda: datetime(2030, 1, 1, 9, 0))
        service.ensure_future(datetime(2030, 1, 2, 10, 0))
        service.ensure_slot_available(7, datetime(2030, 1, 2, 10, 0), existing)
        ```
    """

    def __init__(self, clock: Clock = datetime.now):
        """
        Initialize scheduling service.

        Args:
            clock: Source of the current naive local time
        """
        self.clock = clock

    def now(self) -> datetime:
        return self.clock()

    def ensure_future(self, scheduled_at: datetime | None) -> datetime:
        """Raise InvalidDateError unless ``scheduled_at`` is strictly after now."""
        if scheduled_at is None:
            raise InvalidArgumentError("scheduled_at")
        if scheduled_at <= self.now():
            raise InvalidDateError(scheduled_at)
        return scheduled_at

    def has_conflict(
        self,
        doctor_id: int,
        scheduled_at: datetime,
        existing_appointments: Iterable[Appointment],
        exclude_appointment_id: int | None = None,
    ) -> bool:
        """Check whether another scheduled appointment already holds the slot."""
        requested = Slot(doctor_id=doctor_id, scheduled_at=scheduled_at)
        for apt in existing_appointments:
            if exclude_appointment_id is not None and apt.id == exclude_appointment_id:
                continue
            if not apt.occupies_slot():
                continue
            if apt.slot == requested:
                return True
        return False

    def ensure_slot_available(
        self,
        doctor_id: int,
        scheduled_at: datetime,
        existing_appointments: Iterable[Appointment],
        exclude_appointment_id: int | None = None,
        doctor_name: str | None = None,
    ) -> None:
        """Raise SlotConflictError when the slot is taken."""
        if self.has_conflict(doctor_id, scheduled_at, existing_appointments, exclude_appointment_id):
            raise SlotConflictError(doctor_id, scheduled_at, doctor_name=doctor_name)
