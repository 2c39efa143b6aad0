"""
Appointment Read Use Cases

Read operations never raise for missing rows; they return None or empty lists.
"""

from datetime import date, datetime, time

from hospital.core.domain import InvalidArgumentError
from hospital.domains.healthcare.application.ports.appointment_repository import IAppointmentRepository
from hospital.domains.healthcare.domain.entities.appointment import Appointment
from hospital.domains.healthcare.domain.services.scheduling_service import Clock
from hospital.domains.healthcare.domain.value_objects.appointment_status import AppointmentStatus


class GetAppointmentUseCase:
    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self, appointment_id: int) -> Appointment | None:
        return await self.appointment_repo.find_by_id(appointment_id)


class ListAppointmentsUseCase:
    """All appointments, newest first."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self) -> list[Appointment]:
        return await self.appointment_repo.list_all()


class ListPatientAppointmentsUseCase:
    """A patient's appointments, newest first."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self, patient_id: int) -> list[Appointment]:
        return await self.appointment_repo.find_by_patient(patient_id)


class ListUpcomingDoctorAppointmentsUseCase:
    """A doctor's appointments from now on, oldest first, whatever their status."""

    def __init__(self, appointment_repository: IAppointmentRepository, clock: Clock = datetime.now):
        self.appointment_repo = appointment_repository
        self.clock = clock

    async def execute(self, doctor_id: int) -> list[Appointment]:
        return await self.appointment_repo.find_by_doctor_from(doctor_id, self.clock())


class FindAppointmentsByDateRangeUseCase:
    """
    Appointments between two calendar days, both included.

    A missing bound yields an empty list; an inverted range is an error.
    """

    status: AppointmentStatus | None = None

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self, start_date: date | None, end_date: date | None) -> list[Appointment]:
        if start_date is None or end_date is None:
            return []
        if start_date > end_date:
            raise InvalidArgumentError(
                "start_date",
                f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}",
            )
        start = datetime.combine(start_date, time.min)
        end = datetime.combine(end_date, time.max)
        return await self.appointment_repo.find_in_range(start, end, status=self.status)


class ListScheduledAppointmentsInRangeUseCase(FindAppointmentsByDateRangeUseCase):
    """Same range rules, SCHEDULED appointments only."""

    status = AppointmentStatus.SCHEDULED


class ListAppointmentsByStatusUseCase:
    """Appointments in one status, oldest first."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self, status: AppointmentStatus | str | None) -> list[Appointment]:
        return await self.appointment_repo.find_by_status(AppointmentStatus.parse(status))


class CountAppointmentsByStatusUseCase:
    """Number of appointments per status, including zero counts."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository

    async def execute(self) -> dict[AppointmentStatus, int]:
        return await self.appointment_repo.count_by_status()
