"""
Appointment Scheduling Use Cases

Booking, rescheduling and status changes. Every write goes through the
slot rule of SchedulingService; a unique partial index backs it up when two
bookings race.
"""

from datetime import datetime

from hospital.core.domain import InvalidArgumentError, NotFoundError, SlotConflictError
from hospital.core.shared.logger import get_use_case_logger
from hospital.domains.healthcare.application.dto import (
    ChangeAppointmentStatusRequest,
    RescheduleAppointmentRequest,
    ScheduleAppointmentRequest,
)
from hospital.domains.healthcare.application.ports.appointment_repository import IAppointmentRepository
from hospital.domains.healthcare.application.ports.doctor_repository import IDoctorRepository
from hospital.domains.healthcare.application.ports.patient_repository import IPatientRepository
from hospital.domains.healthcare.domain.entities.appointment import Appointment
from hospital.domains.healthcare.domain.services.scheduling_service import SchedulingService


class CheckSlotAvailabilityUseCase:
    """Answer whether a doctor can take an appointment at a timestamp."""

    def __init__(self, appointment_repository: IAppointmentRepository, scheduling_service: SchedulingService):
        self.appointment_repo = appointment_repository
        self.scheduling = scheduling_service

    async def execute(
        self,
        doctor_id: int | None,
        scheduled_at: datetime | None,
        exclude_appointment_id: int | None = None,
    ) -> bool:
        """
        Check the doctor's slot.

        Args:
            doctor_id: Doctor to check
            scheduled_at: Exact timestamp
            exclude_appointment_id: Appointment ignored by the check (self when rescheduling)

        Returns:
            True when no other scheduled appointment holds the slot
        """
        if doctor_id is None:
            raise InvalidArgumentError("doctor_id")
        if scheduled_at is None:
            raise InvalidArgumentError("scheduled_at")
        existing = await self.appointment_repo.find_by_slot(doctor_id, scheduled_at)
        return not self.scheduling.has_conflict(doctor_id, scheduled_at, existing, exclude_appointment_id)


class ScheduleAppointmentUseCase:
    """
    Use case for booking appointments.

    Single Responsibility: Only handles appointment booking logic
    Dependency Inversion: Depends on interfaces, not implementations
    """

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        patient_repository: IPatientRepository,
        doctor_repository: IDoctorRepository,
        scheduling_service: SchedulingService,
    ):
        """
        Initialize use case with dependencies.

        Args:
            appointment_repository: Repository for appointment data access
            patient_repository: Repository for patient data access
            doctor_repository: Repository for doctor data access
            scheduling_service: Slot and date rules
        """
        self.appointment_repo = appointment_repository
        self.patient_repo = patient_repository
        self.doctor_repo = doctor_repository
        self.scheduling = scheduling_service
        self.logger = get_use_case_logger("schedule_appointment")

    async def execute(self, request: ScheduleAppointmentRequest) -> Appointment:
        """
        Book a new appointment in SCHEDULED status.

        Args:
            request: Booking request parameters

        Returns:
            The stored appointment

        Raises:
            InvalidArgumentError: Patient, doctor or timestamp missing
            InvalidDateError: Timestamp not strictly in the future
            ValidationError: Reason too long
            NotFoundError: Patient or doctor does not exist
            SlotConflictError: The doctor is already booked at that time
        """
        # 1. Shape checks (ids, timestamp, reason)
        appointment = Appointment(
            patient_id=request.patient_id,
            doctor_id=request.doctor_id,
            scheduled_at=request.scheduled_at,
            reason=request.reason,
        )
        assert appointment.patient_id is not None and appointment.doctor_id is not None
        assert appointment.scheduled_at is not None
        log = self.logger.with_context(
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            scheduled_at=appointment.scheduled_at.isoformat(),
        )

        # 2. Must be in the future
        self.scheduling.ensure_future(appointment.scheduled_at)

        # 3. Both parties must exist
        patient = await self.patient_repo.find_by_id(appointment.patient_id)
        if patient is None:
            raise NotFoundError("Patient", appointment.patient_id)
        doctor = await self.doctor_repo.find_by_id(appointment.doctor_id)
        if doctor is None:
            raise NotFoundError("Doctor", appointment.doctor_id)

        # 4. Slot must be free
        existing = await self.appointment_repo.find_by_slot(appointment.doctor_id, appointment.scheduled_at)
        try:
            self.scheduling.ensure_slot_available(
                appointment.doctor_id,
                appointment.scheduled_at,
                existing,
                doctor_name=doctor.full_name,
            )
        except SlotConflictError:
            log.warning("Slot already taken")
            raise

        # 5. Persist; a concurrent booking surfaces here as SlotConflictError
        saved = await self.appointment_repo.save(appointment)
        log.info(f"Appointment booked: {saved.id}", appointment_id=saved.id)
        return saved


class RescheduleAppointmentUseCase:
    """Change the timestamp and/or reason of a scheduled appointment."""

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        doctor_repository: IDoctorRepository,
        scheduling_service: SchedulingService,
    ):
        self.appointment_repo = appointment_repository
        self.doctor_repo = doctor_repository
        self.scheduling = scheduling_service
        self.logger = get_use_case_logger("reschedule_appointment")

    async def execute(self, request: RescheduleAppointmentRequest) -> Appointment:
        """
        Apply the new timestamp and/or reason.

        A missing field is left unchanged. The slot is re-checked, excluding
        the appointment itself, only when the timestamp actually changes.

        Raises:
            NotFoundError: Unknown appointment
            InvalidOperationError: The appointment is no longer scheduled
            InvalidDateError: New timestamp not in the future
            SlotConflictError: The doctor is already booked at the new time
        """
        appointment = await self.appointment_repo.find_by_id(request.appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment", request.appointment_id)
        appointment.ensure_modifiable("reschedule")
        log = self.logger.with_context(appointment_id=appointment.id)

        if request.scheduled_at is not None and request.scheduled_at != appointment.scheduled_at:
            self.scheduling.ensure_future(request.scheduled_at)
            assert appointment.doctor_id is not None
            existing = await self.appointment_repo.find_by_slot(appointment.doctor_id, request.scheduled_at)
            if self.scheduling.has_conflict(
                appointment.doctor_id, request.scheduled_at, existing, exclude_appointment_id=appointment.id
            ):
                doctor = await self.doctor_repo.find_by_id(appointment.doctor_id)
                log.warning("New slot already taken", scheduled_at=request.scheduled_at.isoformat())
                self.scheduling.ensure_slot_available(
                    appointment.doctor_id,
                    request.scheduled_at,
                    existing,
                    exclude_appointment_id=appointment.id,
                    doctor_name=doctor.full_name if doctor else None,
                )
            previous = appointment.scheduled_at
            appointment.reschedule(request.scheduled_at)
            log.info(f"Appointment moved from {previous} to {request.scheduled_at}")

        if request.reason is not None:
            appointment.update_reason(request.reason)

        return await self.appointment_repo.save(appointment)


class ChangeAppointmentStatusUseCase:
    """Drive an appointment through its lifecycle."""

    def __init__(self, appointment_repository: IAppointmentRepository):
        self.appointment_repo = appointment_repository
        self.logger = get_use_case_logger("change_appointment_status")

    async def execute(self, request: ChangeAppointmentStatusRequest) -> Appointment:
        """
        Raises:
            NotFoundError: Unknown appointment
            InvalidArgumentError: Missing or unknown target status
            InvalidTransitionError: The move is not allowed
            ConcurrencyError: Another transaction changed the appointment first
        """
        appointment = await self.appointment_repo.find_by_id(request.appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment", request.appointment_id)

        previous = appointment.change_status(request.status)
        saved = await self.appointment_repo.save(appointment)
        self.logger.info(
            f"Appointment {saved.id} status changed",
            appointment_id=saved.id,
            from_status=previous.value,
            to_status=saved.current_status.value,
        )
        return saved
