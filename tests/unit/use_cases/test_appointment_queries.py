"""
Unit tests for appointment read use cases.
"""

from datetime import date, datetime

import pytest
import pytest_asyncio

from hospital.core.container import HealthcareContainer
from hospital.core.domain import InvalidArgumentError
from hospital.domains.healthcare.application.dto import ChangeAppointmentStatusRequest, ScheduleAppointmentRequest
from hospital.domains.healthcare.domain.value_objects import AppointmentStatus


@pytest_asyncio.fixture
async def calendar(uow, container, patient, second_patient, doctor):
    """
    Four bookings with the same doctor:

    - 2030-03-05 00:00 (patient, attended)
    - 2030-03-05 23:59 (second patient, scheduled)
    - 2030-03-06 10:00 (patient, cancelled)
    - 2030-03-08 10:00 (patient, scheduled)
    """
    plan = [
        (patient.id, datetime(2030, 3, 5, 0, 0), "attended"),
        (second_patient.id, datetime(2030, 3, 5, 23, 59), None),
        (patient.id, datetime(2030, 3, 6, 10, 0), "cancelled"),
        (patient.id, datetime(2030, 3, 8, 10, 0), None),
    ]
    booked = []
    for patient_id, when, final_status in plan:
        async with uow() as db:
            appointment = await container.create_schedule_appointment_use_case(db).execute(
                ScheduleAppointmentRequest(patient_id=patient_id, doctor_id=doctor.id, scheduled_at=when)
            )
            if final_status:
                appointment = await container.create_change_appointment_status_use_case(db).execute(
                    ChangeAppointmentStatusRequest(appointment_id=appointment.id, status=final_status)
                )
        booked.append(appointment)
    return booked


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_date_range_includes_whole_days(uow, container, calendar):
    async with uow() as db:
        found = await container.create_find_appointments_by_date_range_use_case(db).execute(
            date(2030, 3, 5), date(2030, 3, 5)
        )

    assert [a.id for a in found] == [calendar[0].id, calendar[1].id]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_scheduled_in_range_filters_status(uow, container, calendar):
    async with uow() as db:
        found = await container.create_list_scheduled_appointments_in_range_use_case(db).execute(
            date(2030, 3, 1), date(2030, 3, 31)
        )

    assert [a.id for a in found] == [calendar[1].id, calendar[3].id]
    assert all(a.current_status is AppointmentStatus.SCHEDULED for a in found)


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start,end",
    [(None, date(2030, 3, 31)), (date(2030, 3, 1), None), (None, None)],
)
async def test_missing_range_bound_returns_empty(uow, container, calendar, start, end):
    async with uow() as db:
        assert await container.create_find_appointments_by_date_range_use_case(db).execute(start, end) == []
        assert await container.create_list_scheduled_appointments_in_range_use_case(db).execute(start, end) == []


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_inverted_range_rejected(uow, container):
    with pytest.raises(InvalidArgumentError):
        async with uow() as db:
            await container.create_find_appointments_by_date_range_use_case(db).execute(
                date(2030, 3, 10), date(2030, 3, 1)
            )


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_listings_and_ordering(uow, container, calendar, patient, doctor):
    async with uow() as db:
        everything = await container.create_list_appointments_use_case(db).execute()
        of_patient = await container.create_list_patient_appointments_use_case(db).execute(patient.id)
        upcoming = await container.create_list_upcoming_doctor_appointments_use_case(db).execute(doctor.id)
        single = await container.create_get_appointment_use_case(db).execute(calendar[2].id)
        missing = await container.create_get_appointment_use_case(db).execute(9999)

    ids = [a.id for a in calendar]
    assert [a.id for a in everything] == [ids[3], ids[2], ids[1], ids[0]]
    assert [a.id for a in of_patient] == [ids[3], ids[2], ids[0]]
    assert [a.id for a in upcoming] == ids
    assert single.current_status is AppointmentStatus.CANCELLED
    assert missing is None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_upcoming_excludes_past_appointments(uow, settings, calendar, doctor):
    later = HealthcareContainer(settings=settings, clock=lambda: datetime(2030, 3, 6, 0, 0))

    async with uow() as db:
        upcoming = await later.create_list_upcoming_doctor_appointments_use_case(db).execute(doctor.id)
        busy = await later.create_list_doctors_use_case(db).with_upcoming_appointments()

    assert [a.id for a in upcoming] == [calendar[2].id, calendar[3].id]
    assert [d.id for d in busy] == [doctor.id]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_by_status_and_counts(uow, container, calendar):
    async with uow() as db:
        scheduled = await container.create_list_appointments_by_status_use_case(db).execute("SCHEDULED")
        attended = await container.create_list_appointments_by_status_use_case(db).execute(AppointmentStatus.ATTENDED)
        counts = await container.create_count_appointments_by_status_use_case(db).execute()

    assert [a.id for a in scheduled] == [calendar[1].id, calendar[3].id]
    assert [a.id for a in attended] == [calendar[0].id]
    assert counts == {
        AppointmentStatus.SCHEDULED: 2,
        AppointmentStatus.ATTENDED: 1,
        AppointmentStatus.CANCELLED: 1,
    }


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_counts_on_empty_database(uow, container):
    async with uow() as db:
        counts = await container.create_count_appointments_by_status_use_case(db).execute()

    assert counts == {status: 0 for status in AppointmentStatus}


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_by_status_rejects_unknown(uow, container):
    with pytest.raises(InvalidArgumentError):
        async with uow() as db:
            await container.create_list_appointments_by_status_use_case(db).execute("no-show")
