"""
Unit tests for deletion use cases and their ownership rules.
"""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from hospital.core.domain import EntityInUseError
from hospital.domains.healthcare.application.dto import MedicalHistoryRequest, ScheduleAppointmentRequest
from hospital.domains.healthcare.infrastructure.repositories import SQLAlchemyPatientRepository

NOW = datetime(2030, 3, 4, 9, 0)


async def _snapshot(uow, container, patient_id, doctor_id):
    async with uow() as db:
        return {
            "patient": await container.create_get_patient_use_case(db).execute(patient_id),
            "doctor": await container.create_get_doctor_use_case(db).execute(doctor_id),
            "history": await container.create_get_medical_history_use_case(db).execute(patient_id),
            "appointments": await container.create_list_appointments_use_case(db).execute(),
        }


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_appointment_leaves_parties(uow, container, appointment, patient, doctor):
    async with uow() as db:
        deleted = await container.create_delete_appointment_use_case(db).execute(appointment.id)
    async with uow() as db:
        deleted_again = await container.create_delete_appointment_use_case(db).execute(appointment.id)

    state = await _snapshot(uow, container, patient.id, doctor.id)
    assert deleted is True
    assert deleted_again is False
    assert state["appointments"] == []
    assert state["patient"] is not None
    assert state["doctor"] is not None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_patient_cascades_to_owned_records(uow, container, appointment, patient, second_patient, doctor):
    # Arrange: history plus a second appointment of another patient
    async with uow() as db:
        await container.create_create_medical_history_use_case(db).execute(
            MedicalHistoryRequest(patient_id=patient.id, allergies="Aspirin")
        )
        other = await container.create_schedule_appointment_use_case(db).execute(
            ScheduleAppointmentRequest(
                patient_id=second_patient.id, doctor_id=doctor.id, scheduled_at=NOW + timedelta(days=2)
            )
        )

    # Act
    async with uow() as db:
        deleted = await container.create_delete_patient_use_case(db).execute(patient.id)

    # Assert
    state = await _snapshot(uow, container, patient.id, doctor.id)
    assert deleted is True
    assert state["patient"] is None
    assert state["history"] is None
    assert [a.id for a in state["appointments"]] == [other.id]
    assert state["doctor"] is not None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_delete_unknown_patient(uow, container):
    async with uow() as db:
        assert await container.create_delete_patient_use_case(db).execute(404) is False


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_failed_patient_delete_rolls_back_everything(uow, container, appointment, patient, doctor):
    """A failure after the owned rows are gone must restore them."""
    async with uow() as db:
        await container.create_create_medical_history_use_case(db).execute(
            MedicalHistoryRequest(patient_id=patient.id, background="Hypertension")
        )

    with patch.object(SQLAlchemyPatientRepository, "delete", side_effect=RuntimeError("disk full")):
        with pytest.raises(RuntimeError, match="disk full"):
            async with uow() as db:
                await container.create_delete_patient_use_case(db).execute(patient.id)

    state = await _snapshot(uow, container, patient.id, doctor.id)
    assert state["patient"] is not None
    assert state["history"].background == "Hypertension"
    assert [a.id for a in state["appointments"]] == [appointment.id]


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_restrict_policy_refuses_referenced_doctor(uow, container, appointment, patient, doctor):
    with pytest.raises(EntityInUseError) as exc_info:
        async with uow() as db:
            await container.create_delete_doctor_use_case(db).execute(doctor.id)

    state = await _snapshot(uow, container, patient.id, doctor.id)
    assert exc_info.value.count == 1
    assert state["doctor"] is not None
    assert len(state["appointments"]) == 1


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_cascade_policy_removes_doctor_appointments(uow, cascade_container, appointment, patient, doctor):
    async with uow() as db:
        deleted = await cascade_container.create_delete_doctor_use_case(db).execute(doctor.id)

    state = await _snapshot(uow, cascade_container, patient.id, doctor.id)
    assert deleted is True
    assert state["doctor"] is None
    assert state["appointments"] == []
    assert state["patient"] is not None


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_unreferenced_doctor_deleted_under_restrict(uow, container, doctor):
    async with uow() as db:
        assert await container.create_delete_doctor_use_case(db).execute(doctor.id) is True
    async with uow() as db:
        assert await container.create_delete_doctor_use_case(db).execute(doctor.id) is False
