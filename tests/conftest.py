"""
Shared pytest fixtures for all tests.

This module provides the in-memory database, the dependency container and
sample records shared by the test suites.
"""

import os
from collections.abc import AsyncGenerator
from datetime import date, datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

from hospital.config.settings import Settings  # noqa: E402
from hospital.core.container import HealthcareContainer  # noqa: E402
from hospital.database.async_db import (  # noqa: E402
    create_async_database_engine,
    create_session_factory,
    transactional_session,
)
from hospital.database.base import Base  # noqa: E402
from hospital.domains.healthcare.application.dto import (  # noqa: E402
    RegisterDoctorRequest,
    RegisterPatientRequest,
    ScheduleAppointmentRequest,
)
from hospital.domains.healthcare.domain.entities import Appointment, Doctor, Patient  # noqa: E402
from hospital.domains.healthcare.domain.value_objects import DoctorDeletionPolicy  # noqa: E402
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy import models  # noqa: E402, F401

# Fixed "current instant" used by every scheduling rule under test
NOW = datetime(2030, 3, 4, 9, 0)


def fixed_clock() -> datetime:
    return NOW


# ============================================================================
# SETTINGS & DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite:///:memory:",
        ENVIRONMENT="test",
        DOCTOR_DELETION_POLICY="restrict",
    )


@pytest_asyncio.fixture
async def async_engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create the schema on a fresh in-memory database for each test."""
    engine = create_async_database_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(async_engine)


@pytest.fixture
def uow(session_factory):
    """
    Open one unit of work bound to the test database.

    Usage: ``async with uow() as db: ...``
    """

    def _open():
        return transactional_session(session_factory)

    return _open


# ============================================================================
# CONTAINER FIXTURES
# ============================================================================


@pytest.fixture
def container(settings: Settings) -> HealthcareContainer:
    """Container with a frozen clock and the restrict deletion policy."""
    return HealthcareContainer(settings=settings, clock=fixed_clock)


@pytest.fixture
def cascade_container(settings: Settings) -> HealthcareContainer:
    return HealthcareContainer(settings=settings, clock=fixed_clock, deletion_policy=DoctorDeletionPolicy.CASCADE)


# ============================================================================
# SAMPLE DATA
# ============================================================================


@pytest.fixture
def patient_request() -> RegisterPatientRequest:
    return RegisterPatientRequest(
        full_name="María García",
        national_id="1234567890101",
        date_of_birth=date(1990, 5, 15),
        email="maria.garcia@example.com",
        phone="55512345",
    )


@pytest.fixture
def doctor_request() -> RegisterDoctorRequest:
    return RegisterDoctorRequest(
        full_name="Carlos Méndez",
        license_number="COL-4521",
        specialty="cardiology",
        email="carlos.mendez@hospital.org",
    )


@pytest_asyncio.fixture
async def patient(uow, container, patient_request) -> Patient:
    """A registered patient."""
    async with uow() as db:
        return await container.create_register_patient_use_case(db).execute(patient_request)


@pytest_asyncio.fixture
async def second_patient(uow, container) -> Patient:
    async with uow() as db:
        return await container.create_register_patient_use_case(db).execute(
            RegisterPatientRequest(
                full_name="José López",
                national_id="9876543210101",
                date_of_birth=date(1985, 11, 2),
                email="jose.lopez@example.com",
            )
        )


@pytest_asyncio.fixture
async def doctor(uow, container, doctor_request) -> Doctor:
    """A registered doctor."""
    async with uow() as db:
        return await container.create_register_doctor_use_case(db).execute(doctor_request)


@pytest_asyncio.fixture
async def appointment(uow, container, patient, doctor) -> Appointment:
    """A scheduled appointment one week after NOW."""
    async with uow() as db:
        return await container.create_schedule_appointment_use_case(db).execute(
            ScheduleAppointmentRequest(
                patient_id=patient.id,
                doctor_id=doctor.id,
                scheduled_at=NOW + timedelta(days=7),
                reason="Chest pain follow-up",
            )
        )
