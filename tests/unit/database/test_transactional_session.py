"""
Unit tests for the unit-of-work context manager and engine factory.
"""

import json
import logging
from datetime import date

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import NullPool, StaticPool

from hospital.config.settings import Settings, reset_settings
from hospital.core.domain import DuplicateKeyError, NotFoundError, ValidationError
from hospital.core.shared.logger import configure_logging
from hospital.database.async_db import (
    create_async_database_engine,
    dispose_engine,
    get_async_engine,
    get_session_factory,
    transactional_session,
)
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy.models import PatientModel


def _patient_model(national_id: str = "1234567890101") -> PatientModel:
    return PatientModel(
        full_name="Ana Ruiz",
        national_id=national_id,
        date_of_birth=date(1992, 1, 20),
        email="ana.ruiz@example.com",
    )


async def _count_patients(uow) -> int:
    async with uow() as db:
        result = await db.execute(select(func.count()).select_from(PatientModel))
        return result.scalar_one()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_commits_on_success(uow):
    async with uow() as db:
        db.add(_patient_model())

    assert await _count_patients(uow) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_domain_error_rolls_back_and_propagates(uow):
    with pytest.raises(NotFoundError) as exc_info:
        async with uow() as db:
            db.add(_patient_model())
            await db.flush()
            raise NotFoundError("Doctor", 99)

    assert exc_info.value.entity_id == 99
    assert await _count_patients(uow) == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unexpected_error_rolls_back_and_propagates(uow):
    with pytest.raises(RuntimeError, match="boom"):
        async with uow() as db:
            db.add(_patient_model())
            await db.flush()
            raise RuntimeError("boom")

    assert await _count_patients(uow) == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_sqlite_foreign_keys_enabled(uow):
    async with uow() as db:
        result = await db.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_pool_choice_per_database():
    memory = create_async_database_engine(Settings(_env_file=None, DATABASE_URL="sqlite:///:memory:"))
    on_disk = create_async_database_engine(Settings(_env_file=None, DATABASE_URL="sqlite:///./records.db"))
    try:
        assert isinstance(memory.pool, StaticPool)
        assert isinstance(on_disk.pool, NullPool)
    finally:
        await memory.dispose()
        await on_disk.dispose()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_process_wide_engine_follows_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'shared.db'}")
    reset_settings()
    try:
        engine = get_async_engine()
        assert get_async_engine() is engine
        assert get_session_factory() is get_session_factory()
        assert engine.url.database.endswith("shared.db")

        async with transactional_session() as db:
            assert (await db.execute(text("SELECT 1"))).scalar_one() == 1
    finally:
        await dispose_engine()
        reset_settings()

    assert get_async_engine() is not engine
    await dispose_engine()


# ============================================================================
# Rollback logging
# ============================================================================


@pytest.fixture
def json_log_file(tmp_path, capsys):
    """Route logging to stdout (plain) and a JSON file, restoring the root logger afterwards."""
    log_file = tmp_path / "rollback.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    configure_logging("INFO", "plain", str(log_file))
    yield log_file
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_rollback_log_never_contains_patient_identifiers(uow, container, patient_request, json_log_file, capsys):
    # Arrange
    patient_request.national_id = "1234567890101X"
    async with uow() as db:
        await container.create_register_patient_use_case(db).execute(patient_request)

    # Act
    with pytest.raises(DuplicateKeyError):
        async with uow() as db:
            await container.create_register_patient_use_case(db).execute(patient_request)

    patient_request.national_id = "5550001112223"
    patient_request.email = "secret.person@nodomain"
    with pytest.raises(ValidationError):
        async with uow() as db:
            await container.create_register_patient_use_case(db).execute(patient_request)

    # Assert
    file_output = json_log_file.read_text()
    console_output = capsys.readouterr().out
    for output in (file_output, console_output):
        assert "1234567890101X" not in output
        assert "secret.person@nodomain" not in output
        assert "Transaction rolled back: DUPLICATE_KEY" in output
        assert "Transaction rolled back: VALIDATION_ERROR" in output

    rollbacks = [
        json.loads(line)
        for line in file_output.splitlines()
        if json.loads(line)["message"].startswith("Transaction rolled back")
    ]
    assert rollbacks[0]["extra"]["details"]["key"] == "************1X"
    assert rollbacks[1]["extra"]["details"]["value"].endswith("in")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_database_error_rollback_logs_only_error_type(uow, json_log_file, capsys):
    async with uow() as db:
        db.add(_patient_model("1234567890101X"))

    with pytest.raises(IntegrityError):
        async with uow() as db:
            db.add(_patient_model("1234567890101X"))
            await db.flush()

    console_output = capsys.readouterr().out
    assert "Transaction rolled back after database error: IntegrityError" in console_output
    assert "1234567890101X" not in console_output
    assert "1234567890101X" not in json_log_file.read_text()
