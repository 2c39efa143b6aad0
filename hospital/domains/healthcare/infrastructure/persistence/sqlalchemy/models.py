"""
Healthcare SQLAlchemy Models

Database models for healthcare domain persistence.

Rows reference each other by foreign key only; ownership is expressed by the
ON DELETE rules rather than ORM relationships.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    text,
)

from hospital.database.base import Base, TimestampMixin
from hospital.domains.healthcare.domain.value_objects.appointment_status import (
    AppointmentStatus,
    DoctorSpecialty,
)

SLOT_INDEX_NAME = "uq_appointments_doctor_slot_scheduled"
PATIENT_NATIONAL_ID_INDEX = "uq_patients_national_id"
DOCTOR_LICENSE_INDEX = "uq_doctors_license_number"


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class PatientModel(TimestampMixin, Base):
    """SQLAlchemy model for Patient entity."""

    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False)
    national_id = Column(String(20), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    phone = Column(String(15), nullable=True)
    email = Column(String(100), nullable=False)

    __table_args__ = (Index(PATIENT_NATIONAL_ID_INDEX, "national_id", unique=True),)


class DoctorModel(TimestampMixin, Base):
    """SQLAlchemy model for Doctor entity."""

    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(100), nullable=False)
    license_number = Column(String(20), nullable=False)
    specialty = Column(
        SQLEnum(DoctorSpecialty, name="doctor_specialty", values_callable=_enum_values),
        nullable=False,
    )
    email = Column(String(100), nullable=False)

    __table_args__ = (Index(DOCTOR_LICENSE_INDEX, "license_number", unique=True),)


class MedicalHistoryModel(TimestampMixin, Base):
    """SQLAlchemy model for MedicalHistory entity; keyed by its patient."""

    __tablename__ = "medical_histories"

    patient_id = Column(
        Integer,
        ForeignKey("patients.id", ondelete="CASCADE"),
        primary_key=True,
    )
    allergies = Column(String(500), nullable=True)
    background = Column(String(1000), nullable=True)
    observations = Column(String(1000), nullable=True)


class AppointmentModel(TimestampMixin, Base):
    """SQLAlchemy model for Appointment entity."""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    scheduled_at = Column(DateTime, nullable=False, index=True)
    status = Column(
        SQLEnum(AppointmentStatus, name="appointment_status", values_callable=_enum_values),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
        index=True,
    )
    reason = Column(String(200), nullable=True)

    # References
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id", ondelete="RESTRICT"), nullable=False, index=True)

    # Optimistic concurrency
    version = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        # At most one scheduled appointment per doctor and instant
        Index(
            SLOT_INDEX_NAME,
            "doctor_id",
            "scheduled_at",
            unique=True,
            sqlite_where=text("status = 'scheduled'"),
            postgresql_where=text("status = 'scheduled'"),
        ),
    )

    __mapper_args__ = {"version_id_col": version}
