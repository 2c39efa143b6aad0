"""hospital_records

Revision ID: 001_hospital_records
Revises:
Create Date: 2026-10-19

Creates the four hospital record tables. Patients own their medical history
and appointments (ON DELETE CASCADE); doctors are only referenced
(ON DELETE RESTRICT). A partial unique index keeps at most one scheduled
appointment per doctor and instant.
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_hospital_records"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SPECIALTIES = (
    "general_practice",
    "cardiology",
    "dermatology",
    "emergency",
    "endocrinology",
    "gastroenterology",
    "gynecology",
    "neurology",
    "oncology",
    "ophthalmology",
    "orthopedics",
    "pediatrics",
    "psychiatry",
    "pulmonology",
    "radiology",
    "surgery",
    "urology",
)
APPOINTMENT_STATUSES = ("scheduled", "attended", "cancelled")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create hospital tables."""

    # ==========================================================================
    # 1. Patients
    # ==========================================================================
    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("national_id", sa.String(20), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("email", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_patients_id", "patients", ["id"])
    op.create_index("uq_patients_national_id", "patients", ["national_id"], unique=True)

    # ==========================================================================
    # 2. Doctors
    # ==========================================================================
    op.create_table(
        "doctors",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("license_number", sa.String(20), nullable=False),
        sa.Column("specialty", sa.Enum(*SPECIALTIES, name="doctor_specialty"), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_doctors_id", "doctors", ["id"])
    op.create_index("uq_doctors_license_number", "doctors", ["license_number"], unique=True)

    # ==========================================================================
    # 3. Medical histories (id shared with the owning patient)
    # ==========================================================================
    op.create_table(
        "medical_histories",
        sa.Column(
            "patient_id",
            sa.Integer(),
            sa.ForeignKey("patients.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("allergies", sa.String(500), nullable=True),
        sa.Column("background", sa.String(1000), nullable=True),
        sa.Column("observations", sa.String(1000), nullable=True),
        *_timestamps(),
    )

    # ==========================================================================
    # 4. Appointments
    # ==========================================================================
    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("scheduled_at", sa.DateTime(), nullable=False),
        sa.Column("status", sa.Enum(*APPOINTMENT_STATUSES, name="appointment_status"), nullable=False),
        sa.Column("reason", sa.String(200), nullable=True),
        sa.Column(
            "patient_id",
            sa.Integer(),
            sa.ForeignKey("patients.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "doctor_id",
            sa.Integer(),
            sa.ForeignKey("doctors.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("version", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_appointments_id", "appointments", ["id"])
    op.create_index("ix_appointments_patient_id", "appointments", ["patient_id"])
    op.create_index("ix_appointments_doctor_id", "appointments", ["doctor_id"])
    op.create_index("ix_appointments_scheduled_at", "appointments", ["scheduled_at"])
    op.create_index("ix_appointments_status", "appointments", ["status"])
    op.create_index(
        "uq_appointments_doctor_slot_scheduled",
        "appointments",
        ["doctor_id", "scheduled_at"],
        unique=True,
        postgresql_where=sa.text("status = 'scheduled'"),
        sqlite_where=sa.text("status = 'scheduled'"),
    )


def downgrade() -> None:
    """Drop hospital tables."""
    op.drop_index("uq_appointments_doctor_slot_scheduled", table_name="appointments")
    op.drop_index("ix_appointments_status", table_name="appointments")
    op.drop_index("ix_appointments_scheduled_at", table_name="appointments")
    op.drop_index("ix_appointments_doctor_id", table_name="appointments")
    op.drop_index("ix_appointments_patient_id", table_name="appointments")
    op.drop_index("ix_appointments_id", table_name="appointments")
    op.drop_table("appointments")
    op.drop_table("medical_histories")
    op.drop_index("uq_doctors_license_number", table_name="doctors")
    op.drop_index("ix_doctors_id", table_name="doctors")
    op.drop_table("doctors")
    op.drop_index("uq_patients_national_id", table_name="patients")
    op.drop_index("ix_patients_id", table_name="patients")
    op.drop_table("patients")
    sa.Enum(name="appointment_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="doctor_specialty").drop(op.get_bind(), checkfirst=True)
