"""Initial migration - create clinics, doctors, patients and appointments tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create clinic tables."""
    op.create_table(
        "clinics",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "doctors",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("clinic_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("avatar_image_url", sa.Text(), nullable=True),
        sa.Column("specialty", sa.String(length=100), nullable=False),
        sa.Column("appointment_price_in_cents", sa.Integer(), nullable=False),
        sa.Column("available_from_week_day", sa.Integer(), server_default="1", nullable=False),
        sa.Column("available_to_week_day", sa.Integer(), server_default="5", nullable=False),
        sa.Column("available_from_time", sa.Time(), nullable=False),
        sa.Column("available_to_time", sa.Time(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint(
            "available_from_week_day BETWEEN 0 AND 6 AND available_to_week_day BETWEEN 0 AND 6",
            name="doctors_week_day_check",
        ),
        sa.CheckConstraint("appointment_price_in_cents >= 0", name="doctors_price_check"),
        sa.CheckConstraint(
            "available_from_time < available_to_time", name="doctors_time_window_check"
        ),
        sa.ForeignKeyConstraint(["clinic_id"], ["clinics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_doctors_clinic_id", "doctors", ["clinic_id"])
    op.create_index("ix_doctors_specialty", "doctors", ["specialty"])

    op.create_table(
        "patients",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("clinic_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        sa.Column("sex", sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("sex IN ('male', 'female')", name="patients_sex_check"),
        sa.ForeignKeyConstraint(["clinic_id"], ["clinics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_patients_clinic_id", "patients", ["clinic_id"])

    op.create_table(
        "appointments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("clinic_id", sa.Uuid(), nullable=False),
        sa.Column("patient_id", sa.Uuid(), nullable=False),
        sa.Column("doctor_id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("appointment_price_in_cents", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("appointment_price_in_cents >= 0", name="appointments_price_check"),
        sa.ForeignKeyConstraint(["clinic_id"], ["clinics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_appointments_clinic_id", "appointments", ["clinic_id"])
    op.create_index("ix_appointments_patient_id", "appointments", ["patient_id"])
    op.create_index("ix_appointments_doctor_id", "appointments", ["doctor_id"])
    op.create_index("ix_appointments_date", "appointments", ["date"])


def downgrade() -> None:
    """Drop clinic tables."""
    op.drop_index("ix_appointments_date", table_name="appointments")
    op.drop_index("ix_appointments_doctor_id", table_name="appointments")
    op.drop_index("ix_appointments_patient_id", table_name="appointments")
    op.drop_index("ix_appointments_clinic_id", table_name="appointments")
    op.drop_table("appointments")

    op.drop_index("ix_patients_clinic_id", table_name="patients")
    op.drop_table("patients")

    op.drop_index("ix_doctors_specialty", table_name="doctors")
    op.drop_index("ix_doctors_clinic_id", table_name="doctors")
    op.drop_table("doctors")

    op.drop_table("clinics")
