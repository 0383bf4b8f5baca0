"""Doctor model definition using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Time,
    Uuid,
    func,
)

metadata = MetaData()

doctors = Table(
    "doctors",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    Column(
        "clinic_id",
        Uuid,
        ForeignKey("clinics.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    # Profile
    Column("name", String(200), nullable=False),
    Column("avatar_image_url", Text),
    Column("specialty", String(100), nullable=False, index=True),
    # Price kept in cents to avoid floating point drift
    Column("appointment_price_in_cents", Integer, nullable=False),
    # Availability: Sunday=0 ... Saturday=6, the range may wrap (Friday -> Monday)
    Column("available_from_week_day", Integer, nullable=False, server_default="1"),
    Column("available_to_week_day", Integer, nullable=False, server_default="5"),
    Column("available_from_time", Time, nullable=False),
    Column("available_to_time", Time, nullable=False),
    # Metadata
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    # Constraints
    CheckConstraint(
        "available_from_week_day BETWEEN 0 AND 6 AND available_to_week_day BETWEEN 0 AND 6",
        name="doctors_week_day_check",
    ),
    CheckConstraint("appointment_price_in_cents >= 0", name="doctors_price_check"),
    CheckConstraint("available_from_time < available_to_time", name="doctors_time_window_check"),
)
