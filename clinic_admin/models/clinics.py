"""Clinic model definition using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, MetaData, String, Table, Uuid, func

metadata = MetaData()

clinics = Table(
    "clinics",
    metadata,
    Column("id", Uuid, primary_key=True, default=uuid4),
    Column("name", String(255), nullable=False),
    # Metadata
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
