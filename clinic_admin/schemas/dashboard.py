"""Dashboard schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class StatCard(BaseModel):
    """One card of the dashboard summary."""

    title: str
    value: str


class TopDoctor(BaseModel):
    """Doctor ranked by booked appointments."""

    id: UUID
    name: str
    specialty: str
    appointments: int


class TopSpecialty(BaseModel):
    """Specialty ranked by booked appointments."""

    specialty: str
    appointments: int


class DashboardResponse(BaseModel):
    """Aggregate statistics for a clinic."""

    total_revenue: int | None = Field(None, description="Sum of appointment prices in cents")
    total_appointments: int
    total_patients: int
    total_doctors: int
    stats: list[StatCard]
    top_doctors: list[TopDoctor] = Field(default_factory=list)
    top_specialties: list[TopSpecialty] = Field(default_factory=list)
