"""Appointment schemas for request/response validation."""

from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AppointmentCreate(BaseModel):
    """Schema for booking a new appointment."""

    patient_id: UUID
    doctor_id: UUID
    appointment_date: date
    appointment_time: time = Field(..., description="Slot start as HH:MM:SS")
    appointment_price_in_cents: int | None = Field(
        None, ge=0, description="Defaults to the doctor's appointment price"
    )


class AppointmentPatient(BaseModel):
    """Patient summary embedded in an appointment."""

    id: UUID
    name: str
    email: str
    phone_number: str
    sex: str


class AppointmentDoctor(BaseModel):
    """Doctor summary embedded in an appointment."""

    id: UUID
    name: str
    specialty: str


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""

    id: UUID
    clinic_id: UUID
    date: datetime
    appointment_price_in_cents: int
    patient: AppointmentPatient
    doctor: AppointmentDoctor
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
