"""Doctor schemas for request/response validation."""

from datetime import datetime, time
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from clinic_admin.constants import MedicalSpecialty

# ============================================================================
# Doctor Base Schemas
# ============================================================================


class DoctorBase(BaseModel):
    """Base schema for doctor, in storage representation."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    specialty: MedicalSpecialty
    avatar_image_url: str | None = None
    appointment_price_in_cents: int = Field(..., ge=0)
    available_from_week_day: int = Field(..., ge=0, le=6, description="Sunday=0 ... Saturday=6")
    available_to_week_day: int = Field(..., ge=0, le=6, description="Sunday=0 ... Saturday=6")
    available_from_time: time
    available_to_time: time

    @field_validator("available_to_time")
    @classmethod
    def validate_time_window(cls, v: time, info: ValidationInfo) -> time:
        """Validate end time is after start time."""
        start = info.data.get("available_from_time")
        if start is not None and start >= v:
            raise ValueError("Start time must be before end time")
        return v


class DoctorUpsert(DoctorBase):
    """Schema for creating (no id) or updating (with id) a doctor."""

    id: UUID | None = None


class DoctorResponse(DoctorBase):
    """Doctor response schema."""

    id: UUID
    clinic_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Availability Schemas
# ============================================================================


class AvailableTimeSlot(BaseModel):
    """One palette slot of a doctor's day."""

    value: str = Field(..., description="Slot start as HH:MM:SS")
    label: str = Field(..., description="Slot start as HH:MM")
    available: bool


class DoctorFormOptions(BaseModel):
    """Option catalogues for the doctor form."""

    specialties: list[dict[str, str]]
    weekdays: list[dict[str, str]]
    time_slot_groups: list[dict[str, Any]]
