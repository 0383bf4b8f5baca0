"""Patient schemas for request/response validation."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatientSex(str, Enum):
    """Patient sex enumeration."""

    MALE = "male"
    FEMALE = "female"


class PatientBase(BaseModel):
    """Base patient schema with common fields."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    phone_number: str = Field(..., min_length=7, max_length=20)
    sex: PatientSex

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email has a local part and a domain."""
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("Invalid email address")
        return v.lower()

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Validate phone number format."""
        # Remove common separators
        cleaned = (
            v.replace("-", "").replace(" ", "").replace("(", "").replace(")", "").replace("+", "")
        )
        if not cleaned.isdigit():
            raise ValueError("Phone number must contain only digits and separators")
        if len(cleaned) < 7:
            raise ValueError("Phone number must have at least 7 digits")
        return v


class PatientUpsert(PatientBase):
    """Schema for creating (no id) or updating (with id) a patient."""

    id: UUID | None = None


class PatientResponse(PatientBase):
    """Schema for patient response."""

    id: UUID
    clinic_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
