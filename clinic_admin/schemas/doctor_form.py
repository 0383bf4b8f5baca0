"""Doctor form schema, in UI representation, and its validation."""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from clinic_admin.constants import SPECIALTY_VALUES, WEEKDAY_VALUES
from clinic_admin.core.exceptions import (
    FieldError,
    FormValidationError,
    InvalidChoiceError,
    OrderingError,
    RequiredFieldError,
)
from clinic_admin.core.representation import time_to_storage

# Smallest price the form accepts
MIN_APPOINTMENT_PRICE = Decimal("1")

MAX_NAME_LENGTH = 200

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")

REQUIRED_MESSAGES = {
    "name": "Doctor name is required",
    "specialty": "Specialty is required",
    "appointment_price": "Appointment price is required",
    "available_from_week_day": "Initial availability day is required",
    "available_to_week_day": "Final availability day is required",
    "available_from_time": "Start time is required",
    "available_to_time": "End time is required",
}

ORDERING_MESSAGE = "Start time must be before end time"

NAME_LENGTH_MESSAGE = f"Doctor name must have at most {MAX_NAME_LENGTH} characters"

# Upsert payload fields that are named differently in the form
FORM_FIELD_NAMES = {"appointment_price_in_cents": "appointment_price"}


class DoctorFormValues(BaseModel):
    """Values as edited in the doctor dialog."""

    name: str
    specialty: str
    appointment_price: Decimal
    available_from_week_day: str
    available_to_week_day: str
    available_from_time: str
    available_to_time: str

    @field_validator("available_from_week_day", "available_to_week_day", mode="before")
    @classmethod
    def week_day_label(cls, v: Any) -> Any:
        """Accept stored integers as labels."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator(
        "name",
        "specialty",
        "available_from_week_day",
        "available_to_week_day",
        "available_from_time",
        "available_to_time",
        mode="before",
    )
    @classmethod
    def require_text(cls, v: Any, info: ValidationInfo) -> Any:
        """Trim text and reject empty values."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required_field", REQUIRED_MESSAGES[info.field_name])
        return v.strip() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        """Name must fit the stored column."""
        if len(v) > MAX_NAME_LENGTH:
            raise PydanticCustomError("invalid_choice", NAME_LENGTH_MESSAGE)
        return v

    @field_validator("appointment_price", mode="before")
    @classmethod
    def require_price(cls, v: Any) -> Any:
        """Reject a cleared price input."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required_field", REQUIRED_MESSAGES["appointment_price"])
        return v

    @field_validator("appointment_price")
    @classmethod
    def minimum_price(cls, v: Decimal) -> Decimal:
        """Price must be at least 1.00."""
        if v < MIN_APPOINTMENT_PRICE:
            raise PydanticCustomError("required_field", REQUIRED_MESSAGES["appointment_price"])
        return v

    @field_validator("specialty")
    @classmethod
    def known_specialty(cls, v: str) -> str:
        """Specialty must come from the catalogue."""
        if v not in SPECIALTY_VALUES:
            raise PydanticCustomError("invalid_choice", "Select a valid specialty")
        return v

    @field_validator("available_from_week_day", "available_to_week_day")
    @classmethod
    def known_week_day(cls, v: str) -> str:
        """Weekday label must be "0" (Sunday) through "6" (Saturday)."""
        if v not in WEEKDAY_VALUES:
            raise PydanticCustomError("invalid_choice", "Select a valid day")
        return v

    @field_validator("available_from_time", "available_to_time")
    @classmethod
    def time_of_day(cls, v: str) -> str:
        """Time must read HH:MM or HH:MM:SS."""
        if not TIME_PATTERN.match(v):
            raise PydanticCustomError("invalid_choice", "Select a valid time")
        return v

    @field_validator("available_to_time")
    @classmethod
    def after_start_time(cls, v: str, info: ValidationInfo) -> str:
        """End time must come after start time; the error belongs to the end time."""
        start = info.data.get("available_from_time")
        if start is not None and time_to_storage(start) >= time_to_storage(v):
            raise PydanticCustomError("time_ordering", ORDERING_MESSAGE)
        return v


def _field_error(error: Any) -> FieldError:
    field = str(error["loc"][0]) if error["loc"] else "__root__"
    field = FORM_FIELD_NAMES.get(field, field)
    error_type = error["type"]

    if error_type == "missing":
        return RequiredFieldError(field, REQUIRED_MESSAGES.get(field, error["msg"]))
    if error_type == "required_field":
        return RequiredFieldError(field, error["msg"])
    if error_type == "time_ordering":
        return OrderingError(field, error["msg"])
    return InvalidChoiceError(field, error["msg"])


def validate_doctor_form(values: Mapping[str, Any]) -> DoctorFormValues:
    """
    Validate doctor form values.

    Args:
        values: Candidate values in UI representation

    Returns:
        Validated form values

    Raises:
        FormValidationError: With one error per offending field
    """
    try:
        return DoctorFormValues.model_validate(dict(values))
    except ValidationError as exc:
        raise FormValidationError(form_field_errors(exc)) from exc


def form_field_errors(exc: ValidationError) -> dict[str, FieldError]:
    """
    Map pydantic errors of the form or of its upsert payload to form fields.

    Args:
        exc: Validation error raised by ``DoctorFormValues`` or ``DoctorUpsert``

    Returns:
        First error of each offending form field
    """
    errors: dict[str, FieldError] = {}
    for error in exc.errors():
        field_error = _field_error(error)
        errors.setdefault(field_error.field, field_error)
    return errors
