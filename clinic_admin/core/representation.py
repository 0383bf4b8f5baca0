"""Conversion between form (UI) values and stored doctor values."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import time
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any
from uuid import UUID

from clinic_admin.constants import DEFAULT_FROM_WEEK_DAY, DEFAULT_TO_WEEK_DAY
from clinic_admin.schemas.doctors import DoctorUpsert

if TYPE_CHECKING:
    from clinic_admin.schemas.doctor_form import DoctorFormValues

CENTS_PER_UNIT = 100


def price_to_cents(price: Decimal | float | int) -> int:
    """Decimal currency amount to integer cents, rounding half-even."""
    amount = Decimal(str(price)) * CENTS_PER_UNIT
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_EVEN))


def cents_to_price(cents: int | None) -> Decimal:
    """Integer cents to a decimal amount; missing or zero cents give 0."""
    if not cents:
        return Decimal("0")
    return Decimal(cents) / CENTS_PER_UNIT


def week_day_to_storage(label: str) -> int:
    """Weekday label ("0".."6") to its stored integer."""
    return int(label, 10)


def week_day_from_storage(week_day: int | None, default: str) -> str:
    """Stored weekday to its label, falling back to ``default``."""
    return default if week_day is None else str(week_day)


def time_to_storage(value: str) -> str:
    """Normalize a time of day to ``HH:MM:SS``; ``HH:MM`` gains ``:00``."""
    value = value.strip()
    if len(value) == 5:
        return f"{value}:00"
    return value


def time_from_storage(value: time | str | None) -> str:
    """Stored time of day to the ``HH:MM:SS`` form value, or ``""``."""
    if value is None or value == "":
        return ""
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    return time_to_storage(value)


def _get(doctor: Mapping[str, Any] | Any, field: str) -> Any:
    if isinstance(doctor, Mapping):
        value = doctor.get(field)
    else:
        value = getattr(doctor, field, None)
    return value.value if isinstance(value, Enum) else value


def initial_form_values(doctor: Mapping[str, Any] | Any | None = None) -> dict[str, Any]:
    """
    Build the form values for a dialog.

    Args:
        doctor: Stored doctor (mapping or response model) in edit mode, None in create mode

    Returns:
        Form values in UI representation
    """
    if doctor is None:
        return {
            "name": "",
            "specialty": "",
            "appointment_price": Decimal("0"),
            "available_from_week_day": DEFAULT_FROM_WEEK_DAY,
            "available_to_week_day": DEFAULT_TO_WEEK_DAY,
            "available_from_time": "",
            "available_to_time": "",
        }

    return {
        "name": _get(doctor, "name") or "",
        "specialty": _get(doctor, "specialty") or "",
        "appointment_price": cents_to_price(_get(doctor, "appointment_price_in_cents")),
        "available_from_week_day": week_day_from_storage(
            _get(doctor, "available_from_week_day"), DEFAULT_FROM_WEEK_DAY
        ),
        "available_to_week_day": week_day_from_storage(
            _get(doctor, "available_to_week_day"), DEFAULT_TO_WEEK_DAY
        ),
        "available_from_time": time_from_storage(_get(doctor, "available_from_time")),
        "available_to_time": time_from_storage(_get(doctor, "available_to_time")),
    }


def to_upsert_payload(form: DoctorFormValues, doctor_id: UUID | None = None) -> DoctorUpsert:
    """
    Convert validated form values into the upsert payload.

    Args:
        form: Validated form values
        doctor_id: Identity of the doctor being edited; None creates a new doctor

    Returns:
        Payload in storage representation
    """
    return DoctorUpsert(
        id=doctor_id,
        name=form.name,
        specialty=form.specialty,
        appointment_price_in_cents=price_to_cents(form.appointment_price),
        available_from_week_day=week_day_to_storage(form.available_from_week_day),
        available_to_week_day=week_day_to_storage(form.available_to_week_day),
        available_from_time=time_to_storage(form.available_from_time),
        available_to_time=time_to_storage(form.available_to_time),
    )
