"""Tests for form/storage conversion of doctor values."""

from datetime import UTC, datetime, time
from decimal import Decimal
from uuid import uuid4

import pytest

from clinic_admin.constants import MedicalSpecialty
from clinic_admin.core.representation import (
    cents_to_price,
    initial_form_values,
    price_to_cents,
    time_from_storage,
    time_to_storage,
    to_upsert_payload,
    week_day_from_storage,
    week_day_to_storage,
)
from clinic_admin.schemas.doctor_form import validate_doctor_form
from clinic_admin.schemas.doctors import DoctorResponse


@pytest.fixture
def stored_doctor() -> DoctorResponse:
    """Doctor as returned by the API."""
    now = datetime.now(UTC)
    return DoctorResponse(
        id=uuid4(),
        clinic_id=uuid4(),
        name="Dr. Ana Souza",
        specialty=MedicalSpecialty.CARDIOLOGY,
        appointment_price_in_cents=15000,
        available_from_week_day=1,
        available_to_week_day=5,
        available_from_time=time(8, 0),
        available_to_time=time(12, 0),
        created_at=now,
        updated_at=now,
    )


# ============================================================================
# Price
# ============================================================================


@pytest.mark.parametrize(
    "price,cents",
    [
        (Decimal("150"), 15000),
        (Decimal("0.01"), 1),
        (Decimal("19.99"), 1999),
        (19.99, 1999),
        (0.29, 29),
        (Decimal("10.005"), 1000),
        (Decimal("10.015"), 1002),
    ],
)
def test_price_to_cents(price, cents):
    """Test cents conversion, rounding half to even."""
    assert price_to_cents(price) == cents


@pytest.mark.parametrize(
    "cents,price",
    [(15000, Decimal("150")), (1999, Decimal("19.99")), (0, Decimal("0")), (None, Decimal("0"))],
)
def test_cents_to_price(cents, price):
    """Test that missing or zero cents read as 0."""
    assert cents_to_price(cents) == price


# ============================================================================
# Weekdays and times
# ============================================================================


def test_week_day_conversion():
    """Test label parsing and stored weekday defaults."""
    assert week_day_to_storage("0") == 0
    assert week_day_to_storage("6") == 6
    assert week_day_from_storage(3, "1") == "3"
    assert week_day_from_storage(0, "1") == "0"
    assert week_day_from_storage(None, "5") == "5"


def test_time_conversion():
    """Test that times travel as HH:MM:SS."""
    assert time_to_storage("08:30") == "08:30:00"
    assert time_to_storage("08:30:00") == "08:30:00"
    assert time_from_storage(time(8, 30)) == "08:30:00"
    assert time_from_storage("08:30") == "08:30:00"
    assert time_from_storage(None) == ""
    assert time_from_storage("") == ""


# ============================================================================
# Form initialization
# ============================================================================


def test_initial_values_in_create_mode():
    """Test defaults of a new doctor: Monday to Friday, no times, price 0."""
    values = initial_form_values()

    assert values == {
        "name": "",
        "specialty": "",
        "appointment_price": Decimal("0"),
        "available_from_week_day": "1",
        "available_to_week_day": "5",
        "available_from_time": "",
        "available_to_time": "",
    }


def test_initial_values_in_edit_mode(stored_doctor):
    """Test that a stored doctor is shown in UI representation."""
    values = initial_form_values(stored_doctor)

    assert values["name"] == "Dr. Ana Souza"
    assert values["specialty"] == "cardiology"
    assert values["appointment_price"] == Decimal("150")
    assert values["available_from_week_day"] == "1"
    assert values["available_to_week_day"] == "5"
    assert values["available_from_time"] == "08:00:00"
    assert values["available_to_time"] == "12:00:00"


def test_initial_values_from_mapping_with_gaps():
    """Test that absent stored values fall back to form defaults."""
    values = initial_form_values({"name": "Dr. Bruno Alves", "specialty": "pediatrics"})

    assert values["name"] == "Dr. Bruno Alves"
    assert values["appointment_price"] == Decimal("0")
    assert values["available_from_week_day"] == "1"
    assert values["available_to_week_day"] == "5"
    assert values["available_from_time"] == ""


# ============================================================================
# Upsert payload
# ============================================================================


def test_unchanged_edit_reproduces_stored_price(stored_doctor):
    """Test that 15000 cents survive a load and save without edits."""
    form = validate_doctor_form(initial_form_values(stored_doctor))

    payload = to_upsert_payload(form, stored_doctor.id)

    assert form.appointment_price == Decimal("150")
    assert payload.appointment_price_in_cents == 15000


def test_unchanged_edit_reproduces_stored_doctor(stored_doctor):
    """Test that every storage field survives a load and save without edits."""
    form = validate_doctor_form(initial_form_values(stored_doctor))

    payload = to_upsert_payload(form, stored_doctor.id)

    assert payload.id == stored_doctor.id
    assert payload.name == stored_doctor.name
    assert payload.specialty == stored_doctor.specialty
    assert payload.available_from_week_day == stored_doctor.available_from_week_day
    assert payload.available_to_week_day == stored_doctor.available_to_week_day
    assert payload.available_from_time == stored_doctor.available_from_time
    assert payload.available_to_time == stored_doctor.available_to_time


def test_create_payload_has_no_identity():
    """Test that a new doctor is sent without id."""
    form = validate_doctor_form(
        {
            "name": "Dr. Bruno Alves",
            "specialty": "pediatrics",
            "appointment_price": "200",
            "available_from_week_day": "5",
            "available_to_week_day": "1",
            "available_from_time": "13:00",
            "available_to_time": "18:30",
        }
    )

    payload = to_upsert_payload(form)

    assert payload.id is None
    assert payload.appointment_price_in_cents == 20000
    assert payload.available_from_week_day == 5
    assert payload.available_to_week_day == 1
    assert payload.available_from_time == time(13, 0)
    assert payload.available_to_time == time(18, 30)
    assert payload.model_dump(mode="json")["available_to_time"] == "18:30:00"
