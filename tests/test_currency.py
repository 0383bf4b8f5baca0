"""Tests for currency formatting."""

import pytest

from clinic_admin.core.currency import format_currency_in_cents
from clinic_admin.services.dashboard_service import build_stat_cards


@pytest.mark.parametrize(
    "cents,expected",
    [
        (123456, "R$ 1.234,56"),
        (15000, "R$ 150,00"),
        (5, "R$ 0,05"),
        (0, "R$ 0,00"),
        (None, "R$ 0,00"),
        (100000000, "R$ 1.000.000,00"),
        (-2550, "-R$ 25,50"),
    ],
)
def test_format_currency_in_cents(cents, expected):
    """Test Brazilian real formatting of cents."""
    assert format_currency_in_cents(cents) == expected


def test_stat_cards_fall_back_to_zero():
    """Test that missing totals are shown as zero."""
    cards = build_stat_cards(None, None, 0, None)

    assert [(card.title, card.value) for card in cards] == [
        ("Revenue", "R$ 0,00"),
        ("Appointments", "0"),
        ("Patients", "0"),
        ("Doctors", "0"),
    ]


def test_stat_cards_format_totals():
    """Test revenue formatting and counts."""
    cards = build_stat_cards(450000, 30, 12, 4)

    assert [card.value for card in cards] == ["R$ 4.500,00", "30", "12", "4"]
