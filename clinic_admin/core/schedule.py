"""Time palette and weekly availability helpers."""

from datetime import date, time
from typing import Any

from clinic_admin.constants import (
    FIRST_SLOT_MINUTES,
    LAST_SLOT_MINUTES,
    SLOT_INTERVAL_MINUTES,
    TIME_SLOT_BANDS,
)


def slot_times() -> list[time]:
    """Every palette slot from 05:00 to 23:30, in order."""
    return [
        time(minutes // 60, minutes % 60)
        for minutes in range(FIRST_SLOT_MINUTES, LAST_SLOT_MINUTES + 1, SLOT_INTERVAL_MINUTES)
    ]


def time_slot_groups() -> list[dict[str, Any]]:
    """
    Palette grouped into labeled bands.

    Returns:
        ``[{"label": "Morning", "slots": [{"value": "05:00:00", "label": "05:00"}, ...]}, ...]``
    """
    groups: list[dict[str, Any]] = [{"label": label, "slots": []} for label, _ in TIME_SLOT_BANDS]
    for slot in slot_times():
        minutes = slot.hour * 60 + slot.minute
        for group, (_, band_end) in zip(groups, TIME_SLOT_BANDS, strict=True):
            if minutes < band_end:
                group["slots"].append(
                    {"value": slot.strftime("%H:%M:%S"), "label": slot.strftime("%H:%M")}
                )
                break
    return groups


def storage_week_day(day: date) -> int:
    """Weekday number as stored on doctors (Sunday=0 ... Saturday=6)."""
    return (day.weekday() + 1) % 7


def is_week_day_in_range(week_day: int, from_week_day: int, to_week_day: int) -> bool:
    """
    Check whether a weekday falls inside an availability range.

    Ranges may wrap around the weekend, e.g. Friday (5) to Monday (1).
    """
    if from_week_day <= to_week_day:
        return from_week_day <= week_day <= to_week_day
    return week_day >= from_week_day or week_day <= to_week_day


def is_doctor_available_on(doctor: dict[str, Any], day: date) -> bool:
    """Check whether the doctor works on the given date."""
    return is_week_day_in_range(
        storage_week_day(day),
        doctor["available_from_week_day"],
        doctor["available_to_week_day"],
    )


def doctor_slot_times(doctor: dict[str, Any]) -> list[time]:
    """Palette slots that fall inside the doctor's daily window, bounds included."""
    start = doctor["available_from_time"]
    end = doctor["available_to_time"]
    return [slot for slot in slot_times() if start <= slot <= end]
