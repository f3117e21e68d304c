"""German labels printed on the calendar."""

from __future__ import annotations

from datetime import date

from kitchen_calendar.errors import InvalidYearError

MONTH_NAMES = (
    None,
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)

# Indexed by Monday=0 ... Sunday=6, like date.weekday().
WEEKDAY_NAMES = ("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So")


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise InvalidYearError(f"Invalid month: {month!r}")
    return MONTH_NAMES[month]


def weekday_label(day: date) -> str:
    return WEEKDAY_NAMES[day.weekday()]


def date_label(day: date) -> str:
    return f"{day.day}.{day.month}."
