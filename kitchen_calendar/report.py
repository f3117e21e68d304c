"""Reporting helpers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date

from kitchen_calendar.labels import month_name
from kitchen_calendar.layout import is_weekend, month_days


def summarize_year(year: int, holidays: Mapping[date, str]) -> list[dict[str, object]]:
    summaries: list[dict[str, object]] = []
    for month in range(1, 13):
        days = month_days(year, month)
        weekend_days = sum(1 for day in days if is_weekend(day))
        holiday_count = sum(1 for day in days if day in holidays)
        workdays = sum(
            1 for day in days if not is_weekend(day) and day not in holidays
        )
        summaries.append(
            {
                "month": month,
                "name": month_name(month),
                "days": len(days),
                "weekend_days": weekend_days,
                "holidays": holiday_count,
                "workdays": workdays,
            }
        )
    return summaries
