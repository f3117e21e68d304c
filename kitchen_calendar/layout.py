"""Assignment of calendar days to pages and columns."""

from __future__ import annotations

import calendar
from datetime import date

from kitchen_calendar.domain import DayCell, LayoutConfig, MonthPage
from kitchen_calendar.errors import InvalidYearError


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5


def month_days(year: int, month: int) -> list[date]:
    try:
        _, length = calendar.monthrange(year, month)
        return [date(year, month, day) for day in range(1, length + 1)]
    except (TypeError, ValueError) as exc:
        raise InvalidYearError(f"Invalid month: {year!r}-{month!r}") from exc


def day_half(day: date, config: LayoutConfig) -> int | None:
    """Return 0 or 1 for the split layout, ``None`` for the continuous one."""
    threshold = config.split_threshold_day
    if threshold is None:
        return None
    return 0 if day.day < threshold else 1


def day_column_offset(day: date, config: LayoutConfig) -> int:
    threshold = config.split_threshold_day
    if threshold is None or day.day < threshold:
        return day.day - 1
    return day.day - 1 - (threshold - 1)


def day_cell(day: date, config: LayoutConfig) -> DayCell:
    return DayCell(
        date=day,
        column_offset=day_column_offset(day, config),
        half=day_half(day, config),
        is_weekend=is_weekend(day),
    )


def month_pages(year: int, month: int, config: LayoutConfig) -> list[MonthPage]:
    """Lay out one month.

    The continuous layout yields a single page with every day. The split
    layout always yields two halves, the second of which is empty when the
    month is shorter than the threshold.
    """
    cells = [day_cell(day, config) for day in month_days(year, month)]
    if not config.is_split:
        return [MonthPage(year=year, month=month, cells=tuple(cells))]
    return [
        MonthPage(
            year=year,
            month=month,
            half=half,
            cells=tuple(cell for cell in cells if cell.half == half),
        )
        for half in (0, 1)
    ]


def year_pages(year: int, config: LayoutConfig) -> list[MonthPage]:
    pages: list[MonthPage] = []
    for month in range(1, 13):
        pages.extend(month_pages(year, month, config))
    return pages
