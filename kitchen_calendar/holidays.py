"""Swiss (Zurich) holidays shown on the calendar."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from types import MappingProxyType

from kitchen_calendar.domain import FixedRule, Holiday, RelativeRule
from kitchen_calendar.easter import easter_sunday
from kitchen_calendar.errors import InvalidYearError

FIXED_RULES: tuple[FixedRule, ...] = (
    FixedRule(month=1, day=1, name="Neujahr"),
    FixedRule(month=1, day=2, name="Berchtoldstag"),
    FixedRule(month=8, day=1, name="Bundesfeiertag"),
    FixedRule(month=12, day=25, name="Weihnachten"),
    FixedRule(month=12, day=26, name="Stefanstag"),
)

RELATIVE_RULES: tuple[RelativeRule, ...] = (
    RelativeRule(offset_days=-2, name="Karfreitag"),
    RelativeRule(offset_days=0, name="Ostersonntag"),
    RelativeRule(offset_days=1, name="Ostermontag"),
    RelativeRule(offset_days=39, name="Auffahrt"),
    RelativeRule(offset_days=49, name="Pfingstsonntag"),
    RelativeRule(offset_days=50, name="Pfingstmontag"),
)


def fixed_holidays(
    year: int, rules: Iterable[FixedRule] = FIXED_RULES
) -> list[Holiday]:
    holidays: list[Holiday] = []
    for rule in rules:
        try:
            day = date(year, rule.month, rule.day)
        except (TypeError, ValueError) as exc:
            raise InvalidYearError(
                f"{rule.name} ({rule.day}.{rule.month}.) does not exist in {year!r}"
            ) from exc
        holidays.append(Holiday(date=day, name=rule.name))
    return holidays


def relative_holidays(
    year: int, rules: Iterable[RelativeRule] = RELATIVE_RULES
) -> list[Holiday]:
    easter = easter_sunday(year)
    try:
        return [
            Holiday(date=easter + timedelta(days=rule.offset_days), name=rule.name)
            for rule in rules
        ]
    except OverflowError as exc:
        raise InvalidYearError(f"Invalid year: {year!r}") from exc


def merge_holidays(
    fixed: Iterable[Holiday], relative: Iterable[Holiday]
) -> dict[date, str]:
    """Merge holidays into one date -> name mapping.

    Fixed entries are written first and Easter-relative entries second, so on
    a shared date the Easter-relative name wins.
    """
    merged: dict[date, str] = {}
    for holiday in fixed:
        merged[holiday.date] = holiday.name
    for holiday in relative:
        merged[holiday.date] = holiday.name
    return merged


def compute_holidays(
    year: int,
    fixed_rules: Iterable[FixedRule] = FIXED_RULES,
    relative_rules: Iterable[RelativeRule] = RELATIVE_RULES,
) -> dict[date, str]:
    return merge_holidays(
        fixed_holidays(year, fixed_rules),
        relative_holidays(year, relative_rules),
    )


def holiday_list(year: int) -> list[Holiday]:
    return [
        Holiday(date=day, name=name)
        for day, name in sorted(compute_holidays(year).items())
    ]


class HolidayCache:
    """Holiday sets keyed by year.

    Entries are never invalidated: a year's holidays do not change once
    computed. Callers receive read-only views.
    """

    def __init__(self) -> None:
        self._by_year: dict[int, Mapping[date, str]] = {}

    def get(self, year: int) -> Mapping[date, str]:
        if year not in self._by_year:
            self._by_year[year] = MappingProxyType(compute_holidays(year))
        return self._by_year[year]

    def holiday_name(self, day: date) -> str | None:
        return self.get(day.year).get(day)

    def __contains__(self, year: object) -> bool:
        return year in self._by_year
