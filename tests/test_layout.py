import unittest
from datetime import date

from pydantic import ValidationError

from kitchen_calendar import layout
from kitchen_calendar.domain import LayoutConfig
from kitchen_calendar.errors import InvalidYearError


def _config(threshold: int | None = None) -> LayoutConfig:
    return LayoutConfig(
        column_width=28.0,
        column_height=100.0,
        padding_box=3.0,
        padding_text=4.0,
        split_threshold_day=threshold,
    )


class MonthDaysTests(unittest.TestCase):
    def test_month_days_length(self) -> None:
        days = layout.month_days(2026, 2)
        self.assertEqual(len(days), 28)
        self.assertEqual(days[0], date(2026, 2, 1))
        self.assertEqual(days[-1], date(2026, 2, 28))
        self.assertEqual(len(layout.month_days(2024, 2)), 29)
        self.assertEqual(len(layout.month_days(2024, 12)), 31)

    def test_last_representable_month(self) -> None:
        self.assertEqual(layout.month_days(9999, 12)[-1], date(9999, 12, 31))

    def test_invalid_month(self) -> None:
        with self.assertRaises(InvalidYearError):
            layout.month_days(2024, 13)
        with self.assertRaises(InvalidYearError):
            layout.month_days(10000, 1)

    def test_weekend(self) -> None:
        self.assertTrue(layout.is_weekend(date(2026, 1, 3)))  # Saturday
        self.assertTrue(layout.is_weekend(date(2026, 1, 4)))  # Sunday
        self.assertFalse(layout.is_weekend(date(2026, 1, 5)))  # Monday


class ContinuousLayoutTests(unittest.TestCase):
    def test_offset_is_bijection(self) -> None:
        config = _config()
        for month in range(1, 13):
            days = layout.month_days(2024, month)
            offsets = [layout.day_column_offset(day, config) for day in days]
            self.assertEqual(offsets, list(range(len(days))))

    def test_single_page(self) -> None:
        pages = layout.month_pages(2024, 1, _config())
        self.assertEqual(len(pages), 1)
        page = pages[0]
        self.assertIsNone(page.half)
        self.assertEqual(page.column_count, 31)
        self.assertEqual(page.days, list(range(1, 32)))
        self.assertTrue(all(cell.half is None for cell in page.cells))

    def test_weekend_flags(self) -> None:
        page = layout.month_pages(2024, 1, _config())[0]
        weekend_days = [cell.date.day for cell in page.cells if cell.is_weekend]
        self.assertEqual(weekend_days, [6, 7, 13, 14, 20, 21, 27, 28])


class SplitLayoutTests(unittest.TestCase):
    def test_threshold_16_on_31_day_month(self) -> None:
        first, second = layout.month_pages(2024, 1, _config(16))
        self.assertEqual((first.half, second.half), (0, 1))
        self.assertEqual(first.days, list(range(1, 16)))
        self.assertEqual([cell.column_offset for cell in first.cells], list(range(15)))
        self.assertEqual(second.days, list(range(16, 32)))
        self.assertEqual([cell.column_offset for cell in second.cells], list(range(16)))
        self.assertEqual(first.column_count + second.column_count, 31)

    def test_day_half(self) -> None:
        config = _config(16)
        self.assertEqual(layout.day_half(date(2024, 3, 15), config), 0)
        self.assertEqual(layout.day_half(date(2024, 3, 16), config), 1)
        self.assertIsNone(layout.day_half(date(2024, 3, 16), _config()))
        cell = layout.day_cell(date(2024, 3, 16), config)
        self.assertEqual((cell.half, cell.column_offset), (1, 0))
        self.assertTrue(cell.is_weekend)

    def test_month_shorter_than_threshold(self) -> None:
        first, second = layout.month_pages(2023, 2, _config(30))
        self.assertEqual(first.column_count, 28)
        self.assertTrue(second.is_empty)
        self.assertEqual(second.column_count, 0)

    def test_threshold_one_empties_first_half(self) -> None:
        first, second = layout.month_pages(2024, 4, _config(1))
        self.assertTrue(first.is_empty)
        self.assertEqual(second.days, list(range(1, 31)))
        self.assertEqual(second.cells[0].column_offset, 0)

    def test_boundary_independent_of_month(self) -> None:
        config = _config(10)
        for year in (1999, 2024):
            for month in range(1, 13):
                first, second = layout.month_pages(year, month, config)
                self.assertEqual(first.days, list(range(1, 10)))
                self.assertEqual(second.days[0], 10)


class RoundTripTests(unittest.TestCase):
    def test_every_day_exactly_once(self) -> None:
        for config in (_config(), _config(16), _config(29)):
            for year in (2023, 2024, 2100):
                for month in range(1, 13):
                    pages = layout.month_pages(year, month, config)
                    days = [day for page in pages for day in page.days]
                    expected = [d.day for d in layout.month_days(year, month)]
                    self.assertEqual(sorted(days), expected)
                    self.assertEqual(len(days), len(set(days)))
                    for page in pages:
                        offsets = [cell.column_offset for cell in page.cells]
                        self.assertEqual(offsets, list(range(len(offsets))))

    def test_year_pages(self) -> None:
        self.assertEqual(len(layout.year_pages(2024, _config())), 12)
        pages = layout.year_pages(2024, _config(16))
        self.assertEqual(len(pages), 24)
        self.assertEqual(sum(page.column_count for page in pages), 366)


class LayoutConfigTests(unittest.TestCase):
    def test_is_split(self) -> None:
        self.assertFalse(_config().is_split)
        self.assertTrue(_config(16).is_split)

    def test_invalid_threshold(self) -> None:
        with self.assertRaises(ValidationError):
            _config(0)

    def test_padding_wider_than_column(self) -> None:
        with self.assertRaises(ValidationError):
            LayoutConfig(
                column_width=3.0, column_height=10.0, padding_box=3.0, padding_text=1.0
            )

    def test_frozen(self) -> None:
        config = _config()
        with self.assertRaises(ValidationError):
            config.column_width = 10.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
