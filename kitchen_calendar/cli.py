"""CLI for the kitchen calendar generator."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path

import pandas as pd

from kitchen_calendar.errors import CalendarError
from kitchen_calendar.export_excel import export_calendar_excel
from kitchen_calendar.formats import get_format
from kitchen_calendar.holidays import HolidayCache
from kitchen_calendar.output import output_filename
from kitchen_calendar.render_pdf import find_font, render_calendar
from kitchen_calendar.report import summarize_year

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a wall calendar for one year")
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=date.today().year,
        help="Calendar year (default: current year)",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Large format: each month split into two halves with a cut marker",
    )
    parser.add_argument(
        "--format",
        choices=("pdf", "xlsx"),
        default="pdf",
        help="Output file type",
    )
    parser.add_argument("--out-dir", default=".", help="Directory for the output file")
    parser.add_argument(
        "--font-dir",
        default=".",
        help="Directory searched for a *.ttf font (default: Helvetica)",
    )
    parser.add_argument(
        "--print-holidays",
        action="store_true",
        help="Print the holidays of the year",
    )
    parser.add_argument(
        "--print-summary",
        action="store_true",
        help="Print days, weekends, holidays and workdays per month",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    page_format = get_format(args.split)
    cache = HolidayCache()
    try:
        holidays = cache.get(args.year)
        if args.print_holidays:
            rows = [{"datum": day, "feiertag": name} for day, name in sorted(holidays.items())]
            print(_render_table(rows))
        if args.print_summary:
            print(_render_table(summarize_year(args.year, holidays)))

        path = Path(args.out_dir) / output_filename(args.year, page_format, args.format)
        if args.format == "xlsx":
            export_calendar_excel(path, args.year, page_format, holidays)
        else:
            render_calendar(
                path, args.year, page_format, holidays, font_path=find_font(args.font_dir)
            )
    except CalendarError as exc:
        logger.debug("Calendar generation failed", exc_info=True)
        raise SystemExit(f"ERROR: {exc}") from exc
    print(f"OK: {path}")


if __name__ == "__main__":
    main()
