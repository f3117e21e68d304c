"""Excel export helpers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from pathlib import Path

import pandas as pd
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter

from kitchen_calendar.domain import PageFormat
from kitchen_calendar.labels import month_name, weekday_label
from kitchen_calendar.layout import year_pages
from kitchen_calendar.output import atomic_output
from kitchen_calendar.report import summarize_year

logger = logging.getLogger(__name__)

WEEKEND_FILL = PatternFill(start_color="D9DDEE", end_color="D9DDEE", fill_type="solid")
MAX_COLUMN_WIDTH = 60


def _format_sheet(worksheet, frame: pd.DataFrame) -> None:
    """Freeze the header, add a filter and size columns to their widest value."""
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    for idx, column in enumerate(frame.columns, start=1):
        lengths = frame[column].astype(str).str.len()
        widest = max(len(str(column)), int(lengths.max()) if len(lengths) else 0)
        letter = get_column_letter(idx)
        worksheet.column_dimensions[letter].width = min(widest + 2, MAX_COLUMN_WIDTH)


def _highlight_weekends(worksheet, weekend_rows: list[int]) -> None:
    # Row 1 holds the header.
    for row_idx in weekend_rows:
        worksheet.cell(row=row_idx + 2, column=2).fill = WEEKEND_FILL


def calendar_rows(
    year: int, page_format: PageFormat, holidays: Mapping[date, str]
) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for page in year_pages(year, page_format.layout):
        for cell in page.cells:
            rows.append(
                {
                    "datum": cell.date,
                    "wochentag": weekday_label(cell.date),
                    "monat": month_name(page.month),
                    "haelfte": "" if page.half is None else page.half,
                    "spalte": cell.column_offset,
                    "wochenende": cell.is_weekend,
                    "feiertag": holidays.get(cell.date, ""),
                }
            )
    return rows


def export_calendar_excel(
    path: str | Path,
    year: int,
    page_format: PageFormat,
    holidays: Mapping[date, str],
) -> Path:
    output_path = Path(path)
    calendar_df = pd.DataFrame(calendar_rows(year, page_format, holidays))
    holidays_df = pd.DataFrame(
        [{"datum": day, "feiertag": name} for day, name in sorted(holidays.items())],
        columns=["datum", "feiertag"],
    )
    summary_df = pd.DataFrame(summarize_year(year, holidays))
    weekend_rows = calendar_df.index[calendar_df["wochenende"]].tolist()

    with atomic_output(output_path) as tmp_path:
        with pd.ExcelWriter(tmp_path, engine="openpyxl") as writer:
            sheets = {
                "kalender": calendar_df,
                "feiertage": holidays_df,
                "uebersicht": summary_df,
            }
            for sheet_name, frame in sheets.items():
                frame.to_excel(writer, sheet_name=sheet_name, index=False)
                _format_sheet(writer.sheets[sheet_name], frame)
            _highlight_weekends(writer.sheets["kalender"], weekend_rows)
    logger.debug("Exported %s calendar rows", len(calendar_df))
    return output_path
