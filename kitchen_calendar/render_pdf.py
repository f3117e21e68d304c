"""PDF rendering of the month pages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from pathlib import Path

from reportlab.lib.colors import HexColor, white
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas

from kitchen_calendar.domain import MonthPage, PageFormat
from kitchen_calendar.labels import date_label, month_name, weekday_label
from kitchen_calendar.layout import month_pages
from kitchen_calendar.output import atomic_output

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"
CUSTOM_FONT = "CalendarFont"
FONT_SIZE_TITLE = 40
FONT_SIZE_WDAY = 20
FONT_SIZE_DATE = 18
FONT_SIZE_CONTENT = 12
MIN_FONT_SIZE_CONTENT = 7
LEADING = 4
LINE_WIDTH = 1.5

COLOR = HexColor("#2a3773")
CUT_MARKER_DASH = (6, 4)


def find_font(font_dir: str | Path | None) -> Path | None:
    """Return the first TrueType font in ``font_dir``."""
    if font_dir is None:
        return None
    fonts = sorted(Path(font_dir).glob("*.ttf"))
    return fonts[0] if fonts else None


def register_font(font_path: str | Path | None) -> str:
    if font_path is None:
        return DEFAULT_FONT
    try:
        pdfmetrics.registerFont(TTFont(CUSTOM_FONT, str(font_path)))
    except (TTFError, OSError) as exc:
        logger.warning("Cannot load font %s, using %s: %s", font_path, DEFAULT_FONT, exc)
        return DEFAULT_FONT
    logger.debug("Using font %s", font_path)
    return CUSTOM_FONT


class PageRenderer:
    """Draws month pages of one format onto a reportlab canvas."""

    def __init__(
        self,
        pdf: canvas.Canvas,
        page_format: PageFormat,
        holidays: Mapping[date, str],
        font: str = DEFAULT_FONT,
    ) -> None:
        self.pdf = pdf
        self.page_format = page_format
        self.layout = page_format.layout
        self.holidays = holidays
        self.font = font

    def _text(self, text: str, x: float, top: float, size: float) -> None:
        self.pdf.setFont(self.font, size)
        self.pdf.drawString(x, top - size, text)

    def _fitted_size(self, text: str, size: float, width: float) -> float:
        while size > MIN_FONT_SIZE_CONTENT and pdfmetrics.stringWidth(text, self.font, size) > width:
            size -= 1
        return size

    def _region_origin(self, page: MonthPage) -> tuple[float, float]:
        fmt = self.page_format
        region = page.half or 0
        bottom = fmt.page_size[1] - (region + 1) * fmt.region_height
        return fmt.margin, bottom + fmt.margin

    def start_page(self) -> None:
        self.pdf.setStrokeColor(COLOR)
        self.pdf.setFillColor(COLOR)
        self.pdf.setLineWidth(LINE_WIDTH)

    def draw_cut_marker(self) -> None:
        width = self.page_format.page_size[0]
        y = self.page_format.region_height
        self.pdf.setDash(*CUT_MARKER_DASH)
        self.pdf.line(0, y, width, y)
        self.pdf.setDash()

    def draw_page(self, page: MonthPage) -> None:
        layout = self.layout
        x0, y0 = self._region_origin(page)
        self._text(month_name(page.month), x0, y0 + self.page_format.title_top, FONT_SIZE_TITLE)
        if page.is_empty:
            return

        height = layout.column_height
        for cell in page.cells:
            x = x0 + cell.column_offset * layout.column_width
            self.pdf.line(x, y0, x, y0 + height)

            if cell.is_weekend:
                box_height = FONT_SIZE_WDAY + LEADING
                self.pdf.rect(
                    x + layout.padding_box,
                    y0 + height - box_height,
                    layout.column_width - layout.padding_box,
                    box_height,
                    stroke=0,
                    fill=1,
                )
                self.pdf.setFillColor(white)
            text_x = x + layout.padding_text
            self._text(weekday_label(cell.date), text_x, y0 + height - LEADING, FONT_SIZE_WDAY)
            self.pdf.setFillColor(COLOR)

            date_top = y0 + height - 2 * LEADING - FONT_SIZE_WDAY
            self._text(date_label(cell.date), text_x, date_top, FONT_SIZE_DATE)

            name = self.holidays.get(cell.date)
            if name:
                size = self._fitted_size(
                    name, FONT_SIZE_CONTENT, layout.column_width - 2 * layout.padding_text
                )
                self._text(name, text_x, date_top - FONT_SIZE_DATE - LEADING, size)

            # Z: (für Znacht)
            self._text("Z:", text_x, y0 + self.page_format.z_top, FONT_SIZE_CONTENT)

        right = x0 + page.column_count * layout.column_width
        self.pdf.line(right, y0, right, y0 + height)

    def draw_month(self, pages: list[MonthPage]) -> None:
        self.start_page()
        for page in pages:
            self.draw_page(page)
        if self.page_format.regions > 1:
            self.draw_cut_marker()
        self.pdf.showPage()


def render_calendar(
    path: str | Path,
    year: int,
    page_format: PageFormat,
    holidays: Mapping[date, str],
    font_path: str | Path | None = None,
) -> Path:
    """Write the calendar for ``year`` as one PDF page per month."""
    target = Path(path)
    months = [month_pages(year, month, page_format.layout) for month in range(1, 13)]
    font = register_font(font_path)
    with atomic_output(target) as tmp_path:
        pdf = canvas.Canvas(str(tmp_path), pagesize=page_format.page_size)
        pdf.setTitle(f"Kalender {year}")
        renderer = PageRenderer(pdf, page_format, holidays, font=font)
        for month, pages in enumerate(months, start=1):
            logger.debug(
                "Month %s: %s", month, [page.column_count for page in pages]
            )
            renderer.draw_month(pages)
        pdf.save()
    return target
