"""Page formats for the printed calendar."""

from __future__ import annotations

from reportlab.lib.units import mm

from kitchen_calendar.domain import LayoutConfig, PageFormat

STRIP_HEIGHT = 162 * mm
MARGIN = 12 * mm
COLUMN_WIDTH = 28 * mm
SPLIT_THRESHOLD_DAY = 16

_COLUMNS = LayoutConfig(
    column_width=COLUMN_WIDTH,
    column_height=105 * mm,
    padding_box=3 * mm,
    padding_text=4 * mm,
)

# One month per 900 mm strip.
STRIP = PageFormat(
    tag="strip",
    page_size=(900 * mm, STRIP_HEIGHT),
    margin=MARGIN,
    title_top=133 * mm,
    z_top=20 * mm,
    layout=_COLUMNS,
)

# Two half-month strips stacked on one sheet, cut apart after printing.
SPLIT = PageFormat(
    tag="split",
    page_size=(SPLIT_THRESHOLD_DAY * COLUMN_WIDTH + 2 * MARGIN, 2 * STRIP_HEIGHT),
    margin=MARGIN,
    title_top=133 * mm,
    z_top=20 * mm,
    layout=_COLUMNS.model_copy(update={"split_threshold_day": SPLIT_THRESHOLD_DAY}),
)

FORMATS: dict[str, PageFormat] = {fmt.tag: fmt for fmt in (STRIP, SPLIT)}


def get_format(split: bool) -> PageFormat:
    return SPLIT if split else STRIP
