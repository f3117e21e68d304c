"""Domain models for holidays and the page layout."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

Half = Literal[0, 1]


class Holiday(BaseModel):
    date: date
    name: str

    model_config = {"frozen": True}


class FixedRule(BaseModel):
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    name: str

    model_config = {"frozen": True}


class RelativeRule(BaseModel):
    """Holiday defined as a day offset from Easter Sunday."""

    offset_days: int = Field(ge=-2, le=50)
    name: str

    model_config = {"frozen": True}


class LayoutConfig(BaseModel):
    """Column geometry in PDF points plus the optional split threshold.

    ``split_threshold_day`` is the first day of a month placed in the second
    half. ``None`` selects the continuous layout.
    """

    column_width: float = Field(gt=0)
    column_height: float = Field(gt=0)
    padding_box: float = Field(ge=0)
    padding_text: float = Field(ge=0)
    split_threshold_day: int | None = Field(default=None, ge=1)

    model_config = {"frozen": True}

    @property
    def is_split(self) -> bool:
        return self.split_threshold_day is not None

    @model_validator(mode="after")
    def _validate_padding(self) -> "LayoutConfig":
        if self.padding_box >= self.column_width:
            raise ValueError("padding_box must be smaller than column_width")
        return self


class PageFormat(BaseModel):
    tag: str
    page_size: tuple[float, float]
    margin: float = Field(ge=0)
    title_top: float = Field(gt=0)
    z_top: float = Field(ge=0)
    layout: LayoutConfig

    model_config = {"frozen": True}

    @field_validator("page_size")
    @classmethod
    def _validate_page_size(cls, value: tuple[float, float]) -> tuple[float, float]:
        width, height = value
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid page size: {value!r}")
        return value

    @property
    def regions(self) -> int:
        """Number of stacked strips printed on one page."""
        return 2 if self.layout.is_split else 1

    @property
    def region_height(self) -> float:
        return self.page_size[1] / self.regions


class DayCell(BaseModel):
    date: date
    column_offset: int = Field(ge=0)
    half: Half | None = None
    is_weekend: bool

    model_config = {"frozen": True}


class MonthPage(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)
    half: Half | None = None
    cells: tuple[DayCell, ...] = ()

    model_config = {"frozen": True}

    @property
    def column_count(self) -> int:
        return len(self.cells)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    @property
    def days(self) -> list[int]:
        return [cell.date.day for cell in self.cells]
