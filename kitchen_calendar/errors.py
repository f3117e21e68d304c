"""Error types raised by the calendar generator."""

from __future__ import annotations

from pathlib import Path


class CalendarError(Exception):
    """Base error."""


class InvalidYearError(CalendarError, ValueError):
    """Raised when a year (or month) yields a date that cannot be constructed."""


class OutputWriteError(CalendarError, OSError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
