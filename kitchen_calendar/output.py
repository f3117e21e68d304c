"""Output file naming and atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from kitchen_calendar.domain import PageFormat
from kitchen_calendar.errors import OutputWriteError

logger = logging.getLogger(__name__)

CONTINUOUS_TAG = "strip"
DEFAULT_FILE_MODE = 0o666


def output_filename(year: int, page_format: PageFormat, ext: str = "pdf") -> str:
    """``calendar-<year>.<ext>``, or ``calendar-<year>-<tag>.<ext>`` for other formats."""
    if page_format.tag == CONTINUOUS_TAG:
        return f"calendar-{year}.{ext}"
    return f"calendar-{year}-{page_format.tag}.{ext}"


def _umask_mode() -> int:
    """File mode a plain open() would create under the current umask."""
    mask = os.umask(0)
    os.umask(mask)
    return DEFAULT_FILE_MODE & ~mask


@contextmanager
def atomic_output(path: str | Path) -> Iterator[Path]:
    """Yield a temporary path that replaces ``path`` once the block succeeds."""
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.stem}-", suffix=target.suffix, dir=target.parent
        )
        os.close(fd)
    except OSError as exc:
        raise OutputWriteError(target, exc.strerror or str(exc)) from exc
    tmp_path = Path(tmp_name)
    try:
        yield tmp_path
        # mkstemp creates 0600 files
        os.chmod(tmp_path, _umask_mode())
        os.replace(tmp_path, target)
    except OutputWriteError:
        raise
    except OSError as exc:
        logger.error("Failed to write %s: %s", target, exc)
        raise OutputWriteError(target, exc.strerror or str(exc)) from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    logger.info("Wrote %s", target)
