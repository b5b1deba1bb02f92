from __future__ import annotations

from datetime import date, timedelta
import logging
from typing import cast

from sheetedit.models import CellRange
from sheetedit.types import CellValue, FillPattern

from .dates import format_short_date, parse_calendar_date

logger = logging.getLogger(__name__)


def detect_pattern(value: CellValue) -> FillPattern:
    """Classify how a source value extrudes across a fill target."""
    if value is None or isinstance(value, bool):
        return "copy"
    if isinstance(value, (int, float)):
        return "series"
    if isinstance(value, str):
        return "date" if parse_calendar_date(value) is not None else "copy"
    raise TypeError(f"Unsupported cell value type: {type(value).__name__}")


def infer(source_value: CellValue, target: CellRange) -> list[CellValue]:
    """Produce fill values for every target address in row-major order.

    Numbers count up by one starting at the source value. Date text continues
    one calendar day per cell after the source date. Anything else is copied
    verbatim.

    Args:
        source_value: Value of the single fill source cell.
        target: Range the fill handle was dragged across.

    Returns:
        One value per target address, left-to-right then top-to-bottom.
    """
    count = target.cell_count
    logger.debug("Inferring fill over %s (%d cells).", target.to_a1(), count)
    pattern = detect_pattern(source_value)
    if pattern == "series":
        number = cast(float, source_value)
        return [number + step for step in range(count)]
    if pattern == "date":
        start = cast(date, parse_calendar_date(cast(str, source_value)))
        return [
            format_short_date(start + timedelta(days=step))
            for step in range(1, count + 1)
        ]
    return [source_value] * count
