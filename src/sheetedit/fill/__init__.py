from __future__ import annotations

from .dates import format_short_date, parse_calendar_date
from .inference import detect_pattern, infer

__all__ = ["detect_pattern", "format_short_date", "infer", "parse_calendar_date"]
