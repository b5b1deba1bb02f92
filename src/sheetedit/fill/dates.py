"""Locale-independent calendar date parsing for fill inference."""

from __future__ import annotations

from datetime import date
import re
from typing import Final

_MONTHS: Final[dict[str, int]] = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}
_MONTH_ABBREVIATIONS: Final[dict[str, int]] = {
    name[:3]: number for name, number in _MONTHS.items()
}
_MONTH_NAME = r"(?P<month_name>[A-Za-z]{3,9})\.?"

_US_SLASH = re.compile(r"^(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})$")
_ISO_DATE = re.compile(
    r"^(?P<year>\d{4})[-/](?P<month>\d{1,2})[-/](?P<day>\d{1,2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)
_MONTH_FIRST = re.compile(
    rf"^{_MONTH_NAME}\s+(?P<day>\d{{1,2}}),?\s+(?P<year>\d{{4}})$"
)
_DAY_FIRST = re.compile(
    rf"^(?P<day>\d{{1,2}})\s+{_MONTH_NAME},?\s+(?P<year>\d{{4}})$"
)
_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    _US_SLASH,
    _ISO_DATE,
    _MONTH_FIRST,
    _DAY_FIRST,
)


def parse_calendar_date(text: str) -> date | None:
    """Parse text as a calendar date, or return None.

    Accepted forms are ``M/D/YYYY``, ``YYYY-MM-DD`` (optionally followed by a
    time part), ``YYYY/MM/DD``, ``Month D, YYYY`` and ``D Month YYYY`` with
    English month names or three-letter abbreviations. Impossible dates such
    as ``2/30/2024`` are rejected.
    """
    candidate = text.strip()
    if not candidate:
        return None
    for pattern in _PATTERNS:
        match = pattern.match(candidate)
        if match is None:
            continue
        month = _resolve_month(match.groupdict())
        if month is None:
            return None
        try:
            return date(int(match.group("year")), month, int(match.group("day")))
        except ValueError:
            return None
    return None


def format_short_date(value: date) -> str:
    """Render a date as ``M/D/YYYY`` without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def _resolve_month(groups: dict[str, str | None]) -> int | None:
    numeric = groups.get("month")
    if numeric is not None:
        return int(numeric)
    name = (groups.get("month_name") or "").lower()
    if name in _MONTHS:
        return _MONTHS[name]
    return _MONTH_ABBREVIATIONS.get(name)
