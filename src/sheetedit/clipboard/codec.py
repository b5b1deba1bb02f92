"""Conversions between captured cell blocks and clipboard encodings.

Every function here is pure: nothing reads or writes shared state, so
callers may encode or decode speculatively.
"""

from __future__ import annotations

import csv
import html
import io
import json
import logging
import math
import re
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from sheetedit.errors import ClipboardParseError
from sheetedit.grid.base import Grid
from sheetedit.models import CellRange, CellSnapshot, ClipboardPayload
from sheetedit.types import (
    MIME_CSV,
    MIME_HTML,
    MIME_NATIVE,
    MIME_PLAIN_TEXT,
    CellValue,
)

from .formats import ClipboardFormats

logger = logging.getLogger(__name__)

NATIVE_FORMAT_MARKER: Final = "sheetedit/cells"
NATIVE_FORMAT_VERSION: Final = 1

_LINE_BREAK = re.compile(r"\r?\n")
_INTEGER_TEXT = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL_TEXT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_CSV_SPECIALS: Final = (",", '"', "\n", "\r")
# Integral floats below this magnitude render without an exponent.
_PLAIN_INTEGER_LIMIT: Final = 1e21


class NativeClipboardDocument(BaseModel):
    """Envelope written to the native clipboard entry."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    format: Literal["sheetedit/cells"] = NATIVE_FORMAT_MARKER
    version: int = NATIVE_FORMAT_VERSION
    payload: ClipboardPayload


def capture(grid: Grid, cell_range: CellRange, *, is_cut: bool = False) -> ClipboardPayload:
    """Snapshot every cell of a range in row-major order.

    Args:
        grid: Grid to read from.
        cell_range: Range to capture.
        is_cut: Whether the capture belongs to a cut operation.

    Returns:
        Payload whose cells are detached copies of the live grid.
    """
    cells: list[list[CellSnapshot]] = []
    for row in cell_range.iter_rows():
        captured: list[CellSnapshot] = []
        for address in row:
            snapshot = grid.get_cell(address)
            captured.append(
                CellSnapshot(value=None)
                if snapshot is None
                else CellSnapshot(value=snapshot.value, style=snapshot.style)
            )
        cells.append(captured)
    return ClipboardPayload(cells=cells, range=cell_range, is_cut=is_cut)


def format_scalar(value: CellValue) -> str:
    """Render a cell value as locale-independent text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return value


def encode_plain_text(payload: ClipboardPayload) -> str:
    """Encode as tab-separated values, one line per row."""
    return "\n".join(
        "\t".join(format_scalar(cell.value) for cell in row) for row in payload.cells
    )


def encode_html(payload: ClipboardPayload) -> str:
    """Encode as a minimal HTML table."""
    parts = ["<table>"]
    for row in payload.cells:
        parts.append("<tr>")
        for cell in row:
            parts.append(f"<td>{_escape_html(format_scalar(cell.value))}</td>")
        parts.append("</tr>")
    parts.append("</table>")
    return "".join(parts)


def encode_csv(payload: ClipboardPayload) -> str:
    """Encode as CSV, quoting only fields that need it."""
    return "\n".join(
        ",".join(_quote_csv_field(format_scalar(cell.value)) for cell in row)
        for row in payload.cells
    )


def encode_native(payload: ClipboardPayload) -> str:
    """Encode losslessly for same-application round trips."""
    return NativeClipboardDocument(payload=payload).model_dump_json()


def encode_all(payload: ClipboardPayload) -> ClipboardFormats:
    """Encode a payload in every published clipboard format."""
    return {
        MIME_PLAIN_TEXT: encode_plain_text(payload),
        MIME_HTML: encode_html(payload),
        MIME_CSV: encode_csv(payload),
        MIME_NATIVE: encode_native(payload),
    }


def decode_native(text: str) -> ClipboardPayload:
    """Decode a native clipboard entry.

    Args:
        text: Text previously produced by ``encode_native``.

    Returns:
        The original payload, field for field.

    Raises:
        ClipboardParseError: If the text is empty, not JSON, carries another
            format marker or version, or holds an invalid payload.
    """
    if not text.strip():
        raise ClipboardParseError.from_reason("empty", "Native clipboard text is empty.")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ClipboardParseError.from_reason(
            "invalid_json",
            f"Native clipboard text is not valid JSON: {exc.msg}",
            position=exc.pos,
        ) from exc
    if not isinstance(data, dict) or data.get("format") != NATIVE_FORMAT_MARKER:
        raise ClipboardParseError.from_reason(
            "unknown_format",
            f"Native clipboard text is not a {NATIVE_FORMAT_MARKER} document.",
        )
    if data.get("version") != NATIVE_FORMAT_VERSION:
        raise ClipboardParseError.from_reason(
            "unsupported_version",
            f"Unsupported native clipboard version: {data.get('version')!r}",
        )
    try:
        return ClipboardPayload.model_validate(data.get("payload"))
    except ValidationError as exc:
        raise ClipboardParseError.from_reason(
            "invalid_payload",
            f"Native clipboard payload is invalid: {exc.error_count()} error(s).",
        ) from exc


def try_decode_native(text: str) -> ClipboardPayload | None:
    """Decode a native entry, returning None instead of raising."""
    try:
        return decode_native(text)
    except ClipboardParseError as exc:
        logger.debug("Native clipboard decode failed (%s): %s", exc.detail.reason, exc)
        return None


def decode_plain_text(text: str) -> list[list[CellSnapshot]]:
    """Decode tab-separated text into rows of snapshots.

    Rows may have different lengths. Empty input decodes to one cell holding
    an empty string.
    """
    if text == "":
        return [[CellSnapshot(value="")]]
    return [
        [CellSnapshot(value=coerce_field(field)) for field in line.split("\t")]
        for line in _LINE_BREAK.split(text)
    ]


def decode_csv(text: str) -> list[list[CellSnapshot]]:
    """Decode CSV text into rows of snapshots."""
    if text == "":
        return [[CellSnapshot(value="")]]
    reader = csv.reader(io.StringIO(text, newline=""))
    rows = [[CellSnapshot(value=coerce_field(field)) for field in row] for row in reader]
    return rows or [[CellSnapshot(value="")]]


def coerce_field(field: str) -> CellValue:
    """Convert a text field to a number when it is entirely a finite number."""
    candidate = field.strip()
    if not candidate or not _DECIMAL_TEXT.match(candidate):
        return field
    if _INTEGER_TEXT.match(candidate):
        return int(candidate)
    number = float(candidate)
    if not math.isfinite(number):
        return field
    return number


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e", maxsplit=1)
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _escape_html(text: str) -> str:
    return html.escape(text, quote=False).replace('"', "&quot;")


def _quote_csv_field(text: str) -> str:
    if any(special in text for special in _CSV_SPECIALS):
        return '"' + text.replace('"', '""') + '"'
    return text
