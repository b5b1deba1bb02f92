from __future__ import annotations

from copy import copy
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable

from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, PatternFill

from sheetedit.fill.dates import format_short_date
from sheetedit.models import Address, CellSnapshot
from sheetedit.types import CellValue

_STYLE_KEYS = (
    "bold",
    "font_size",
    "font_color",
    "fill_color",
    "horizontal",
    "vertical",
    "wrap_text",
)


@runtime_checkable
class OpenpyxlCellProtocol(Protocol):
    """Protocol for openpyxl cell access used by the grid adapter."""

    value: object
    has_style: bool
    font: Any
    fill: Any
    alignment: Any


@runtime_checkable
class OpenpyxlWorksheetProtocol(Protocol):
    """Protocol for openpyxl worksheet access used by the grid adapter."""

    max_row: int
    _cells: dict[tuple[int, int], OpenpyxlCellProtocol]

    def cell(
        self, row: int, column: int, value: object | None = None
    ) -> OpenpyxlCellProtocol: ...


class OpenpyxlGrid:
    """Grid adapter over an openpyxl worksheet.

    Addresses are zero-based; openpyxl rows and columns are one-based.
    The style blob is a flat dict with the keys ``bold``, ``font_size``,
    ``font_color``, ``fill_color``, ``horizontal``, ``vertical`` and
    ``wrap_text``.

    Reads go through the worksheet's private ``_cells`` map so that reading
    an empty address does not create a cell; this ties the adapter to
    openpyxl's ``Worksheet`` internals (3.1 series).
    """

    def __init__(self, worksheet: OpenpyxlWorksheetProtocol) -> None:
        self._sheet = worksheet

    @property
    def worksheet(self) -> OpenpyxlWorksheetProtocol:
        return self._sheet

    @property
    def row_count(self) -> int:
        if not self._existing_cells():
            return 0
        return int(self._sheet.max_row)

    def get_cell(self, address: Address) -> CellSnapshot | None:
        key = (address.row + 1, address.col + 1)
        cell = self._existing_cells().get(key)
        if cell is None:
            return None
        return CellSnapshot(
            value=_normalize_cell_value(cell.value),
            style=_read_style(cell) if cell.has_style else None,
        )

    def set_cell_value(self, address: Address, value: CellValue) -> None:
        self._target(address).value = value

    def set_cell_style(self, address: Address, style: dict[str, Any] | None) -> None:
        """Apply a style blob; ``None`` resets the cell to the workbook default.

        Keys missing from the blob are unset, so writing back a blob read by
        ``get_cell`` restores the same blob.
        """
        cell = self._target(address)
        if style is None:
            default = Cell(self._sheet)
            cell.font = copy(default.font)
            cell.fill = copy(default.fill)
            cell.alignment = copy(default.alignment)
            return

        font = copy(cell.font)
        font.bold = bool(style.get("bold", False))
        font.size = style.get("font_size")
        font.color = _normalize_hex(style.get("font_color"))
        cell.font = font
        fill_color = _normalize_hex(style.get("fill_color"))
        if fill_color is None:
            cell.fill = PatternFill(fill_type=None)
        else:
            cell.fill = PatternFill(
                fill_type="solid", start_color=fill_color, end_color=fill_color
            )
        cell.alignment = Alignment(
            horizontal=style.get("horizontal"),
            vertical=style.get("vertical"),
            wrap_text=style.get("wrap_text"),
        )

    def _target(self, address: Address) -> OpenpyxlCellProtocol:
        return self._sheet.cell(row=address.row + 1, column=address.col + 1)

    def _existing_cells(self) -> dict[tuple[int, int], OpenpyxlCellProtocol]:
        """Return the worksheet cell map without materializing new cells."""
        cells = getattr(self._sheet, "_cells", None)
        if not isinstance(cells, dict):
            raise ValueError("Invalid worksheet: cell map missing.")
        return cells


def _normalize_cell_value(value: object) -> CellValue:
    """Coerce openpyxl cell values into grid scalars."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime, date)):
        return format_short_date(value)
    return str(value)


def _read_style(cell: OpenpyxlCellProtocol) -> dict[str, Any] | None:
    """Read the style blob of a styled openpyxl cell."""
    font = cell.font
    fill = cell.fill
    alignment = cell.alignment
    fill_color = None
    if getattr(fill, "fill_type", None) == "solid":
        fill_color = _color_to_hex(getattr(fill, "start_color", None))
    style: dict[str, Any] = {
        "bold": bool(getattr(font, "bold", False)),
        "font_size": getattr(font, "size", None),
        "font_color": _color_to_hex(getattr(font, "color", None)),
        "fill_color": fill_color,
        "horizontal": getattr(alignment, "horizontal", None),
        "vertical": getattr(alignment, "vertical", None),
        "wrap_text": getattr(alignment, "wrap_text", None),
    }
    compact = {key: style[key] for key in _STYLE_KEYS if style[key] is not None}
    return compact or None


def _color_to_hex(color: object | None) -> str | None:
    """Return aRGB hex for explicit colors (theme/indexed colors yield None)."""
    if color is None:
        return None
    rgb = getattr(color, "rgb", None)
    if not isinstance(rgb, str):
        return None
    return rgb.upper()


def _normalize_hex(value: object) -> str | None:
    """Normalize '#RRGGBB' / 'AARRGGBB' input into openpyxl aRGB form."""
    if value is None:
        return None
    text = str(value).strip().lstrip("#").upper()
    if len(text) == 6:
        return f"FF{text}"
    if len(text) == 8:
        return text
    raise ValueError(f"Invalid color value: {value}")


__all__ = ["OpenpyxlGrid"]
