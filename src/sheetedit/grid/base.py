from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from sheetedit.models import Address, CellSnapshot
from sheetedit.types import CellValue


@runtime_checkable
class Grid(Protocol):
    """Read/write contract for the worksheet storage being edited."""

    @property
    def row_count(self) -> int:
        """Number of rows currently holding data."""

    def get_cell(self, address: Address) -> CellSnapshot | None:
        """Return a snapshot of the cell, or None when no cell exists."""

    def set_cell_value(self, address: Address, value: CellValue) -> None:
        """Write a raw value to the cell."""

    def set_cell_style(self, address: Address, style: dict[str, Any] | None) -> None:
        """Replace the cell style blob (None clears it)."""


__all__ = ["Grid"]
