from __future__ import annotations

from collections.abc import Mapping
import copy
from typing import Any

from sheetedit.models import Address, CellSnapshot
from sheetedit.types import CellValue


class InMemoryGrid:
    """Dict-backed grid used by hosts without a worksheet and by tests."""

    def __init__(self, cells: Mapping[Address, CellSnapshot] | None = None) -> None:
        self._values: dict[Address, CellValue] = {}
        self._styles: dict[Address, dict[str, Any]] = {}
        for address, snapshot in (cells or {}).items():
            self._values[address] = snapshot.value
            if snapshot.style is not None:
                self._styles[address] = copy.deepcopy(snapshot.style)

    @classmethod
    def from_rows(
        cls, rows: list[list[CellValue]], *, origin: Address | None = None
    ) -> InMemoryGrid:
        """Build a grid from a 2D list of values placed at origin."""
        base = origin or Address(row=0, col=0)
        grid = cls()
        for r_idx, row in enumerate(rows):
            for c_idx, value in enumerate(row):
                grid.set_cell_value(base.offset(r_idx, c_idx), value)
        return grid

    @property
    def row_count(self) -> int:
        addresses = self._values.keys() | self._styles.keys()
        if not addresses:
            return 0
        return max(address.row for address in addresses) + 1

    def get_cell(self, address: Address) -> CellSnapshot | None:
        if address not in self._values and address not in self._styles:
            return None
        return CellSnapshot(
            value=self._values.get(address),
            style=self._styles.get(address),
        )

    def set_cell_value(self, address: Address, value: CellValue) -> None:
        self._values[address] = value

    def set_cell_style(self, address: Address, style: dict[str, Any] | None) -> None:
        if style is None:
            self._styles.pop(address, None)
            return
        self._styles[address] = copy.deepcopy(style)

    def value_at(self, address: Address) -> CellValue:
        """Return the raw value at address (None when absent)."""
        return self._values.get(address)

    def values(self, rows: int, cols: int) -> list[list[CellValue]]:
        """Return the top-left rows x cols block of values."""
        return [
            [self._values.get(Address(row=r, col=c)) for c in range(cols)]
            for r in range(rows)
        ]

    def copy(self) -> InMemoryGrid:
        """Return an independent copy of this grid."""
        clone = InMemoryGrid()
        clone._values = dict(self._values)
        clone._styles = copy.deepcopy(self._styles)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InMemoryGrid):
            return NotImplemented
        return self._normalized() == other._normalized()

    def _normalized(self) -> tuple[dict[Address, CellValue], dict[Address, Any]]:
        """Drop empty entries so cleared cells compare equal to absent ones."""
        values = {key: val for key, val in self._values.items() if val is not None}
        return values, dict(self._styles)
