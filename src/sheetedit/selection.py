from __future__ import annotations

from .models import Address, CellRange


class SelectionState:
    """Currently active rectangular selection, if any."""

    def __init__(self, *, allow_multi: bool = True) -> None:
        self._allow_multi = allow_multi
        self._range: CellRange | None = None

    @property
    def range(self) -> CellRange | None:
        return self._range

    @property
    def active(self) -> bool:
        return self._range is not None

    @property
    def anchor(self) -> Address | None:
        """Top-left corner of the selection."""
        return None if self._range is None else self._range.start

    def select(self, start: Address, end: Address | None = None) -> CellRange:
        """Select the rectangle between two corners (single cell by default)."""
        if end is None or not self._allow_multi:
            end = start
        self._range = CellRange.spanning(start, end)
        return self._range

    def clear(self) -> None:
        self._range = None
