from __future__ import annotations

from collections.abc import Iterator
import copy
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .shared.a1 import a1_to_coordinates, coordinates_to_a1, split_range


class Address(BaseModel):
    """Zero-based grid coordinate."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)

    @classmethod
    def from_a1(cls, value: str) -> Address:
        """Build an address from A1 notation (``A1`` is row 0, col 0)."""
        row, col = a1_to_coordinates(value)
        return cls(row=row, col=col)

    def to_a1(self) -> str:
        """Return the A1 notation for this address."""
        return coordinates_to_a1(self.row, self.col)

    def offset(self, rows: int, cols: int) -> Address:
        """Return a new address shifted by the given deltas."""
        return Address(row=self.row + rows, col=self.col + cols)


class CellRange(BaseModel):
    """Inclusive rectangular span of addresses with ordered bounds."""

    model_config = ConfigDict(frozen=True)

    start: Address
    end: Address

    @model_validator(mode="after")
    def _validate_bounds(self) -> CellRange:
        if self.start.row > self.end.row or self.start.col > self.end.col:
            raise ValueError(
                "Range bounds are reversed: "
                f"start=({self.start.row}, {self.start.col}), "
                f"end=({self.end.row}, {self.end.col}). "
                "Use CellRange.spanning() to normalize corners."
            )
        return self

    @classmethod
    def spanning(cls, first: Address, second: Address | None = None) -> CellRange:
        """Build a range from two corners given in any order."""
        other = first if second is None else second
        return cls(
            start=Address(row=min(first.row, other.row), col=min(first.col, other.col)),
            end=Address(row=max(first.row, other.row), col=max(first.col, other.col)),
        )

    @classmethod
    def single(cls, address: Address) -> CellRange:
        """Build a degenerate single-cell range."""
        return cls(start=address, end=address)

    @classmethod
    def from_a1(cls, value: str) -> CellRange:
        """Build a range from A1 notation such as ``B2:D4`` or ``C3``."""
        (start_row, start_col), (end_row, end_col) = split_range(value)
        return cls(
            start=Address(row=start_row, col=start_col),
            end=Address(row=end_row, col=end_col),
        )

    def to_a1(self) -> str:
        """Return the A1 notation for this range."""
        return f"{self.start.to_a1()}:{self.end.to_a1()}"

    @property
    def row_count(self) -> int:
        return self.end.row - self.start.row + 1

    @property
    def col_count(self) -> int:
        return self.end.col - self.start.col + 1

    @property
    def cell_count(self) -> int:
        return self.row_count * self.col_count

    def contains(self, address: Address) -> bool:
        """Return whether the address falls inside this range."""
        return (
            self.start.row <= address.row <= self.end.row
            and self.start.col <= address.col <= self.end.col
        )

    def iter_rows(self) -> Iterator[list[Address]]:
        """Yield the addresses of each row, top to bottom."""
        for row in range(self.start.row, self.end.row + 1):
            yield [
                Address(row=row, col=col)
                for col in range(self.start.col, self.end.col + 1)
            ]

    def iter_addresses(self) -> Iterator[Address]:
        """Yield every address in row-major order."""
        for row in self.iter_rows():
            yield from row

    def offset(self, rows: int, cols: int) -> CellRange:
        """Return the same-shaped range shifted by the given deltas."""
        return CellRange(
            start=self.start.offset(rows, cols), end=self.end.offset(rows, cols)
        )


class CellSnapshot(BaseModel):
    """Captured copy of one cell's value and optional style."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    value: bool | int | float | str | None = None
    style: dict[str, Any] | None = None

    @field_validator("style")
    @classmethod
    def _detach_style(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return None
        return copy.deepcopy(value)

    @property
    def is_empty(self) -> bool:
        return self.value is None and self.style is None


class ClipboardPayload(BaseModel):
    """Captured rectangular block of snapshots exchanged via the clipboard."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    cells: list[list[CellSnapshot]]
    range: CellRange
    is_cut: bool = False

    @model_validator(mode="after")
    def _validate_shape(self) -> ClipboardPayload:
        if len(self.cells) != self.range.row_count:
            raise ValueError(
                f"Payload has {len(self.cells)} rows but range "
                f"{self.range.to_a1()} spans {self.range.row_count}."
            )
        for index, row in enumerate(self.cells):
            if len(row) != self.range.col_count:
                raise ValueError(
                    f"Payload row {index} has {len(row)} cells but range "
                    f"{self.range.to_a1()} spans {self.range.col_count} columns."
                )
        return self

    def iter_cells(self) -> Iterator[tuple[Address, CellSnapshot]]:
        """Yield (source address, snapshot) pairs in row-major order."""
        for r_idx, row in enumerate(self.cells):
            for c_idx, snapshot in enumerate(row):
                yield self.range.start.offset(r_idx, c_idx), snapshot


class HistoryStats(BaseModel):
    """Undo/redo stack depths."""

    undo_count: int
    redo_count: int
