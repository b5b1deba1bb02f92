from __future__ import annotations

from sheetedit.grid.base import Grid
from sheetedit.grid.memory import InMemoryGrid
from sheetedit.models import Address, CellSnapshot


def test_in_memory_grid_satisfies_grid_protocol() -> None:
    assert isinstance(InMemoryGrid(), Grid)


def test_missing_cell_returns_none() -> None:
    grid = InMemoryGrid()
    assert grid.get_cell(Address(row=0, col=0)) is None
    assert grid.row_count == 0


def test_set_and_get_value_and_style() -> None:
    grid = InMemoryGrid()
    address = Address(row=3, col=1)
    grid.set_cell_value(address, 42)
    grid.set_cell_style(address, {"bold": True})
    assert grid.get_cell(address) == CellSnapshot(value=42, style={"bold": True})
    assert grid.row_count == 4


def test_snapshot_is_not_affected_by_later_writes() -> None:
    grid = InMemoryGrid()
    address = Address(row=0, col=0)
    style = {"fill_color": "#FFFF00"}
    grid.set_cell_value(address, "before")
    grid.set_cell_style(address, style)
    captured = grid.get_cell(address)
    style["fill_color"] = "#000000"
    grid.set_cell_value(address, "after")
    assert captured == CellSnapshot(value="before", style={"fill_color": "#FFFF00"})


def test_clearing_style_removes_it() -> None:
    grid = InMemoryGrid()
    address = Address(row=0, col=0)
    grid.set_cell_style(address, {"bold": True})
    grid.set_cell_style(address, None)
    assert grid.get_cell(address) is None


def test_copy_is_independent_and_equality_ignores_empty_values() -> None:
    grid = InMemoryGrid.from_rows([[1, 2]])
    clone = grid.copy()
    clone.set_cell_value(Address(row=0, col=0), 9)
    assert grid.value_at(Address(row=0, col=0)) == 1
    assert grid != clone
    clone.set_cell_value(Address(row=0, col=0), 1)
    clone.set_cell_value(Address(row=5, col=5), None)
    assert grid == clone


def test_from_rows_respects_origin() -> None:
    grid = InMemoryGrid.from_rows([["a"]], origin=Address(row=2, col=2))
    assert grid.value_at(Address(row=2, col=2)) == "a"
    assert grid.values(1, 1) == [[None]]
