from __future__ import annotations

from datetime import datetime

from openpyxl import Workbook
from openpyxl.styles import Font
import pytest

from sheetedit.grid.base import Grid
from sheetedit.grid.openpyxl_grid import OpenpyxlGrid, OpenpyxlWorksheetProtocol
from sheetedit.models import Address, CellRange, CellSnapshot
from sheetedit.session import EditingSession


def _create_sheet() -> OpenpyxlGrid:
    """Create a worksheet-backed grid with a small data block."""
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.title = "Sheet1"
    sheet["A1"] = 1
    sheet["B1"] = "label"
    sheet["A2"] = datetime(2024, 1, 31)
    sheet["B2"].font = Font(bold=True, color="FFFF0000")
    return OpenpyxlGrid(sheet)


def test_openpyxl_grid_satisfies_grid_protocol() -> None:
    assert isinstance(_create_sheet(), Grid)


def test_get_cell_maps_one_based_worksheet() -> None:
    grid = _create_sheet()
    assert grid.get_cell(Address(row=0, col=0)).value == 1  # type: ignore[union-attr]
    assert grid.get_cell(Address(row=0, col=1)).value == "label"  # type: ignore[union-attr]
    assert grid.get_cell(Address(row=9, col=9)) is None
    assert grid.row_count == 2


def test_get_cell_surfaces_dates_as_short_text() -> None:
    grid = _create_sheet()
    snapshot = grid.get_cell(Address(row=1, col=0))
    assert snapshot is not None
    assert snapshot.value == "1/31/2024"


def test_get_cell_reads_style_blob() -> None:
    grid = _create_sheet()
    snapshot = grid.get_cell(Address(row=1, col=1))
    assert snapshot is not None
    assert snapshot.style is not None
    assert snapshot.style["bold"] is True
    assert snapshot.style["font_color"] == "FFFF0000"


def test_set_cell_style_applies_fill_and_alignment() -> None:
    grid = _create_sheet()
    address = Address(row=0, col=0)
    grid.set_cell_style(
        address, {"fill_color": "#D9E1F2", "horizontal": "center", "bold": True}
    )
    cell = grid.worksheet.cell(row=1, column=1)
    assert cell.fill.fill_type == "solid"
    assert cell.fill.start_color.rgb == "FFD9E1F2"
    assert cell.alignment.horizontal == "center"
    assert cell.font.bold is True


def test_set_cell_style_rejects_invalid_color() -> None:
    grid = _create_sheet()
    with pytest.raises(ValueError, match="Invalid color"):
        grid.set_cell_style(Address(row=0, col=0), {"fill_color": "#12"})


def test_session_fill_and_undo_on_worksheet() -> None:
    grid = _create_sheet()
    session = EditingSession(grid)
    assert session.fill(Address(row=0, col=0), CellRange.from_a1("C1:E1"))
    sheet = grid.worksheet
    assert [sheet["C1"].value, sheet["D1"].value, sheet["E1"].value] == [1, 2, 3]
    assert session.undo()
    assert [sheet["C1"].value, sheet["D1"].value, sheet["E1"].value] == [
        None,
        None,
        None,
    ]


def test_session_paste_restores_style_on_undo() -> None:
    grid = _create_sheet()
    session = EditingSession(grid)
    session.set_selection(Address.from_a1("B2"))
    assert session.copy()
    payload = session.clipboard_payload
    assert payload is not None
    session.paste(payload, Address.from_a1("B1"))
    sheet = grid.worksheet
    assert sheet["B1"].font.bold is True
    assert session.undo()
    assert sheet["B1"].value == "label"
    assert not sheet["B1"].font.bold


def test_paste_then_undo_restores_unstyled_cell_exactly() -> None:
    grid = _create_sheet()
    session = EditingSession(grid)
    address = Address.from_a1("A1")
    before = grid.get_cell(address)
    session.paste_cells([[CellSnapshot(value=1, style={"bold": True})]], address)
    assert grid.get_cell(address) != before
    assert session.undo()
    assert grid.get_cell(address) == before
    assert before is not None and before.style is None
    assert grid.worksheet.cell(row=1, column=1).has_style is False


def test_style_then_undo_restores_styled_cell_exactly() -> None:
    grid = _create_sheet()
    session = EditingSession(grid)
    target = CellRange.from_a1("B2")
    before = grid.get_cell(target.start)
    assert session.apply_style({"fill_color": "#D9E1F2", "font_size": 14}, target)
    assert session.undo()
    assert grid.get_cell(target.start) == before


def test_set_cell_style_keeps_font_name() -> None:
    grid = _create_sheet()
    grid.set_cell_style(Address.from_a1("A1"), {"bold": True})
    font = grid.worksheet.cell(row=1, column=1).font
    assert font.name == "Calibri"
    assert font.bold is True


def test_worksheet_satisfies_worksheet_protocol() -> None:
    assert isinstance(_create_sheet().worksheet, OpenpyxlWorksheetProtocol)
