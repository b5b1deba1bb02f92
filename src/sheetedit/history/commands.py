from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from sheetedit.grid.base import Grid
from sheetedit.models import Address, CellSnapshot
from sheetedit.types import CellValue, CommandKind


@runtime_checkable
class ReversibleCommand(Protocol):
    """A grid mutation paired with its exact inverse."""

    kind: CommandKind

    def forward(self, grid: Grid) -> None:
        """Apply the mutation."""

    def inverse(self, grid: Grid) -> None:
        """Undo the mutation when invoked right after ``forward``."""


class CellChange(BaseModel):
    """Before/after state of one cell touched by a command."""

    address: Address
    before: CellSnapshot
    after: CellSnapshot
    write_style: bool = False


class EditCommand(BaseModel):
    """Serializable command record replayable in both directions."""

    kind: CommandKind
    changes: list[CellChange] = Field(default_factory=list)

    def forward(self, grid: Grid) -> None:
        for change in self.changes:
            grid.set_cell_value(change.address, change.after.value)
            if change.write_style:
                grid.set_cell_style(change.address, change.after.style)

    def inverse(self, grid: Grid) -> None:
        for change in reversed(self.changes):
            grid.set_cell_value(change.address, change.before.value)
            if change.write_style:
                grid.set_cell_style(change.address, change.before.style)

    @property
    def addresses(self) -> list[Address]:
        return [change.address for change in self.changes]


def snapshot_at(grid: Grid, address: Address) -> CellSnapshot:
    """Capture the current cell state, treating a missing cell as empty."""
    current = grid.get_cell(address)
    if current is None:
        return CellSnapshot()
    return CellSnapshot(value=current.value, style=current.style)


def build_value_command(
    grid: Grid,
    assignments: Iterable[tuple[Address, CellValue]],
    *,
    kind: CommandKind = "set_value",
) -> EditCommand:
    """Build a command writing raw values, snapshotting prior state first."""
    changes: list[CellChange] = []
    for address, value in assignments:
        before = snapshot_at(grid, address)
        changes.append(
            CellChange(
                address=address,
                before=before,
                after=CellSnapshot(value=value, style=before.style),
            )
        )
    return EditCommand(kind=kind, changes=changes)


def build_paste_command(
    grid: Grid, placements: Iterable[tuple[Address, CellSnapshot]]
) -> EditCommand:
    """Build a command writing values, and styles when the source carries one."""
    changes: list[CellChange] = []
    for address, source in placements:
        before = snapshot_at(grid, address)
        write_style = source.style is not None
        changes.append(
            CellChange(
                address=address,
                before=before,
                after=CellSnapshot(
                    value=source.value,
                    style=source.style if write_style else before.style,
                ),
                write_style=write_style,
            )
        )
    return EditCommand(kind="set_value", changes=changes)


def build_style_command(
    grid: Grid, addresses: Iterable[Address], style: dict[str, Any] | None
) -> EditCommand:
    """Build a command replacing the style of each address."""
    changes: list[CellChange] = []
    for address in addresses:
        before = snapshot_at(grid, address)
        changes.append(
            CellChange(
                address=address,
                before=before,
                after=CellSnapshot(value=before.value, style=style),
                write_style=True,
            )
        )
    return EditCommand(kind="set_style", changes=changes)


__all__ = [
    "CellChange",
    "EditCommand",
    "ReversibleCommand",
    "build_paste_command",
    "build_style_command",
    "build_value_command",
    "snapshot_at",
]
