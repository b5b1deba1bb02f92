from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .clipboard.codec import (
    capture,
    decode_csv,
    decode_plain_text,
    encode_all,
    try_decode_native,
)
from .clipboard.formats import PASTE_PREFERENCE, ClipboardBackend, InMemoryClipboard
from .config import EditingConfig
from .fill.inference import infer
from .grid.base import Grid
from .history.commands import (
    build_paste_command,
    build_style_command,
    build_value_command,
)
from .history.log import CommandLog
from .models import Address, CellRange, CellSnapshot, ClipboardPayload, HistoryStats
from .selection import SelectionState
from .types import MIME_CSV, MIME_NATIVE, CellValue

logger = logging.getLogger(__name__)


class EditingSession:
    """Orchestrates selection, clipboard, fill and undo/redo over one grid.

    Every mutation is applied as a single command through the command log,
    so one undo step reverts one user operation. Operations that need a
    selection return False when nothing is selected.
    """

    def __init__(
        self,
        grid: Grid,
        config: EditingConfig | None = None,
        *,
        clipboard: ClipboardBackend | None = None,
    ) -> None:
        self._grid = grid
        self._config = config if config is not None else EditingConfig()
        self._clipboard = clipboard if clipboard is not None else InMemoryClipboard()
        self._log = CommandLog(grid, capacity=self._config.max_history_size)
        self._selection = SelectionState(allow_multi=self._config.enable_multi_select)
        self._payload: ClipboardPayload | None = None

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def config(self) -> EditingConfig:
        return self._config

    @property
    def history(self) -> CommandLog:
        return self._log

    @property
    def selection(self) -> CellRange | None:
        return self._selection.range

    @property
    def clipboard_payload(self) -> ClipboardPayload | None:
        """Payload retained by the most recent copy or cut."""
        return self._payload

    def set_selection(self, start: Address, end: Address | None = None) -> CellRange:
        """Select a rectangle; ``end`` defaults to ``start``."""
        return self._selection.select(start, end)

    def clear_selection(self) -> None:
        self._selection.clear()

    def copy(self) -> bool:
        """Capture the selection and publish it in every clipboard encoding."""
        target = self._selection.range
        if target is None:
            return False
        self._publish(capture(self._grid, target))
        return True

    def cut(self) -> bool:
        """Copy the selection, then clear it as one undoable step."""
        target = self._selection.range
        if target is None:
            return False
        self._publish(capture(self._grid, target, is_cut=True))
        command = build_value_command(
            self._grid, ((address, None) for address in target.iter_addresses())
        )
        self._log.execute(command)
        logger.debug("Cut %s.", target.to_a1())
        return True

    def paste(self, payload: ClipboardPayload, destination: Address) -> None:
        """Write a payload with its top-left corner at destination.

        Args:
            payload: Captured block to paste.
            destination: Target address for the payload's top-left cell.
        """
        row_shift = destination.row - payload.range.start.row
        col_shift = destination.col - payload.range.start.col
        placements = [
            (source.offset(row_shift, col_shift), snapshot)
            for source, snapshot in payload.iter_cells()
        ]
        self._log.execute(build_paste_command(self._grid, placements))
        logger.debug(
            "Pasted %s at %s.", payload.range.to_a1(), destination.to_a1()
        )

    def paste_cells(
        self, cells: list[list[CellSnapshot]], destination: Address
    ) -> bool:
        """Write decoded rows (possibly ragged) starting at destination."""
        placements = [
            (destination.offset(r_idx, c_idx), snapshot)
            for r_idx, row in enumerate(cells)
            for c_idx, snapshot in enumerate(row)
        ]
        if not placements:
            return False
        self._log.execute(build_paste_command(self._grid, placements))
        return True

    def paste_formats(
        self, formats: Mapping[str, str], destination: Address | None = None
    ) -> bool:
        """Paste from MIME-keyed encodings, preferring the native entry.

        Args:
            formats: Clipboard contents keyed by MIME type.
            destination: Target top-left; defaults to the selection anchor.

        Returns:
            True when something was pasted.
        """
        target = destination if destination is not None else self._selection.anchor
        if target is None:
            return False
        for mime_type in PASTE_PREFERENCE:
            text = formats.get(mime_type)
            if not text:
                continue
            if mime_type == MIME_NATIVE:
                payload = try_decode_native(text)
                if payload is None:
                    logger.debug("Native clipboard entry unusable; falling back.")
                    continue
                self.paste(payload, target)
                return True
            decoder = decode_csv if mime_type == MIME_CSV else decode_plain_text
            return self.paste_cells(decoder(text), target)
        return False

    def paste_from_clipboard(self, destination: Address | None = None) -> bool:
        """Paste whatever the clipboard backend currently holds."""
        return self.paste_formats(self._clipboard.read(), destination)

    def fill(self, source: Address, target: CellRange) -> bool:
        """Extrude the source cell's pattern across target as one step."""
        if not self._config.enable_fill_handle:
            return False
        source_cell = self._grid.get_cell(source)
        if source_cell is None:
            return False
        values = infer(source_cell.value, target)
        command = build_value_command(
            self._grid, zip(target.iter_addresses(), values)
        )
        self._log.execute(command)
        logger.debug("Filled %s from %s.", target.to_a1(), source.to_a1())
        return True

    def set_value(self, address: Address, value: CellValue) -> None:
        """Write one cell value as an undoable step."""
        self._log.execute(build_value_command(self._grid, [(address, value)]))

    def apply_style(
        self, style: dict[str, Any] | None, target: CellRange | None = None
    ) -> bool:
        """Replace the style of every cell in target (default: selection)."""
        resolved = target if target is not None else self._selection.range
        if resolved is None:
            return False
        self._log.execute(
            build_style_command(self._grid, resolved.iter_addresses(), style)
        )
        return True

    def clear_contents(self, target: CellRange | None = None) -> bool:
        """Empty every cell value in target (default: selection)."""
        resolved = target if target is not None else self._selection.range
        if resolved is None:
            return False
        self._log.execute(
            build_value_command(
                self._grid, ((address, None) for address in resolved.iter_addresses())
            )
        )
        return True

    def undo(self) -> bool:
        return self._log.undo()

    def redo(self) -> bool:
        return self._log.redo()

    def clear_history(self) -> None:
        self._log.clear()

    def history_stats(self) -> HistoryStats:
        return self._log.stats()

    def _publish(self, payload: ClipboardPayload) -> None:
        self._payload = payload
        if self._config.enable_clipboard:
            self._clipboard.write(encode_all(payload))
