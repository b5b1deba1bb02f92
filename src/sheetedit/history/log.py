from __future__ import annotations

import logging

from sheetedit.grid.base import Grid
from sheetedit.models import HistoryStats

from .commands import ReversibleCommand

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class CommandLog:
    """Bounded undo stack plus linear redo stack.

    The log is the only writer to the grid: every mutation goes through
    ``execute`` so it is always paired with its inverse. Pushing a new
    command discards all pending redo entries. When the undo stack exceeds
    ``capacity`` the oldest entry is dropped without signalling.
    """

    def __init__(self, grid: Grid, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("Command log capacity must be positive.")
        self._grid = grid
        self._capacity = capacity
        self._undo: list[ReversibleCommand] = []
        self._redo: list[ReversibleCommand] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def undo_stack(self) -> tuple[ReversibleCommand, ...]:
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[ReversibleCommand, ...]:
        return tuple(self._redo)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def execute(self, command: ReversibleCommand) -> None:
        """Apply a command and record it as the newest undo step.

        The command is recorded even when ``forward`` raises; the exception
        propagates after the push.
        """
        try:
            command.forward(self._grid)
        finally:
            self._push(command)

    def undo(self) -> bool:
        """Revert the newest command; return False when there is none."""
        if not self._undo:
            return False
        command = self._undo.pop()
        command.inverse(self._grid)
        self._redo.append(command)
        logger.debug("Undid %s command.", command.kind)
        return True

    def redo(self) -> bool:
        """Re-apply the newest undone command; return False when there is none."""
        if not self._redo:
            return False
        command = self._redo.pop()
        command.forward(self._grid)
        self._undo.append(command)
        logger.debug("Redid %s command.", command.kind)
        return True

    def clear(self) -> None:
        """Drop all undo and redo history."""
        self._undo.clear()
        self._redo.clear()

    def stats(self) -> HistoryStats:
        """Return current stack depths."""
        return HistoryStats(undo_count=len(self._undo), redo_count=len(self._redo))

    def _push(self, command: ReversibleCommand) -> None:
        self._undo.append(command)
        if len(self._undo) > self._capacity:
            evicted = self._undo.pop(0)
            logger.debug("History full; evicted oldest %s command.", evicted.kind)
        self._redo.clear()
