"""Undoable cell editing with clipboard codecs and fill inference."""

from __future__ import annotations

from .clipboard import ClipboardBackend, InMemoryClipboard
from .config import EditingConfig, configure_logging
from .errors import ClipboardParseError, ParseErrorDetail
from .grid import Grid, InMemoryGrid, OpenpyxlGrid
from .history import CommandLog, EditCommand
from .models import Address, CellRange, CellSnapshot, ClipboardPayload, HistoryStats
from .selection import SelectionState
from .session import EditingSession

__all__ = [
    "Address",
    "CellRange",
    "CellSnapshot",
    "ClipboardBackend",
    "ClipboardParseError",
    "ClipboardPayload",
    "CommandLog",
    "EditCommand",
    "EditingConfig",
    "EditingSession",
    "Grid",
    "HistoryStats",
    "InMemoryClipboard",
    "InMemoryGrid",
    "OpenpyxlGrid",
    "ParseErrorDetail",
    "SelectionState",
    "configure_logging",
]
