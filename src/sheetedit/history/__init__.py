from __future__ import annotations

from .commands import (
    CellChange,
    EditCommand,
    ReversibleCommand,
    build_paste_command,
    build_style_command,
    build_value_command,
)
from .log import DEFAULT_CAPACITY, CommandLog

__all__ = [
    "DEFAULT_CAPACITY",
    "CellChange",
    "CommandLog",
    "EditCommand",
    "ReversibleCommand",
    "build_paste_command",
    "build_style_command",
    "build_value_command",
]
