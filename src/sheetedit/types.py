from __future__ import annotations

from typing import Final, Literal, TypeAlias

Scalar: TypeAlias = bool | int | float | str
CellValue: TypeAlias = Scalar | None
CellStyle: TypeAlias = dict[str, object]

CommandKind = Literal[
    "set_value",
    "set_style",
    "insert_row",
    "delete_row",
    "insert_col",
    "delete_col",
]
FillPattern = Literal["series", "date", "copy"]
ClipboardMimeType = Literal[
    "text/plain",
    "text/html",
    "text/csv",
    "application/x-sheetedit",
]

MIME_PLAIN_TEXT: Final[ClipboardMimeType] = "text/plain"
MIME_HTML: Final[ClipboardMimeType] = "text/html"
MIME_CSV: Final[ClipboardMimeType] = "text/csv"
MIME_NATIVE: Final[ClipboardMimeType] = "application/x-sheetedit"
