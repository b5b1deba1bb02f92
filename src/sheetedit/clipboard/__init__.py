from __future__ import annotations

from .codec import (
    capture,
    decode_csv,
    decode_native,
    decode_plain_text,
    encode_all,
    encode_csv,
    encode_html,
    encode_native,
    encode_plain_text,
    format_scalar,
    try_decode_native,
)
from .formats import (
    PASTE_PREFERENCE,
    ClipboardBackend,
    ClipboardFormats,
    InMemoryClipboard,
)

__all__ = [
    "PASTE_PREFERENCE",
    "ClipboardBackend",
    "ClipboardFormats",
    "InMemoryClipboard",
    "capture",
    "decode_csv",
    "decode_native",
    "decode_plain_text",
    "encode_all",
    "encode_csv",
    "encode_html",
    "encode_native",
    "encode_plain_text",
    "format_scalar",
    "try_decode_native",
]
