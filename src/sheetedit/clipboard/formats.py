from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeAlias, runtime_checkable

from sheetedit.types import MIME_CSV, MIME_NATIVE, MIME_PLAIN_TEXT

ClipboardFormats: TypeAlias = dict[str, str]

# Order in which paste consults the available encodings.
PASTE_PREFERENCE: tuple[str, ...] = (MIME_NATIVE, MIME_PLAIN_TEXT, MIME_CSV)


@runtime_checkable
class ClipboardBackend(Protocol):
    """Host clipboard adapter exchanging MIME-keyed strings with the session."""

    def write(self, formats: Mapping[str, str]) -> None:
        """Publish encodings to the host clipboard."""

    def read(self) -> Mapping[str, str]:
        """Return the encodings currently on the host clipboard."""


class InMemoryClipboard:
    """Process-local clipboard used when no host clipboard is wired in."""

    def __init__(self) -> None:
        self._formats: ClipboardFormats = {}

    def write(self, formats: Mapping[str, str]) -> None:
        self._formats = dict(formats)

    def read(self) -> Mapping[str, str]:
        return dict(self._formats)

    def clear(self) -> None:
        self._formats = {}


__all__ = [
    "PASTE_PREFERENCE",
    "ClipboardBackend",
    "ClipboardFormats",
    "InMemoryClipboard",
]
