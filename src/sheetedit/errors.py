from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

ParseFailureReason = Literal[
    "empty",
    "invalid_json",
    "unknown_format",
    "unsupported_version",
    "invalid_payload",
]


class ParseErrorDetail(BaseModel):
    """Structured details for a clipboard decode failure."""

    message: str
    reason: ParseFailureReason
    position: int | None = None


class ClipboardParseError(ValueError):
    """Native clipboard text could not be decoded into a payload."""

    def __init__(self, detail: ParseErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    @classmethod
    def from_reason(
        cls,
        reason: ParseFailureReason,
        message: str,
        *,
        position: int | None = None,
    ) -> ClipboardParseError:
        """Build an error from a failure reason and message."""
        return cls(ParseErrorDetail(message=message, reason=reason, position=position))
