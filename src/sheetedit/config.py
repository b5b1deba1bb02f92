from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .history.log import DEFAULT_CAPACITY

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class EditingConfig(BaseModel):
    """Options for an editing session."""

    max_history_size: int = Field(
        default=DEFAULT_CAPACITY, ge=1, description="Undo steps kept before eviction."
    )
    enable_clipboard: bool = Field(
        default=True, description="Publish copy/cut encodings to the clipboard backend."
    )
    enable_fill_handle: bool = Field(default=True, description="Allow fill operations.")
    enable_multi_select: bool = Field(
        default=True, description="Allow selections spanning more than one cell."
    )
    log_level: str = Field(default="WARNING", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return normalized


def configure_logging(config: EditingConfig) -> None:
    """Configure logging for a host process embedding the editor.

    Args:
        config: Editing configuration carrying the log level and file.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level,
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
