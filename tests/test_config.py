from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
import pytest

from sheetedit import config as config_module
from sheetedit.config import EditingConfig, configure_logging


def test_editing_config_defaults() -> None:
    config = EditingConfig()
    assert config.max_history_size == 100
    assert config.enable_clipboard is True
    assert config.enable_fill_handle is True
    assert config.enable_multi_select is True
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_editing_config_rejects_non_positive_history() -> None:
    with pytest.raises(ValidationError):
        EditingConfig(max_history_size=0)


def test_editing_config_normalizes_log_level() -> None:
    assert EditingConfig(log_level=" debug ").log_level == "DEBUG"
    with pytest.raises(ValidationError, match="Unknown log level"):
        EditingConfig(log_level="LOUD")


def test_configure_logging_adds_file_handler(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify configure_logging wires level, format and optional file handler.

    Args:
        tmp_path: Temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.
    """
    captured: dict[str, object] = {}

    def _fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(config_module.logging, "basicConfig", _fake_basic_config)
    configure_logging(EditingConfig(log_level="info", log_file=tmp_path / "edit.log"))
    handlers = captured["handlers"]
    assert isinstance(handlers, list)
    assert captured["level"] == "INFO"
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    for handler in handlers:
        handler.close()
