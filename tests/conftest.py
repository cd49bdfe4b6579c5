"""Pytest configuration and fixtures."""

import json
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import Mock

import pytest

from embed_youtube.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate settings from the developer's environment for all tests.

    Runs each test from an empty temporary directory, points the log
    directory into it, and clears the cached settings before and after.
    """
    for key in list(os.environ):
        if key.startswith("EMBED_YOUTUBE_"):
            monkeypatch.delenv(key)

    log_dir = tmp_path / "logs"
    monkeypatch.setenv("EMBED_YOUTUBE_LOG_DIR", str(log_dir))
    monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying the WidgetLogger protocol."""
    return Mock(spec=["warning", "error"])


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a widget config JSON file and return its path.

    Usage:
        def test_something(write_config):
            path = write_config({"video_id": "abc123"})
    """

    def _write(options: object, name: str = "widget.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(options), encoding="utf-8")
        return path

    return _write
