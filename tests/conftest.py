"""Shared fixtures for settings store tests."""

from __future__ import annotations

import json

from loguru import logger
import pytest

from infrastructure.settings import SettingsStore


@pytest.fixture(autouse=True)
def _silence_loguru():
    """Keep loguru's default stderr sink out of test output."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def settings_dir(tmp_path):
    return tmp_path / "settings"


@pytest.fixture
def store(settings_dir):
    return SettingsStore(dir=settings_dir)


@pytest.fixture
def read_json():
    """Return a helper parsing the JSON file at a path."""

    def _read(path):
        return json.loads(path.read_text(encoding="utf-8"))

    return _read
