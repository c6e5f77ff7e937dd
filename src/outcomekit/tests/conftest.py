"""Shared fixtures: isolated settings and silent logging per test."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from outcomekit.foundation.config import clear_settings_cache
from outcomekit.observability import configure_logging


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> object:
    """Reload settings from a clean environment before and after each test."""
    monkeypatch.chdir(tmp_path)  # no stray .env file
    for key in [k for k in os.environ if k.startswith("OUTCOMEKIT_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging(format="none", level="DEBUG")
    yield
    clear_settings_cache()
