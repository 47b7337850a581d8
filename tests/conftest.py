"""Shared pytest fixtures for barcodectl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from barcodectl.config.models import SchemeConfig
from barcodectl.services.barcode import BarcodeService

# Far enough from the end of the default 2008..2033 window that
# services built with it emit no year warning.
QUIET_YEAR = 2020


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no BARCODECTL_* overrides.

    Keeps a developer's own barcodectl.toml or environment from leaking
    into config discovery.
    """
    for key in list(os.environ):
        if key.startswith("BARCODECTL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state changed by configure_logging (CLI invocations call it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("barcodectl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def service() -> BarcodeService:
    """BarcodeService on the default scheme with no year-window warning."""
    return BarcodeService(SchemeConfig(), reference_year=QUIET_YEAR)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a barcodectl.toml into the test directory and return its path."""

    def _write(body: str) -> Path:
        path = tmp_path / "barcodectl.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
