"""Shared pytest fixtures for plident tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PLIDENT_* variables from the outer shell out of every test."""
    for key in list(os.environ):
        if key.startswith("PLIDENT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handlers and levels installed by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    plident = logging.getLogger("plident")
    plident_level = plident.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    plident.setLevel(plident_level)
