# tests/conftest.py

"""Shared pytest fixtures for coinprice tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from coinprice.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logging(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Send run logs to a temp dir and drop handlers between tests."""
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    root_logger = logging.getLogger("coinprice")
    yield
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
