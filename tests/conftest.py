"""Pytest fixtures for latinize tests."""

import logging
import tempfile
from pathlib import Path

import pytest

from latinize.mapping import default_table


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def table():
    """Fresh default mapping table."""
    return default_table()


@pytest.fixture
def sample_lrc_lines():
    """Sample lyric file lines with metadata tags."""
    return [
        "[ar:Кино]",
        "[ti:Группа крови]",
        "[00:12.50]Тёплое место, но улицы ждут",
        "",
        "[00:18.20]Отпечатков наших ног",
    ]


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("latinize_test")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture(autouse=True)
def _no_settings_env(monkeypatch):
    """Keep a developer's LATINIZE_SETTINGS from leaking into tests."""
    monkeypatch.delenv("LATINIZE_SETTINGS", raising=False)


@pytest.fixture(autouse=True)
def _restore_loggers():
    """Restore handlers and levels replaced by setup_logging."""
    loggers = [logging.getLogger(), logging.getLogger("latinize")]
    saved = [(logger.handlers[:], logger.level) for logger in loggers]
    yield
    for logger, (handlers, level) in zip(loggers, saved):
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)
