"""Tests for the doxywiki logging helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from doxywiki.logging import configure_logging, get_logger


def test_get_logger_is_namespaced() -> None:
    """Module loggers live under the ``doxywiki`` hierarchy."""
    assert get_logger("naming").name == "doxywiki.naming"
    assert get_logger().name == "doxywiki"


def test_reconfiguring_closes_previous_file_handler(tmp_path: Path) -> None:
    """Repeated configuration replaces handlers and releases the old log file."""
    logger = configure_logging(log_file=tmp_path / "first.log")
    first = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

    configure_logging(log_file=tmp_path / "second.log")

    assert first not in logger.handlers
    assert first.stream is None
    assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1

    configure_logging()
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
