"""Tests for logging utilities."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from mapweaver.logging import _ContextFilter, configure_logging, map_context


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_leaves_time_and_level_to_rich(root_logger: logging.Logger) -> None:
    """The message format only carries map context; RichHandler draws time and level."""

    configure_logging("DEBUG")
    configure_logging("DEBUG")

    rich_handlers = [h for h in root_logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    fmt = rich_handlers[0].formatter._fmt  # type: ignore[union-attr]
    assert "asctime" not in fmt
    assert "levelname" not in fmt
    assert "%(map_id)s" in fmt
    assert root_logger.level == logging.DEBUG


def test_map_context_stamps_records() -> None:
    record = logging.LogRecord("mapweaver", logging.INFO, __file__, 1, "msg", None, None)
    with map_context(map_id="n_0", mode="radial"):
        _ContextFilter().filter(record)
    assert (record.map_id, record.mode) == ("n_0", "radial")  # type: ignore[attr-defined]

    _ContextFilter().filter(record)
    assert (record.map_id, record.mode) == ("-", "-")  # type: ignore[attr-defined]
