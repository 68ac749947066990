"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_map_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("mapweaver_map_id", default="-")
_mode_var: contextvars.ContextVar[str] = contextvars.ContextVar("mapweaver_mode", default="-")


class _ContextFilter(logging.Filter):
    """Inject map context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.map_id = _map_id_var.get()  # type: ignore[attr-defined]
        record.mode = _mode_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def map_context(*, map_id: str, mode: str | None = None) -> Any:
    """Temporarily bind map context for structured logging.

    Args:
        map_id: Identifier of the map being processed (usually the root id).
        mode: Optional layout mode name.
    """

    token_map = _map_id_var.set(map_id)
    token_mode = _mode_var.set(mode or _mode_var.get())
    try:
        yield
    finally:
        _map_id_var.reset(token_map)
        _mode_var.reset(token_mode)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    # stderr keeps stdout free for command output
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.addFilter(_ContextFilter())

    # RichHandler already renders time and level
    formatter = logging.Formatter(fmt="map=%(map_id)s mode=%(mode)s %(name)s: %(message)s")
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)
