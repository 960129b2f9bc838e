"""Structured logging setup (structlog)."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import structlog

from healthfood.config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog for the parser.

    Args:
        level: Log level name, defaults to LOG_LEVEL
        fmt: "console" or "json", defaults to LOG_FORMAT

    Example:
        >>> configure_logging(level="DEBUG", fmt="json")
    """
    level_name = (level or get_log_level()).upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    renderer: Any
    if (fmt or get_log_format()) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        cache_logger_on_first_use=False,
    )
