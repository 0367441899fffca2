"""Structured logging configuration for mylib.

Library functions (calculator, domain, contracts) do not log. Entry points
such as the demo program call ``configure_logging`` once and then obtain
loggers with ``get_logger``. Events use dotted names (``demo.division``)
with key/value context.

Output goes to stderr so that program output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def configure_logging(
    level: str = "WARNING",
    json_format: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for the process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON lines, False for console rendering
        add_timestamp: Include ISO timestamp in events

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger, bound to ``name`` when given.

    The returned proxy resolves configuration lazily, so module-level
    loggers pick up a later ``configure_logging`` call.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def ensure_logging_configured(level: str = "WARNING") -> None:
    """Apply ``configure_logging(level)`` unless structlog is already configured.

    Without it structlog's defaults print every level to stdout.
    """
    if not structlog.is_configured():
        configure_logging(level=level)
