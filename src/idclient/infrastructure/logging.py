"""Structlog configuration for id client consumers.

Renders coloured console output when attached to a terminal and JSON lines
otherwise. Identifier derivation events are logged at debug level, so the
default info threshold keeps per-identifier noise out of production logs.
"""

import logging
import os
import sys
from typing import TextIO

import structlog


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: int | str = "info",
    *,
    colors: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for identifier events.

    Args:
        level: Minimum level name or number (e.g. "debug", logging.INFO)
        colors: Force console (True) or JSON (False) rendering. By default
            console rendering is used when FORCE_COLOR is set or the
            output stream is a TTY.
        stream: Where to write log lines (default: stdout)

    Raises:
        ValueError: If level is not a known level name
    """
    if colors is None:
        force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
        colors = force_color or (stream or sys.stdout).isatty()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if colors:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
