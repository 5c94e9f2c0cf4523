"""Structured logging configuration for pueue-dash.

This module provides structlog-based logging with:
- Pretty console output by default
- JSON output when requested
- Optional log file, since stderr is unusable while the TUI owns the screen

Usage:
    from pueue_dash.logging import get_logger, configure_logging

    configure_logging(level=logging.INFO)

    log = get_logger(__name__)
    log.info("refresh_started", extra_args="--group ci")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "shared_processors",
]

# Default log level
DEFAULT_LOG_LEVEL = logging.WARNING


def shared_processors() -> list[Processor]:
    """Get processors shared between stdlib and structlog.

    Returns:
        List of common processors for log processing.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_console_processors() -> list[Processor]:
    return [
        *shared_processors(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_json_processors() -> list[Processor]:
    return [
        *shared_processors(),
        structlog.processors.dict_tracebacks,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def build_formatter(*, use_json: bool, colors: bool) -> logging.Formatter:
    """Build the stdlib formatter that renders structlog events.

    Args:
        use_json: Render events as JSON lines.
        colors: Use ANSI colors in console output.

    Returns:
        A ProcessorFormatter suitable for any stdlib handler.
    """
    renderer: Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors(),
    )


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
    log_file: Path | None = None,
) -> None:
    """Configure structlog for the application.

    Subsequent calls reconfigure logging.

    Args:
        force_json: Render JSON lines instead of console output.
        level: Log level. Defaults to WARNING.
        log_file: Write to this file instead of stderr.

    Example:
        configure_logging(level=logging.DEBUG, log_file=Path("dash.log"))
    """
    log_level = level if level is not None else DEFAULT_LOG_LEVEL

    structlog.configure(
        processors=_get_json_processors() if force_json else _get_console_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        colors = False
    else:
        handler = logging.StreamHandler(sys.stderr)
        colors = True
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(use_json=force_json, colors=colors))
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A bound structlog logger.

    Example:
        log = get_logger(__name__)
        log.info("refresh_finished", lines=12)
    """
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Bind context variables that will be included in all log messages.

    Args:
        **context: Key-value pairs to bind to log context.

    Example:
        bind_context(status_command="pueue")
        log.info("event")  # Includes status_command
    """
    structlog.contextvars.bind_contextvars(**context)
