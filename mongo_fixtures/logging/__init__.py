"""Logging for mongo_fixtures.

Components never import structlog directly; they receive a LoggerProtocol
through their constructor (or function arguments) so the engine can hand out
a muted logger when the caller asks for silence.

Usage:
    from mongo_fixtures.logging import configure_logging, create_logger

    # At application startup (once)
    configure_logging(level="INFO", json_output=False)

    # Create logger for injection
    logger = create_logger("fixtures", directory="tests/fixtures")
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

from mongo_fixtures.protocols import LoggerProtocol

# Module state
_CONFIGURED = False

_current_logger: ContextVar[Optional[LoggerProtocol]] = ContextVar(
    "current_logger",
    default=None
)


class Logger:
    """LoggerProtocol implementation backed by structlog."""

    def __init__(
        self,
        base_logger: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize logger.

        Args:
            base_logger: Underlying structlog logger (created if None)
            context: Bound context fields
        """
        self._logger = base_logger or structlog.get_logger()
        self._context = context or {}

        if self._context:
            self._logger = self._logger.bind(**self._context)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(msg, **kwargs)

    def exception(self, msg: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self._logger.exception(msg, **kwargs)

    def bind(self, **kwargs: Any) -> "Logger":
        """Create child logger with additional context."""
        return Logger(
            base_logger=structlog.get_logger(),
            context={**self._context, **kwargs},
        )


class NullLogger:
    """LoggerProtocol implementation that drops everything.

    Handed out when an engine is constructed with mute=True.
    """

    def debug(self, msg: str, **kwargs: Any) -> None:
        pass

    def info(self, msg: str, **kwargs: Any) -> None:
        pass

    def warning(self, msg: str, **kwargs: Any) -> None:
        pass

    def error(self, msg: str, **kwargs: Any) -> None:
        pass

    def exception(self, msg: str, **kwargs: Any) -> None:
        pass

    def bind(self, **kwargs: Any) -> "NullLogger":
        return self


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Configure stdlib logging and structlog.

    This should be called ONCE, by the application or the CLI. Library code
    never calls it.

    Args:
        level: Default log level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, output JSON; if False, console format
    """
    global _CONFIGURED

    if _CONFIGURED:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stdout,
    )

    # The driver logs every heartbeat at DEBUG
    for noisy in ["pymongo", "motor"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def create_logger(
    component: str,
    *,
    mute: bool = False,
    **context: Any,
) -> LoggerProtocol:
    """Create a logger for dependency injection.

    Args:
        component: Component name (e.g., "fixtures", "cli")
        mute: If True, return a logger that drops every message
        **context: Additional context to bind

    Returns:
        LoggerProtocol implementation
    """
    if mute:
        return NullLogger()
    return Logger(context={"component": component, **context})


def get_current_logger() -> LoggerProtocol:
    """Get the context logger, or a default one."""
    logger = _current_logger.get()
    if logger is None:
        return Logger()
    return logger


def set_current_logger(logger: LoggerProtocol) -> None:
    """Set the context logger."""
    _current_logger.set(logger)


def get_component_logger(
    component: str,
    logger: Optional[LoggerProtocol] = None,
) -> LoggerProtocol:
    """Get a logger bound to a component name.

    Args:
        component: Component name (e.g., "loader", "scripts")
        logger: Optional injected logger. If None, uses context logger.

    Returns:
        LoggerProtocol bound to the component name
    """
    base_logger = logger or get_current_logger()
    return base_logger.bind(component=component)


__all__ = [
    # Configuration
    "configure_logging",
    # Logger creation
    "create_logger",
    "get_component_logger",
    # Types
    "Logger",
    "NullLogger",
    # Context
    "get_current_logger",
    "set_current_logger",
]
