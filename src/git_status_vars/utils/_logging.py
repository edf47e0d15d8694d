"""Logging utilities for git-status-vars.

This module provides a standalone structlog logger factory that writes
text-formatted or JSON-formatted logs to stderr. Loggers are self-contained
and do not modify global structlog configuration. Standard output is
reserved for shell variables, so nothing here ever writes to it.
"""

import logging
import sys
from os import getenv
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "GIT_STATUS_VARS_DEBUG"


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, GIT_STATUS_VARS_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer, WARNING for unknown names.
    """
    if respect_env and getenv(DEBUG_ENV_VAR, None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def _create_logger(
    file: TextIO,
    *,
    log_level: int,
    log_format: LogFormatType = "text",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger writing to ``file``.

    Args:
        file: Stream log lines are written to.
        log_level: Minimum level that is emitted.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=file)(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    verbose: bool = False,
    file: TextIO | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the logger used by the command line tool.

    The log level is determined by (in order of precedence):
    1. ``verbose`` or the GIT_STATUS_VARS_DEBUG environment variable: DEBUG
    2. The ``level`` parameter

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        verbose: Force debug logging (the ``--verbose`` flag).
        file: Stream to log to. Defaults to stderr.

    Returns:
        A FilteringBoundLogger instance.
    """
    effective_level = (
        logging.DEBUG if verbose else _log_level_from_string(level, respect_env=True)
    )
    return _create_logger(
        file if file is not None else sys.stderr,
        log_level=effective_level,
        log_format=log_format,
    )
