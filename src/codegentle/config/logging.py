# codegentle:header:start
#
#   project      : CodeGentle
#   file         : logging.py
#   file_relpath : src/codegentle/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle logging with a TRACE level below DEBUG.

Modules obtain their logger with
[`get_logger`][codegentle.config.logging.get_logger] and may call ``logger.trace``
for per-name detail (import registrations, static-import elisions). Records are
colored by severity with ``yachalk`` and go to ``stderr`` so that generated
source written to ``stdout`` stays clean.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "CODEGENTLE_LOG_LEVEL"


class CodegentleLogger(logging.Logger):
    """Logger with an additional ``trace`` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(CodegentleLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = record.levelno
        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim(message)


def parse_log_level(value: str) -> int | None:
    """Return the level for a name such as ``"trace"`` or a number such as ``"10"``.

    Returns:
        int | None: The level, or None if ``value`` names no level.
    """
    normalized = value.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    return _LEVEL_NAMES.get(normalized)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CODEGENTLE_LOG_LEVEL``, or None if unset or unknown."""
    value = os.environ.get(ENV_LOG_LEVEL)
    if not value:
        return None
    return parse_log_level(value)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a colored ``stderr`` handler.

    If ``level`` is None the environment is consulted via
    [`resolve_env_log_level`][codegentle.config.logging.resolve_env_log_level];
    the fallback is CRITICAL, which keeps the library quiet.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace earlier handlers so repeated calls do not duplicate records.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> CodegentleLogger:
    """Return the [`CodegentleLogger`][codegentle.config.logging.CodegentleLogger] for ``name``."""
    return cast("CodegentleLogger", logging.getLogger(name))
