# codegentle:header:start
#
#   project      : CodeGentle
#   file         : errors.py
#   file_relpath : src/codegentle/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Exceptions for the CodeGentle CLI.

Raise these from commands to end the run with a standardized message and exit
code. When the Click context carries a project console the message is printed
through it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from codegentle.cli.exit_codes import ExitCode


class CodegentleError(click.ClickException):
    """Base class for all CodeGentle CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; color is applied in ``show()``."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if one is available."""
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class CodegentleUsageError(CodegentleError):
    """Invalid arguments, such as a malformed type expression or name."""

    exit_code = ExitCode.USAGE_ERROR


class CodegentleConfigError(CodegentleError):
    """Missing, unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class CodegentleIOError(CodegentleError):
    """A generated file could not be written."""

    exit_code = ExitCode.IO_ERROR


class CodegentleUnexpectedError(CodegentleError):
    """Unhandled error (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
