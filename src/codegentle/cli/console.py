# codegentle:header:start
#
#   project      : CodeGentle
#   file         : console.py
#   file_relpath : src/codegentle/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Console abstraction for user-facing program output.

Generated source and command results go through a
[`ClickConsole`][codegentle.cli.console.ClickConsole]; diagnostics go through
``logging`` (see [`codegentle.config.logging`][codegentle.config.logging]).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, emit ANSI styling.
        out (TextIO | None): Standard output stream; ``sys.stdout`` if None.
        err (TextIO | None): Error stream; ``sys.stderr`` if None.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style``, or unchanged if color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
