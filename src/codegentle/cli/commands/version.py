# codegentle:header:start
#
#   project      : CodeGentle
#   file         : version.py
#   file_relpath : src/codegentle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codegentle.cli.options import CONTEXT_SETTINGS
from codegentle.constants import CODEGENTLE_VERSION

if TYPE_CHECKING:
    from codegentle.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the installed version of CodeGentle.",
    context_settings=CONTEXT_SETTINGS,
)
def version_command() -> None:
    """Print the version of CodeGentle installed in the active environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(console.styled(CODEGENTLE_VERSION, bold=True))
