# codegentle:header:start
#
#   project      : CodeGentle
#   file         : main.py
#   file_relpath : src/codegentle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""The ``codegentle`` command line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the [`ClickConsole`][codegentle.cli.console.ClickConsole] for program output;
- ``log_level``: the level logging was configured with.

Subcommands read them from the context.
"""

from __future__ import annotations

import click

from codegentle.cli.commands.config import config_command
from codegentle.cli.commands.new_class import new_class_command
from codegentle.cli.commands.render import render_command
from codegentle.cli.commands.version import version_command
from codegentle.cli.console import ClickConsole
from codegentle.cli.options import common_color_options, common_verbose_options, resolve_log_level
from codegentle.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, no_color: bool) -> None:
    """Configure logging and the console once for all subcommands.

    ``CODEGENTLE_LOG_LEVEL`` takes precedence over ``-v``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    log_level = resolve_env_log_level()
    if log_level is None:
        log_level = resolve_log_level(verbose)
    setup_logging(level=log_level)
    ctx.obj["log_level"] = log_level

    console = ClickConsole(enable_color=not no_color and click.get_text_stream("stdout").isatty())
    ctx.obj["console"] = console
    ctx.color = console.enable_color


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,  # Always invoke the cli() function
    help="CodeGentle: generate Java source code with minimal qualification.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_color: bool) -> None:
    """Entry point for the CodeGentle CLI."""
    init_common_state(ctx, verbose=verbose, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'codegentle render EXPR...' to render type expressions.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(render_command)

cli.add_command(new_class_command)

if __name__ == "__main__":
    cli()
