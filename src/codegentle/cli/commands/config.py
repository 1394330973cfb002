# codegentle:header:start
#
#   project      : CodeGentle
#   file         : config.py
#   file_relpath : src/codegentle/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle `config` command group.

- ``codegentle config defaults``: print the built-in defaults.
- ``codegentle config dump``: print the effective merged configuration.
- ``codegentle config init``: print a starter configuration file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codegentle.cli.config_resolver import resolve_config_from_click
from codegentle.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_format_options,
    common_language_options,
)
from codegentle.config import (
    MutableConfig,
    build_starter_config_toml,
    get_default_config_toml,
)
from codegentle.config.io import nest_under_tool, to_toml
from codegentle.config.logging import get_logger

if TYPE_CHECKING:
    from codegentle.cli.console import ClickConsole
    from codegentle.config import Language
    from codegentle.config.logging import CodegentleLogger

logger: CodegentleLogger = get_logger(__name__)

_PYPROJECT_HELP = "Nest the tables under [tool.codegentle] for use in pyproject.toml."


def _console() -> ClickConsole:
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    return ctx.obj["console"]


@click.group(
    name="config",
    help="Inspect and scaffold CodeGentle configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration subcommands; performs no action itself."""


@click.command(
    name="defaults",
    help="Print the built-in default configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--pyproject", is_flag=True, help=_PYPROJECT_HELP)
def config_defaults_command(*, pyproject: bool) -> None:
    console = _console()
    if pyproject:
        defaults = MutableConfig.from_defaults().freeze().to_toml_dict()
        console.print(to_toml(nest_under_tool(defaults)), nl=False)
    else:
        console.print(get_default_config_toml(), nl=False)


@click.command(
    name="dump",
    help=(
        "Print the effective configuration as TOML after merging defaults, "
        "discovered project files, --config files and command line overrides."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_format_options
@common_language_options
def config_dump_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent: str | None,
    column_limit: int | None,
    static_imports: tuple[str, ...],
    language: Language | None,
) -> None:
    """Print the merged configuration; contributing files are listed as comments."""
    console = _console()
    config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        indent=indent,
        column_limit=column_limit,
        static_imports=static_imports,
        language=language,
    )
    for path in config.config_files:
        console.print(f"# from {path}")
    console.print(config.to_toml(), nl=False)


@click.command(
    name="init",
    help="Print a starter configuration marked 'root = true'.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--pyproject", is_flag=True, help=_PYPROJECT_HELP)
def config_init_command(*, pyproject: bool) -> None:
    _console().print(build_starter_config_toml(pyproject=pyproject), nl=False)


config_command.add_command(config_defaults_command)
config_command.add_command(config_dump_command)
config_command.add_command(config_init_command)
