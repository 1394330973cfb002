# codegentle:header:start
#
#   project      : CodeGentle
#   file         : options.py
#   file_relpath : src/codegentle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Shared Click options and helpers for CodeGentle commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from codegentle.cli.cli_types import EnumChoiceParam
from codegentle.config import Language
from codegentle.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_log_level(verbose: int) -> int | None:
    """Map the count of ``-v`` flags to a log level; None keeps the default.

    ``-v`` is INFO, ``-vv`` DEBUG and ``-vvv`` (or more) TRACE.
    """
    if verbose <= 0:
        return None
    if verbose == 1:
        return logging.INFO
    if verbose == 2:
        return logging.DEBUG
    return TRACE_LEVEL


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` (counted) to a command."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Log more detail to stderr (-v info, -vv debug, -vvv trace).",
    )(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable ANSI styling of program output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config/-c`` to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the formatting overrides shared by the emitting commands."""
    f = click.option(
        "--indent",
        "indent",
        type=str,
        default=None,
        help="Indentation unit (default: four spaces).",
    )(f)
    f = click.option(
        "--column-limit",
        "column_limit",
        type=click.IntRange(min=0),
        default=None,
        help="Line width for soft breaks.",
    )(f)
    f = click.option(
        "--static-import",
        "static_imports",
        multiple=True,
        metavar="TYPE.MEMBER",
        help="Static import, e.g. java.util.Collections.emptyList or java.util.Collections.*.",
    )(f)
    return f


def common_language_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--language`` to a command."""
    return click.option(
        "--language",
        "language",
        type=EnumChoiceParam(Language),
        default=None,
        help=f"Target language ({', '.join(v.value for v in Language)}).",
    )(f)
