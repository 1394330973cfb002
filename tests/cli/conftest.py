# codegentle:header:start
#
#   project      : CodeGentle
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CLI test helpers.

Tests that touch the filesystem request the ``isolation`` fixture first, so the
command runs in a temporary project directory whose ``codegentle.toml`` stops
config discovery.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from codegentle.cli.exit_codes import ExitCode
from codegentle.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the handler swap `setup_logging` performs inside each CLI invocation.

    The CLI handler writes to the runner's captured ``stderr``, which is gone
    once the invocation returns.
    """
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = root_logger.handlers[:]
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    ``--no-color`` is always passed so assertions can match plain text.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector after the group
            options, e.g. ``["render", "java.util.List"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["render", "java.util.List<java.lang.String>"])
        assert_SUCCESS(result)
        ```
    """
    if argv is None:
        args: list[str] = []
    elif isinstance(argv, str):
        args = [argv]
    else:
        args = list(argv)
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *args], input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
