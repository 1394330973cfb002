# codegentle:header:start
#
#   project      : CodeGentle
#   file         : config_resolver.py
#   file_relpath : src/codegentle/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Resolve a [`Config`][codegentle.config.Config] from Click parameters.

Resolution order (lowest to highest precedence):

1. runtime defaults;
2. discovered project configs (root-most to the anchor directory), unless
   ``--no-config`` is set; ``pyproject.toml`` before ``codegentle.toml`` in each
   directory, and ``root = true`` stops the walk;
3. explicit ``--config`` files, in order;
4. command line overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from codegentle.cli.errors import CodegentleConfigError
from codegentle.config import MutableConfig
from codegentle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codegentle.config import Config, Language
    from codegentle.config.logging import CodegentleLogger

logger: CodegentleLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    anchor: Path | None = None,
    indent: str | None = None,
    column_limit: int | None = None,
    static_imports: Sequence[str] = (),
    language: Language | None = None,
) -> Config:
    """Build the effective configuration of one command invocation.

    Args:
        no_config (bool): Skip discovery of project config files.
        config_paths (Sequence[str]): Explicit config files, merged in order.
        anchor (Path | None): Directory discovery starts from; the working directory if None.
        indent (str | None): ``--indent`` override.
        column_limit (int | None): ``--column-limit`` override.
        static_imports (Sequence[str]): ``--static-import`` entries, added to configured ones.
        language (Language | None): ``--language`` override.

    Returns:
        Config: The frozen configuration.

    Raises:
        CodegentleConfigError: If an explicit config file cannot be found.
    """
    try:
        draft = MutableConfig.load_merged(
            anchor=anchor or Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except FileNotFoundError as exc:
        raise CodegentleConfigError(str(exc)) from exc

    draft.apply_overrides(
        indent=indent,
        column_limit=column_limit,
        static_imports=list(static_imports),
        language=language,
    )
    config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
