# codegentle:header:start
#
#   project      : CodeGentle
#   file         : keys.py
#   file_relpath : src/codegentle/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""TOML section and key names of the CodeGentle configuration.

The same schema is read from ``codegentle.toml`` and from ``[tool.codegentle]``
in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Section and key names, in the order of the default configuration."""

    KEY_ROOT: Final[str] = "root"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_INDENT: Final[str] = "indent"
    KEY_COLUMN_LIMIT: Final[str] = "column_limit"

    # [imports]
    SECTION_IMPORTS: Final[str] = "imports"

    KEY_SKIP_JAVA_LANG: Final[str] = "skip_java_lang"
    KEY_STATIC: Final[str] = "static"
    KEY_ALWAYS_QUALIFY: Final[str] = "always_qualify"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_LANGUAGE: Final[str] = "language"

    # pyproject.toml nesting
    PYPROJECT_TOOL: Final[str] = "tool"
    PYPROJECT_SECTION: Final[str] = "codegentle"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, SECTION_FORMAT, SECTION_IMPORTS, SECTION_RENDER}
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMAT: frozenset({KEY_INDENT, KEY_COLUMN_LIMIT}),
        SECTION_IMPORTS: frozenset({KEY_SKIP_JAVA_LANG, KEY_STATIC, KEY_ALWAYS_QUALIFY}),
        SECTION_RENDER: frozenset({KEY_LANGUAGE}),
    }
