# codegentle:header:start
#
#   project      : CodeGentle
#   file         : io.py
#   file_relpath : src/codegentle/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""TOML I/O for the configuration layer.

Parsing and serialization use ``tomlkit``; parsed documents are handed around as
plain ``dict`` tables. The getters never raise: a value of the wrong shape is
logged as a warning and treated as absent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from codegentle.config.keys import Toml
from codegentle.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from codegentle.config.logging import CodegentleLogger

logger: CodegentleLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a new dict; performs no I/O."""
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_INDENT: "    ",
            Toml.KEY_COLUMN_LIMIT: 100,
        },
        Toml.SECTION_IMPORTS: {
            Toml.KEY_SKIP_JAVA_LANG: True,
            Toml.KEY_STATIC: [],
            Toml.KEY_ALWAYS_QUALIFY: [],
        },
        Toml.SECTION_RENDER: {
            Toml.KEY_LANGUAGE: "java",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a UTF-8 TOML file.

    Args:
        path (Path): E.g. ``codegentle.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed content; empty if the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data: Any = tomlkit.parse(text).unwrap()
        return cast("TomlTable", data) if isinstance(data, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def _strip_none(value: object) -> object:
    """Drop ``None`` values, which TOML cannot represent, from tables and arrays."""
    if isinstance(value, Mapping):
        table = cast("Mapping[object, object]", value)
        return {str(k): _strip_none(v) for k, v in table.items() if v is not None}
    if isinstance(value, (list, tuple)):
        items = cast("list[object]", list(value))
        return [_strip_none(v) for v in items if v is not None]
    return value


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a table to TOML text, omitting ``None`` values."""
    cleaned = cast("Mapping[str, Any]", _strip_none(toml_dict))
    return tomlkit.dumps(cleaned)


def nest_under_tool(toml_dict: TomlTable) -> TomlTable:
    """Return ``toml_dict`` nested as ``[tool.codegentle]`` for ``pyproject.toml``."""
    return {Toml.PYPROJECT_TOOL: {Toml.PYPROJECT_SECTION: toml_dict}}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``; empty (with a warning) if it is not a table."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected [%s] to be a table, got %s; ignoring it", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Expected %s to be a string, got %r; ignoring it", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str, *, minimum: int = 0) -> int | None:
    """Return an integer ``>= minimum``; booleans and other types are rejected."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected %s to be an integer, got %r; ignoring it", key, value)
        return None
    if value < minimum:
        logger.warning("Expected %s to be at least %d, got %d; ignoring it", key, minimum, value)
        return None
    return value


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected %s to be a boolean, got %r; ignoring it", key, value)
    return None


def get_string_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return a list of strings; non-string items are dropped with a warning."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning("Expected %s to be an array, got %r; ignoring it", key, value)
        return None
    items = cast("list[object]", value)
    result: list[str] = []
    for item in items:
        if isinstance(item, str):
            result.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in %s", item, key)
    return result


def warn_unknown_keys(toml_dict: TomlTable, source: str) -> None:
    """Log a warning for each section or key the schema does not know."""
    for key, value in toml_dict.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            logger.warning("Unknown key %r in %s", key, source)
            continue
        allowed = Toml.ALLOWED_SECTION_KEYS.get(key)
        if allowed is None or not isinstance(value, dict):
            continue
        for sub_key in cast("TomlTable", value):
            if sub_key not in allowed:
                logger.warning("Unknown key %r in [%s] of %s", sub_key, key, source)
