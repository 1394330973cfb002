# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : src/codegentle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Formatting configuration for CodeGentle.

A [`MutableConfig`][codegentle.config.MutableConfig] draft is assembled from layers,
lowest precedence first:

1. runtime defaults ([`load_defaults_dict`][codegentle.config.io.load_defaults_dict]);
2. project files discovered upward from an anchor directory (``pyproject.toml``
   with ``[tool.codegentle]`` and ``codegentle.toml``, root-most first);
3. explicitly given config files;
4. command line overrides.

[`MutableConfig.freeze`][codegentle.config.MutableConfig.freeze] turns the draft
into an immutable [`Config`][codegentle.config.Config] snapshot.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from codegentle.config.io import (
    TomlTable,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    nest_under_tool,
    to_toml,
    warn_unknown_keys,
)
from codegentle.config.keys import Toml
from codegentle.config.logging import get_logger
from codegentle.writer.strategy import DEFAULT_JAVA_STRATEGY, DEFAULT_KOTLIN_STRATEGY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegentle.config.logging import CodegentleLogger
    from codegentle.writer.strategy import Strategy

logger: CodegentleLogger = get_logger(__name__)

CONFIG_FILE_NAME: str = "codegentle.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"


class Language(str, Enum):
    """Target language of the emitted source."""

    JAVA = "java"
    KOTLIN = "kotlin"

    @classmethod
    def from_name(cls, key_name: str | None) -> Language | None:
        """Find a language by its case-insensitive name, or None if unmatched."""
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper())


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable formatting configuration.

    Attributes:
        indent (str): Indentation unit.
        column_limit (int): Soft-break line width.
        skip_java_lang_imports (bool): Leave out import lines for implicitly visible types.
        static_imports (tuple[str, ...]): ``Type.member`` or ``Type.*`` entries, in order.
        always_qualify (frozenset[str]): Simple names that are never imported.
        language (Language): Target language.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    indent: str
    column_limit: int
    skip_java_lang_imports: bool
    static_imports: tuple[str, ...]
    always_qualify: frozenset[str]
    language: Language
    config_files: tuple[Path, ...] = ()

    def strategy(self) -> Strategy:
        """Return the write strategy of the configured language."""
        if self.language is Language.KOTLIN:
            return DEFAULT_KOTLIN_STRATEGY
        return DEFAULT_JAVA_STRATEGY

    def to_toml_dict(self) -> TomlTable:
        """Return this config in the TOML schema it is read from."""
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_COLUMN_LIMIT: self.column_limit,
            },
            Toml.SECTION_IMPORTS: {
                Toml.KEY_SKIP_JAVA_LANG: self.skip_java_lang_imports,
                Toml.KEY_STATIC: list(self.static_imports),
                Toml.KEY_ALWAYS_QUALIFY: sorted(self.always_qualify),
            },
            Toml.SECTION_RENDER: {
                Toml.KEY_LANGUAGE: self.language.value,
            },
        }

    def to_toml(self) -> str:
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable draft initialized from this snapshot."""
        return MutableConfig(
            indent=self.indent,
            column_limit=self.column_limit,
            skip_java_lang_imports=self.skip_java_lang_imports,
            static_imports=list(self.static_imports),
            always_qualify=set(self.always_qualify),
            language=self.language,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration draft; ``None`` means "inherit from a lower layer"."""

    indent: str | None = None
    column_limit: int | None = None
    skip_java_lang_imports: bool | None = None
    static_imports: list[str] = field(default_factory=list)
    always_qualify: set[str] = field(default_factory=set)
    language: Language | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Return an immutable snapshot; unset values take the runtime defaults."""
        defaults = MutableConfig.from_toml_dict(load_defaults_dict())
        return Config(
            indent=self.indent if self.indent is not None else defaults.indent or "    ",
            column_limit=(
                self.column_limit if self.column_limit is not None else defaults.column_limit or 100
            ),
            skip_java_lang_imports=(
                self.skip_java_lang_imports
                if self.skip_java_lang_imports is not None
                else bool(defaults.skip_java_lang_imports)
            ),
            static_imports=tuple(dict.fromkeys(self.static_imports)),
            always_qualify=frozenset(self.always_qualify),
            language=self.language or defaults.language or Language.JAVA,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, toml_dict: TomlTable, *, source: str = "<defaults>") -> MutableConfig:
        """Parse a table in the ``codegentle.toml`` schema; bad values are logged and ignored.

        Args:
            toml_dict (TomlTable): Parsed TOML.
            source (str): Name of the origin, used in log messages.

        Returns:
            MutableConfig: The draft; keys that are missing or invalid stay unset.
        """
        warn_unknown_keys(toml_dict, source)
        format_table = get_table_value(toml_dict, Toml.SECTION_FORMAT)
        imports_table = get_table_value(toml_dict, Toml.SECTION_IMPORTS)
        render_table = get_table_value(toml_dict, Toml.SECTION_RENDER)

        draft = cls(
            indent=get_string_value_or_none(format_table, Toml.KEY_INDENT),
            column_limit=get_int_value_or_none(format_table, Toml.KEY_COLUMN_LIMIT),
            skip_java_lang_imports=get_bool_value_or_none(
                imports_table, Toml.KEY_SKIP_JAVA_LANG
            ),
            static_imports=get_string_list_or_none(imports_table, Toml.KEY_STATIC) or [],
            always_qualify=set(
                get_string_list_or_none(imports_table, Toml.KEY_ALWAYS_QUALIFY) or []
            ),
        )

        language_name = get_string_value_or_none(render_table, Toml.KEY_LANGUAGE)
        if language_name is not None:
            draft.language = Language.from_name(language_name)
            if draft.language is None:
                logger.warning("Unknown language %r in %s; ignoring it", language_name, source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load one config file; ``pyproject.toml`` is read from ``[tool.codegentle]``.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` has no
                ``[tool.codegentle]`` table.
        """
        logger.debug("Loading config from %s", path)
        toml_dict = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            tool = get_table_value(toml_dict, Toml.PYPROJECT_TOOL)
            toml_dict = get_table_value(tool, Toml.PYPROJECT_SECTION)
            if not toml_dict:
                logger.debug("No [tool.codegentle] table in %s", path)
                return None
        draft = cls.from_toml_dict(toml_dict, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``, root-most first.

        Within one directory ``pyproject.toml`` comes before ``codegentle.toml`` so the
        latter wins on merge. A file with ``root = true`` stops the walk after its
        directory.
        """
        found: list[list[Path]] = []
        current = start.resolve()
        if current.is_file():
            current = current.parent

        while True:
            in_directory: list[Path] = []
            stop_here = False
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                path = current / name
                if not path.is_file():
                    continue
                data = load_toml_dict(path)
                if name == PYPROJECT_FILE_NAME:
                    tool = get_table_value(data, Toml.PYPROJECT_TOOL)
                    data = get_table_value(tool, Toml.PYPROJECT_SECTION)
                    if not data:
                        continue
                in_directory.append(path)
                logger.debug("Discovered config file %s", path)
                if data.get(Toml.KEY_ROOT) is True:
                    stop_here = True
            if in_directory:
                found.append(in_directory)
            if stop_here or current.parent == current:
                break
            current = current.parent

        return [path for directory in reversed(found) for path in directory]

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path | str] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered project files and explicit files, in that order.

        Raises:
            FileNotFoundError: If an explicit config file does not exist.
        """
        draft = cls.from_defaults()
        if not no_config:
            for path in cls.discover_local_config_files(anchor or Path.cwd()):
                layer = cls.from_toml_file(path)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for entry in extra_config_files:
            path = Path(entry)
            if not path.is_file():
                raise FileNotFoundError(f"Config file not found: {path}")
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft in which values set in ``other`` override this draft."""
        return MutableConfig(
            indent=other.indent if other.indent is not None else self.indent,
            column_limit=(
                other.column_limit if other.column_limit is not None else self.column_limit
            ),
            skip_java_lang_imports=(
                other.skip_java_lang_imports
                if other.skip_java_lang_imports is not None
                else self.skip_java_lang_imports
            ),
            static_imports=other.static_imports or self.static_imports,
            always_qualify=other.always_qualify or self.always_qualify,
            language=other.language if other.language is not None else self.language,
            config_files=self.config_files + other.config_files,
        )

    def apply_overrides(self, **overrides: Any) -> MutableConfig:
        """Apply command line style overrides; ``None`` and empty values are skipped.

        List-valued settings (``static_imports``, ``always_qualify``) are extended.
        """
        for name, value in overrides.items():
            if value is None or value == () or value == []:
                continue
            if name == "static_imports":
                self.static_imports.extend(value)
            elif name == "always_qualify":
                self.always_qualify.update(value)
            elif name == "language":
                self.language = value if isinstance(value, Language) else Language(value)
            elif name in ("indent", "column_limit", "skip_java_lang_imports"):
                setattr(self, name, value)
            else:
                raise ValueError(f"Unknown config override: {name}")
        return self


@functools.cache
def get_default_config_toml() -> str:
    """Return the runtime defaults rendered as ``codegentle.toml`` text."""
    return MutableConfig.from_defaults().freeze().to_toml()


def build_starter_config_toml(*, pyproject: bool = False) -> str:
    """Return a starter config marked ``root = true``.

    Args:
        pyproject (bool): Nest the tables under ``[tool.codegentle]`` for ``pyproject.toml``.
    """
    table: TomlTable = {Toml.KEY_ROOT: True}
    table.update(MutableConfig.from_defaults().freeze().to_toml_dict())
    if pyproject:
        table = nest_under_tool(table)
    return to_toml(table)
