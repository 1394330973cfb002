# codegentle:header:start
#
#   project      : CodeGentle
#   file         : strategy.py
#   file_relpath : src/codegentle/writer/strategy.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Per-language write strategies.

A [`Strategy`][codegentle.writer.strategy.Strategy] tells the code writer the rules
of the target language that affect emission: which names are identifiers, which
packages are implicitly imported, how statements end and how nullability is
spelled. The writer itself stays language-neutral.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from codegentle.naming.package_name import JAVA_LANG, PackageName

if TYPE_CHECKING:
    from collections.abc import Set

JAVA_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "final", "finally", "float", "for", "goto", "if", "implements",
        "import", "instanceof", "int", "interface", "long", "native", "new",
        "package", "private", "protected", "public", "return", "short", "static",
        "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "try", "void", "volatile", "while", "true", "false", "null",
    }
)  # fmt: skip

KOTLIN_HARD_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "as", "break", "class", "continue", "do", "else", "false", "for", "fun",
        "if", "in", "interface", "is", "null", "object", "package", "return",
        "super", "this", "throw", "true", "try", "typealias", "typeof", "val",
        "var", "when", "while",
    }
)  # fmt: skip

KOTLIN_DEFAULT_IMPORTS: Final[frozenset[PackageName]] = frozenset(
    PackageName.parse(name)
    for name in (
        "kotlin",
        "kotlin.annotation",
        "kotlin.collections",
        "kotlin.comparisons",
        "kotlin.io",
        "kotlin.ranges",
        "kotlin.sequences",
        "kotlin.text",
        "kotlin.jvm",
        "kotlin.js",
        "java.lang",
    )
)


def is_java_identifier(name: str) -> bool:
    """Return True if ``name`` is a Java identifier (letters, digits, ``_`` and ``$``)."""
    if not name:
        return False
    first, rest = name[0], name[1:]
    if not (first.isalpha() or first in "_$"):
        return False
    return all(c.isalnum() or c in "_$" for c in rest)


@runtime_checkable
class Strategy(Protocol):
    """Language rules consulted by the [`CodeWriter`][codegentle.writer.code_writer.CodeWriter]."""

    @property
    def newline(self) -> str: ...

    @property
    def statement_terminator(self) -> str | None:
        """Character appended at the end of a statement, or ``None``."""
        ...

    @property
    def marks_nullable(self) -> bool:
        """Whether a nullable type reference renders a ``?`` suffix."""
        ...

    def is_identifier(self, name: str) -> bool: ...

    def is_valid_source_name(self, name: str) -> bool:
        """An identifier that is not a reserved keyword."""
        ...

    def omit_package(self, package_name: PackageName) -> bool:
        """Whether types of ``package_name`` are implicitly visible and need no qualifier."""
        ...


@dataclass(frozen=True, slots=True)
class JavaWriteStrategy:
    """Java rules; ``java.lang`` is implicitly imported unless ``omit_java_lang`` is False."""

    omit_java_lang: bool = True
    newline: str = "\n"
    statement_terminator: str | None = ";"
    marks_nullable: bool = False

    def is_identifier(self, name: str) -> bool:
        return is_java_identifier(name)

    def is_valid_source_name(self, name: str) -> bool:
        return is_java_identifier(name) and name not in JAVA_KEYWORDS

    def omit_package(self, package_name: PackageName) -> bool:
        return self.omit_java_lang and package_name == JAVA_LANG


@dataclass(frozen=True, slots=True)
class KotlinWriteStrategy:
    """Kotlin rules: default-imported packages, no terminator, ``?`` for nullable types."""

    default_imports: Set[PackageName] = KOTLIN_DEFAULT_IMPORTS
    newline: str = "\n"
    statement_terminator: str | None = None
    marks_nullable: bool = True

    def is_identifier(self, name: str) -> bool:
        if len(name) > 2 and name.startswith("`") and name.endswith("`"):
            return "`" not in name[1:-1] and "\n" not in name
        return name.isidentifier()

    def is_valid_source_name(self, name: str) -> bool:
        if name.startswith("`"):
            return self.is_identifier(name)
        return self.is_identifier(name) and name not in KOTLIN_HARD_KEYWORDS

    def omit_package(self, package_name: PackageName) -> bool:
        return package_name in self.default_imports


DEFAULT_JAVA_STRATEGY: Final[JavaWriteStrategy] = JavaWriteStrategy()
TO_STRING_JAVA_STRATEGY: Final[JavaWriteStrategy] = JavaWriteStrategy(omit_java_lang=False)
DEFAULT_KOTLIN_STRATEGY: Final[KotlinWriteStrategy] = KotlinWriteStrategy()
