# codegentle:header:start
#
#   project      : CodeGentle
#   file         : parts.py
#   file_relpath : src/codegentle/code/parts.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Parts of a [`CodeValue`][codegentle.code.code_value.CodeValue].

A code value is a flat sequence of parts. [`TextPart`][codegentle.code.parts.TextPart]
carries literal source text; every other part is an argument directive that the
[`CodeWriter`][codegentle.writer.code_writer.CodeWriter] interprets when walking
the sequence (emit a type, open a statement, insert a soft break, ...).

Stateless directives are module-level singletons; the factory functions below are
the intended way to create parts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from codegentle.ref.type_ref import TypeRef

if TYPE_CHECKING:
    from codegentle.code.code_value import CodeValue
    from codegentle.naming.type_name import TypeName


class CodePart:
    """Base of every code value part."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class TextPart(CodePart):
    """Literal source text, emitted as-is (subject to indentation)."""

    value: str


class CodeArgumentPart(CodePart):
    """Base of the directive parts that fill ``%V`` placeholders."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class SkipPart(CodeArgumentPart):
    """Emits the placeholder text ``%V`` itself."""


@dataclass(frozen=True, slots=True)
class LiteralPart(CodeArgumentPart):
    """Emits ``value`` as a literal: specs and annotations emit themselves, others use ``str``."""

    value: Any


@dataclass(frozen=True, slots=True)
class NamePart(CodeArgumentPart):
    """Emits a name: a string, a member name (qualified), or any object with a ``name``."""

    value: Any


@dataclass(frozen=True, slots=True)
class StringPart(CodeArgumentPart):
    """Emits a quoted, escaped string literal; ``None`` emits ``null``."""

    value: str | None


@dataclass(frozen=True, slots=True)
class TypePart(CodeArgumentPart):
    """Emits a type name, qualified against the current import table."""

    type_name: TypeName


@dataclass(frozen=True, slots=True)
class TypeRefPart(CodeArgumentPart):
    """Emits a type reference with its annotations and status."""

    type_ref: TypeRef[Any]


@dataclass(frozen=True, slots=True)
class IndentPart(CodeArgumentPart):
    levels: int = 1


@dataclass(frozen=True, slots=True)
class UnindentPart(CodeArgumentPart):
    levels: int = 1


@dataclass(frozen=True, slots=True)
class StatementBeginPart(CodeArgumentPart):
    """Opens a statement: continuation lines get extra indentation."""


@dataclass(frozen=True, slots=True)
class StatementEndPart(CodeArgumentPart):
    """Closes a statement, appending the terminator once and a newline."""


@dataclass(frozen=True, slots=True)
class WrappingSpacePart(CodeArgumentPart):
    """A space the line wrapper may turn into a newline."""


@dataclass(frozen=True, slots=True)
class ZeroWidthSpacePart(CodeArgumentPart):
    """An empty break the line wrapper may turn into a newline."""


@dataclass(frozen=True, slots=True)
class NewlinePart(CodeArgumentPart):
    pass


@dataclass(frozen=True, slots=True)
class CodeValuePart(CodeArgumentPart):
    """Emits a nested code value in place."""

    code_value: CodeValue


SKIP: SkipPart = SkipPart()
STATEMENT_BEGIN: StatementBeginPart = StatementBeginPart()
STATEMENT_END: StatementEndPart = StatementEndPart()
WRAPPING_SPACE: WrappingSpacePart = WrappingSpacePart()
ZERO_WIDTH_SPACE: ZeroWidthSpacePart = ZeroWidthSpacePart()
NEWLINE: NewlinePart = NewlinePart()


def skip() -> SkipPart:
    return SKIP


def literal(value: Any) -> LiteralPart:
    return LiteralPart(value)


def name(value: Any) -> NamePart:
    return NamePart(value)


def string(value: str | None) -> StringPart:
    return StringPart(value)


def type_of(value: TypeName | TypeRef[Any]) -> TypePart | TypeRefPart:
    """Return a type part for a type name, or a type-ref part for a ref."""
    if isinstance(value, TypeRef):
        return TypeRefPart(value)
    return TypePart(value)


def indent(levels: int = 1) -> IndentPart:
    return IndentPart(levels)


def unindent(levels: int = 1) -> UnindentPart:
    return UnindentPart(levels)


def statement_begin() -> StatementBeginPart:
    return STATEMENT_BEGIN


def statement_end() -> StatementEndPart:
    return STATEMENT_END


def wrapping_space() -> WrappingSpacePart:
    return WRAPPING_SPACE


def zero_width_space() -> ZeroWidthSpacePart:
    return ZERO_WIDTH_SPACE


def newline() -> NewlinePart:
    return NEWLINE


def code(value: CodeValue) -> CodeValuePart:
    return CodeValuePart(value)
