# codegentle:header:start
#
#   project      : CodeGentle
#   file         : code_value.py
#   file_relpath : src/codegentle/code/code_value.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Code values: immutable templates of text and directives.

A [`CodeValue`][codegentle.code.code_value.CodeValue] is created from a format
string in which every ``%V`` placeholder is filled by one argument part:

```python
CodeValue.of("%V.out.println(%V)", type_of(SYSTEM), string("Hello"))
```

Arguments that are not already parts are coerced: a nested ``CodeValue`` becomes a
[`CodeValuePart`][codegentle.code.parts.CodeValuePart], a ``TypeName`` a
[`TypePart`][codegentle.code.parts.TypePart], a ``TypeRef`` a
[`TypeRefPart`][codegentle.code.parts.TypeRefPart] and anything else a
[`LiteralPart`][codegentle.code.parts.LiteralPart].

The parsed value is never re-parsed: the writer walks its parts once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from codegentle.code.parts import (
    STATEMENT_BEGIN,
    STATEMENT_END,
    CodePart,
    CodeValuePart,
    IndentPart,
    LiteralPart,
    TextPart,
    TypePart,
    TypeRefPart,
    UnindentPart,
)
from codegentle.naming.type_name import TypeName
from codegentle.ref.type_ref import TypeRef

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegentle.writer.strategy import Strategy

PLACEHOLDER: Final[str] = "%V"


def as_code_part(argument: Any) -> CodePart:
    """Coerce a format argument to a code part."""
    if isinstance(argument, CodePart):
        return argument
    if isinstance(argument, CodeValue):
        return CodeValuePart(argument)
    if isinstance(argument, TypeRef):
        return TypeRefPart(argument)
    if isinstance(argument, TypeName):
        return TypePart(argument)
    return LiteralPart(argument)


def parse_format(format: str, arguments: tuple[Any, ...]) -> list[CodePart]:
    """Split ``format`` on ``%V`` and interleave the coerced arguments.

    Args:
        format (str): Template text.
        arguments (tuple[Any, ...]): One argument per placeholder.

    Returns:
        list[CodePart]: Parts in emission order; empty text segments are dropped.

    Raises:
        ValueError: If the number of placeholders and arguments differ.
    """
    segments = format.split(PLACEHOLDER)
    expected = len(segments) - 1
    if expected != len(arguments):
        raise ValueError(
            f"Format {format!r} has {expected} placeholder(s) but {len(arguments)} argument(s)"
        )
    parts: list[CodePart] = []
    for index, segment in enumerate(segments):
        if segment:
            parts.append(TextPart(segment))
        if index < expected:
            parts.append(as_code_part(arguments[index]))
    return parts


@dataclass(frozen=True, slots=True)
class CodeValue:
    """An immutable sequence of code parts.

    Attributes:
        parts (tuple[CodePart, ...]): Text and directive parts in emission order.
    """

    parts: tuple[CodePart, ...] = ()

    @classmethod
    def of(cls, format: str, *arguments: Any) -> CodeValue:
        """Parse ``format`` with one argument per ``%V`` placeholder."""
        return CodeValue(tuple(parse_format(format, arguments)))

    @classmethod
    def builder(cls) -> CodeValueBuilder:
        return CodeValueBuilder()

    @classmethod
    def join(cls, values: Iterable[CodeValue], separator: str) -> CodeValue:
        """Concatenate ``values`` with ``separator`` text between them."""
        builder = CodeValueBuilder()
        for index, value in enumerate(values):
            if index:
                builder.add_code(separator)
            builder.add_code(value)
        return builder.build()

    @property
    def is_empty(self) -> bool:
        return not self.parts

    def to_builder(self) -> CodeValueBuilder:
        return CodeValueBuilder().add_code(self)

    def render(self, strategy: Strategy | None = None) -> str:
        """Render this value with an in-memory writer."""
        from codegentle.writer.render import render

        return render(self, strategy=strategy)

    def __add__(self, other: object) -> CodeValue:
        if not isinstance(other, CodeValue):
            return NotImplemented
        return CodeValue(self.parts + other.parts)

    def __str__(self) -> str:
        return self.render()


EMPTY_CODE: Final[CodeValue] = CodeValue()


class CodeValueBuilder:
    """Mutable builder for [`CodeValue`][codegentle.code.code_value.CodeValue].

    Every adder returns the builder; parts accumulate in call order.
    """

    def __init__(self) -> None:
        self._parts: list[CodePart] = []

    @property
    def is_empty(self) -> bool:
        return not self._parts

    def add_parts(self, *parts: CodePart) -> CodeValueBuilder:
        self._parts.extend(parts)
        return self

    def add_code(self, code: str | CodeValue, *arguments: Any) -> CodeValueBuilder:
        """Append a format string with arguments, or the parts of a code value."""
        if isinstance(code, CodeValue):
            if arguments:
                raise ValueError("Arguments are only accepted with a format string")
            self._parts.extend(code.parts)
        else:
            self._parts.extend(parse_format(code, arguments))
        return self

    def add_statement(self, code: str | CodeValue, *arguments: Any) -> CodeValueBuilder:
        """Append code wrapped in statement begin/end markers."""
        self._parts.append(STATEMENT_BEGIN)
        self.add_code(code, *arguments)
        self._parts.append(STATEMENT_END)
        return self

    def add_comment(self, format: str, *arguments: Any) -> CodeValueBuilder:
        """Append a ``// `` line comment."""
        self.add_code("// ")
        self.add_code(format, *arguments)
        return self.add_code("\n")

    def begin_control_flow(self, control_flow: str, *arguments: Any) -> CodeValueBuilder:
        """Open a block such as ``if (x) {`` and indent its body."""
        self.add_code(control_flow + " {\n", *arguments)
        return self.indent()

    def next_control_flow(self, control_flow: str, *arguments: Any) -> CodeValueBuilder:
        """Close the current block and open a sibling, e.g. ``} else {``."""
        self.unindent()
        self.add_code("} " + control_flow + " {\n", *arguments)
        return self.indent()

    def end_control_flow(
        self, control_flow: str | None = None, *arguments: Any
    ) -> CodeValueBuilder:
        """Close the current block; ``control_flow`` adds a trailer such as ``while (x)``."""
        self.unindent()
        if control_flow is None:
            return self.add_code("}\n")
        return self.add_code("} " + control_flow + ";\n", *arguments)

    def indent(self, levels: int = 1) -> CodeValueBuilder:
        self._parts.append(IndentPart(levels))
        return self

    def unindent(self, levels: int = 1) -> CodeValueBuilder:
        self._parts.append(UnindentPart(levels))
        return self

    def clear(self) -> CodeValueBuilder:
        self._parts.clear()
        return self

    def build(self) -> CodeValue:
        return CodeValue(tuple(self._parts))
