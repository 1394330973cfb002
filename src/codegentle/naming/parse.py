# codegentle:header:start
#
#   project      : CodeGentle
#   file         : parse.py
#   file_relpath : src/codegentle/naming/parse.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Parse type expressions such as ``java.util.Map<String, ? extends Number>[]``.

Only type names are parsed, never source code. Accepted syntax:

- primitives (``int``, ``void``, ...);
- dotted class names, split into package and classes by
  [`ClassName.best_guess`][codegentle.naming.class_name.ClassName.best_guess];
- type arguments in ``<...>``, including on inner classes (``Outer<A>.Inner<B>``);
- wildcards ``?``, ``? extends A & B`` and ``? super A``;
- any number of ``[]`` suffixes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from codegentle.naming.class_name import ClassName
from codegentle.naming.type_names import (
    PRIMITIVES,
    WILDCARD,
    ArrayTypeName,
    ParameterizedTypeName,
    subtype_of,
    supertype_of,
)

if TYPE_CHECKING:
    from codegentle.naming.type_name import TypeName

_TOKEN: Final[re.Pattern[str]] = re.compile(r"\s*(?:([A-Za-z_$][\w$]*)|([<>,.?&\[\]]))")


def _tokenize(text: str) -> list[str]:
    tokens: list[str] = []
    position = 0
    while position < len(text):
        if text[position:].strip() == "":
            break
        match = _TOKEN.match(text, position)
        if match is None:
            raise ValueError(f"Unexpected character {text[position:].lstrip()[:1]!r} in {text!r}")
        tokens.append(match.group(1) or match.group(2))
        position = match.end()
    return tokens


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = _tokenize(text)
        self.index = 0

    def peek(self) -> str | None:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def next(self) -> str:
        token = self.peek()
        if token is None:
            raise ValueError(f"Unexpected end of type expression {self.text!r}")
        self.index += 1
        return token

    def expect(self, expected: str) -> None:
        token = self.next()
        if token != expected:
            raise ValueError(f"Expected {expected!r} but found {token!r} in {self.text!r}")

    def identifier(self) -> str:
        token = self.next()
        if not (token[0].isalpha() or token[0] in "_$"):
            raise ValueError(f"Expected an identifier but found {token!r} in {self.text!r}")
        return token

    def parse(self) -> TypeName:
        result = self.type_name()
        if self.peek() is not None:
            raise ValueError(f"Unexpected {self.peek()!r} after type in {self.text!r}")
        return result

    def type_name(self) -> TypeName:
        result: TypeName
        if self.peek() == "?":
            return self.wildcard()
        first = self.identifier()
        if first in PRIMITIVES:
            result = PRIMITIVES[first]
        else:
            result = self.class_type(first)
        while self.peek() == "[":
            self.next()
            self.expect("]")
            result = ArrayTypeName.of(result)
        return result

    def wildcard(self) -> TypeName:
        self.expect("?")
        keyword = self.peek()
        if keyword not in ("extends", "super"):
            return WILDCARD
        self.next()
        bounds = [self.type_name()]
        while self.peek() == "&":
            self.next()
            bounds.append(self.type_name())
        return subtype_of(*bounds) if keyword == "extends" else supertype_of(*bounds)

    def class_type(self, first: str) -> TypeName:
        segments = [first]
        while self.peek() == ".":
            self.next()
            segments.append(self.identifier())
        raw = ClassName.best_guess(".".join(segments))
        if self.peek() != "<":
            return raw
        current = ParameterizedTypeName.of(raw, *self.type_arguments())
        while self.peek() == ".":
            self.next()
            name = self.identifier()
            arguments = self.type_arguments() if self.peek() == "<" else []
            current = current.nested_class(name, *arguments)
        return current

    def type_arguments(self) -> list[TypeName]:
        self.expect("<")
        arguments = [self.type_name()]
        while self.peek() == ",":
            self.next()
            arguments.append(self.type_name())
        self.expect(">")
        return arguments


def parse_type_name(text: str) -> TypeName:
    """Parse a single type expression.

    Args:
        text (str): E.g. ``"java.util.List<? extends java.lang.Number>"``.

    Returns:
        TypeName: The parsed type.

    Raises:
        ValueError: If ``text`` is not a well-formed type expression.
    """
    if not text.strip():
        raise ValueError("Empty type expression")
    return _Parser(text).parse()
