# codegentle:header:start
#
#   project      : CodeGentle
#   file         : cli_types.py
#   file_relpath : src/codegentle/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Custom Click parameter types for the CodeGentle CLI.

- [`EnumChoiceParam`][codegentle.cli.cli_types.EnumChoiceParam]: case-insensitive
  choice among the values of a string enum.
- [`TypeNameParam`][codegentle.cli.cli_types.TypeNameParam]: a type expression such
  as ``java.util.List<java.lang.String>``.
- [`FieldParam`][codegentle.cli.cli_types.FieldParam]: a ``TYPE:NAME`` pair.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NamedTuple, NoReturn, TypeVar, cast

import click

from codegentle.naming.parse import parse_type_name

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

    from codegentle.naming.type_name import TypeName

E = TypeVar("E", bound=Enum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", member.value) for member in self.enum_cls]

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", member.value).lower(): member for member in self.enum_cls
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class TypeNameParam(click.ParamType):
    """Click parameter type for type expressions.

    Values are parsed with [`parse_type_name`][codegentle.naming.parse.parse_type_name].
    """

    name = "type"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> TypeName:
        if not isinstance(value, str):
            return cast("TypeName", value)
        try:
            return parse_type_name(value)
        except ValueError as exc:
            _fail_noreturn(str(exc), param, ctx)


class FieldArg(NamedTuple):
    """A field declared on the command line."""

    type_name: TypeName
    name: str


class FieldParam(click.ParamType):
    """A ``TYPE:NAME`` pair; the type may itself contain no colon."""

    name = "field"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> FieldArg:
        if isinstance(value, FieldArg):
            return value
        text = str(value)
        type_text, sep, field_name = text.rpartition(":")
        if not sep or not type_text.strip() or not field_name.strip():
            _fail_noreturn(f"Expected TYPE:NAME, got {text!r}", param, ctx)
        try:
            type_name = parse_type_name(type_text)
        except ValueError as exc:
            _fail_noreturn(str(exc), param, ctx)
        return FieldArg(type_name, field_name.strip())
