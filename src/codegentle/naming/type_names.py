# codegentle:header:start
#
#   project      : CodeGentle
#   file         : type_names.py
#   file_relpath : src/codegentle/naming/type_names.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Composite and primitive type names.

Type arguments, bounds and array components are held as
[`TypeRef`][codegentle.ref.type_ref.TypeRef] values so that type-use annotations and
nullability survive nesting. Factories accept bare type names and wrap them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from codegentle.naming.class_name import ClassName
from codegentle.naming.type_name import TypeName
from codegentle.ref.type_ref import TypeRef, as_type_ref


@dataclass(frozen=True, slots=True)
class PrimitiveTypeName(TypeName):
    """A primitive type or ``void``, rendered as its keyword."""

    keyword: str


VOID: Final[PrimitiveTypeName] = PrimitiveTypeName("void")
BOOLEAN: Final[PrimitiveTypeName] = PrimitiveTypeName("boolean")
BYTE: Final[PrimitiveTypeName] = PrimitiveTypeName("byte")
SHORT: Final[PrimitiveTypeName] = PrimitiveTypeName("short")
INT: Final[PrimitiveTypeName] = PrimitiveTypeName("int")
LONG: Final[PrimitiveTypeName] = PrimitiveTypeName("long")
CHAR: Final[PrimitiveTypeName] = PrimitiveTypeName("char")
FLOAT: Final[PrimitiveTypeName] = PrimitiveTypeName("float")
DOUBLE: Final[PrimitiveTypeName] = PrimitiveTypeName("double")

PRIMITIVES: Final[dict[str, PrimitiveTypeName]] = {
    p.keyword: p for p in (VOID, BOOLEAN, BYTE, SHORT, INT, LONG, CHAR, FLOAT, DOUBLE)
}


@dataclass(frozen=True, slots=True)
class ParameterizedTypeName(TypeName):
    """A generic class applied to type arguments, e.g. ``List<String>``.

    Attributes:
        raw_type (ClassName): The generic class.
        type_arguments (tuple[TypeRef[Any], ...]): Arguments in declaration order.
        enclosing_type (ParameterizedTypeName | None): Parameterized outer type for
            inner classes such as ``Outer<String>.Inner<Integer>``.
    """

    raw_type: ClassName
    type_arguments: tuple[TypeRef[Any], ...]
    enclosing_type: ParameterizedTypeName | None = None

    @classmethod
    def of(
        cls, raw_type: ClassName, *type_arguments: TypeName | TypeRef[Any]
    ) -> ParameterizedTypeName:
        """Parameterize ``raw_type`` with one or more type arguments.

        Raises:
            ValueError: If no type argument is given.
        """
        if not type_arguments:
            raise ValueError(f"No type arguments for {raw_type.canonical_name}")
        return ParameterizedTypeName(raw_type, tuple(as_type_ref(a) for a in type_arguments))

    def nested_class(
        self, name: str, *type_arguments: TypeName | TypeRef[Any]
    ) -> ParameterizedTypeName:
        """Return an inner class of this parameterized type."""
        return ParameterizedTypeName(
            self.raw_type.nested_class(name),
            tuple(as_type_ref(a) for a in type_arguments),
            self,
        )


@dataclass(frozen=True, slots=True)
class ArrayTypeName(TypeName):
    """An array of ``component_type``."""

    component_type: TypeRef[Any]

    @classmethod
    def of(cls, component_type: TypeName | TypeRef[Any]) -> ArrayTypeName:
        return ArrayTypeName(as_type_ref(component_type))


@dataclass(frozen=True, slots=True)
class TypeVariableName(TypeName):
    """A type variable such as ``T`` or ``E extends Comparable<E>``.

    Bounds are only rendered where the variable is declared.
    """

    name: str
    bounds: tuple[TypeRef[Any], ...] = ()

    @classmethod
    def of(cls, name: str, *bounds: TypeName | TypeRef[Any]) -> TypeVariableName:
        return TypeVariableName(name, tuple(as_type_ref(b) for b in bounds))


class WildcardTypeName(TypeName):
    """Base of the three wildcard forms."""

    __slots__ = ()

    @property
    def bounds(self) -> tuple[TypeRef[Any], ...]:
        return ()


@dataclass(frozen=True, slots=True)
class EmptyWildcardTypeName(WildcardTypeName):
    """The unbounded wildcard ``?``."""


@dataclass(frozen=True, slots=True)
class LowerWildcardTypeName(WildcardTypeName):
    """``? extends B``: admits types lower than the bounds in the hierarchy."""

    upper_bounds: tuple[TypeRef[Any], ...]

    @property
    def bounds(self) -> tuple[TypeRef[Any], ...]:
        return self.upper_bounds


@dataclass(frozen=True, slots=True)
class UpperWildcardTypeName(WildcardTypeName):
    """``? super B``: admits types upper than the bounds in the hierarchy."""

    lower_bounds: tuple[TypeRef[Any], ...]

    @property
    def bounds(self) -> tuple[TypeRef[Any], ...]:
        return self.lower_bounds


WILDCARD: Final[EmptyWildcardTypeName] = EmptyWildcardTypeName()


def subtype_of(*bounds: TypeName | TypeRef[Any]) -> LowerWildcardTypeName:
    """Return ``? extends bounds``.

    Raises:
        ValueError: If no bound is given.
    """
    if not bounds:
        raise ValueError("A bounded wildcard needs at least one bound")
    return LowerWildcardTypeName(tuple(as_type_ref(b) for b in bounds))


def supertype_of(*bounds: TypeName | TypeRef[Any]) -> UpperWildcardTypeName:
    """Return ``? super bounds``.

    Raises:
        ValueError: If no bound is given.
    """
    if not bounds:
        raise ValueError("A bounded wildcard needs at least one bound")
    return UpperWildcardTypeName(tuple(as_type_ref(b) for b in bounds))
