# codegentle:header:start
#
#   project      : CodeGentle
#   file         : annotation_ref.py
#   file_relpath : src/codegentle/ref/annotation_ref.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Annotation usages.

An [`AnnotationRef`][codegentle.ref.annotation_ref.AnnotationRef] is an annotation
type plus named member values. Adding the same member twice turns its value into
a [`MultipleMemberValue`][codegentle.ref.annotation_ref.MultipleMemberValue], which
renders as an array initializer (``{a, b}``).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from codegentle.code.code_value import CodeValue
from codegentle.naming.class_name import ClassName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from codegentle.writer.strategy import Strategy


@dataclass(frozen=True, slots=True)
class SingleMemberValue:
    value: CodeValue

    @property
    def values(self) -> tuple[CodeValue, ...]:
        return (self.value,)


@dataclass(frozen=True, slots=True)
class MultipleMemberValue:
    items: tuple[CodeValue, ...]

    @property
    def values(self) -> tuple[CodeValue, ...]:
        return self.items


MemberValue = SingleMemberValue | MultipleMemberValue


@dataclass(frozen=True, slots=True, eq=False)
class AnnotationRef:
    """An annotation usage such as ``@SuppressWarnings("unchecked")``.

    Attributes:
        type_name (ClassName): The annotation type.
        members (Mapping[str, MemberValue]): Member values in insertion order.
    """

    type_name: ClassName
    members: Mapping[str, MemberValue]

    @classmethod
    def of(cls, type_name: ClassName) -> AnnotationRef:
        """Return a marker annotation (no members)."""
        return AnnotationRef(type_name, MappingProxyType({}))

    @classmethod
    def builder(cls, type_name: ClassName) -> AnnotationRefBuilder:
        return AnnotationRefBuilder(type_name)

    def to_builder(self) -> AnnotationRefBuilder:
        builder = AnnotationRefBuilder(self.type_name)
        builder.members.update(self.members)
        return builder

    def render(self, strategy: Strategy | None = None) -> str:
        from codegentle.writer.render import render

        return render(self, strategy=strategy)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationRef):
            return NotImplemented
        return self.type_name == other.type_name and list(self.members.items()) == list(
            other.members.items()
        )

    def __hash__(self) -> int:
        return hash((self.type_name, tuple(self.members.items())))

    def __str__(self) -> str:
        return self.render()


class AnnotationRefBuilder:
    """Mutable builder for [`AnnotationRef`][codegentle.ref.annotation_ref.AnnotationRef]."""

    def __init__(self, type_name: ClassName) -> None:
        self.type_name: ClassName = type_name
        self.members: dict[str, MemberValue] = {}

    def add_member(
        self, name: str, value: str | CodeValue, *arguments: Any
    ) -> AnnotationRefBuilder:
        """Add a member value; a repeated name collects values in call order.

        Args:
            name (str): Member name, e.g. ``"value"``.
            value (str | CodeValue): A code value, or a format string for ``arguments``.
            *arguments (Any): Arguments for the format string.

        Returns:
            AnnotationRefBuilder: This builder.
        """
        code = value if isinstance(value, CodeValue) else CodeValue.of(value, *arguments)
        current = self.members.get(name)
        if current is None:
            self.members[name] = SingleMemberValue(code)
        else:
            self.members[name] = MultipleMemberValue((*current.values, code))
        return self

    def add_multiple_members(self, name: str, values: list[CodeValue]) -> AnnotationRefBuilder:
        """Set ``name`` to an array value, appending to any existing values."""
        current = self.members.get(name)
        existing = current.values if current is not None else ()
        self.members[name] = MultipleMemberValue((*existing, *values))
        return self

    def build(self) -> AnnotationRef:
        return AnnotationRef(self.type_name, MappingProxyType(dict(self.members)))
