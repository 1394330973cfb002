# codegentle:header:start
#
#   project      : CodeGentle
#   file         : parameter_spec.py
#   file_relpath : src/codegentle/spec/parameter_spec.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Method and constructor parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from codegentle.code.code_value import EMPTY_CODE, CodeValue
from codegentle.ref.type_ref import as_type_ref
from codegentle.spec.checks import require_modifiers, require_source_name
from codegentle.spec.modifiers import Modifier

if TYPE_CHECKING:
    from codegentle.naming.type_name import TypeName
    from codegentle.ref.annotation_ref import AnnotationRef
    from codegentle.ref.type_ref import TypeRef
    from codegentle.writer.code_writer import CodeWriter


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """A parameter such as ``@Nullable final String name``.

    Attributes:
        type_ref (TypeRef[Any]): Declared type.
        name (str): Parameter name.
        doc (CodeValue): Doc text, emitted as an ``@param`` tag of the method's doc.
        annotations (tuple[AnnotationRef, ...]): Annotations in declaration order.
        modifiers (frozenset[Modifier]): Only ``final`` is allowed.
    """

    type_ref: TypeRef[Any]
    name: str
    doc: CodeValue = EMPTY_CODE
    annotations: tuple[AnnotationRef, ...] = ()
    modifiers: frozenset[Modifier] = frozenset()

    @classmethod
    def of(
        cls, type_name: TypeName | TypeRef[Any], name: str, *modifiers: Modifier
    ) -> ParameterSpec:
        return cls.builder(type_name, name).add_modifiers(*modifiers).build()

    @classmethod
    def builder(cls, type_name: TypeName | TypeRef[Any], name: str) -> ParameterSpecBuilder:
        return ParameterSpecBuilder(type_name, name)

    def to_builder(self) -> ParameterSpecBuilder:
        builder = ParameterSpecBuilder(self.type_ref, self.name)
        builder.doc.add_code(self.doc)
        builder.annotations.extend(self.annotations)
        builder.modifiers.update(self.modifiers)
        return builder

    def emit_to(self, writer: CodeWriter, *, varargs: bool = False) -> None:
        writer.emit_annotations(self.annotations, inline=True)
        writer.emit_modifiers(self.modifiers)
        writer.emit_type_ref(self.type_ref, varargs=varargs)
        writer.emit_raw(f" {self.name}")

    def __str__(self) -> str:
        from codegentle.writer.render import render

        return render(self)


class ParameterSpecBuilder:
    """Mutable builder for [`ParameterSpec`][codegentle.spec.parameter_spec.ParameterSpec]."""

    def __init__(self, type_name: TypeName | TypeRef[Any], name: str) -> None:
        self.type_ref: TypeRef[Any] = as_type_ref(type_name)
        self.name: str = require_source_name(name, "parameter")
        self.doc = CodeValue.builder()
        self.annotations: list[AnnotationRef] = []
        self.modifiers: set[Modifier] = set()

    def add_doc(self, format: str | CodeValue, *arguments: Any) -> ParameterSpecBuilder:
        self.doc.add_code(format, *arguments)
        return self

    def add_annotation(self, *annotations: AnnotationRef) -> ParameterSpecBuilder:
        self.annotations.extend(annotations)
        return self

    def add_modifiers(self, *modifiers: Modifier) -> ParameterSpecBuilder:
        self.modifiers.update(modifiers)
        return self

    def build(self) -> ParameterSpec:
        """Return the parameter.

        Raises:
            ValueError: If a modifier other than ``final`` was added.
        """
        require_modifiers(self.modifiers, {Modifier.FINAL}, f"parameter {self.name!r}")
        return ParameterSpec(
            type_ref=self.type_ref,
            name=self.name,
            doc=self.doc.build(),
            annotations=tuple(self.annotations),
            modifiers=frozenset(self.modifiers),
        )
