# codegentle:header:start
#
#   project      : CodeGentle
#   file         : type_spec.py
#   file_relpath : src/codegentle/spec/type_spec.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Classes, interfaces, enums, annotation types, records and anonymous classes.

Members of a [`TypeSpec`][codegentle.spec.type_spec.TypeSpec] are emitted in a
fixed order, each section separated from the previous one by a blank line:

1. enum constants;
2. static fields, then the static block;
3. instance fields, then the initializer block;
4. constructors, then methods;
5. nested types.

Modifiers implied by the declaring kind (``public abstract`` for interface methods,
``public static final`` for interface fields, ``static`` for nested interfaces and
enums) are not printed.

An anonymous class has no name. Used as a code argument it renders as
``new Supertype(arguments) { ... }``; as the value of an enum constant it
supplies the constant's arguments and optional body.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from codegentle.code.code_value import EMPTY_CODE, CodeValue
from codegentle.naming.common import OBJECT
from codegentle.ref.type_ref import as_type_ref
from codegentle.spec.checks import require_exclusive, require_source_name
from codegentle.spec.field_spec import FieldSpec
from codegentle.spec.method_spec import MethodSpec
from codegentle.spec.modifiers import ACCESS_MODIFIERS, Modifier

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Set

    from codegentle.naming.type_name import TypeName
    from codegentle.naming.type_names import TypeVariableName
    from codegentle.ref.annotation_ref import AnnotationRef
    from codegentle.ref.type_ref import TypeRef
    from codegentle.spec.parameter_spec import ParameterSpec
    from codegentle.writer.code_writer import CodeWriter

_NONE: Final[frozenset[Modifier]] = frozenset()
_PUBLIC_STATIC_FINAL: Final[frozenset[Modifier]] = frozenset(
    {Modifier.PUBLIC, Modifier.STATIC, Modifier.FINAL}
)
_PUBLIC_ABSTRACT: Final[frozenset[Modifier]] = frozenset({Modifier.PUBLIC, Modifier.ABSTRACT})
_PUBLIC_STATIC: Final[frozenset[Modifier]] = frozenset({Modifier.PUBLIC, Modifier.STATIC})
_STATIC: Final[frozenset[Modifier]] = frozenset({Modifier.STATIC})


class TypeKind(Enum):
    """Kind of a declared type and the modifiers it implies for its members."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "@interface"
    RECORD = "record"
    SEALED_CLASS = "sealed class"
    SEALED_INTERFACE = "sealed interface"
    NON_SEALED_CLASS = "non-sealed class"
    NON_SEALED_INTERFACE = "non-sealed interface"
    ANONYMOUS_CLASS = "new"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def is_interface(self) -> bool:
        """Whether supertypes of this kind are listed after ``extends``."""
        return self in (
            TypeKind.INTERFACE,
            TypeKind.SEALED_INTERFACE,
            TypeKind.NON_SEALED_INTERFACE,
        )

    @property
    def is_sealed(self) -> bool:
        return self in (TypeKind.SEALED_CLASS, TypeKind.SEALED_INTERFACE)

    @property
    def supports_superclass(self) -> bool:
        return self in (
            TypeKind.CLASS,
            TypeKind.SEALED_CLASS,
            TypeKind.NON_SEALED_CLASS,
            TypeKind.ANONYMOUS_CLASS,
        )

    @property
    def implicit_field_modifiers(self) -> frozenset[Modifier]:
        return _PUBLIC_STATIC_FINAL if self._is_interface_like else _NONE

    @property
    def implicit_method_modifiers(self) -> frozenset[Modifier]:
        return _PUBLIC_ABSTRACT if self._is_interface_like else _NONE

    @property
    def implicit_type_modifiers(self) -> frozenset[Modifier]:
        return _PUBLIC_STATIC if self._is_interface_like else _NONE

    @property
    def as_member_modifiers(self) -> frozenset[Modifier]:
        """Modifiers implied when a type of this kind is nested in another type."""
        return _STATIC if self._is_interface_like or self is TypeKind.ENUM else _NONE

    @property
    def _is_interface_like(self) -> bool:
        return self.is_interface or self is TypeKind.ANNOTATION


@dataclass(frozen=True, slots=True)
class TypeSpec:
    """A declared type with its members.

    Attributes:
        kind (TypeKind): Class, interface, enum, annotation type, record, sealed or
            non-sealed type, or anonymous class.
        name (str): Simple name; empty for anonymous classes.
        doc (CodeValue): Doc comment body.
        annotations (tuple[AnnotationRef, ...]): Annotations, one per line.
        modifiers (frozenset[Modifier]): Declared modifiers.
        type_variables (tuple[TypeRef[TypeVariableName], ...]): Generic parameters.
        superclass (TypeRef[Any] | None): Superclass of a class; ``Object`` is never printed.
        superinterfaces (tuple[TypeRef[Any], ...]): Implemented (or, for interfaces,
            extended) interfaces.
        record_components (tuple[ParameterSpec, ...]): Record header components.
        permits (tuple[TypeRef[Any], ...]): Permitted subtypes of a sealed type.
        anonymous_arguments (CodeValue): Constructor arguments of an anonymous class or
            enum constant.
        enum_constants (Mapping[str, TypeSpec]): Constant name to its anonymous class,
            empty for none.
        fields (tuple[FieldSpec, ...]): Static and instance fields.
        static_block (CodeValue): Body of the ``static { }`` block.
        initializer_block (CodeValue): Body of the instance initializer block.
        methods (tuple[MethodSpec, ...]): Constructors and methods.
        type_specs (tuple[TypeSpec, ...]): Nested types.
    """

    kind: TypeKind
    name: str
    doc: CodeValue = EMPTY_CODE
    annotations: tuple[AnnotationRef, ...] = ()
    modifiers: frozenset[Modifier] = frozenset()
    type_variables: tuple[TypeRef[TypeVariableName], ...] = ()
    superclass: TypeRef[Any] | None = None
    superinterfaces: tuple[TypeRef[Any], ...] = ()
    record_components: tuple[ParameterSpec, ...] = ()
    permits: tuple[TypeRef[Any], ...] = ()
    anonymous_arguments: CodeValue = EMPTY_CODE
    enum_constants: Mapping[str, TypeSpec] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )
    fields: tuple[FieldSpec, ...] = ()
    static_block: CodeValue = EMPTY_CODE
    initializer_block: CodeValue = EMPTY_CODE
    methods: tuple[MethodSpec, ...] = ()
    type_specs: tuple[TypeSpec, ...] = ()

    @classmethod
    def class_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.CLASS, name)

    @classmethod
    def interface_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.INTERFACE, name)

    @classmethod
    def enum_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.ENUM, name)

    @classmethod
    def annotation_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.ANNOTATION, name)

    @classmethod
    def record_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.RECORD, name)

    @classmethod
    def sealed_class_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.SEALED_CLASS, name)

    @classmethod
    def sealed_interface_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.SEALED_INTERFACE, name)

    @classmethod
    def non_sealed_class_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.NON_SEALED_CLASS, name)

    @classmethod
    def non_sealed_interface_builder(cls, name: str) -> TypeSpecBuilder:
        return TypeSpecBuilder(TypeKind.NON_SEALED_INTERFACE, name)

    @classmethod
    def anonymous_class_builder(
        cls, format: str | CodeValue = "", *arguments: Any
    ) -> TypeSpecBuilder:
        """Start an anonymous class whose constructor arguments are ``format``."""
        builder = TypeSpecBuilder(TypeKind.ANONYMOUS_CLASS, "")
        builder.anonymous_arguments.add_code(format, *arguments)
        return builder

    def has_modifier(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers

    @property
    def has_body(self) -> bool:
        """Whether an anonymous class declares any member."""
        return bool(
            self.fields
            or self.methods
            or self.type_specs
            or not self.static_block.is_empty
            or not self.initializer_block.is_empty
        )

    def iter_type_specs(self) -> Iterator[TypeSpec]:
        """Yield this type and all nested types, depth first."""
        yield self
        for nested in self.type_specs:
            yield from nested.iter_type_specs()

    def emit_to(self, writer: CodeWriter, implicit_modifiers: Set[Modifier] = frozenset()) -> None:
        # Nested types interrupt the continuation indent of an enclosing statement.
        previous_statement_line = writer.statement_line
        writer.statement_line = -1
        try:
            if self.kind is TypeKind.ANONYMOUS_CLASS:
                self._emit_anonymous_header(writer)
                self._emit_body(writer)
                writer.emit_raw("}")
            else:
                self._emit_header(writer, implicit_modifiers)
                writer.emit_raw(" {\n")
                self._emit_body(writer)
                writer.emit_raw("}\n")
        finally:
            writer.statement_line = previous_statement_line

    def _emit_header(self, writer: CodeWriter, implicit_modifiers: Set[Modifier]) -> None:
        # The header resolves names as if this type had no nested types.
        writer.push_type(dataclasses.replace(self, type_specs=()))
        writer.emit_doc(self.doc)
        writer.emit_annotations(self.annotations, inline=False)
        implicit = set(implicit_modifiers) | self.kind.as_member_modifiers
        writer.emit_modifiers(self.modifiers, implicit)
        writer.emit_raw(f"{self.kind.keyword} {self.name}")
        writer.emit_type_variables(self.type_variables)

        if self.kind is TypeKind.RECORD:
            writer.emit_raw("(")
            for index, component in enumerate(self.record_components):
                if index:
                    writer.emit_raw(", ")
                component.emit_to(writer)
            writer.emit_raw(")")

        if self.kind.is_interface:
            extends_types = list(self.superinterfaces)
            implements_types = []
        else:
            extends_types = []
            if self.superclass is not None and self.superclass.type_name != OBJECT:
                extends_types.append(self.superclass)
            implements_types = list(self.superinterfaces)
        _emit_supertypes(writer, "extends", extends_types)
        _emit_supertypes(writer, "implements", implements_types)
        _emit_supertypes(writer, "permits", list(self.permits))
        writer.pop_type()

    def _emit_anonymous_header(self, writer: CodeWriter) -> None:
        supertype = self.superinterfaces[0] if self.superinterfaces else self.superclass
        if supertype is None:
            raise ValueError("anonymous class has no supertype")
        writer.emit_raw("new ")
        writer.emit_type_ref(supertype)
        writer.emit_raw("(")
        writer.emit_code(self.anonymous_arguments)
        writer.emit_raw(") {\n")

    def _emit_body(self, writer: CodeWriter) -> None:
        writer.push_type(self)
        writer.indent()
        self._emit_members(writer)
        writer.unindent()
        writer.pop_type()
        writer.pop_type_variables(self.type_variables)

    def _emit_enum_constant(self, writer: CodeWriter, name: str) -> None:
        writer.emit_doc(self.doc)
        writer.emit_annotations(self.annotations, inline=False)
        writer.emit_raw(name)
        if not self.anonymous_arguments.is_empty:
            writer.emit_raw("(")
            writer.emit_code(self.anonymous_arguments)
            writer.emit_raw(")")
        if self.has_body:
            writer.emit_raw(" {\n")
            self._emit_body(writer)
            writer.emit_raw("}")

    def _emit_members(self, writer: CodeWriter) -> None:
        blank_line = _BlankLines(writer)
        kind = self.kind

        if self.enum_constants:
            needs_separator = bool(
                self.fields
                or self.methods
                or self.type_specs
                or not self.static_block.is_empty
                or not self.initializer_block.is_empty
            )
            last = len(self.enum_constants) - 1
            for index, (constant, body) in enumerate(self.enum_constants.items()):
                blank_line.before_member()
                body._emit_enum_constant(writer, constant)
                if index < last:
                    writer.emit_raw(",\n")
                elif needs_separator:
                    writer.emit_raw(";\n")
                else:
                    writer.emit_raw("\n")

        for field in self.fields:
            if field.has_modifier(Modifier.STATIC):
                blank_line.before_member()
                field.emit_to(writer, kind.implicit_field_modifiers)

        if not self.static_block.is_empty:
            blank_line.before_member()
            _emit_block(writer, "static {\n", self.static_block)

        for field in self.fields:
            if not field.has_modifier(Modifier.STATIC):
                blank_line.before_member()
                field.emit_to(writer, kind.implicit_field_modifiers)

        if not self.initializer_block.is_empty:
            blank_line.before_member()
            _emit_block(writer, "{\n", self.initializer_block)

        for method in self.methods:
            if method.is_constructor:
                blank_line.before_member()
                method.emit_to(writer, self.name, kind.implicit_method_modifiers)

        for method in self.methods:
            if not method.is_constructor:
                blank_line.before_member()
                method.emit_to(writer, None, kind.implicit_method_modifiers)

        for nested in self.type_specs:
            blank_line.before_member()
            nested.emit_to(writer, kind.implicit_type_modifiers)

    def __str__(self) -> str:
        from codegentle.writer.render import render

        return render(self)


class _BlankLines:
    """Emits a blank line before every member but the first."""

    def __init__(self, writer: CodeWriter) -> None:
        self.writer = writer
        self.required = False

    def before_member(self) -> None:
        if self.required:
            self.writer.emit_newline()
        self.required = True


def _emit_supertypes(writer: CodeWriter, keyword: str, types: list[TypeRef[Any]]) -> None:
    if not types:
        return
    writer.emit_raw(f" {keyword}")
    for index, type_ref in enumerate(types):
        if index:
            writer.emit_raw(",")
        writer.emit_raw(" ")
        writer.emit_type_ref(type_ref)


def _emit_block(writer: CodeWriter, opening: str, body: CodeValue) -> None:
    writer.emit_raw(opening)
    writer.indent()
    writer.emit_code(body, ensure_trailing_newline=True)
    writer.unindent()
    writer.emit_raw("}\n")


class TypeSpecBuilder:
    """Mutable builder for [`TypeSpec`][codegentle.spec.type_spec.TypeSpec].

    Args:
        kind (TypeKind): Kind of the built type.
        name (str): Simple name; must be a valid Java source name unless the kind is
            ``ANONYMOUS_CLASS``.
    """

    def __init__(self, kind: TypeKind, name: str) -> None:
        self.kind: TypeKind = kind
        if kind is not TypeKind.ANONYMOUS_CLASS:
            require_source_name(name, "type")
        self.name: str = name
        self.doc = CodeValue.builder()
        self.annotations: list[AnnotationRef] = []
        self.modifiers: set[Modifier] = set()
        self.type_variables: list[TypeRef[TypeVariableName]] = []
        self.superclass: TypeRef[Any] | None = None
        self.superinterfaces: list[TypeRef[Any]] = []
        self.record_components: list[ParameterSpec] = []
        self.permits: list[TypeRef[Any]] = []
        self.anonymous_arguments = CodeValue.builder()
        self.enum_constants: dict[str, TypeSpec] = {}
        self.fields: list[FieldSpec] = []
        self.static_block = CodeValue.builder()
        self.initializer_block = CodeValue.builder()
        self.methods: list[MethodSpec] = []
        self.type_specs: list[TypeSpec] = []

    def add_doc(self, format: str | CodeValue, *arguments: Any) -> TypeSpecBuilder:
        self.doc.add_code(format, *arguments)
        return self

    def add_annotation(self, *annotations: AnnotationRef) -> TypeSpecBuilder:
        self.annotations.extend(annotations)
        return self

    def add_modifiers(self, *modifiers: Modifier) -> TypeSpecBuilder:
        self.modifiers.update(modifiers)
        return self

    def add_type_variable(
        self, *type_variables: TypeVariableName | TypeRef[TypeVariableName]
    ) -> TypeSpecBuilder:
        self.type_variables.extend(as_type_ref(t) for t in type_variables)
        return self

    def superclass_type(self, type_name: TypeName | TypeRef[Any]) -> TypeSpecBuilder:
        """Set the superclass.

        Raises:
            ValueError: If this kind of type has no superclass.
        """
        if not self.kind.supports_superclass:
            raise ValueError(f"only classes have a superclass, not {self.kind.keyword}")
        self.superclass = as_type_ref(type_name)
        return self

    def add_superinterface(self, *type_names: TypeName | TypeRef[Any]) -> TypeSpecBuilder:
        """Add implemented interfaces.

        Raises:
            ValueError: On annotation types.
        """
        if self.kind is TypeKind.ANNOTATION:
            raise ValueError(f"{self.kind.keyword} {self.name} cannot have superinterfaces")
        self.superinterfaces.extend(as_type_ref(t) for t in type_names)
        return self

    def add_record_component(self, *components: ParameterSpec) -> TypeSpecBuilder:
        """Add components to the record header.

        Raises:
            ValueError: If this is not a record.
        """
        if self.kind is not TypeKind.RECORD:
            raise ValueError(f"{self.name} is not a record")
        self.record_components.extend(components)
        return self

    def add_permitted_subtype(self, *type_names: TypeName | TypeRef[Any]) -> TypeSpecBuilder:
        """Add subtypes to the ``permits`` clause.

        Raises:
            ValueError: If this is not a sealed type.
        """
        if not self.kind.is_sealed:
            raise ValueError(f"{self.name} is not sealed")
        self.permits.extend(as_type_ref(t) for t in type_names)
        return self

    def add_enum_constant(
        self, name: str, format: str | CodeValue | TypeSpec = "", *arguments: Any
    ) -> TypeSpecBuilder:
        """Add an enum constant.

        ``format`` and ``arguments`` are the constructor arguments. An anonymous class
        may be passed instead to give the constant a body.

        Raises:
            ValueError: If this is not an enum, the name is invalid, or a type other than
                an anonymous class is given.
        """
        if self.kind is not TypeKind.ENUM:
            raise ValueError(f"{self.name} is not an enum")
        require_source_name(name, "enum constant")
        if isinstance(format, TypeSpec):
            if format.kind is not TypeKind.ANONYMOUS_CLASS:
                raise ValueError(f"enum constant {name} needs an anonymous class body")
            self.enum_constants[name] = format
        else:
            self.enum_constants[name] = TypeSpec.anonymous_class_builder(
                format, *arguments
            ).build()
        return self

    def add_field(self, *fields: FieldSpec) -> TypeSpecBuilder:
        self.fields.extend(fields)
        return self

    def add_static_block(self, code: CodeValue) -> TypeSpecBuilder:
        self.static_block.add_code(code)
        return self

    def add_initializer_block(self, code: CodeValue) -> TypeSpecBuilder:
        """Append to the instance initializer.

        Raises:
            ValueError: On interfaces and annotation types.
        """
        if self.kind.is_interface or self.kind is TypeKind.ANNOTATION:
            raise ValueError(f"{self.kind.keyword} cannot have an initializer block")
        self.initializer_block.add_code(code)
        return self

    def add_method(self, *methods: MethodSpec) -> TypeSpecBuilder:
        self.methods.extend(methods)
        return self

    def add_type(self, *type_specs: TypeSpec) -> TypeSpecBuilder:
        self.type_specs.extend(type_specs)
        return self

    def build(self) -> TypeSpec:
        """Return the type.

        Raises:
            ValueError: On an enum without constants, an interface constructor,
                an instance field in a record, two access modifiers, or duplicate
                nested type names.
        """
        require_exclusive(self.modifiers, ACCESS_MODIFIERS, f"type {self.name!r}")
        if self.kind is TypeKind.ENUM and not self.enum_constants:
            raise ValueError(f"enum {self.name} has no constants")
        if self.kind.is_interface or self.kind is TypeKind.ANNOTATION:
            for method in self.methods:
                if method.is_constructor:
                    raise ValueError(f"{self.kind.keyword} {self.name} cannot have a constructor")
        if self.kind is TypeKind.RECORD:
            for field in self.fields:
                if not field.has_modifier(Modifier.STATIC):
                    raise ValueError(f"record {self.name} cannot have instance field {field.name}")
        nested_names = [t.name for t in self.type_specs]
        if len(nested_names) != len(set(nested_names)):
            raise ValueError(f"duplicate nested type names in {self.name}: {nested_names}")
        return TypeSpec(
            kind=self.kind,
            name=self.name,
            doc=self.doc.build(),
            annotations=tuple(self.annotations),
            modifiers=frozenset(self.modifiers),
            type_variables=tuple(self.type_variables),
            superclass=self.superclass,
            superinterfaces=tuple(self.superinterfaces),
            record_components=tuple(self.record_components),
            permits=tuple(self.permits),
            anonymous_arguments=self.anonymous_arguments.build(),
            enum_constants=MappingProxyType(dict(self.enum_constants)),
            fields=tuple(self.fields),
            static_block=self.static_block.build(),
            initializer_block=self.initializer_block.build(),
            methods=tuple(self.methods),
            type_specs=tuple(self.type_specs),
        )
