# codegentle:header:start
#
#   project      : CodeGentle
#   file         : imports.py
#   file_relpath : src/codegentle/writer/imports.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Import collection: one read-only pass over a file's spec tree.

The [`ImportCollector`][codegentle.writer.imports.ImportCollector] walks every
reachable type name (in signatures, annotations, docs and code values) and builds
the table the [`CodeWriter`][codegentle.writer.code_writer.CodeWriter] consults to
decide whether a name may be written unqualified.

Registration rules for each class (or member) name:

- names without a package, or in the file's own package, are skipped;
- names whose simple name is in the always-qualify set are skipped;
- otherwise the first name seen for a simple name wins. Later, different names
  with the same simple name are left out and render fully qualified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from codegentle.code.code_value import CodeValue
from codegentle.code.parts import CodeValuePart, LiteralPart, NamePart, TypePart, TypeRefPart
from codegentle.config.logging import get_logger
from codegentle.naming.class_name import ClassName, MemberName
from codegentle.naming.type_name import TypeName
from codegentle.naming.type_names import (
    ArrayTypeName,
    ParameterizedTypeName,
    TypeVariableName,
    WildcardTypeName,
)
from codegentle.ref.annotation_ref import AnnotationRef
from codegentle.ref.type_ref import TypeRef
from codegentle.spec.field_spec import FieldSpec
from codegentle.spec.method_spec import MethodSpec
from codegentle.spec.parameter_spec import ParameterSpec
from codegentle.spec.type_spec import TypeSpec

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codegentle.config.logging import CodegentleLogger
    from codegentle.naming.package_name import PackageName

logger: CodegentleLogger = get_logger(__name__)

ImportName: TypeAlias = ClassName | MemberName


class ImportCollector:
    """Collects the simple-name to qualified-name import table of one file.

    Args:
        package_name (PackageName): Package of the file being written.
        always_qualify (Iterable[str]): Simple names that are never imported.
        import_members (bool): Register member names themselves (top-level member
            imports); otherwise only a member's enclosing class is considered.
    """

    def __init__(
        self,
        package_name: PackageName,
        always_qualify: Iterable[str] = (),
        *,
        import_members: bool = False,
    ) -> None:
        self.package_name: PackageName = package_name
        self.always_qualify: frozenset[str] = frozenset(always_qualify)
        self.import_members: bool = import_members
        self.imports: dict[str, ImportName] = {}

    def collect(self, *values: Any) -> ImportCollector:
        """Visit ``values`` depth first; anything that names no type is ignored."""
        for value in values:
            self._visit(value)
        return self

    def _visit(self, value: Any) -> None:
        match value:
            case TypeSpec():
                self._visit_type_spec(value)
            case MethodSpec():
                self._visit_method_spec(value)
            case FieldSpec():
                self.collect(value.doc, *value.annotations, value.type_ref, value.initializer)
            case ParameterSpec():
                self.collect(value.doc, *value.annotations, value.type_ref)
            case AnnotationRef():
                self._visit_annotation(value)
            case CodeValue():
                for part in value.parts:
                    self._visit_part(part)
            case TypeRef():
                self.collect(*value.annotations)
                self._visit_type_name(value.type_name)
            case TypeName():
                self._visit_type_name(value)
            case _:
                pass

    def _visit_type_spec(self, spec: TypeSpec) -> None:
        self.collect(spec.doc, *spec.annotations, *spec.type_variables)
        if spec.superclass is not None:
            self.collect(spec.superclass)
        self.collect(*spec.superinterfaces, *spec.record_components, *spec.permits)
        self.collect(spec.anonymous_arguments, *spec.enum_constants.values())
        self.collect(*spec.fields, spec.static_block, spec.initializer_block)
        self.collect(*spec.methods, *spec.type_specs)

    def _visit_method_spec(self, spec: MethodSpec) -> None:
        self.collect(spec.doc, *spec.annotations, *spec.type_variables)
        if spec.return_type is not None:
            self.collect(spec.return_type)
        self.collect(*spec.parameters, *spec.exceptions, spec.code, spec.default_value)

    def _visit_annotation(self, annotation: AnnotationRef) -> None:
        self.importable(annotation.type_name)
        for member in annotation.members.values():
            self.collect(*member.values)

    def _visit_part(self, part: object) -> None:
        match part:
            case TypePart(type_name=type_name):
                self._visit_type_name(type_name)
            case TypeRefPart(type_ref=type_ref):
                self.collect(type_ref)
            case LiteralPart(value=value):
                # Literals that are annotations, specs or names are emitted through the writer.
                self.collect(value)
            case NamePart(value=MemberName() as member):
                self._visit_type_name(member)
            case CodeValuePart(code_value=nested):
                self.collect(nested)
            case _:
                pass

    def _visit_type_name(self, type_name: TypeName) -> None:
        match type_name:
            case ClassName():
                self.importable(type_name)
            case MemberName(enclosing_class_name=enclosing):
                if self.import_members:
                    self.importable(type_name)
                elif enclosing is not None:
                    self.importable(enclosing)
            case ParameterizedTypeName(raw_type=raw, type_arguments=arguments):
                if type_name.enclosing_type is not None:
                    self._visit_type_name(type_name.enclosing_type)
                else:
                    self.importable(raw)
                self.collect(*arguments)
            case ArrayTypeName(component_type=component):
                self.collect(component)
            case TypeVariableName(bounds=bounds):
                self.collect(*bounds)
            case WildcardTypeName():
                self.collect(*type_name.bounds)
            case _:
                pass

    def importable(self, name: ImportName) -> None:
        """Register ``name`` unless a rule excludes it or its simple name is taken."""
        if name.package_name.is_empty or name.package_name == self.package_name:
            return
        simple_name = name.simple_name
        if simple_name in self.always_qualify:
            logger.trace("Not importing %s: always qualified", name.canonical_name)
            return
        registered = self.imports.setdefault(simple_name, name)
        if registered is name:
            logger.trace("Import %s", name.canonical_name)
        elif registered != name:
            logger.debug(
                "Import collision on %r: keeping %s, qualifying %s",
                simple_name,
                registered.canonical_name,
                name.canonical_name,
            )


def collect_imports(
    package_name: PackageName,
    *values: Any,
    always_qualify: Iterable[str] = (),
    import_members: bool = False,
) -> dict[str, ImportName]:
    """Return the import table for ``values`` written in ``package_name``."""
    collector = ImportCollector(package_name, always_qualify, import_members=import_members)
    return collector.collect(*values).imports
