# codegentle:header:start
#
#   project      : CodeGentle
#   file         : code_writer.py
#   file_relpath : src/codegentle/writer/code_writer.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""The code writer: qualification, statements and indentation.

A [`CodeWriter`][codegentle.writer.code_writer.CodeWriter] owns all mutable state of
one emission:

- the indentation level and the statement line counter;
- the current package and the stack of enclosing type specs;
- the type variables in lexical scope;
- the import table produced by the
  [`ImportCollector`][codegentle.writer.imports.ImportCollector].

It walks [`CodeValue`][codegentle.code.code_value.CodeValue] parts, decides for each
class or member name whether it can be written unqualified, and writes the result
through a [`LineWrapper`][codegentle.writer.line_wrapper.LineWrapper].

A writer is created for a single emission and must not be reused or shared.
Usage errors (unbalanced statements, unindenting below zero, a second package)
raise ``RuntimeError`` and abort the emission; text already flushed to the sink
stays there.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from codegentle.code.code_value import PLACEHOLDER, CodeValue
from codegentle.code.parts import (
    CodeValuePart,
    IndentPart,
    LiteralPart,
    NamePart,
    NewlinePart,
    SkipPart,
    StatementBeginPart,
    StatementEndPart,
    StringPart,
    TextPart,
    TypePart,
    TypeRefPart,
    UnindentPart,
    WrappingSpacePart,
    ZeroWidthSpacePart,
)
from codegentle.config.logging import get_logger
from codegentle.naming.class_name import ClassName, MemberName
from codegentle.naming.type_name import TypeName
from codegentle.naming.type_names import (
    ArrayTypeName,
    EmptyWildcardTypeName,
    LowerWildcardTypeName,
    ParameterizedTypeName,
    PrimitiveTypeName,
    TypeVariableName,
    UpperWildcardTypeName,
)
from codegentle.ref.annotation_ref import AnnotationRef, MemberValue, SingleMemberValue
from codegentle.ref.type_ref import TypeRef
from codegentle.writer.line_wrapper import UNBOUNDED_COLUMN_LIMIT, LineWrapper
from codegentle.writer.literals import string_literal_with_quotes
from codegentle.writer.strategy import DEFAULT_JAVA_STRATEGY

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from types import TracebackType

    from codegentle.code.parts import CodePart
    from codegentle.config.logging import CodegentleLogger
    from codegentle.naming.package_name import PackageName
    from codegentle.spec.modifiers import Modifier
    from codegentle.spec.type_spec import TypeSpec
    from codegentle.writer.imports import ImportName
    from codegentle.writer.line_wrapper import TextSink
    from codegentle.writer.strategy import Strategy

logger: CodegentleLogger = get_logger(__name__)

NO_STATEMENT: int = -1


class CommentType(Enum):
    """Kind of comment currently being written; selects the line prefix."""

    JAVADOC = "javadoc"
    COMMENT = "comment"


@runtime_checkable
class Emittable(Protocol):
    """An object (typically a spec) that writes itself to a code writer."""

    def emit_to(self, writer: CodeWriter) -> None: ...


class CodeWriter:
    """Writes names, types and code values to a text sink.

    Args:
        sink (TextSink): Destination; owned by the caller and never closed here.
        strategy (Strategy): Language rules for identifiers, implicit packages and terminators.
        indent (str): Indentation unit.
        column_limit (int): Line width for soft breaks; unbounded by default.
        imported_types (Mapping[str, ImportName] | None): Simple name to imported name.
        static_imports (Iterable[str]): ``Type.member`` or ``Type.*`` entries.
        always_qualify (Iterable[str]): Simple names that are never imported.
    """

    def __init__(
        self,
        sink: TextSink,
        strategy: Strategy = DEFAULT_JAVA_STRATEGY,
        *,
        indent: str = "    ",
        column_limit: int = UNBOUNDED_COLUMN_LIMIT,
        imported_types: Mapping[str, ImportName] | None = None,
        static_imports: Iterable[str] = (),
        always_qualify: Iterable[str] = (),
    ) -> None:
        self.strategy: Strategy = strategy
        self.indent_value: str = indent
        self.out: LineWrapper = LineWrapper(sink, indent, column_limit)
        self.imported_types: dict[str, ImportName] = dict(imported_types or {})
        self.static_imports: frozenset[str] = frozenset(static_imports)
        self.always_qualify: frozenset[str] = frozenset(always_qualify)

        self.indent_level: int = 0
        self.trailing_newline: bool = False
        self.comment_type: CommentType | None = None
        self.package_name: PackageName | None = None
        self.type_spec_stack: list[TypeSpec] = []
        self.current_type_variables: Counter[str] = Counter()
        # -1 outside a statement, otherwise the line number within the statement.
        self.statement_line: int = NO_STATEMENT

        self._deferred_type_name: ClassName | None = None

    # --- lifecycle ---

    def close(self) -> None:
        """Flush buffered text to the sink."""
        self.out.close()

    def __enter__(self) -> CodeWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # --- indentation and scopes ---

    def indent(self, levels: int = 1) -> CodeWriter:
        self.indent_level += levels
        return self

    def unindent(self, levels: int = 1) -> CodeWriter:
        if self.indent_level - levels < 0:
            raise RuntimeError(f"cannot unindent {levels} from {self.indent_level}")
        self.indent_level -= levels
        return self

    def push_package(self, package_name: PackageName) -> CodeWriter:
        if self.package_name is not None:
            raise RuntimeError(f"package already set: {self.package_name}")
        self.package_name = package_name
        return self

    def pop_package(self) -> CodeWriter:
        if self.package_name is None:
            raise RuntimeError("package not set")
        self.package_name = None
        return self

    def push_type(self, type_spec: TypeSpec) -> CodeWriter:
        self.type_spec_stack.append(type_spec)
        return self

    def pop_type(self) -> CodeWriter:
        self.type_spec_stack.pop()
        return self

    def push_type_variables(self, type_variables: Iterable[TypeRef[TypeVariableName]]) -> None:
        for ref in type_variables:
            self.current_type_variables[ref.type_name.name] += 1

    def pop_type_variables(self, type_variables: Iterable[TypeRef[TypeVariableName]]) -> None:
        for ref in type_variables:
            name = ref.type_name.name
            self.current_type_variables[name] -= 1
            if self.current_type_variables[name] <= 0:
                del self.current_type_variables[name]

    # --- statements ---

    def begin_statement(self) -> None:
        if self.statement_line != NO_STATEMENT:
            raise RuntimeError("statement begin followed by another statement begin")
        self.statement_line = 0
        self.out.start_record_last_non_blank_char()

    def end_statement(self) -> None:
        if self.statement_line == NO_STATEMENT:
            raise RuntimeError("statement end without statement begin")
        if self.statement_line > 0:
            # Undo the continuation indent added on the statement's second line.
            self.unindent(2)
        self.statement_line = NO_STATEMENT
        terminator = self.strategy.statement_terminator
        if terminator and self.out.last_non_blank_char != terminator:
            self.emit_raw(terminator)
        self.emit_raw("\n")
        self.out.stop_record_last_non_blank_char()

    # --- generic entry point ---

    def emit(self, value: object, *arguments: Any) -> CodeWriter:
        """Emit a code value, type name, type ref, annotation, spec or string.

        A string with ``arguments`` is parsed as a ``%V`` format; a string
        without arguments is emitted as raw text.

        Raises:
            TypeError: If ``value`` cannot be emitted.
        """
        match value:
            case str() if arguments:
                self.emit_code(CodeValue.of(value, *arguments))
            case str():
                self.emit_raw(value)
            case CodeValue():
                self.emit_code(value)
            case TypeRef():
                self.emit_type_ref(value)
            case TypeName():
                self.emit_type_name(value)
            case AnnotationRef():
                self.emit_annotation(value)
            case Emittable():
                value.emit_to(self)
            case _:
                raise TypeError(f"Cannot emit {type(value).__name__}")
        return self

    def emit_raw(self, s: str) -> CodeWriter:
        """Emit text, indenting each new line and applying comment prefixes."""
        first = True
        for line in s.split("\n"):
            if not first:
                if self.comment_type is not None and self.trailing_newline:
                    self._emit_indentation()
                    self.out.append(" *" if self.comment_type is CommentType.JAVADOC else "//")
                self.out.append(self.strategy.newline)
                self.trailing_newline = True
                if self.statement_line != NO_STATEMENT:
                    if self.statement_line == 0:
                        # Continuation lines of a statement get a double indent.
                        self.indent(2)
                    self.statement_line += 1
            first = False

            if not line:
                continue

            if self.trailing_newline:
                self._emit_indentation()
                if self.comment_type is CommentType.JAVADOC:
                    self.out.append(" * ")
                elif self.comment_type is CommentType.COMMENT:
                    self.out.append("// ")

            self.out.append(line)
            self.trailing_newline = False
        return self

    def emit_newline(self) -> CodeWriter:
        return self.emit_raw("\n")

    def emit_wrapping_space(self) -> CodeWriter:
        """Emit a soft break that wraps with a double continuation indent."""
        self.out.wrapping_space(self.indent_level + 2)
        return self

    def _emit_indentation(self) -> None:
        for _ in range(self.indent_level):
            self.out.append(self.indent_value)

    # --- code values ---

    def emit_code(
        self, code_value: CodeValue, *, ensure_trailing_newline: bool = False
    ) -> CodeWriter:
        """Walk the parts of ``code_value`` and emit each one."""
        parts = code_value.parts
        for index, part in enumerate(parts):
            following = parts[index + 1] if index + 1 < len(parts) else None
            self._emit_part(part, following)

        if self._deferred_type_name is not None:
            deferred = self._deferred_type_name
            self._deferred_type_name = None
            self.emit_type_name(deferred)

        if ensure_trailing_newline and not self.trailing_newline:
            self.emit_raw("\n")
        return self

    def _emit_part(self, part: CodePart, following: CodePart | None) -> None:
        match part:
            case TextPart(value=value):
                if self._deferred_type_name is not None:
                    deferred = self._deferred_type_name
                    self._deferred_type_name = None
                    if value.startswith(".") and self.emit_static_import_member(
                        deferred.canonical_name, value
                    ):
                        return
                    self.emit_type_name(deferred)
                self.emit_raw(value)
            case SkipPart():
                self.emit_raw(PLACEHOLDER)
            case LiteralPart(value=value):
                self.emit_literal(value)
            case NamePart(value=value):
                self.emit_name(value)
            case StringPart(value=value):
                if value is None:
                    self.emit_raw("null")
                else:
                    self.emit_raw(string_literal_with_quotes(value, self.indent_value))
            case TypePart(type_name=type_name):
                if self._is_static_import_candidate(type_name, following):
                    self.defer_type_name(type_name)
                else:
                    self.emit_type_name(type_name)
            case TypeRefPart(type_ref=type_ref):
                if not type_ref.annotations and self._is_static_import_candidate(
                    type_ref.type_name, following
                ):
                    self.defer_type_name(type_ref.type_name)
                else:
                    self.emit_type_ref(type_ref)
            case IndentPart(levels=levels):
                self.indent(levels)
            case UnindentPart(levels=levels):
                self.unindent(levels)
            case StatementBeginPart():
                self.begin_statement()
            case StatementEndPart():
                self.end_statement()
            case WrappingSpacePart():
                self.out.wrapping_space(self.indent_level + 2)
            case ZeroWidthSpacePart():
                self.out.zero_width_space(self.indent_level + 2)
            case NewlinePart():
                self.emit_raw("\n")
            case CodeValuePart(code_value=nested):
                self.emit_code(nested)
            case _:
                raise TypeError(f"Unknown code part {type(part).__name__}")

    def _is_static_import_candidate(self, type_name: TypeName, following: CodePart | None) -> bool:
        return (
            bool(self.static_imports)
            and isinstance(type_name, ClassName)
            and isinstance(following, TextPart)
            and following.value.startswith(".")
        )

    def defer_type_name(self, type_name: ClassName) -> None:
        """Hold ``type_name`` back until the next text part decides on static-import elision.

        Raises:
            RuntimeError: If another type is already pending.
        """
        if self._deferred_type_name is not None:
            raise RuntimeError(
                f"pending type for static import: {self._deferred_type_name.canonical_name}"
            )
        self._deferred_type_name = type_name

    def extract_member_name(self, part: str) -> str:
        """Return the longest prefix of ``part`` that is a valid identifier."""
        for end in range(1, len(part) + 1):
            if not self.strategy.is_identifier(part[:end]):
                return part[: end - 1]
        return part

    def emit_static_import_member(self, canonical_name: str, part: str) -> bool:
        """Emit ``part`` without its leading dot if it accesses a statically imported member.

        Args:
            canonical_name (str): Canonical name of the type preceding ``part``.
            part (str): Text starting with ``.``, e.g. ``.emptyList()``.

        Returns:
            bool: True if the member was covered by a static import and emitted.
        """
        member = self.extract_member_name(part[1:])
        if not member:
            return False
        if (
            f"{canonical_name}.{member}" in self.static_imports
            or f"{canonical_name}.*" in self.static_imports
        ):
            logger.trace("Static import elides %s.%s", canonical_name, member)
            self.emit_raw(part[1:])
            return True
        return False

    def emit_literal(self, value: object) -> CodeWriter:
        match value:
            case AnnotationRef():
                self.emit_annotation(value)
            case CodeValue():
                self.emit_code(value)
            case TypeRef():
                self.emit_type_ref(value)
            case TypeName():
                self.emit_type_name(value)
            case Emittable():
                value.emit_to(self)
            case None:
                self.emit_raw("null")
            case bool():
                self.emit_raw("true" if value else "false")
            case _:
                self.emit_raw(str(value))
        return self

    def emit_name(self, value: object) -> CodeWriter:
        match value:
            case str():
                self.emit_raw(value)
            case MemberName():
                self._emit_member_name(value)
            case _ if isinstance(getattr(value, "name", None), str):
                self.emit_raw(getattr(value, "name"))
            case _:
                raise TypeError(f"Expected a name but was {type(value).__name__}")
        return self

    # --- comments ---

    def emit_comment(self, code_value: CodeValue) -> CodeWriter:
        """Emit ``code_value`` as ``//`` line comments."""
        self.trailing_newline = True
        self.comment_type = CommentType.COMMENT
        try:
            self.emit_code(code_value)
            self.emit_raw("\n")
        finally:
            self.comment_type = None
        return self

    def emit_doc(self, code_value: CodeValue) -> CodeWriter:
        """Emit ``code_value`` as a ``/** ... */`` doc comment; nothing if it is empty."""
        if code_value.is_empty:
            return self
        self.emit_raw("/**\n")
        self.comment_type = CommentType.JAVADOC
        try:
            self.emit_code(code_value, ensure_trailing_newline=True)
        finally:
            self.comment_type = None
        self.emit_raw(" */\n")
        return self

    # --- annotations, modifiers, type variables ---

    def emit_annotation(self, annotation: AnnotationRef) -> CodeWriter:
        """Emit ``@Type``, ``@Type(value)`` or ``@Type(a = x, b = y)``."""
        self.emit_raw("@")
        self.emit_type_name(annotation.type_name)
        members = annotation.members
        if not members:
            return self

        self.emit_raw("(")
        if list(members) == ["value"]:
            self._emit_member_value(members["value"])
        else:
            for index, (name, value) in enumerate(members.items()):
                if index:
                    self.emit_raw(",")
                    self.out.wrapping_space(self.indent_level + 2)
                self.emit_raw(f"{name} = ")
                self._emit_member_value(value)
        self.emit_raw(")")
        return self

    def _emit_member_value(self, value: MemberValue) -> None:
        if isinstance(value, SingleMemberValue):
            self.emit_code(value.value)
            return
        self.emit_raw("{")
        for index, item in enumerate(value.values):
            if index:
                self.emit_raw(", ")
            self.emit_code(item)
        self.emit_raw("}")

    def emit_annotations(self, annotations: Iterable[AnnotationRef], *, inline: bool) -> CodeWriter:
        """Emit annotations followed by a space (``inline``) or a newline each."""
        for annotation in annotations:
            self.emit_annotation(annotation)
            self.emit_raw(" " if inline else "\n")
        return self

    def emit_modifiers(
        self, modifiers: Iterable[Modifier], implicit: Iterable[Modifier] = ()
    ) -> CodeWriter:
        """Emit modifiers in canonical order, skipping the ``implicit`` ones."""
        implicit_set = set(implicit)
        for modifier in sorted(set(modifiers), key=lambda m: m.order):
            if modifier not in implicit_set:
                self.emit_raw(modifier.value + " ")
        return self

    def emit_type_variables(
        self, type_variables: Sequence[TypeRef[TypeVariableName]]
    ) -> CodeWriter:
        """Emit a declaration such as ``<T extends Number & Comparable<T>, U>``.

        The variables are pushed into scope first so bounds may refer to them;
        callers pop them with
        [`pop_type_variables`][codegentle.writer.code_writer.CodeWriter.pop_type_variables].
        """
        if not type_variables:
            return self
        self.push_type_variables(type_variables)
        self.emit_raw("<")
        for index, ref in enumerate(type_variables):
            if index:
                self.emit_raw(", ")
            self.emit_annotations(ref.annotations, inline=True)
            self.emit_raw(ref.type_name.name)
            for bound_index, bound in enumerate(ref.type_name.bounds):
                self.emit_raw(" extends " if bound_index == 0 else " & ")
                self.emit_type_ref(bound)
        self.emit_raw(">")
        return self

    # --- type names ---

    def emit_type_ref(self, type_ref: TypeRef[Any], *, varargs: bool = False) -> CodeWriter:
        """Emit a type ref: type-use annotations, the type, then any nullable marker.

        With ``varargs`` an array type renders its component followed by ``...``.
        """
        self.emit_annotations(type_ref.annotations, inline=True)
        type_name = type_ref.type_name
        if varargs and isinstance(type_name, ArrayTypeName):
            self.emit_type_ref(type_name.component_type)
            self.emit_raw("...")
        else:
            self.emit_type_name(type_name)
        if self.strategy.marks_nullable and type_ref.is_nullable:
            self.emit_raw("?")
        return self

    def emit_type_name(self, type_name: TypeName) -> CodeWriter:
        match type_name:
            case ClassName():
                self._emit_class_name(type_name)
            case MemberName():
                self._emit_member_name(type_name)
            case ParameterizedTypeName(raw_type=raw, type_arguments=arguments):
                if type_name.enclosing_type is not None:
                    self.emit_type_name(type_name.enclosing_type)
                    self.emit_raw("." + raw.simple_name)
                else:
                    self._emit_class_name(raw)
                if arguments:
                    self.emit_raw("<")
                    for index, argument in enumerate(arguments):
                        if index:
                            self.emit_raw(", ")
                        self.emit_type_ref(argument)
                    self.emit_raw(">")
            case ArrayTypeName(component_type=component):
                self.emit_type_ref(component)
                self.emit_raw("[]")
            case TypeVariableName(name=name):
                self.emit_raw(name)
            case EmptyWildcardTypeName():
                self.emit_raw("?")
            case LowerWildcardTypeName(upper_bounds=bounds):
                self.emit_raw("? extends ")
                self._emit_bounds(bounds)
            case UpperWildcardTypeName(lower_bounds=bounds):
                self.emit_raw("? super ")
                self._emit_bounds(bounds)
            case PrimitiveTypeName(keyword=keyword):
                self.emit_raw(keyword)
            case _:
                raise TypeError(f"Unknown type name {type(type_name).__name__}")
        return self

    def _emit_bounds(self, bounds: Sequence[TypeRef[Any]]) -> None:
        for index, bound in enumerate(bounds):
            if index:
                self.emit_raw(" & ")
            self.emit_type_ref(bound)

    def _is_imported(self, class_name: ClassName) -> bool:
        imported = self.imported_types.get(class_name.simple_name)
        if isinstance(imported, ClassName) and imported == class_name:
            return True
        return class_name.canonical_name in self.static_imports

    def _collides(self, class_name: ClassName) -> bool:
        """Whether ``class_name``'s simple name is shadowed in the current lexical scope."""
        simple_name = class_name.simple_name
        if self.current_type_variables[simple_name] > 0:
            return True
        enclosing = class_name.enclosing_class_name
        for type_spec in reversed(self.type_spec_stack):
            for nested in type_spec.type_specs:
                if nested.name != simple_name:
                    continue
                if enclosing is None or enclosing.simple_name != type_spec.name:
                    return True
        if self.type_spec_stack and self.type_spec_stack[0].name == simple_name:
            return enclosing is not None or class_name.package_name != self.package_name
        return False

    def _emit_class_name(self, class_name: ClassName) -> None:
        omit_package = (
            self.package_name is not None and class_name.package_name == self.package_name
        )
        if self.strategy.omit_package(class_name.package_name):
            omit_package = True

        force_qualify = False
        names: list[str] = []
        seen: set[int] = set()
        current: ClassName | None = class_name
        imported = False
        while current is not None:
            if id(current) in seen:
                raise RuntimeError(f"Cyclic enclosing class chain at {current.simple_name!r}")
            seen.add(id(current))
            names.append(current.simple_name)
            if not imported and not force_qualify and self._is_imported(current):
                if self._collides(current):
                    force_qualify = True
                else:
                    imported = True
                    break
            current = current.enclosing_class_name

        if imported:
            omit_package = True
        elif omit_package and self._collides(class_name.top_level_class_name):
            force_qualify = True

        if force_qualify:
            # A shadowed simple name needs the full chain from the package down.
            names = list(reversed(class_name.simple_names))
            omit_package = False

        if not omit_package and not class_name.package_name.is_empty:
            self.emit_raw(f"{class_name.package_name}.")
        self.emit_raw(".".join(reversed(names)))

    def _emit_member_name(self, member_name: MemberName) -> None:
        enclosing = member_name.enclosing_class_name
        if member_name.canonical_name in self.static_imports or (
            enclosing is not None and f"{enclosing.canonical_name}.*" in self.static_imports
        ):
            self.emit_raw(member_name.name)
            return

        imported = self.imported_types.get(member_name.name)
        if isinstance(imported, MemberName) and imported == member_name:
            self.emit_raw(member_name.name)
            return

        if enclosing is not None:
            self._emit_class_name(enclosing)
            self.emit_raw("." + member_name.name)
            return

        omit_package = (
            self.package_name is not None and member_name.package_name == self.package_name
        ) or self.strategy.omit_package(member_name.package_name)
        if not omit_package and not member_name.package_name.is_empty:
            self.emit_raw(f"{member_name.package_name}.")
        self.emit_raw(member_name.name)
