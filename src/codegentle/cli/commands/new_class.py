# codegentle:header:start
#
#   project      : CodeGentle
#   file         : new_class.py
#   file_relpath : src/codegentle/cli/commands/new_class.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle `new-class` command.

Generates the skeleton of a Java type and prints it, or writes it below an
output directory following the package layout. A class gets a private final
field, a constructor parameter and a getter for every ``--field TYPE:NAME``.

Examples:
    ```console
    $ codegentle new-class com.example.Point --field int:x --field int:y
    $ codegentle new-class com.example.Color --kind enum --constant RED --constant GREEN
    $ codegentle new-class com.example.Shape --kind interface -o src/main/java
    ```
"""

from __future__ import annotations

import io
from enum import Enum
from typing import TYPE_CHECKING

import click

from codegentle.cli.cli_types import EnumChoiceParam, FieldParam, TypeNameParam
from codegentle.cli.config_resolver import resolve_config_from_click
from codegentle.cli.errors import CodegentleIOError, CodegentleUsageError
from codegentle.cli.options import CONTEXT_SETTINGS, common_config_options, common_format_options
from codegentle.config.logging import get_logger
from codegentle.naming.class_name import ClassName
from codegentle.naming.type_names import BOOLEAN
from codegentle.spec.field_spec import FieldSpec
from codegentle.spec.file_spec import FileSpec
from codegentle.spec.method_spec import MethodSpec
from codegentle.spec.modifiers import Modifier
from codegentle.spec.type_spec import TypeKind, TypeSpec, TypeSpecBuilder
from codegentle.writer.strategy import DEFAULT_JAVA_STRATEGY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codegentle.cli.cli_types import FieldArg
    from codegentle.cli.console import ClickConsole
    from codegentle.config import Config
    from codegentle.config.logging import CodegentleLogger
    from codegentle.naming.type_name import TypeName

logger: CodegentleLogger = get_logger(__name__)


class NewTypeKind(str, Enum):
    """Kinds of type the command can scaffold."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"

    @property
    def type_kind(self) -> TypeKind:
        return TypeKind[self.name]


def getter_name(field: FieldSpec) -> str:
    """Return ``getX`` for a field ``x``, or ``isX`` for a ``boolean`` field."""
    prefix = "is" if field.type_ref.type_name == BOOLEAN else "get"
    return prefix + field.name[0].upper() + field.name[1:]


def build_type_spec(
    class_name: ClassName,
    *,
    kind: NewTypeKind = NewTypeKind.CLASS,
    superclass: TypeName | None = None,
    interfaces: Sequence[TypeName] = (),
    fields: Sequence[FieldArg] = (),
    constants: Sequence[str] = (),
) -> TypeSpec:
    """Build the skeleton type.

    Raises:
        ValueError: If the options do not fit ``kind`` or a name is invalid.
    """
    if fields and kind is not NewTypeKind.CLASS:
        raise ValueError(f"--field is only supported for classes, not {kind.value}")
    if constants and kind is not NewTypeKind.ENUM:
        raise ValueError("--constant is only supported for enums")
    if superclass is not None and kind is not NewTypeKind.CLASS:
        raise ValueError(f"--extends is only supported for classes, not {kind.value}")

    builder = TypeSpecBuilder(kind.type_kind, class_name.simple_name)
    builder.add_modifiers(Modifier.PUBLIC)
    if superclass is not None:
        builder.superclass_type(superclass)
    builder.add_superinterface(*interfaces)
    for constant in constants:
        builder.add_enum_constant(constant)

    if fields:
        field_specs = [
            FieldSpec.builder(f.type_name, f.name)
            .add_modifiers(Modifier.PRIVATE, Modifier.FINAL)
            .build()
            for f in fields
        ]
        builder.add_field(*field_specs)

        constructor = MethodSpec.constructor_builder().add_modifiers(Modifier.PUBLIC)
        for spec in field_specs:
            constructor.add_parameter(spec.type_ref, spec.name)
            constructor.add_statement("this.%V = %V", spec.name, spec.name)
        builder.add_method(constructor.build())

        for spec in field_specs:
            builder.add_method(
                MethodSpec.builder(getter_name(spec))
                .add_modifiers(Modifier.PUBLIC)
                .returns(spec.type_ref)
                .add_statement("return %V", spec.name)
                .build()
            )
    return builder.build()


def build_file_spec(class_name: ClassName, type_spec: TypeSpec, config: Config) -> FileSpec:
    return FileSpec.builder(class_name.package_name, type_spec).apply_config(config).build()


@click.command(
    name="new-class",
    help="Generate the skeleton of a Java type named by its fully qualified name.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("fqcn", metavar="FQCN")
@click.option(
    "--kind",
    "kind",
    type=EnumChoiceParam(NewTypeKind),
    default=NewTypeKind.CLASS.value,
    help=f"Kind of type ({', '.join(v.value for v in NewTypeKind)}).",
)
@click.option("--extends", "superclass", type=TypeNameParam(), default=None, help="Superclass.")
@click.option(
    "--implements",
    "interfaces",
    type=TypeNameParam(),
    multiple=True,
    help="Implemented interface (repeatable).",
)
@click.option(
    "--field",
    "fields",
    type=FieldParam(),
    multiple=True,
    metavar="TYPE:NAME",
    help="Field with constructor parameter and getter (repeatable).",
)
@click.option(
    "--constant",
    "constants",
    multiple=True,
    metavar="NAME",
    help="Enum constant (repeatable).",
)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Write below this source root instead of printing.",
)
@common_config_options
@common_format_options
def new_class_command(
    *,
    fqcn: str,
    kind: NewTypeKind,
    superclass: TypeName | None,
    interfaces: tuple[TypeName, ...],
    fields: tuple[FieldArg, ...],
    constants: tuple[str, ...],
    output: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent: str | None,
    column_limit: int | None,
    static_imports: tuple[str, ...],
) -> None:
    """Generate and emit the skeleton.

    Raises:
        CodegentleUsageError: If the name or the options are invalid.
        CodegentleIOError: If the file cannot be written.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        indent=indent,
        column_limit=column_limit,
        static_imports=static_imports,
    )

    try:
        class_name = ClassName.best_guess(fqcn)
        if class_name.enclosing_class_name is not None:
            raise ValueError(f"{fqcn!r} names a nested class; give a top-level class")
        type_spec = build_type_spec(
            class_name,
            kind=kind,
            superclass=superclass,
            interfaces=interfaces,
            fields=fields,
            constants=constants,
        )
        file_spec = build_file_spec(class_name, type_spec, config)
    except ValueError as exc:
        raise CodegentleUsageError(str(exc)) from exc

    if output is None:
        buffer = io.StringIO()
        file_spec.write_to(buffer, DEFAULT_JAVA_STRATEGY)
        console.print(buffer.getvalue(), nl=False)
        return

    try:
        path = file_spec.write_to_directory(output, DEFAULT_JAVA_STRATEGY)
    except OSError as exc:
        raise CodegentleIOError(f"Cannot write {fqcn} below {output}: {exc}") from exc
    console.print(f"Wrote {console.styled(str(path), bold=True)}")
