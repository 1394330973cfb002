# codegentle:header:start
#
#   project      : CodeGentle
#   file         : render.py
#   file_relpath : src/codegentle/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle `render` command.

Parses type expressions and prints them as source text. With ``--short`` the
expressions are rendered the way a source file would write them: the import
table is collected over all expressions, the import lines are printed first and
each type then uses its shortest unambiguous form.

Examples:
    ```console
    $ codegentle render --short "java.util.Map<java.lang.String, java.util.List<a.B>>"
    import a.B;
    import java.util.List;
    import java.util.Map;

    Map<String, List<B>>
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from codegentle.cli.config_resolver import resolve_config_from_click
from codegentle.cli.errors import CodegentleUsageError
from codegentle.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_format_options,
    common_language_options,
)
from codegentle.config.logging import get_logger
from codegentle.naming.class_name import ClassName
from codegentle.naming.package_name import PackageName
from codegentle.naming.parse import parse_type_name
from codegentle.writer.imports import collect_imports
from codegentle.writer.render import render

if TYPE_CHECKING:
    from codegentle.cli.console import ClickConsole
    from codegentle.config import Config, Language
    from codegentle.config.logging import CodegentleLogger
    from codegentle.naming.type_name import TypeName
    from codegentle.writer.imports import ImportName

logger: CodegentleLogger = get_logger(__name__)


def _import_lines(imports: dict[str, ImportName], config: Config) -> list[str]:
    strategy = config.strategy()
    terminator = strategy.statement_terminator or ""
    lines: list[str] = []
    for name in imports.values():
        if not isinstance(name, ClassName):
            continue
        if config.skip_java_lang_imports and strategy.omit_package(name.package_name):
            continue
        lines.append(f"import {name.canonical_name}{terminator}")
    return sorted(lines)


@click.command(
    name="render",
    help="Render type expressions, e.g. 'java.util.List<? extends java.lang.Number>'.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("expressions", nargs=-1, required=True, metavar="EXPR...")
@click.option(
    "--package",
    "package",
    default=None,
    metavar="PKG",
    help="Package the expressions are written in; its types render unqualified.",
)
@click.option(
    "--short",
    "short",
    is_flag=True,
    help="Collect imports, print the import lines and render the shortest names.",
)
@click.option(
    "--import",
    "explicit_imports",
    multiple=True,
    metavar="FQCN",
    help="Treat this class as imported (repeatable); takes precedence over collected imports.",
)
@common_config_options
@common_format_options
@common_language_options
def render_command(
    *,
    expressions: tuple[str, ...],
    package: str | None,
    short: bool,
    explicit_imports: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    indent: str | None,
    column_limit: int | None,
    static_imports: tuple[str, ...],
    language: Language | None,
) -> None:
    """Render each expression on its own line.

    Raises:
        CodegentleUsageError: If an expression, an import or the package name is malformed.
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
        language=language,
    )

    try:
        package_name = PackageName.parse(package) if package else PackageName.EMPTY
        types: list[TypeName] = [parse_type_name(expression) for expression in expressions]
        imported: list[ClassName] = [ClassName.best_guess(fqcn) for fqcn in explicit_imports]
    except ValueError as exc:
        raise CodegentleUsageError(str(exc)) from exc

    imports: dict[str, ImportName] = {}
    for class_name in imported:
        imports.setdefault(class_name.simple_name, class_name)
    if short:
        collected = collect_imports(package_name, *types, always_qualify=config.always_qualify)
        for simple_name, name in collected.items():
            imports.setdefault(simple_name, name)
        lines = _import_lines(imports, config)
        for line in lines:
            console.print(line)
        if lines:
            console.print()

    for type_name in types:
        logger.debug("Rendering %r", type_name)
        console.print(
            render(
                type_name,
                config.strategy(),
                indent=config.indent,
                column_limit=config.column_limit,
                imported_types=imports,
                static_imports=config.static_imports,
                package_name=package_name,
            )
        )
