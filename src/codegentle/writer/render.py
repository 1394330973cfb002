# codegentle:header:start
#
#   project      : CodeGentle
#   file         : render.py
#   file_relpath : src/codegentle/writer/render.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Render any emittable value to a string.

This backs ``str()`` on names, refs, code values and specs. Without an explicit
strategy the output is fully qualified (``java.lang`` is not omitted) so that the
string is unambiguous.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from codegentle.writer.code_writer import CodeWriter
from codegentle.writer.line_wrapper import UNBOUNDED_COLUMN_LIMIT
from codegentle.writer.strategy import TO_STRING_JAVA_STRATEGY

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from codegentle.naming.package_name import PackageName
    from codegentle.writer.imports import ImportName
    from codegentle.writer.strategy import Strategy


def render(
    value: object,
    strategy: Strategy | None = None,
    *,
    indent: str = "    ",
    column_limit: int = UNBOUNDED_COLUMN_LIMIT,
    imported_types: Mapping[str, ImportName] | None = None,
    static_imports: Iterable[str] = (),
    package_name: PackageName | None = None,
) -> str:
    """Emit ``value`` with a fresh writer and return the produced text.

    Args:
        value (object): Anything [`CodeWriter.emit`][codegentle.writer.code_writer.CodeWriter.emit]
            accepts.
        strategy (Strategy | None): Language rules; ``TO_STRING_JAVA_STRATEGY`` if None.
        indent (str): Indentation unit.
        column_limit (int): Soft-break line width, unbounded by default.
        imported_types (Mapping[str, ImportName] | None): Import table to honor.
        static_imports (Iterable[str]): Static imports to honor.
        package_name (PackageName | None): Package whose types render unqualified.

    Returns:
        str: The rendered text.
    """
    buffer = io.StringIO()
    with CodeWriter(
        buffer,
        strategy if strategy is not None else TO_STRING_JAVA_STRATEGY,
        indent=indent,
        column_limit=column_limit,
        imported_types=imported_types,
        static_imports=static_imports,
    ) as writer:
        if package_name is not None:
            writer.push_package(package_name)
        writer.emit(value)
    return buffer.getvalue()
