# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __main__.py
#   file_relpath : src/codegentle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Module entry point for running CodeGentle via ``python -m codegentle``.

Equivalent to running the ``codegentle`` console script.

Examples:
    Render a type expression::

        python -m codegentle render "java.util.List<java.lang.String>"
"""

from __future__ import annotations

from codegentle.cli.main import cli

if __name__ == "__main__":
    cli()
