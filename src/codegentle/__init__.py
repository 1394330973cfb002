# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : src/codegentle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle package.

CodeGentle generates Java source code from an immutable model of names, types,
code values and declarations. It writes each type name as short as its scope
allows and collects the import statements that make this possible.
"""

from __future__ import annotations
