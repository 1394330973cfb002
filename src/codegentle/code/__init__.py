# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : src/codegentle/code/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Code values: format strings parsed into parts."""

from __future__ import annotations
