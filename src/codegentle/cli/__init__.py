# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : src/codegentle/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Command line interface for CodeGentle, built on ``click``."""

from __future__ import annotations
