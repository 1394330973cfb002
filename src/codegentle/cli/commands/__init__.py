# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : src/codegentle/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Subcommands of the ``codegentle`` CLI."""

from __future__ import annotations
