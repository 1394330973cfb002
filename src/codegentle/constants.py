# codegentle:header:start
#
#   project      : CodeGentle
#   file         : constants.py
#   file_relpath : src/codegentle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""CodeGentle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CODEGENTLE_VERSION: str = get_version("codegentle")
