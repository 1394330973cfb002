# codegentle:header:start
#
#   project      : CodeGentle
#   file         : __init__.py
#   file_relpath : tests/code/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end
