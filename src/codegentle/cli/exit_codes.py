# codegentle:header:start
#
#   project      : CodeGentle
#   file         : exit_codes.py
#   file_relpath : src/codegentle/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Exit codes for the CodeGentle CLI.

The values follow the BSD ``sysexits`` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CodeGentle CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code.
        USAGE_ERROR: Invalid arguments, e.g. a malformed type expression.
            Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: A generated file could not be written. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
