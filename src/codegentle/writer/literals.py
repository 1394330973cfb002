# codegentle:header:start
#
#   project      : CodeGentle
#   file         : literals.py
#   file_relpath : src/codegentle/writer/literals.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Java character and string literal escaping."""

from __future__ import annotations

import unicodedata
from typing import Final

_ESCAPES: Final[dict[str, str]] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    '"': '"',
    "'": "\\'",
    "\\": "\\\\",
}


def character_literal_without_single_quotes(c: str) -> str:
    """Escape one character for use inside a character literal.

    ISO control characters without a short escape become ``\\uXXXX``.
    """
    escaped = _ESCAPES.get(c)
    if escaped is not None:
        return escaped
    if unicodedata.category(c) == "Cc":
        return f"\\u{ord(c):04x}"
    return c


def string_literal_with_quotes(value: str, indent: str) -> str:
    """Return ``value`` as a double-quoted Java string literal.

    A newline that is not the last character ends the current literal and
    continues it on the next line as ``+ "...``, indented twice by ``indent``.

    Args:
        value (str): Raw string content.
        indent (str): Indentation unit of the surrounding code.

    Returns:
        str: The literal including its quotes.
    """
    result: list[str] = ['"']
    for i, c in enumerate(value):
        if c == "'":
            result.append("'")
        elif c == '"':
            result.append('\\"')
        elif c == "\n" and i + 1 < len(value):
            result.append('\\n"\n')
            result.append(indent + indent)
            result.append('+ "')
        else:
            result.append(character_literal_without_single_quotes(c))
    result.append('"')
    return "".join(result)
