# codegentle:header:start
#
#   project      : CodeGentle
#   file         : test_literals.py
#   file_relpath : tests/writer/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Tests for Java literal escaping."""

from __future__ import annotations

from codegentle.writer.literals import (
    character_literal_without_single_quotes,
    string_literal_with_quotes,
)
from tests.conftest import parametrize


@parametrize(
    "char, expected",
    [
        ("a", "a"),
        ("\b", "\\b"),
        ("\t", "\\t"),
        ("\n", "\\n"),
        ("\f", "\\f"),
        ("\r", "\\r"),
        ('"', '"'),
        ("'", "\\'"),
        ("\\", "\\\\"),
        ("\x00", "\\u0000"),
        ("\x1b", "\\u001b"),
        ("\x7f", "\\u007f"),
        ("é", "é"),
    ],
)
def test_character_literal(char: str, expected: str) -> None:
    assert character_literal_without_single_quotes(char) == expected


def test_string_literal_quotes_and_escapes() -> None:
    assert string_literal_with_quotes("", "  ") == '""'
    assert string_literal_with_quotes("it's", "  ") == '"it\'s"'
    assert string_literal_with_quotes('say "hi"', "  ") == '"say \\"hi\\""'
    assert string_literal_with_quotes("tab\there", "  ") == '"tab\\there"'


def test_trailing_newline_stays_in_one_literal() -> None:
    assert string_literal_with_quotes("line\n", "  ") == '"line\\n"'


def test_inner_newlines_split_the_literal() -> None:
    result = string_literal_with_quotes("a\nb\nc", "  ")
    assert result == '"a\\n"\n    + "b\\n"\n    + "c"'
