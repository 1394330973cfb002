# codegentle:header:start
#
#   project      : CodeGentle
#   file         : line_wrapper.py
#   file_relpath : src/codegentle/writer/line_wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 CodeGentle contributors
#
# codegentle:header:end

"""Column-aware line wrapping.

[`LineWrapper`][codegentle.writer.line_wrapper.LineWrapper] sits between the code
writer and the caller's text sink. Text appended after a soft break (a wrapping
space or a zero-width space) is held in a buffer until it is known whether the
break fits on the current line:

- if the buffered text still fits within ``column_limit`` the break becomes a
  single space (or nothing, for a zero-width space);
- otherwise the break becomes a newline followed by the break's indentation.

A [`RecordingSink`][codegentle.writer.line_wrapper.RecordingSink] wraps the sink and
remembers the last characters written so the writer can tell whether a statement
already ends with its terminator.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, Final, Protocol

if TYPE_CHECKING:
    from types import TracebackType

UNBOUNDED_COLUMN_LIMIT: Final[int] = sys.maxsize


class TextSink(Protocol):
    """Anything text can be written to, e.g. ``io.StringIO`` or an open text file."""

    def write(self, s: str, /) -> object: ...


class FlushType(Enum):
    """How a pending soft break is rendered when the buffer is flushed."""

    WRAP = "wrap"
    SPACE = "space"
    EMPTY = "empty"


class RecordingSink:
    """Text sink wrapper tracking the last character and the last non-blank character.

    The last non-blank character is only tracked while recording is switched on.
    """

    def __init__(self, delegate: TextSink) -> None:
        self.delegate: TextSink = delegate
        self.last_char: str | None = None
        self.last_non_blank_char: str | None = None
        self.recording: bool = False

    def write(self, s: str) -> None:
        if not s:
            return
        self.delegate.write(s)
        self.last_char = s[-1]
        if self.recording:
            stripped = s.rstrip()
            if stripped:
                self.last_non_blank_char = stripped[-1]

    def start_record_last_non_blank_char(self) -> None:
        self.recording = True

    def stop_record_last_non_blank_char(self) -> None:
        self.recording = False
        self.last_non_blank_char = None


class LineWrapper:
    """Buffering writer that decides lazily how soft breaks are rendered.

    Args:
        sink (TextSink): Destination for the rendered text. It is never closed here.
        indent (str): Indentation unit repeated ``indent_level`` times after a wrap.
        column_limit (int): Maximum line width; ``UNBOUNDED_COLUMN_LIMIT`` disables wrapping.
    """

    def __init__(
        self,
        sink: TextSink,
        indent: str = "    ",
        column_limit: int = UNBOUNDED_COLUMN_LIMIT,
    ) -> None:
        if column_limit < 0:
            raise ValueError(f"column_limit must not be negative: {column_limit}")
        self.out: RecordingSink = RecordingSink(sink)
        self.indent: str = indent
        self.column_limit: int = column_limit
        self.column: int = 0
        self.closed: bool = False

        self._buffer: list[str] = []
        self._buffered_length: int = 0
        # Indentation level of the pending break; -1 when nothing is pending.
        self._indent_level: int = -1
        self._next_flush: FlushType | None = None

    @property
    def has_pending_break(self) -> bool:
        return self._next_flush is not None

    @property
    def buffered_text(self) -> str:
        return "".join(self._buffer)

    @property
    def last_char(self) -> str | None:
        """Last character emitted, counting text still held in the buffer."""
        if self._buffer:
            return self._buffer[-1][-1]
        return self.out.last_char

    @property
    def last_non_blank_char(self) -> str | None:
        """Last non-blank character emitted while recording, counting buffered text."""
        if self.out.recording:
            stripped = self.buffered_text.rstrip()
            if stripped:
                return stripped[-1]
        return self.out.last_non_blank_char

    def start_record_last_non_blank_char(self) -> None:
        self.out.start_record_last_non_blank_char()

    def stop_record_last_non_blank_char(self) -> None:
        self.out.stop_record_last_non_blank_char()

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("LineWrapper is closed")

    def append(self, text: str) -> None:
        """Emit ``text``; it may be held back until the pending break is decided."""
        self._check_open()
        if not text:
            return

        if self._next_flush is not None:
            next_newline = text.find("\n")

            if next_newline == -1 and self.column + len(text) <= self.column_limit:
                self._buffer.append(text)
                self._buffered_length += len(text)
                self.column += len(text)
                return

            wrap = next_newline == -1 or self.column + next_newline > self.column_limit
            self._flush(FlushType.WRAP if wrap else self._next_flush)

        self.out.write(text)
        last_newline = text.rfind("\n")
        if last_newline != -1:
            self.column = len(text) - last_newline - 1
        else:
            self.column += len(text)

    def wrapping_space(self, indent_level: int) -> None:
        """Emit a space, or a newline plus ``indent_level`` indents if the line overflows."""
        self._check_open()
        if self._next_flush is not None:
            self._flush(self._next_flush)
        self.column += 1
        self._next_flush = FlushType.SPACE
        self._indent_level = indent_level

    def zero_width_space(self, indent_level: int) -> None:
        """Emit nothing, or a newline plus ``indent_level`` indents if the line overflows."""
        self._check_open()
        if self.column == 0:
            return
        if self._next_flush is not None:
            self._flush(self._next_flush)
        self._next_flush = FlushType.EMPTY
        self._indent_level = indent_level

    def _flush(self, flush_type: FlushType) -> None:
        if flush_type is FlushType.WRAP:
            self.out.write("\n")
            self.out.write(self.indent * self._indent_level)
            self.column = self._indent_level * len(self.indent) + self._buffered_length
        elif flush_type is FlushType.SPACE:
            self.out.write(" ")
        self.out.write("".join(self._buffer))
        self._buffer.clear()
        self._buffered_length = 0
        self._indent_level = -1
        self._next_flush = None

    def close(self) -> None:
        """Flush any pending break and buffered text; further appends raise ``RuntimeError``."""
        if self.closed:
            return
        if self._next_flush is not None:
            self._flush(self._next_flush)
        self.closed = True

    def __enter__(self) -> LineWrapper:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
