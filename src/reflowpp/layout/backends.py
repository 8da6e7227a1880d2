# topmark:header:start
#
#   project      : ReflowPP
#   file         : backends.py
#   file_relpath : src/reflowpp/layout/backends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output backends for the layout engine.

A backend is the sink the `Layouter` writes its decisions to: plain text,
line terminators and zero-width marks. Backends also define how wide a piece
of text is, which is what the engine measures against `line_width`.

Key types:
    - `Backend`: structural protocol every sink implements.
    - `WriterBackend`: writes to any text stream (``sys.stdout``, an open file).
    - `StringBackend`: accumulates output in memory; read it with `getvalue`.
    - `HtmlMarkBackend`: in-memory sink rendering bold marks as ``<b>``/``</b>``.
    - `ChalkBackend`: stream sink rendering bold marks as ANSI styling (yachalk).

Errors raised by the underlying stream (``OSError`` and subclasses) propagate
to the caller unchanged.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol

from yachalk import chalk

from reflowpp.layout.marks import Mark

if TYPE_CHECKING:
    from typing import TextIO


class Backend(Protocol):
    """Minimal interface of a layout output sink."""

    @property
    def line_width(self) -> int:
        """Maximum number of columns a line may occupy."""
        ...

    def print(self, text: str) -> None:
        """Write ``text``; it never contains a line terminator."""
        ...

    def newline(self) -> None:
        """Terminate the current line."""
        ...

    def mark(self, token: object) -> None:
        """Receive a zero-width mark emitted at the current position."""
        ...

    def measure(self, text: str) -> int:
        """Return the number of columns ``text`` occupies once printed."""
        ...

    def flush(self) -> None:
        """Push buffered output to the underlying sink."""
        ...

    def close(self) -> None:
        """Flush and release the underlying sink."""
        ...


class WriterBackend:
    """Backend writing to a text stream.

    Args:
        out (TextIO): Destination stream.
        line_width (int): Maximum line width used by the layout engine.
        close_stream (bool): If True, `close` also closes ``out``. Leave False for
            streams owned by someone else (e.g. ``sys.stdout``).
    """

    def __init__(self, out: TextIO, line_width: int, *, close_stream: bool = False) -> None:
        if line_width < 1:
            raise ValueError(f"line_width must be positive, got {line_width}")
        self._out: TextIO = out
        self._line_width: int = line_width
        self._close_stream: bool = close_stream

    @property
    def line_width(self) -> int:
        """Maximum number of columns a line may occupy."""
        return self._line_width

    def print(self, text: str) -> None:
        self._out.write(text)

    def newline(self) -> None:
        self._out.write("\n")

    def mark(self, token: object) -> None:
        # Plain text output has no use for marks.
        return None

    def measure(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        self._out.flush()

    def close(self) -> None:
        self.flush()
        if self._close_stream:
            self._out.close()


class StringBackend(WriterBackend):
    """Backend accumulating output in a private in-memory buffer."""

    def __init__(self, line_width: int) -> None:
        self._buffer: io.StringIO = io.StringIO()
        super().__init__(self._buffer, line_width)

    def getvalue(self) -> str:
        """Return everything written so far (also valid after `close`)."""
        return self._buffer.getvalue()


class HtmlMarkBackend(StringBackend):
    """In-memory backend that renders bold marks as HTML ``<b>`` tags.

    The tags are zero-width as far as line breaking is concerned.
    """

    def mark(self, token: object) -> None:
        if token is Mark.START_BOLD:
            self._buffer.write("<b>")
        elif token is Mark.END_BOLD:
            self._buffer.write("</b>")


class ChalkBackend(WriterBackend):
    """Stream backend that renders bold marks with ANSI styles.

    Text printed between `Mark.START_BOLD` and `Mark.END_BOLD` is wrapped with
    ``chalk.bold``. Widths are measured on the unstyled text, so escape codes
    never count against the line width.

    Args:
        out (TextIO): Destination stream.
        line_width (int): Maximum line width used by the layout engine.
        enable_color (bool): If False, marks are ignored and output stays plain.
    """

    def __init__(self, out: TextIO, line_width: int, *, enable_color: bool = True) -> None:
        super().__init__(out, line_width)
        self._enable_color: bool = enable_color
        self._bold_depth: int = 0

    def print(self, text: str) -> None:
        if self._enable_color and self._bold_depth > 0 and text.strip():
            text = chalk.bold(text)
        super().print(text)

    def mark(self, token: object) -> None:
        if token is Mark.START_BOLD:
            self._bold_depth += 1
        elif token is Mark.END_BOLD and self._bold_depth > 0:
            self._bold_depth -= 1
