# topmark:header:start
#
#   project      : ReflowPP
#   file         : layouter.py
#   file_relpath : src/reflowpp/layout/layouter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-breaking layout engine.

`Layouter` receives a stream of layout calls (text, groups, breaks) and decides
where lines break. The model is Oppen's:

- A *group* is opened with `Layouter.begin_consistent` or
  `Layouter.begin_inconsistent` and closed with `Layouter.end`. Its indentation
  is relative to the column at which the group starts.
- A *break* (`Layouter.brk`) renders as ``width`` spaces when its group fits on
  the current line. Otherwise it renders as a line terminator followed by the
  group's indentation plus ``offset``.
- In a consistent group that does not fit, every break fires. In an
  inconsistent group that does not fit, a break fires only if the text up to
  the next break of the same group would overflow the line.
- `Layouter.newline` is a forced break: it always fires and makes every
  enclosing group too wide to fit.

Calls are buffered and laid out on `Layouter.flush` / `Layouter.close`. Groups
that are still open when `flush` runs are treated as not fitting.

All mutating methods return the layouter itself so calls can be chained:

```python
out = Layouter.for_string(line_width=20)
out.begin_consistent().print("[").brk(0, 0).print("]").end().close()
print(out.backend.getvalue())
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeVar

from reflowpp.config.logging import get_logger
from reflowpp.constants import DEFAULT_INDENTATION, DEFAULT_LINE_WIDTH
from reflowpp.layout.backends import StringBackend, WriterBackend
from reflowpp.layout.errors import LayoutClosedError, UnbalancedGroupsError

if TYPE_CHECKING:
    from typing import TextIO

    from reflowpp.config.logging import ReflowLogger
    from reflowpp.layout.backends import Backend

logger: ReflowLogger = get_logger(__name__)

# Size assigned to anything that must never fit on a line: forced newlines and
# groups/breaks whose extent is not yet known at flush time.
_UNBOUNDED: Final[int] = 1 << 40

L = TypeVar("L", bound="Layouter")


# --- Buffered tokens ---


@dataclass(slots=True)
class _Text:
    text: str
    width: int


@dataclass(slots=True)
class _Mark:
    token: object


@dataclass(slots=True)
class _Begin:
    consistent: bool
    indent: int
    size: int = 0


@dataclass(slots=True)
class _End:
    pass


@dataclass(slots=True)
class _Break:
    width: int
    offset: int
    forced: bool = False
    size: int = 0


_Token = _Text | _Mark | _Begin | _End | _Break


@dataclass(slots=True)
class _Frame:
    """Print-time state of an open group."""

    consistent: bool
    broken: bool
    indent: int


class Layouter:
    """Oppen-style pretty-printing engine writing to a `Backend`.

    Args:
        backend (Backend): Output sink; its ``line_width`` bounds every line.
        indentation (int): Indentation used by `begin_consistent` /
            `begin_inconsistent` when no explicit indent is given.
    """

    def __init__(self, backend: Backend, indentation: int = DEFAULT_INDENTATION) -> None:
        self._backend: Backend = backend
        self._indentation: int = indentation
        self._tokens: list[_Token] = []
        # Root frame: behaves like an inconsistent group that never fits.
        self._frames: list[_Frame] = [_Frame(consistent=False, broken=True, indent=0)]
        self._column: int = 0
        self._depth: int = 0
        self._closed: bool = False

    # --- Factories ---

    @classmethod
    def for_string(
        cls: type[L],
        line_width: int = DEFAULT_LINE_WIDTH,
        indentation: int = DEFAULT_INDENTATION,
    ) -> L:
        """Return a layouter accumulating output in a `StringBackend`."""
        return cls(StringBackend(line_width), indentation)

    @classmethod
    def for_writer(
        cls: type[L],
        out: TextIO,
        line_width: int = DEFAULT_LINE_WIDTH,
        indentation: int = DEFAULT_INDENTATION,
    ) -> L:
        """Return a layouter writing to the text stream ``out``."""
        return cls(WriterBackend(out, line_width), indentation)

    # --- Introspection ---

    @property
    def backend(self) -> Backend:
        """The output sink this layouter writes to."""
        return self._backend

    @property
    def indentation(self) -> int:
        """Default group indentation."""
        return self._indentation

    @property
    def depth(self) -> int:
        """Number of groups currently open."""
        return self._depth

    @property
    def closed(self) -> bool:
        """Whether `close` has been called."""
        return self._closed

    # --- Layout primitives ---

    def print(self: L, text: str) -> L:
        """Output ``text``, which must not contain line terminators."""
        self._check_open()
        self._tokens.append(_Text(text, self._backend.measure(text)))
        return self

    def begin(self: L, consistent: bool, indent: int | None = None) -> L:
        """Open a group.

        Args:
            consistent (bool): If True all breaks of the group fire together.
            indent (int | None): Indentation of continuation lines relative to
                the column where the group starts; defaults to `indentation`.

        Returns:
            The layouter itself.
        """
        self._check_open()
        self._tokens.append(_Begin(consistent, self._indentation if indent is None else indent))
        self._depth += 1
        return self

    def begin_consistent(self: L, indent: int | None = None) -> L:
        """Open a consistent group (all breaks fire, or none)."""
        return self.begin(True, indent)

    def begin_inconsistent(self: L, indent: int | None = None) -> L:
        """Open an inconsistent group (each break decided on its own)."""
        return self.begin(False, indent)

    def end(self: L) -> L:
        """Close the innermost open group.

        Raises:
            UnbalancedGroupsError: If no group is open.
        """
        self._check_open()
        if self._depth == 0:
            raise UnbalancedGroupsError("end() called without a matching begin()")
        self._tokens.append(_End())
        self._depth -= 1
        return self

    def brk(self: L, width: int = 1, offset: int = 0) -> L:
        """Insert a break of ``width`` spaces and indentation ``offset``.

        Args:
            width (int): Number of spaces printed when the break does not fire.
            offset (int): Added to the group's indentation when the break fires.

        Returns:
            The layouter itself.
        """
        self._check_open()
        self._tokens.append(_Break(width, offset))
        return self

    def newline(self: L) -> L:
        """Insert a forced line break at the enclosing group's indentation."""
        self._check_open()
        self._tokens.append(_Break(0, 0, forced=True))
        return self

    def mark(self: L, token: object) -> L:
        """Pass the zero-width ``token`` to the backend at this position."""
        self._check_open()
        self._tokens.append(_Mark(token))
        return self

    def flush(self: L) -> L:
        """Lay out and write everything buffered so far."""
        self._check_open()
        self._drain()
        self._backend.flush()
        return self

    def close(self) -> None:
        """Flush remaining output and close the backend.

        Raises:
            UnbalancedGroupsError: If groups are still open.
        """
        self._check_open()
        if self._depth != 0:
            raise UnbalancedGroupsError(f"close() called with {self._depth} open group(s)")
        self._drain(final=True)
        self._closed = True
        self._backend.close()

    # --- Internals ---

    def _check_open(self) -> None:
        if self._closed:
            raise LayoutClosedError("layouter has been closed")

    def _drain(self, final: bool = False) -> None:
        tokens: list[_Token] = self._tokens
        self._tokens = []
        logger.trace("Laying out %d buffered token(s)", len(tokens))
        _measure(tokens, final)
        self._render(tokens)

    def _render(self, tokens: list[_Token]) -> None:
        backend: Backend = self._backend
        width: int = backend.line_width
        for tok in tokens:
            if isinstance(tok, _Text):
                backend.print(tok.text)
                self._column += tok.width
            elif isinstance(tok, _Break):
                frame: _Frame = self._frames[-1]
                fire: bool = tok.forced or (
                    frame.broken and (frame.consistent or tok.size > width - self._column)
                )
                if fire:
                    backend.newline()
                    self._column = max(0, frame.indent + tok.offset)
                    if self._column:
                        backend.print(" " * self._column)
                elif tok.width:
                    backend.print(" " * tok.width)
                    self._column += tok.width
            elif isinstance(tok, _Begin):
                self._frames.append(
                    _Frame(
                        consistent=tok.consistent,
                        broken=tok.size > width - self._column,
                        indent=self._column + tok.indent,
                    )
                )
            elif isinstance(tok, _End):
                self._frames.pop()
            else:
                backend.mark(tok.token)


def _measure(tokens: list[_Token], final: bool = False) -> None:
    """Compute sizes of groups and breaks in ``tokens``.

    A group's size is the width of everything up to its matching end. A break's
    size is its own width plus everything up to the next break of the same group
    or the end of that group, whichever comes first. With ``final`` set the input
    has ended, so breaks outside any group extend to the end of ``tokens``.
    Otherwise extents that reach past the buffered tokens get an unbounded size.
    """
    total: int = 0
    pending: list[_Begin | _Break] = []
    for tok in tokens:
        if isinstance(tok, _Text):
            total += tok.width
        elif isinstance(tok, _Begin):
            tok.size = -total
            pending.append(tok)
        elif isinstance(tok, _Break):
            if pending and isinstance(pending[-1], _Break):
                pending.pop().size += total
            tok.size = -total
            pending.append(tok)
            total += _UNBOUNDED if tok.forced else tok.width
        elif isinstance(tok, _End):
            if pending and isinstance(pending[-1], _Break):
                pending.pop().size += total
            # The matching begin may have been flushed already.
            if pending and isinstance(pending[-1], _Begin):
                pending.pop().size += total
    for tok in pending:
        tok.size = tok.size + total if final else _UNBOUNDED
