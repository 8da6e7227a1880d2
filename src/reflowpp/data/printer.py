# topmark:header:start
#
#   project      : ReflowPP
#   file         : printer.py
#   file_relpath : src/reflowpp/data/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printing of arbitrary Python data structures.

`ValuePrinter` is a `Layouter` that knows how to print values: sequences,
mappings, typed arrays, values implementing
`reflowpp.data.classifier.PrettyPrintable`, and scalars. Containers nest to
any depth.

Layouts:
    A sequence prints as ``[xxx, yyy, zzz]`` when it fits on one line, and
    otherwise as::

        [xxx,
         yyy,
         zzz]

    A mapping uses the same shape with braces and ``key=value`` entries. An
    entry whose value does not fit moves the value to its own line, indented
    under the key, so long keys do not push wrapped values too far right::

        {key1=val1,
         key2=
           [long,
            value],
         key3=val3}

Cycles:
    Self-referencing containers recurse without end unless the printer was
    created with ``detect_cycles=True``; then a container met again on its own
    recursion path prints as ``<...>``.

Scalars:
    A scalar prints as its ``str()``. Line terminators inside it become forced
    newlines at the enclosing group's indentation.
"""

from __future__ import annotations

import re
import sys
from typing import TYPE_CHECKING, Any, TypeVar

from reflowpp.config.logging import get_logger
from reflowpp.constants import CYCLE_PLACEHOLDER, DEFAULT_INDENTATION, DEFAULT_LINE_WIDTH
from reflowpp.data.classifier import ValueKind, box_array, classify
from reflowpp.layout.backends import StringBackend, WriterBackend
from reflowpp.layout.layouter import Layouter

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import TextIO

    from reflowpp.config.logging import ReflowLogger
    from reflowpp.data.classifier import PrettyPrintable
    from reflowpp.layout.backends import Backend

logger: ReflowLogger = get_logger(__name__)

_LINE_BREAK: re.Pattern[str] = re.compile(r"\r\n|[\r\n]")

P = TypeVar("P", bound="ValuePrinter")


class ValuePrinter(Layouter):
    """Layouter extension that prints Python values according to their shape.

    All layout primitives inherited from `Layouter` (`begin_consistent`,
    `brk`, `end`, `mark`, `newline`, ...) stay available and return the printer,
    so self-describing values can mix them freely with `print`.

    Args:
        backend (Backend): Output sink.
        indentation (int): Default group indentation; used for mapping entries.
        detect_cycles (bool): Print ``<...>`` for containers already being printed.
    """

    def __init__(
        self,
        backend: Backend,
        indentation: int = DEFAULT_INDENTATION,
        *,
        detect_cycles: bool = False,
    ) -> None:
        super().__init__(backend, indentation)
        self._detect_cycles: bool = detect_cycles
        self._active: set[int] = set()

    def print(self: P, value: object) -> P:
        """Print ``value`` using the layout of its `ValueKind`."""
        kind: ValueKind = classify(value)
        if kind is ValueKind.SCALAR:
            return self.print_scalar(value)

        if self._detect_cycles:
            key: int = id(value)
            if key in self._active:
                logger.debug("Cycle detected at %s", type(value).__name__)
                return self.print_text(CYCLE_PLACEHOLDER)
            self._active.add(key)
            try:
                return self._print_kind(kind, value)
            finally:
                self._active.discard(key)
        return self._print_kind(kind, value)

    def _print_kind(self: P, kind: ValueKind, value: Any) -> P:
        if kind is ValueKind.SEQUENCE:
            return self.print_sequence(value)
        if kind is ValueKind.MAPPING:
            return self.print_mapping(value)
        if kind is ValueKind.ARRAY:
            return self.print_array(value)
        return self.print_self_describing(value)

    def print_text(self: P, text: str) -> P:
        """Print ``text`` verbatim, as one unbreakable piece."""
        return super().print(text)

    def print_scalar(self: P, value: object) -> P:
        """Print ``str(value)``, turning embedded line terminators into `newline` calls."""
        for i, line in enumerate(_LINE_BREAK.split(str(value))):
            if i:
                self.newline()
            if line:
                self.print_text(line)
        return self

    def print_sequence(self: P, items: Iterable[object]) -> P:
        """Print the elements of ``items`` as ``[a, b, c]``."""
        self.print_text("[").begin_consistent(0)
        for i, item in enumerate(items):
            if i:
                self.print_text(",").brk(1, 0)
            self.print(item)
        return self.print_text("]").end()

    def print_array(self: P, value: object) -> P:
        """Print an array-shaped value; same format as a sequence."""
        return self.print_sequence(box_array(value))

    def print_mapping(self: P, mapping: Mapping[Any, Any]) -> P:
        """Print ``mapping`` as ``{k1=v1, k2=v2}`` in its iteration order."""
        self.print_text("{").begin_consistent(0)
        for i, entry in enumerate(mapping.items()):
            if i:
                self.print_text(",").brk(1, 0)
            self.print_entry(entry)
        return self.print_text("}").end()

    def print_entry(self: P, entry: tuple[object, object]) -> P:
        """Print one ``key=value`` pair.

        The zero-width break after ``=`` lets the value move to its own
        indented line when the pair does not fit.
        """
        key, value = entry
        self.begin_consistent()
        self.print(key)
        self.print_text("=").brk(0, 0)
        self.print(value)
        return self.end()

    def print_self_describing(self: P, value: PrettyPrintable) -> P:
        """Hand the printer to ``value.pretty_print``."""
        value.pretty_print(self)
        return self


def pformat(
    value: object,
    *,
    width: int = DEFAULT_LINE_WIDTH,
    indentation: int = DEFAULT_INDENTATION,
    detect_cycles: bool = False,
) -> str:
    """Return ``value`` pretty-printed as a string."""
    backend = StringBackend(width)
    ValuePrinter(backend, indentation, detect_cycles=detect_cycles).print(value).close()
    return backend.getvalue()


def pprint(
    value: object,
    stream: TextIO | None = None,
    *,
    width: int = DEFAULT_LINE_WIDTH,
    indentation: int = DEFAULT_INDENTATION,
    detect_cycles: bool = False,
) -> None:
    """Pretty-print ``value`` to ``stream`` (default ``sys.stdout``), then a newline."""
    out: TextIO = stream if stream is not None else sys.stdout
    printer = ValuePrinter(WriterBackend(out, width), indentation, detect_cycles=detect_cycles)
    printer.print(value).close()
    out.write("\n")
