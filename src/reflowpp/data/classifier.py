# topmark:header:start
#
#   project      : ReflowPP
#   file         : classifier.py
#   file_relpath : src/reflowpp/data/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural classification of values for `reflowpp.data.printer.ValuePrinter`.

`classify` tags a value with the `ValueKind` that picks its rendering. The
checks run in a fixed order and the first match wins:

1. `ValueKind.SEQUENCE`: any sized, iterable container (``list``, ``tuple``,
   ``set``, ``deque``, dict views, ...) that is not a mapping, not text and not
   array-shaped.
2. `ValueKind.MAPPING`: any ``collections.abc.Mapping``.
3. `ValueKind.ARRAY`: fixed-size, typed buffers (``array.array``,
   ``memoryview``, and objects exposing ``tolist()`` with a non-empty ``shape``
   such as NumPy arrays). Zero-dimensional values such as NumPy scalars fall
   through to `ValueKind.SCALAR`.
4. `ValueKind.SELF_DESCRIBING`: instances implementing `PrettyPrintable`.
5. `ValueKind.SCALAR`: everything else, including ``str`` and ``bytes``.
"""

from __future__ import annotations

import array
from collections.abc import Collection, Mapping, Sized
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from reflowpp.data.printer import ValuePrinter

# Iterable, but rendered as one piece of text.
_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


class ValueKind(Enum):
    """Rendering strategy picked for a value."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ARRAY = "array"
    SELF_DESCRIBING = "self_describing"
    SCALAR = "scalar"


@runtime_checkable
class PrettyPrintable(Protocol):
    """Capability of values that render themselves.

    Example:
        ```python
        class Point:
            def __init__(self, x: int, y: int) -> None:
                self.x, self.y = x, y

            def pretty_print(self, printer: ValuePrinter) -> None:
                printer.print_text("Point(").begin_consistent(0)
                printer.print(self.x).print_text(",").brk(1, 0).print(self.y)
                printer.print_text(")").end()
        ```
    """

    def pretty_print(self, printer: ValuePrinter) -> None:
        """Emit this value's layout calls on ``printer``."""
        ...


def is_array(value: object) -> bool:
    """Return True for fixed-size typed buffers."""
    if isinstance(value, (array.array, memoryview)):
        return True
    shape: object = getattr(value, "shape", None)
    return callable(getattr(value, "tolist", None)) and isinstance(shape, Sized) and len(shape) > 0


def is_sequence(value: object) -> bool:
    """Return True for containers rendered as ``[a, b, c]``."""
    return (
        isinstance(value, Collection)
        and not isinstance(value, Mapping)
        and not isinstance(value, _TEXT_TYPES)
        and not is_array(value)
    )


def is_self_describing(value: object) -> bool:
    """Return True for instances implementing `PrettyPrintable`."""
    # A class defining pretty_print matches the protocol but is not an instance.
    return isinstance(value, PrettyPrintable) and not isinstance(value, type)


def classify(value: object) -> ValueKind:
    """Return the `ValueKind` used to render ``value``."""
    if is_sequence(value):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if is_array(value):
        return ValueKind.ARRAY
    if is_self_describing(value):
        return ValueKind.SELF_DESCRIBING
    return ValueKind.SCALAR


def box_array(value: object) -> list[object]:
    """Return the elements of an array-shaped value as plain Python objects.

    Typed elements (machine integers, floats, bytes) become the equivalent
    Python scalars; multi-dimensional buffers become nested lists.
    """
    tolist = getattr(value, "tolist", None)
    if callable(tolist):
        return list(tolist())
    return list(value)  # type: ignore[call-overload]
