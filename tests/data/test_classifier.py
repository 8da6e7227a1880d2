# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_classifier.py
#   file_relpath : tests/data/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `reflowpp.data.classifier`."""

from __future__ import annotations

import array
from collections import OrderedDict, deque
from types import MappingProxyType
from typing import Any

from reflowpp.data import PrettyPrintable, ValueKind, ValuePrinter, classify
from reflowpp.data.classifier import box_array, is_array
from tests.conftest import parametrize


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def pretty_print(self, printer: ValuePrinter) -> None:
        printer.print_text("Point(").print(self.x).print_text(", ").print(self.y).print_text(")")


class FakeMatrix:
    """Array-like exposing the ``tolist``/``shape`` pair NumPy arrays have."""

    shape = (2, 2)

    def tolist(self) -> list[list[int]]:
        return [[1, 2], [3, 4]]


class ZeroDim:
    """NumPy scalars have ``tolist`` too, but an empty ``shape``."""

    shape = ()

    def tolist(self) -> int:
        return 5


class PointMapping(dict[str, int]):
    """A mapping that also describes itself; the mapping shape wins."""

    def pretty_print(self, printer: ValuePrinter) -> None:
        printer.print_text("never used")


@parametrize(
    "value, kind",
    [
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({1, 2}, ValueKind.SEQUENCE),
        (frozenset(), ValueKind.SEQUENCE),
        (deque([1]), ValueKind.SEQUENCE),
        ({"a": 1}.keys(), ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.MAPPING),
        (OrderedDict(a=1), ValueKind.MAPPING),
        (MappingProxyType({"a": 1}), ValueKind.MAPPING),
        (PointMapping(a=1), ValueKind.MAPPING),
        (array.array("i", [1, 2]), ValueKind.ARRAY),
        (memoryview(b"ab"), ValueKind.ARRAY),
        (FakeMatrix(), ValueKind.ARRAY),
        (ZeroDim(), ValueKind.SCALAR),
        (Point(1, 2), ValueKind.SELF_DESCRIBING),
        ("text", ValueKind.SCALAR),
        (b"bytes", ValueKind.SCALAR),
        (bytearray(b"x"), ValueKind.SCALAR),
        (42, ValueKind.SCALAR),
        (None, ValueKind.SCALAR),
        (Point, ValueKind.SCALAR),
    ],
)
def test_classify(value: Any, kind: ValueKind) -> None:
    assert classify(value) is kind


def test_point_satisfies_protocol() -> None:
    assert isinstance(Point(0, 0), PrettyPrintable)


def test_is_array_rejects_plain_sequences() -> None:
    assert not is_array([1, 2])
    assert not is_array(range(3))


def test_box_array_converts_typed_elements() -> None:
    assert box_array(array.array("d", [1.5, 2.0])) == [1.5, 2.0]
    assert box_array(memoryview(b"ab")) == [97, 98]
    assert box_array(FakeMatrix()) == [[1, 2], [3, 4]]
