# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_printer_properties.py
#   file_relpath : tests/data/test_printer_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the value printer over generated nested values."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from reflowpp.data import pformat
from tests.strategies_reflowpp import flat_value, s_values, strip_whitespace

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(max_examples=80, deadline=None)
@given(value=s_values())
def test_fitting_value_renders_flat(value: Any) -> None:
    expected: str = flat_value(value)
    assert pformat(value, width=len(expected)) == expected


@settings(max_examples=80, deadline=None)
@given(value=s_values(), width=st.integers(min_value=1, max_value=30))
def test_breaking_only_changes_whitespace(value: Any, width: int) -> None:
    out: str = pformat(value, width=width)
    assert strip_whitespace(out) == strip_whitespace(flat_value(value))


@settings(max_examples=80, deadline=None)
@given(value=s_values())
def test_cycle_detection_does_not_change_acyclic_output(value: Any) -> None:
    assert pformat(value, width=20, detect_cycles=True) == pformat(value, width=20)
