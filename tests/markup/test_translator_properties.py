# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_translator_properties.py
#   file_relpath : tests/markup/test_translator_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for markup translation over generated element trees.

For any well-nested tree:
1) every group the translator opens is closed again,
2) a tree that fits renders exactly as its one-line form, and
3) at any width, line breaking only ever changes whitespace.
"""

from __future__ import annotations

from typing import cast

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from reflowpp.layout import Layouter, StringBackend
from reflowpp.markup import MarkupTranslator
from tests.doubles import RecordingLayouter
from tests.strategies_reflowpp import Element, feed, flat_markup, s_elements, strip_whitespace

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _count_elements(node: Element | str) -> int:
    if isinstance(node, str):
        return 0
    return 1 + sum(_count_elements(child) for child in node.children)


def _render(tree: Element, width: int) -> str:
    backend = StringBackend(width)
    translator = MarkupTranslator(Layouter(backend), declaration=None)
    feed(translator, tree)
    translator.finish()
    return backend.getvalue()


@settings(max_examples=60, deadline=None)
@given(tree=s_elements())
def test_groups_are_balanced(tree: Element) -> None:
    rec = RecordingLayouter()
    translator = MarkupTranslator(cast("Layouter", rec), declaration=None, fontify=True)
    feed(translator, tree)
    translator.finish()

    assert rec.begins() == rec.count("end")
    assert rec.count("mark") == 4 * _count_elements(tree)
    assert rec.closed


@settings(max_examples=60, deadline=None)
@given(tree=s_elements())
def test_fitting_tree_renders_flat(tree: Element) -> None:
    expected: str = flat_markup(tree)
    assert _render(tree, len(expected)) == expected


@settings(max_examples=60, deadline=None)
@given(tree=s_elements(), width=st.integers(min_value=1, max_value=40))
def test_breaking_only_changes_whitespace(tree: Element, width: int) -> None:
    out: str = _render(tree, width)
    assert strip_whitespace(out) == strip_whitespace(flat_markup(tree))
