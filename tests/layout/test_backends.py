# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_backends.py
#   file_relpath : tests/layout/test_backends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the layout output backends."""

from __future__ import annotations

import io

import pytest
from yachalk import chalk

from reflowpp.layout import ChalkBackend, HtmlMarkBackend, Mark, StringBackend, WriterBackend


def test_writer_backend_writes_text_and_newlines() -> None:
    out = io.StringIO()
    backend = WriterBackend(out, 40)
    backend.print("a")
    backend.newline()
    backend.print("b")
    assert out.getvalue() == "a\nb"
    assert backend.line_width == 40
    assert backend.measure("abc") == 3


def test_writer_backend_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        WriterBackend(io.StringIO(), 0)


def test_writer_backend_closes_stream_only_when_owned() -> None:
    shared = io.StringIO()
    WriterBackend(shared, 10).close()
    assert not shared.closed

    owned = io.StringIO()
    WriterBackend(owned, 10, close_stream=True).close()
    assert owned.closed


def test_string_backend_ignores_marks() -> None:
    backend = StringBackend(10)
    backend.print("x")
    backend.mark(Mark.START_BOLD)
    backend.print("y")
    backend.close()
    assert backend.getvalue() == "xy"


def test_html_backend_renders_bold_marks() -> None:
    backend = HtmlMarkBackend(10)
    backend.mark(Mark.START_BOLD)
    backend.print("doc")
    backend.mark(Mark.END_BOLD)
    backend.mark("unrelated")
    assert backend.getvalue() == "<b>doc</b>"


def test_chalk_backend_styles_text_between_marks() -> None:
    out = io.StringIO()
    backend = ChalkBackend(out, 10, enable_color=True)
    backend.print("<")
    backend.mark(Mark.START_BOLD)
    backend.print("doc")
    backend.print("   ")
    backend.mark(Mark.END_BOLD)
    backend.print(">")
    assert out.getvalue() == "<" + chalk.bold("doc") + "   >"


def test_chalk_backend_measures_unstyled_text() -> None:
    backend = ChalkBackend(io.StringIO(), 10)
    backend.mark(Mark.START_BOLD)
    assert backend.measure("doc") == 3


def test_chalk_backend_without_color_is_plain() -> None:
    out = io.StringIO()
    backend = ChalkBackend(out, 10, enable_color=False)
    backend.mark(Mark.START_BOLD)
    backend.print("doc")
    backend.mark(Mark.END_BOLD)
    assert out.getvalue() == "doc"


def test_chalk_backend_ignores_unbalanced_end_mark() -> None:
    out = io.StringIO()
    backend = ChalkBackend(out, 10)
    backend.mark(Mark.END_BOLD)
    backend.print("doc")
    assert out.getvalue() == "doc"
