# topmark:header:start
#
#   project      : ReflowPP
#   file         : test_translator.py
#   file_relpath : tests/markup/test_translator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-trace tests for `reflowpp.markup.MarkupTranslator`.

The translator drives a `RecordingLayouter`, so each test asserts on the
exact layout calls emitted for a sequence of markup events.
"""

from __future__ import annotations

from typing import cast

import pytest

from reflowpp.constants import XML_DECLARATION
from reflowpp.layout import Layouter, Mark
from reflowpp.markup import MarkupTranslator, TranslationError
from tests.doubles import FailingBackend, RecordingLayouter


def make_translator(
    *,
    indentation: int = 3,
    declaration: str | None = None,
    fontify: bool = False,
) -> tuple[MarkupTranslator, RecordingLayouter]:
    rec = RecordingLayouter()
    translator = MarkupTranslator(
        cast("Layouter", rec),
        indentation,
        declaration=declaration,
        fontify=fontify,
    )
    return translator, rec


def test_construction_opens_document_group() -> None:
    _, rec = make_translator()
    assert rec.calls == [("begin_consistent", 0)]


def test_construction_prints_declaration_on_its_own_line() -> None:
    _, rec = make_translator(declaration=XML_DECLARATION)
    assert rec.calls == [
        ("begin_consistent", 0),
        ("print", XML_DECLARATION),
        ("newline",),
    ]


def test_first_element_has_no_leading_break() -> None:
    translator, rec = make_translator()
    rec.clear()
    translator.on_start("doc")
    assert rec.calls == [
        ("begin_consistent", 3),
        ("print", "<doc"),
        ("print", ">"),
    ]


def test_sibling_elements_are_separated_by_breaks() -> None:
    translator, rec = make_translator()
    translator.on_start("doc")
    translator.on_start("head")
    translator.on_end("head")
    rec.clear()
    translator.on_start("body")
    assert rec.calls[0] == ("brk", 0, 0)


def test_end_tag_break_cancels_indentation() -> None:
    translator, rec = make_translator(indentation=4)
    translator.on_start("doc")
    rec.clear()
    translator.on_end("doc")
    assert rec.calls == [
        ("brk", 0, -4),
        ("print", "</doc"),
        ("print", ">"),
        ("end",),
    ]


def test_attributes_keep_input_order() -> None:
    translator, rec = make_translator()
    rec.clear()
    translator.on_start("a", [("z", "1"), ("b", "2"), ("m", "3")])
    assert rec.calls == [
        ("begin_consistent", 3),
        ("print", "<a"),
        ("print", " "),
        ("begin_consistent", 0),
        ("print", 'z="1"'),
        ("brk", 1, 0),
        ("print", 'b="2"'),
        ("brk", 1, 0),
        ("print", 'm="3"'),
        ("end",),
        ("print", ">"),
    ]


def test_single_attribute_has_no_separator() -> None:
    translator, rec = make_translator()
    rec.clear()
    translator.on_start("a", {"href": "x"})
    assert ("brk", 1, 0) not in rec.calls
    assert ("print", 'href="x"') in rec.calls


def test_attribute_values_are_escaped() -> None:
    translator, rec = make_translator()
    translator.on_start("a", {"title": "\"Tom\" & 'Jerry' <3"})
    assert ("print", 'title="&quot;Tom&quot; &amp; &apos;Jerry&apos; &lt;3"') in rec.calls


def test_character_data_words_share_one_inconsistent_group() -> None:
    translator, rec = make_translator()
    translator.on_start("p")
    rec.clear()
    translator.on_character_data("  Hello   big\n world ")
    assert rec.calls == [
        ("begin_inconsistent", 0),
        ("print", "Hello"),
        ("brk", 1, 0),
        ("print", "big"),
        ("brk", 1, 0),
        ("print", "world"),
    ]
    assert translator.pending_text


def test_adjacent_character_data_continues_the_run() -> None:
    translator, rec = make_translator()
    translator.on_start("p")
    rec.clear()
    translator.on_character_data("Hello")
    translator.on_character_data("world")
    assert rec.calls == [
        ("begin_inconsistent", 0),
        ("print", "Hello"),
        ("brk", 1, 0),
        ("print", "world"),
    ]


def test_text_run_is_closed_before_next_tag() -> None:
    translator, rec = make_translator()
    translator.on_start("p")
    translator.on_character_data("Hello")
    rec.clear()
    translator.on_end("p")
    assert rec.calls[0] == ("end",)
    assert rec.calls[1] == ("brk", 0, -3)
    assert not translator.pending_text


def test_whitespace_only_character_data_is_ignored() -> None:
    translator, rec = make_translator()
    translator.on_start("p")
    rec.clear()
    translator.on_character_data(" \n\t ")
    assert rec.calls == []
    assert not translator.pending_text


def test_character_data_honours_start_and_length() -> None:
    translator, rec = make_translator()
    rec.clear()
    translator.on_character_data("xxHelloxx", 2, 5)
    assert ("print", "Hello") in rec.calls
    assert rec.count("print") == 1


def test_character_data_is_escaped() -> None:
    translator, rec = make_translator()
    translator.on_character_data("a<b && c>d")
    assert ("print", "a&lt;b") in rec.calls
    assert ("print", "&amp;&amp;") in rec.calls
    assert ("print", "c&gt;d") in rec.calls


def test_processing_instruction_forces_line_break() -> None:
    translator, rec = make_translator()
    rec.clear()
    translator.on_processing_instruction("xml-stylesheet", 'href="s.css"')
    translator.on_processing_instruction("page-break", "")
    assert rec.calls == [
        ("print", '<?xml-stylesheet href="s.css"?>'),
        ("newline",),
        ("print", "<?page-break?>"),
        ("newline",),
    ]


def test_fontify_wraps_tag_names_in_bold_marks() -> None:
    translator, rec = make_translator(fontify=True)
    translator.on_start("doc")
    translator.on_end("doc")
    assert rec.calls[2:6] == [
        ("print", "<"),
        ("mark", Mark.START_BOLD),
        ("print", "doc"),
        ("mark", Mark.END_BOLD),
    ]
    assert ("print", "</") in rec.calls


def test_finish_closes_document_and_layouter() -> None:
    translator, rec = make_translator()
    translator.on_start("doc")
    translator.on_character_data("text")
    translator.on_end("doc")
    rec.clear()
    translator.finish()
    assert rec.calls == [("brk", 0, 0), ("end",), ("close",)]
    assert rec.closed


def test_finish_wraps_up_trailing_text() -> None:
    translator, rec = make_translator()
    translator.on_character_data("loose text")
    rec.clear()
    translator.finish()
    assert rec.calls == [("end",), ("end",), ("close",)]


def test_stack_balance_for_document() -> None:
    translator, rec = make_translator(declaration=XML_DECLARATION, fontify=True)
    translator.on_processing_instruction("pi", "data")
    translator.on_start("doc", [("id", "1")])
    translator.on_character_data("intro")
    translator.on_start("item")
    translator.on_character_data("one")
    translator.on_character_data("two")
    translator.on_end("item")
    translator.on_character_data("outro")
    translator.on_end("doc")
    translator.finish()
    assert rec.begins() == rec.count("end")
    assert rec.count("mark") == 8


def test_output_failure_is_reported_as_translation_error() -> None:
    translator = MarkupTranslator(Layouter(FailingBackend(80)), declaration=None)
    translator.on_start("doc")
    translator.on_end("doc")
    with pytest.raises(TranslationError) as excinfo:
        translator.finish()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_layouter_and_indentation_are_exposed() -> None:
    translator, rec = make_translator(indentation=5)
    assert translator.layouter is cast("Layouter", rec)
    assert translator.indentation == 5
    assert rec.calls[0] == ("begin_consistent", 0)
