# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup outline pretty-printing.

`MarkupTranslator` turns a stream of element/text/processing-instruction events
into layout calls; `reflowpp.markup.sax` drives it from ``xml.sax``.
"""

from __future__ import annotations

from reflowpp.markup.errors import TranslationError
from reflowpp.markup.escape import escape_attribute, escape_text, unescape
from reflowpp.markup.sax import MarkupContentHandler, process, render_xml, render_xml_text
from reflowpp.markup.translator import MarkupTranslator

__all__ = [
    "MarkupContentHandler",
    "MarkupTranslator",
    "TranslationError",
    "escape_attribute",
    "escape_text",
    "process",
    "render_xml",
    "render_xml_text",
    "unescape",
]
