# topmark:header:start
#
#   project      : ReflowPP
#   file         : sax.py
#   file_relpath : src/reflowpp/markup/sax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drive a `MarkupTranslator` from the standard library SAX parser.

`MarkupContentHandler` adapts ``xml.sax`` callbacks to translator events. The
parser is free to deliver one text node as several ``characters()`` chunks
(e.g. at buffer boundaries or around entity references); the handler joins
adjacent chunks before forwarding them, so a word is never split in two.

Element and attribute names are forwarded as qualified names (``xs:element``);
namespace processing is left off so prefixes survive in the output.
"""

from __future__ import annotations

import io
import xml.sax
from typing import TYPE_CHECKING, Any
from xml.sax import handler

from reflowpp.config.logging import get_logger
from reflowpp.constants import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARKUP_INDENTATION,
    XML_DECLARATION,
)
from reflowpp.layout.backends import HtmlMarkBackend, StringBackend
from reflowpp.layout.layouter import Layouter
from reflowpp.markup.translator import MarkupTranslator

if TYPE_CHECKING:
    from xml.sax.xmlreader import AttributesImpl

    from reflowpp.config.logging import ReflowLogger

logger: ReflowLogger = get_logger(__name__)


class MarkupContentHandler(handler.ContentHandler):
    """SAX content handler forwarding document events to a translator.

    `endDocument` calls `MarkupTranslator.finish`, so a successful parse
    leaves the translator's layouter closed and all output written.
    """

    def __init__(self, translator: MarkupTranslator) -> None:
        super().__init__()
        self._translator: MarkupTranslator = translator
        self._chunks: list[str] = []

    @property
    def translator(self) -> MarkupTranslator:
        """The translator receiving the events."""
        return self._translator

    def startElement(self, name: str, attrs: AttributesImpl) -> None:  # noqa: N802
        self._forward_text()
        pairs = [(qname, attrs.getValue(qname)) for qname in attrs.getNames()]
        self._translator.on_start(name, pairs)

    def endElement(self, name: str) -> None:  # noqa: N802
        self._forward_text()
        self._translator.on_end(name)

    def characters(self, content: str) -> None:
        self._chunks.append(content)

    def processingInstruction(self, target: str, data: str) -> None:  # noqa: N802
        self._forward_text()
        self._translator.on_processing_instruction(target, data)

    def endDocument(self) -> None:  # noqa: N802
        self._forward_text()
        self._translator.finish()

    def _forward_text(self) -> None:
        if self._chunks:
            text: str = "".join(self._chunks)
            self._chunks.clear()
            self._translator.on_character_data(text)


def make_parser(translator: MarkupTranslator) -> xml.sax.xmlreader.XMLReader:
    """Return a SAX parser wired to ``translator``, with external entities disabled."""
    parser: xml.sax.xmlreader.XMLReader = xml.sax.make_parser()
    parser.setFeature(handler.feature_namespaces, False)
    parser.setFeature(handler.feature_external_ges, False)
    parser.setContentHandler(MarkupContentHandler(translator))
    return parser


def process(source: Any, translator: MarkupTranslator) -> None:
    """Parse ``source`` and feed every event to ``translator``.

    Args:
        source (Any): Anything ``xml.sax`` accepts: a path, a URL, a binary or
            text file object, or an ``InputSource``.
        translator (MarkupTranslator): Receives the events; finished on success.

    Raises:
        xml.sax.SAXParseException: If the document is not well-formed.
        TranslationError: If the layout output fails.
    """
    logger.debug("Parsing markup source %r", source)
    make_parser(translator).parse(source)


def render_xml(
    source: Any,
    *,
    line_width: int = DEFAULT_LINE_WIDTH,
    indentation: int = DEFAULT_MARKUP_INDENTATION,
    declaration: str | None = XML_DECLARATION,
    fontify: bool = False,
) -> str:
    """Parse ``source`` and return its pretty-printed outline.

    With ``fontify`` set, tag names are wrapped in HTML ``<b>`` tags.
    """
    backend: StringBackend = HtmlMarkBackend(line_width) if fontify else StringBackend(line_width)
    translator = MarkupTranslator(
        Layouter(backend),
        indentation,
        declaration=declaration,
        fontify=fontify,
    )
    process(source, translator)
    return backend.getvalue()


def render_xml_text(text: str, **kwargs: Any) -> str:
    """Like `render_xml`, for a document held in a string."""
    return render_xml(io.BytesIO(text.encode("utf-8")), **kwargs)
