# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP: width-aware pretty printing.

Two front ends share one line-breaking engine (`reflowpp.layout.Layouter`):

- `reflowpp.markup` turns a stream of XML parse events into an indented,
  width-aware outline (`render_xml`, `render_xml_text`).
- `reflowpp.data` prints nested Python values (`pformat`, `pprint`,
  `ValuePrinter`).
"""

from __future__ import annotations

from reflowpp.constants import REFLOWPP_VERSION
from reflowpp.data import PrettyPrintable, ValuePrinter, pformat, pprint
from reflowpp.layout import Layouter, Mark
from reflowpp.markup import MarkupTranslator, render_xml, render_xml_text

__version__: str = REFLOWPP_VERSION

__all__ = [
    "Layouter",
    "Mark",
    "MarkupTranslator",
    "PrettyPrintable",
    "ValuePrinter",
    "__version__",
    "pformat",
    "pprint",
    "render_xml",
    "render_xml_text",
]
