# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/data/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printing of nested Python data structures."""

from __future__ import annotations

from reflowpp.data.classifier import PrettyPrintable, ValueKind, classify
from reflowpp.data.printer import ValuePrinter, pformat, pprint
from reflowpp.data.sources import DataFormat, DataSourceError, load_data, load_data_text

__all__ = [
    "DataFormat",
    "DataSourceError",
    "PrettyPrintable",
    "ValueKind",
    "ValuePrinter",
    "classify",
    "load_data",
    "load_data_text",
    "pformat",
    "pprint",
]
