# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-breaking layout engine and its output backends.

Both translators (`reflowpp.markup` and `reflowpp.data`) only ever emit calls on
a `Layouter`; every width computation and line-break decision happens here.
"""

from __future__ import annotations

from reflowpp.layout.backends import (
    Backend,
    ChalkBackend,
    HtmlMarkBackend,
    StringBackend,
    WriterBackend,
)
from reflowpp.layout.errors import LayoutClosedError, LayoutError, UnbalancedGroupsError
from reflowpp.layout.layouter import Layouter
from reflowpp.layout.marks import Mark

__all__ = [
    "Backend",
    "ChalkBackend",
    "HtmlMarkBackend",
    "LayoutClosedError",
    "LayoutError",
    "Layouter",
    "Mark",
    "StringBackend",
    "UnbalancedGroupsError",
    "WriterBackend",
]
