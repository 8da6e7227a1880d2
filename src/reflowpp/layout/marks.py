# topmark:header:start
#
#   project      : ReflowPP
#   file         : marks.py
#   file_relpath : src/reflowpp/layout/marks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Zero-width mark tokens passed through the layout engine.

Marks carry no width and never influence line breaking. They are handed to
the backend at the exact position they were emitted, so a backend can switch
styling on and off around a span of text.
"""

from __future__ import annotations

from enum import Enum


class Mark(str, Enum):
    """Styling marks understood by the bundled backends."""

    START_BOLD = "start_bold"
    END_BOLD = "end_bold"
