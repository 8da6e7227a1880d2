# topmark:header:start
#
#   project      : ReflowPP
#   file         : errors.py
#   file_relpath : src/reflowpp/markup/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised while translating markup events into layout calls."""

from __future__ import annotations


class TranslationError(Exception):
    """The layout engine's output sink failed during a translation.

    The original ``OSError`` is available as ``__cause__``. The translator and
    its layouter are left in an unspecified state and must not be reused.
    """
