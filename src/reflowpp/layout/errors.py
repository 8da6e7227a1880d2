# topmark:header:start
#
#   project      : ReflowPP
#   file         : errors.py
#   file_relpath : src/reflowpp/layout/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the layout engine.

Unbalanced groups are programming errors on the caller's side, not conditions
to recover from: once raised, the `Layouter` instance must be discarded.
Failures of the underlying output stream are not wrapped here; backends let
their `OSError` propagate unchanged.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all layout engine errors."""


class UnbalancedGroupsError(LayoutError):
    """A group was closed without being opened, or left open at close time."""


class LayoutClosedError(LayoutError):
    """An operation was attempted on a layouter that has already been closed."""
