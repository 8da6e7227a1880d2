# topmark:header:start
#
#   project      : ReflowPP
#   file         : escape.py
#   file_relpath : src/reflowpp/markup/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entity escaping for character data and attribute values.

The ampersand is always replaced first so that the produced entities are not
escaped a second time; reversing the table therefore restores the input.
"""

from __future__ import annotations

from typing import Final

TEXT_ENTITIES: Final[tuple[tuple[str, str], ...]] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)

ATTRIBUTE_ENTITIES: Final[tuple[tuple[str, str], ...]] = TEXT_ENTITIES + (
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def _replace_all(text: str, table: tuple[tuple[str, str], ...]) -> str:
    for char, entity in table:
        text = text.replace(char, entity)
    return text


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` in character data."""
    return _replace_all(text, TEXT_ENTITIES)


def escape_attribute(value: str) -> str:
    """Escape an attribute value, including both quote characters."""
    return _replace_all(value, ATTRIBUTE_ENTITIES)


def unescape(text: str) -> str:
    """Reverse `escape_attribute` (and therefore `escape_text`)."""
    for char, entity in reversed(ATTRIBUTE_ENTITIES):
        text = text.replace(entity, char)
    return text
