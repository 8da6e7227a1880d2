# topmark:header:start
#
#   project      : ReflowPP
#   file         : getters.py
#   file_relpath : src/reflowpp/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter returns ``None`` when the key is absent, so a missing key means
"inherit from the layer below". A present value of the wrong shape is logged as
a warning and also treated as absent; configuration mistakes never abort a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from reflowpp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reflowpp.config.logging import ReflowLogger

    from .types import TomlTable

logger: ReflowLogger = get_logger(__name__)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    logger.warning("Expected table [%s], got %s: %r", key, type(value).__name__, value)
    return {}


def get_int_value(
    table: TomlTable,
    key: str,
    *,
    where: str,
    minimum: int | None = None,
) -> int | None:
    """Return an integer value, warning when it is not an ``int`` or below ``minimum``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: str = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected integer in %s, got %s: %r", loc, type(value).__name__, value)
        return None
    if minimum is not None and value < minimum:
        logger.warning("Value of %s must be >= %d, got %d; ignored", loc, minimum, value)
        return None
    return value


def get_bool_value(table: TomlTable, key: str, *, where: str) -> bool | None:
    """Return a boolean value, warning when the type is not ``bool``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning(
        "Expected boolean in %s.%s, got %s: %r", where, key, type(value).__name__, value
    )
    return None


def get_string_value(
    table: TomlTable,
    key: str,
    *,
    where: str,
    choices: Iterable[str] | None = None,
) -> str | None:
    """Return a string value, warning when it is not a ``str`` or not one of ``choices``.

    Matching against ``choices`` is case-insensitive; the lower-cased value is
    returned.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: str = f"{where}.{key}"
    if not isinstance(value, str):
        logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
        return None
    if choices is None:
        return value
    allowed: tuple[str, ...] = tuple(choices)
    if value.lower() not in allowed:
        logger.warning("Invalid value for %s: %r (expected one of %s)", loc, value, allowed)
        return None
    return value.lower()


def warn_unknown_keys(
    table: TomlTable,
    allowed: Iterable[str],
    *,
    where: str,
) -> list[str]:
    """Log a warning for each key of ``table`` not in ``allowed``; return them sorted."""
    allowed_set: frozenset[str] = frozenset(allowed)
    unknown: list[str] = sorted(k for k in table if k not in allowed_set)
    for key in unknown:
        logger.warning("Unknown configuration key %s.%s; ignored", where, key)
    return unknown
