# topmark:header:start
#
#   project      : ReflowPP
#   file         : render.py
#   file_relpath : src/reflowpp/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a TOML table for ``reflowpp config dump``.

TOML has no ``null``, so ``None`` entries are dropped while rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from reflowpp.config.logging import get_logger

if TYPE_CHECKING:
    from reflowpp.config.logging import ReflowLogger

    from .types import TomlTable

logger: ReflowLogger = get_logger(__name__)


def _strip_none(value: object) -> object:
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        for k_any, v_any in cast("Mapping[object, object]", value).items():
            if v_any is None:
                logger.debug("Ignoring `None` entry for key %s", k_any)
                continue
            out[str(k_any)] = _strip_none(v_any)
        return out
    if isinstance(value, (list, tuple)):
        return [_strip_none(v) for v in cast("list[object]", value) if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none(toml_dict)
    return tomlkit.dumps(cleaned)
