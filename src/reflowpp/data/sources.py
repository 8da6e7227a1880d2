# topmark:header:start
#
#   project      : ReflowPP
#   file         : sources.py
#   file_relpath : src/reflowpp/data/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load structured documents (JSON, TOML) into plain Python values.

JSON is read with the standard library, TOML with ``tomlkit`` (unwrapped to
plain ``dict``/``list`` values). Both preserve key order, which the value
printer then reproduces.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from reflowpp.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from reflowpp.config.logging import ReflowLogger

logger: ReflowLogger = get_logger(__name__)


class DataFormat(Enum):
    """Input formats accepted by `load_data`."""

    AUTO = "auto"
    JSON = "json"
    TOML = "toml"


_SUFFIXES: dict[str, DataFormat] = {
    ".json": DataFormat.JSON,
    ".toml": DataFormat.TOML,
}


class DataSourceError(ValueError):
    """The document could not be decoded in the requested format."""


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataSourceError(f"Invalid JSON: {exc}") from exc


def _parse_toml(text: str) -> Any:
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise DataSourceError(f"Invalid TOML: {exc}") from exc


def load_data_text(text: str, fmt: DataFormat = DataFormat.AUTO) -> Any:
    """Decode ``text`` as ``fmt``.

    With `DataFormat.AUTO`, JSON is tried first and TOML second.

    Raises:
        DataSourceError: If ``text`` is not valid in the requested format(s).
    """
    if fmt is DataFormat.JSON:
        return _parse_json(text)
    if fmt is DataFormat.TOML:
        return _parse_toml(text)
    try:
        return _parse_json(text)
    except DataSourceError as json_error:
        logger.debug("Not JSON (%s), trying TOML", json_error)
    try:
        return _parse_toml(text)
    except DataSourceError as exc:
        raise DataSourceError("Input is neither valid JSON nor valid TOML") from exc


def detect_format(path: Path) -> DataFormat:
    """Guess the format from the file suffix; `DataFormat.AUTO` if unknown."""
    return _SUFFIXES.get(path.suffix.lower(), DataFormat.AUTO)


def load_data(path: Path, fmt: DataFormat = DataFormat.AUTO) -> Any:
    """Read and decode the document at ``path``.

    Raises:
        OSError: If the file cannot be read.
        DataSourceError: If the content does not decode.
    """
    if fmt is DataFormat.AUTO:
        fmt = detect_format(path)
    logger.debug("Loading %s as %s", path, fmt.value)
    return load_data_text(path.read_text(encoding="utf-8"), fmt)
