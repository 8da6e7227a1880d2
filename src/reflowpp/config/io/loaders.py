# topmark:header:start
#
#   project      : ReflowPP
#   file         : loaders.py
#   file_relpath : src/reflowpp/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Runtime defaults live in code (`load_defaults_dict`); on-disk files
(``reflowpp.toml`` / ``pyproject.toml``) are parsed with `tomlkit` and
returned as plain ``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from reflowpp.config.keys import Toml
from reflowpp.config.logging import get_logger
from reflowpp.constants import (
    DEFAULT_DATA_FORMAT,
    DEFAULT_INDENTATION,
    DEFAULT_LINE_WIDTH,
    DEFAULT_MARKUP_INDENTATION,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from reflowpp.config.logging import ReflowLogger

    from .types import TomlTable

logger: ReflowLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ReflowPP's runtime defaults as a new TOML-shaped dict.

    Performs no I/O; callers may mutate the result.
    """
    return {
        Toml.SECTION_LAYOUT: {
            Toml.KEY_LINE_WIDTH: DEFAULT_LINE_WIDTH,
            Toml.KEY_INDENTATION: DEFAULT_INDENTATION,
        },
        Toml.SECTION_MARKUP: {
            Toml.KEY_INDENTATION: DEFAULT_MARKUP_INDENTATION,
            Toml.KEY_DECLARATION: True,
            Toml.KEY_FONTIFY: False,
        },
        Toml.SECTION_DATA: {
            Toml.KEY_FORMAT: DEFAULT_DATA_FORMAT,
            Toml.KEY_DETECT_CYCLES: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content; an empty dict on failure.

    Notes:
        Errors are logged, not raised. Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ReflowPP table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.reflowpp]`` (None when absent); any
    other file is a ReflowPP config file as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)
