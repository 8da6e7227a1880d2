# topmark:header:start
#
#   project      : ReflowPP
#   file         : keys.py
#   file_relpath : src/reflowpp/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ReflowPP configuration.

The names below are the external configuration schema as it appears in
``reflowpp.toml`` and in ``[tool.reflowpp]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ReflowPP configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [layout]
    SECTION_LAYOUT: Final[str] = "layout"

    KEY_LINE_WIDTH: Final[str] = "line_width"
    KEY_INDENTATION: Final[str] = "indentation"

    # [markup]
    SECTION_MARKUP: Final[str] = "markup"

    KEY_DECLARATION: Final[str] = "declaration"
    KEY_FONTIFY: Final[str] = "fontify"

    # [data]
    SECTION_DATA: Final[str] = "data"

    KEY_FORMAT: Final[str] = "format"
    KEY_DETECT_CYCLES: Final[str] = "detect_cycles"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            SECTION_LAYOUT,
            SECTION_MARKUP,
            SECTION_DATA,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_LAYOUT: frozenset({KEY_LINE_WIDTH, KEY_INDENTATION}),
        SECTION_MARKUP: frozenset({KEY_INDENTATION, KEY_DECLARATION, KEY_FONTIFY}),
        SECTION_DATA: frozenset({KEY_FORMAT, KEY_DETECT_CYCLES}),
    }


class ArgKey:
    """Keys of the argument mapping accepted by `MutableConfig.apply_cli_args`."""

    LINE_WIDTH: Final[str] = "line_width"
    INDENTATION: Final[str] = "indentation"
    MARKUP_INDENTATION: Final[str] = "markup_indentation"
    DECLARATION: Final[str] = "declaration"
    FONTIFY: Final[str] = "fontify"
    DATA_FORMAT: Final[str] = "data_format"
    DETECT_CYCLES: Final[str] = "detect_cycles"
