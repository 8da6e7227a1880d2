# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for ReflowPP configuration.

Typical flow:
    1. Load runtime defaults (``load_defaults_dict``).
    2. Load project TOML files (``load_toml_dict``, ``extract_tool_table``).
    3. Read values with the checked getters.
    4. Serialize back to TOML when needed (``to_toml``).

All parsing and rendering goes through `tomlkit`.
"""

from __future__ import annotations

from .getters import (
    get_bool_value,
    get_int_value,
    get_string_value,
    get_table_value,
    warn_unknown_keys,
)
from .loaders import extract_tool_table, load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "extract_tool_table",
    "get_bool_value",
    "get_int_value",
    "get_string_value",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
    "warn_unknown_keys",
]
