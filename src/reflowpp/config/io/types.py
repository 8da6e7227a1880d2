# topmark:header:start
#
#   project      : ReflowPP
#   file         : types.py
#   file_relpath : src/reflowpp/config/io/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML type alias shared by the config I/O helpers."""

from __future__ import annotations

from typing import Any

TomlTable = dict[str, Any]
