# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for ReflowPP.

`Config` is the immutable runtime snapshot; `MutableConfig` builds it from
runtime defaults, discovered ``pyproject.toml`` / ``reflowpp.toml`` files,
explicit config files and CLI overrides.
"""

from __future__ import annotations

from reflowpp.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
