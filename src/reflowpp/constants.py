# topmark:header:start
#
#   project      : ReflowPP
#   file         : constants.py
#   file_relpath : src/reflowpp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    REFLOWPP_VERSION: str = get_version("reflowpp")
except PackageNotFoundError:  # running from a source checkout without install
    REFLOWPP_VERSION = "0.0.0"

# Layout engine defaults
DEFAULT_LINE_WIDTH: int = 80
DEFAULT_INDENTATION: int = 2

# Markup outline defaults
DEFAULT_MARKUP_INDENTATION: int = 3
XML_DECLARATION: str = '<?xml version="1.0"?>'

# Config file names looked up during discovery
CONFIG_FILE_NAME: str = "reflowpp.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "reflowpp"

# Rendering of a container found again on its own recursion path
CYCLE_PLACEHOLDER: str = "<...>"

# Accepted values of the [data] format setting
DATA_FORMAT_CHOICES: tuple[str, ...] = ("auto", "json", "toml")
DEFAULT_DATA_FORMAT: str = "auto"
