# topmark:header:start
#
#   project      : ReflowPP
#   file         : options.py
#   file_relpath : src/reflowpp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Commands stay thin by stacking these decorators: verbosity and color on the
group, config discovery and layout overrides on the rendering commands.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from reflowpp.cli.errors import ReflowUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, the ``-v`` count otherwise.

    Raises:
        ReflowUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ReflowUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program-output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


_EXPLICIT_COLOR: dict[ColorMode, bool] = {ColorMode.ALWAYS: True, ColorMode.NEVER: False}


def _env_color_override() -> bool | None:
    """Return the color choice made through ``FORCE_COLOR`` / ``NO_COLOR``, if any."""
    force: str = os.environ.get("FORCE_COLOR", "")
    if force not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return None


def _stdout_is_terminal() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty()) if callable(isatty) else False
    except ValueError:  # stdout already closed
        return False


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether the console emits ANSI styles.

    Precedence: an explicit ``--color always|never``, then ``FORCE_COLOR``
    (any value but ``"0"``) and ``NO_COLOR``, then whether stdout is a
    terminal. ``stdout_isatty`` replaces the terminal probe in tests.
    """
    if cli_mode is not None and cli_mode in _EXPLICIT_COLOR:
        return _EXPLICIT_COLOR[cli_mode]
    from_env: bool | None = _env_color_override()
    if from_env is not None:
        return from_env
    return _stdout_is_terminal() if stdout_isatty is None else stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options."""
    f = click.option(
        "--config",
        "-c",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Merge this TOML config file after the discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Do not discover pyproject.toml / reflowpp.toml files.",
    )(f)
    return f


def common_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--width`` and ``--indent`` overrides."""
    f = click.option(
        "--width",
        "-w",
        "line_width",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum line width (default from config, else 80).",
    )(f)
    f = click.option(
        "--indent",
        "-i",
        "indentation",
        type=click.IntRange(min=0),
        default=None,
        help="Indentation of nested groups.",
    )(f)
    return f
