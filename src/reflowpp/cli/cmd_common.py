# topmark:header:start
#
#   project      : ReflowPP
#   file         : cmd_common.py
#   file_relpath : src/reflowpp/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the ReflowPP subcommands.

Covers reading the shared ``ctx.obj`` state, resolving the layered
configuration, and opening the ``PATH | -`` input argument.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO

import click

from reflowpp.cli.errors import ReflowConfigError, ReflowFileNotFoundError, ReflowIOError
from reflowpp.config.logging import get_logger
from reflowpp.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from reflowpp.cli.console_api import ConsoleLike
    from reflowpp.config.logging import ReflowLogger
    from reflowpp.config.model import Config

logger: ReflowLogger = get_logger(__name__)

STDIN_PATH: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by `init_common_state`."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity (-1 quiet, 0 terse, >0 verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config(
    *,
    config_files: Iterable[str] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Merge defaults, discovered files, ``--config`` files and CLI overrides.

    Raises:
        ReflowConfigError: If an explicit config file does not exist.
    """
    extra: list[Path] = [Path(p) for p in config_files]
    for path in extra:
        if not path.is_file():
            raise ReflowConfigError(f"Config file not found: {path}")
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=extra,
        no_config=no_config,
    )
    if overrides:
        draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Resolved config: %s", config)
    return config


def open_binary_input(path: str) -> BinaryIO:
    """Open the ``PATH`` argument for binary reading; ``-`` is standard input.

    The caller closes the returned stream (closing stdin's wrapper is harmless).

    Raises:
        ReflowFileNotFoundError: If ``path`` does not exist.
        ReflowIOError: If ``path`` cannot be opened.
    """
    if path == STDIN_PATH:
        return click.get_binary_stream("stdin")
    p = Path(path)
    if not p.exists():
        raise ReflowFileNotFoundError(f"No such file: {path}")
    try:
        return p.open("rb")
    except OSError as exc:
        raise ReflowIOError(f"Cannot read {path}: {exc}") from exc


def read_text_input(path: str) -> str:
    """Read the ``PATH`` argument as UTF-8 text; ``-`` is standard input.

    Raises:
        ReflowFileNotFoundError: If ``path`` does not exist.
        ReflowIOError: If reading fails.
        UnicodeDecodeError: If the content is not UTF-8.
    """
    with open_binary_input(path) as stream:
        try:
            data: bytes = stream.read()
        except OSError as exc:
            raise ReflowIOError(f"Cannot read {path}: {exc}") from exc
    return data.decode("utf-8")
