# topmark:header:start
#
#   project      : ReflowPP
#   file         : data.py
#   file_relpath : src/reflowpp/cli/commands/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP ``data`` command.

Loads a JSON or TOML document into plain Python values and pretty-prints it
as nested ``[a, b]`` sequences and ``{key=value}`` mappings.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from reflowpp.cli.cli_types import EnumChoiceParam
from reflowpp.cli.cmd_common import STDIN_PATH, get_console, read_text_input, resolve_config
from reflowpp.cli.errors import ReflowInputError
from reflowpp.cli.options import common_config_options, common_layout_options
from reflowpp.config.keys import ArgKey
from reflowpp.data.printer import pformat
from reflowpp.data.sources import DataFormat, DataSourceError, detect_format, load_data_text

if TYPE_CHECKING:
    from reflowpp.cli.console_api import ConsoleLike
    from reflowpp.config.model import Config


@click.command(
    name="data",
    help="Pretty-print a JSON or TOML document (PATH, or '-' for stdin).",
)
@click.argument("path", type=str, default="-")
@common_config_options
@common_layout_options
@click.option(
    "--format",
    "data_format",
    type=EnumChoiceParam(DataFormat),
    default=None,
    help=f"Input format ({', '.join(v.value for v in DataFormat)}).",
)
@click.option(
    "--detect-cycles/--no-detect-cycles",
    default=None,
    help="Print '<...>' for containers met again while printing themselves.",
)
def data_command(
    *,
    path: str,
    config_files: tuple[str, ...],
    no_config: bool,
    line_width: int | None,
    indentation: int | None,
    data_format: DataFormat | None,
    detect_cycles: bool | None,
) -> None:
    """Pretty-print a structured document."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = resolve_config(
        config_files=config_files,
        no_config=no_config,
        overrides={
            ArgKey.LINE_WIDTH: line_width,
            ArgKey.INDENTATION: indentation,
            ArgKey.DATA_FORMAT: data_format.value if data_format is not None else None,
            ArgKey.DETECT_CYCLES: detect_cycles,
        },
    )

    fmt = DataFormat(config.data_format)
    if fmt is DataFormat.AUTO and path != STDIN_PATH:
        fmt = detect_format(Path(path))

    try:
        value: Any = load_data_text(read_text_input(path), fmt)
    except UnicodeDecodeError as exc:
        raise ReflowInputError(f"{path} is not valid UTF-8: {exc}") from exc
    except DataSourceError as exc:
        raise ReflowInputError(f"{path}: {exc}") from exc

    console.print(
        pformat(
            value,
            width=config.line_width,
            indentation=config.indentation,
            detect_cycles=config.detect_cycles,
        )
    )
