# topmark:header:start
#
#   project      : ReflowPP
#   file         : version.py
#   file_relpath : src/reflowpp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP ``version`` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from reflowpp.cli.cli_types import EnumChoiceParam, OutputFormat
from reflowpp.cli.cmd_common import get_console, get_effective_verbosity
from reflowpp.constants import REFLOWPP_VERSION

if TYPE_CHECKING:
    from reflowpp.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the installed version of ReflowPP.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the ReflowPP version installed in the current environment."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": REFLOWPP_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ReflowPP version:", bold=True, underline=True))
        console.print(f"    {console.styled(REFLOWPP_VERSION, bold=True)}")
    else:
        console.print(console.styled(REFLOWPP_VERSION, bold=True))
