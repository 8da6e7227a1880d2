# topmark:header:start
#
#   project      : ReflowPP
#   file         : config.py
#   file_relpath : src/reflowpp/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP ``config`` command group.

``reflowpp config dump`` prints the configuration resolved from runtime
defaults, discovered ``pyproject.toml`` / ``reflowpp.toml`` files and any
``--config`` files, in the same TOML schema those files use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reflowpp.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from reflowpp.cli.options import common_config_options

if TYPE_CHECKING:
    from reflowpp.cli.console_api import ConsoleLike
    from reflowpp.config.model import Config


@click.group(name="config", help="Inspect ReflowPP configuration.")
def config_command() -> None:
    """Configuration subcommands."""


@config_command.command(name="dump", help="Print the resolved configuration as TOML.")
@common_config_options
def dump_command(*, config_files: tuple[str, ...], no_config: bool) -> None:
    """Dump the merged configuration."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = resolve_config(config_files=config_files, no_config=no_config)

    if get_effective_verbosity(ctx) > 0:
        console.print("# Configuration sources (lowest precedence first):")
        for source in config.config_files:
            console.print(f"#   {source}")
        console.print()
    console.print(config.to_toml(), nl=False)
