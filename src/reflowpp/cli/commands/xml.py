# topmark:header:start
#
#   project      : ReflowPP
#   file         : xml.py
#   file_relpath : src/reflowpp/cli/commands/xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReflowPP ``xml`` command.

Pretty-prints the element outline and text of an XML document: every element
becomes a group that stays on one line when it fits and otherwise puts each
child on its own indented line.
"""

from __future__ import annotations

import io
import xml.sax
from typing import TYPE_CHECKING

import click

from reflowpp.cli.cmd_common import get_console, open_binary_input, resolve_config
from reflowpp.cli.errors import ReflowInputError, ReflowIOError, ReflowUnexpectedError
from reflowpp.cli.options import common_config_options, common_layout_options
from reflowpp.config.keys import ArgKey
from reflowpp.config.logging import get_logger
from reflowpp.constants import XML_DECLARATION
from reflowpp.layout.backends import ChalkBackend, HtmlMarkBackend, StringBackend
from reflowpp.layout.errors import LayoutError
from reflowpp.layout.layouter import Layouter
from reflowpp.markup.errors import TranslationError
from reflowpp.markup.sax import process
from reflowpp.markup.translator import MarkupTranslator

if TYPE_CHECKING:
    from reflowpp.cli.console_api import ConsoleLike
    from reflowpp.config.logging import ReflowLogger
    from reflowpp.config.model import Config
    from reflowpp.layout.backends import WriterBackend

logger: ReflowLogger = get_logger(__name__)


@click.command(
    name="xml",
    help="Pretty-print the outline of an XML document (PATH, or '-' for stdin).",
)
@click.argument("path", type=str, default="-")
@common_config_options
@common_layout_options
@click.option(
    "--declaration/--no-declaration",
    default=None,
    help="Print the XML declaration before the outline.",
)
@click.option(
    "--fontify/--no-fontify",
    default=None,
    help="Emphasize tag names (bold on color terminals).",
)
@click.option(
    "--html",
    is_flag=True,
    help="With --fontify, emphasize tag names with HTML <b> tags instead of ANSI bold.",
)
def xml_command(
    *,
    path: str,
    config_files: tuple[str, ...],
    no_config: bool,
    line_width: int | None,
    indentation: int | None,
    declaration: bool | None,
    fontify: bool | None,
    html: bool,
) -> None:
    """Pretty-print an XML document."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = resolve_config(
        config_files=config_files,
        no_config=no_config,
        overrides={
            ArgKey.LINE_WIDTH: line_width,
            ArgKey.MARKUP_INDENTATION: indentation,
            ArgKey.DECLARATION: declaration,
            ArgKey.FONTIFY: fontify,
        },
    )

    if html and not config.fontify:
        console.warn("--html has no effect without --fontify")

    buffer = io.StringIO()
    backend: WriterBackend
    if config.fontify and html:
        backend = HtmlMarkBackend(config.line_width)
    elif config.fontify:
        backend = ChalkBackend(buffer, config.line_width, enable_color=console.enable_color)
    else:
        backend = StringBackend(config.line_width)

    translator = MarkupTranslator(
        Layouter(backend),
        config.markup_indentation,
        declaration=XML_DECLARATION if config.declaration else None,
        fontify=config.fontify,
    )

    with open_binary_input(path) as stream:
        try:
            process(stream, translator)
        except xml.sax.SAXParseException as exc:
            raise ReflowInputError(f"Malformed XML in {path}: {exc}") from exc
        except TranslationError as exc:
            raise ReflowIOError(str(exc)) from exc
        except (LayoutError, xml.sax.SAXException) as exc:
            logger.error("Unexpected failure rendering %s: %r", path, exc)
            raise ReflowUnexpectedError(f"Unexpected failure rendering {path}: {exc}") from exc
        except OSError as exc:
            raise ReflowIOError(f"Cannot read {path}: {exc}") from exc

    text: str = backend.getvalue() if isinstance(backend, StringBackend) else buffer.getvalue()
    console.print(text, nl=not text.endswith("\n"))
