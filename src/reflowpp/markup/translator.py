# topmark:header:start
#
#   project      : ReflowPP
#   file         : translator.py
#   file_relpath : src/reflowpp/markup/translator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming translation of markup events into layout calls.

`MarkupTranslator` is driven one event at a time, in document order, by an
event source such as `reflowpp.markup.sax.MarkupContentHandler`. It never
looks ahead; all it remembers between events is:

- whether a break must precede the next tag (any element seen so far), and
- whether a run of character data is still open (the pending text run).

Each element becomes a consistent group indented by `indentation`, so the
outline renders on one line when it fits:

```text
<doc><head></head><body></body></doc>
```

and otherwise breaks every child onto its own line:

```text
<doc>
   <head></head>
   <body></body>
</doc>
```

Adjacent character data is coalesced into one inconsistent group, so long text
is filled word by word rather than broken at every word.

Preconditions (not checked):
    Events arrive well nested, every start matched by one end, innermost
    first. Tag names of start and end events are not compared.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING

from reflowpp.config.logging import get_logger
from reflowpp.constants import DEFAULT_MARKUP_INDENTATION, XML_DECLARATION
from reflowpp.layout.marks import Mark
from reflowpp.markup.errors import TranslationError
from reflowpp.markup.escape import escape_attribute, escape_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TypeAlias

    from reflowpp.config.logging import ReflowLogger
    from reflowpp.layout.layouter import Layouter

    # Attributes as delivered by an event source: ordered pairs or a mapping.
    Attributes: TypeAlias = Iterable[tuple[str, str]] | Mapping[str, str] | None

logger: ReflowLogger = get_logger(__name__)


class MarkupTranslator:
    """Translate markup parse events into calls on a `Layouter`.

    Construction opens the top-level group of the document and, if
    ``declaration`` is given, prints it on a line of its own. `finish` closes
    that group and the layouter.

    Args:
        layouter (Layouter): Engine receiving the layout calls; owned by this
            translator until `finish` closes it.
        indentation (int): Indentation of child elements relative to their parent.
        declaration (str | None): Line printed before the first element, or None.
        fontify (bool): Wrap tag names in `Mark.START_BOLD` / `Mark.END_BOLD`.

    Raises:
        TranslationError: From any method, when the layouter's output fails.
    """

    def __init__(
        self,
        layouter: Layouter,
        indentation: int = DEFAULT_MARKUP_INDENTATION,
        *,
        declaration: str | None = XML_DECLARATION,
        fontify: bool = False,
    ) -> None:
        self._pp: Layouter = layouter
        self._indentation: int = indentation
        self._fontify: bool = fontify
        self._insert_break: bool = False
        self._pending_text: bool = False

        logger.debug(
            "Starting markup translation (indentation=%d, fontify=%s)", indentation, fontify
        )
        with self._output():
            self._pp.begin_consistent(0)
            if declaration:
                self._pp.print(declaration).newline()

    @property
    def layouter(self) -> Layouter:
        """The layout engine driven by this translator."""
        return self._pp

    @property
    def indentation(self) -> int:
        """Indentation of child elements."""
        return self._indentation

    @property
    def pending_text(self) -> bool:
        """True while a run of character data is still open."""
        return self._pending_text

    # --- Events ---

    def on_start(self, local_name: str, attributes: Attributes = None) -> None:
        """Handle an element start tag.

        Args:
            local_name (str): Element name.
            attributes (Iterable[tuple[str, str]] | Mapping[str, str] | None):
                Attributes in source order.
        """
        with self._output():
            self._wrap_up_text()
            if self._insert_break:
                self._pp.brk(0, 0)
            self._pp.begin_consistent(self._indentation)
            self._print_tag("<", local_name)
            self._print_attributes(_attribute_pairs(attributes))
            self._pp.print(">")
            self._insert_break = True

    def on_end(self, local_name: str) -> None:
        """Handle an element end tag.

        The closing tag is preceded by a break whose offset cancels the element
        indentation, so on a line of its own it lines up with the start tag.
        """
        with self._output():
            self._wrap_up_text()
            self._pp.brk(0, -self._indentation)
            self._print_tag("</", local_name)
            self._pp.print(">").end()
            self._insert_break = True

    def on_character_data(self, raw: str, start: int = 0, length: int | None = None) -> None:
        """Handle character data ``raw[start:start + length]``.

        The text is escaped, trimmed and split into words. A run directly
        following another run continues the same text group.
        """
        text: str = raw[start:] if length is None else raw[start : start + length]
        words: list[str] = escape_text(text).split()
        if not words:
            return
        with self._output():
            if self._pending_text:
                self._pp.brk(1, 0)
            else:
                self._pp.begin_inconsistent(0)
            self._pp.print(words[0])
            for word in words[1:]:
                self._pp.brk(1, 0).print(word)
            self._pending_text = True

    def on_processing_instruction(self, target: str, data: str) -> None:
        """Print a processing instruction followed by a forced line break."""
        with self._output():
            pi: str = f"<?{target} {data}?>" if data else f"<?{target}?>"
            self._pp.print(pi).newline()

    def finish(self) -> None:
        """Close the document and the layouter, writing all pending output."""
        with self._output():
            if self._insert_break:
                self._pp.brk(0, 0)
            self._wrap_up_text()
            self._pp.end()
            self._pp.close()
        logger.debug("Finished markup translation")

    # --- Helpers ---

    def _wrap_up_text(self) -> None:
        if self._pending_text:
            self._pp.end()
            self._pending_text = False

    def _print_tag(self, opener: str, name: str) -> None:
        if self._fontify:
            self._pp.print(opener).mark(Mark.START_BOLD).print(name).mark(Mark.END_BOLD)
        else:
            self._pp.print(opener + name)

    def _print_attributes(self, attributes: list[tuple[str, str]]) -> None:
        if not attributes:
            return
        self._pp.print(" ").begin_consistent(0)
        for i, (name, value) in enumerate(attributes):
            if i:
                self._pp.brk(1, 0)
            self._pp.print(f'{name}="{escape_attribute(value)}"')
        self._pp.end()

    @contextmanager
    def _output(self) -> Iterator[None]:
        try:
            yield
        except OSError as exc:
            logger.error("Layout output failed: %s", exc)
            raise TranslationError(f"Layout output failed: {exc}") from exc


def _attribute_pairs(attributes: Attributes) -> list[tuple[str, str]]:
    if attributes is None:
        return []
    if isinstance(attributes, Mapping):
        return list(attributes.items())
    return list(attributes)
