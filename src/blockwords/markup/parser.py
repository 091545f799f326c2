# topmark:header:start
#
#   project      : BlockWords
#   file         : parser.py
#   file_relpath : src/blockwords/markup/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML event source built on the standard library `html.parser`.

[`HtmlEventParser`][blockwords.markup.parser.HtmlEventParser] turns a document
into the event stream rules subscribe to. Every byte of the document belongs to
exactly one construct, so each event's ``raw`` is the source slice between its
own start and the start of the next construct:

* start tags (``tagstart``), including self-closing ones (``close=True``);
* end tags (``tagend``);
* comments (``comment``);
* text runs (``text``). Doctype declarations, processing instructions, CDATA
  sections and the bodies of ``<script>``/``<style>`` are folded into the
  surrounding text run.

Tag and attribute names are reported lower-cased, as `html.parser` normalizes
them. Attribute values arrive with character references decoded
(``a&amp;b`` becomes ``a&b``), as `html.parser` unescapes them; only ``raw``
keeps the source text. Positions are 1-based line and column of the first
character of the construct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import TYPE_CHECKING

from blockwords.config.logging import get_logger
from blockwords.markup.events import (
    ALL_EVENTS,
    Attribute,
    CommentEvent,
    EndTagEvent,
    EventKind,
    StartTagEvent,
    TextEvent,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from blockwords.config.logging import BlockWordsLogger
    from blockwords.markup.events import ParseEvent

logger: BlockWordsLogger = get_logger(__name__)


@dataclass
class _Pending:
    """A construct whose end is not known until the next construct starts."""

    kind: EventKind
    offset: int
    line: int
    col: int
    tag_name: str | None = None
    attrs: tuple[Attribute, ...] = field(default_factory=tuple)
    close: bool = False


class HtmlEventParser(HTMLParser):
    """Markup event source delivering `ParseEvent` objects to listeners.

    Attribute values are entity-decoded, so patterns over attribute values see
    ``&`` where the source has ``&amp;``. The ``all`` sweep over ``raw`` sees the
    source text.

    Example:
        ```python
        parser = HtmlEventParser()
        parser.add_listener("all", print)
        parser.parse('<p class="x">hi</p>')
        ```
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._listeners: dict[str, list[Callable[[ParseEvent], None]]] = {}
        self._source: str = ""
        self._line_starts: list[int] = [0]
        self._pending: _Pending | None = None

    # --- Event source interface ---

    def add_listener(self, kind: str, callback: Callable[[ParseEvent], None]) -> None:
        """Subscribe ``callback`` to events of ``kind``.

        Args:
            kind (str): An event type (``"tagstart"``, ``"text"``, ...) or ``"all"``.
            callback (Callable[[ParseEvent], None]): Invoked synchronously per event.
        """
        self._listeners.setdefault(kind, []).append(callback)

    def remove_listener(self, kind: str, callback: Callable[[ParseEvent], None]) -> bool:
        """Unsubscribe ``callback`` from ``kind``; return True if it was subscribed."""
        callbacks = self._listeners.get(kind, [])
        if callback in callbacks:
            callbacks.remove(callback)
            return True
        return False

    def get_map_attrs(self, attrs: Sequence[Attribute]) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in document order.

        Duplicate attribute names are kept as separate pairs.
        """
        return [(attr.name, attr.value) for attr in attrs]

    def parse(self, html: str) -> None:
        """Parse a complete document, firing events as constructs are recognized.

        Args:
            html (str): The full document text.
        """
        self.reset()
        self._pending = None
        self._source = html
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(html) if ch == "\n")
        logger.debug("Parsing %d characters (%d lines)", len(html), len(self._line_starts))
        self.feed(html)
        self.close()
        self._flush(len(html))

    # --- html.parser callbacks ---

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._begin(EventKind.START_TAG, tag_name=tag, attrs=self._attributes(attrs))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._begin(EventKind.START_TAG, tag_name=tag, attrs=self._attributes(attrs), close=True)

    def handle_endtag(self, tag: str) -> None:
        self._begin(EventKind.END_TAG, tag_name=tag)

    def handle_comment(self, data: str) -> None:
        self._begin(EventKind.COMMENT)

    def handle_data(self, data: str) -> None:
        self._begin_text()

    def handle_decl(self, decl: str) -> None:
        self._begin_text()

    def handle_pi(self, data: str) -> None:
        self._begin_text()

    def unknown_decl(self, data: str) -> None:
        self._begin_text()

    # --- internals ---

    @staticmethod
    def _attributes(attrs: list[tuple[str, str | None]]) -> tuple[Attribute, ...]:
        return tuple(Attribute(name, value or "") for name, value in attrs)

    def _offset(self) -> tuple[int, int, int]:
        """Return (absolute offset, 1-based line, 1-based column) of the current construct."""
        lineno, col = self.getpos()
        return self._line_starts[lineno - 1] + col, lineno, col + 1

    def _begin_text(self) -> None:
        if self._pending is not None and self._pending.kind is EventKind.TEXT:
            return
        self._begin(EventKind.TEXT)

    def _begin(
        self,
        kind: EventKind,
        *,
        tag_name: str | None = None,
        attrs: tuple[Attribute, ...] = (),
        close: bool = False,
    ) -> None:
        offset, line, col = self._offset()
        self._flush(offset)
        self._pending = _Pending(kind, offset, line, col, tag_name, attrs, close)

    def _flush(self, end: int) -> None:
        pending: _Pending | None = self._pending
        if pending is None:
            return
        self._pending = None
        raw: str = self._source[pending.offset : end]
        event: ParseEvent
        if pending.kind is EventKind.START_TAG:
            event = StartTagEvent(
                pending.line, pending.col, raw, pending.tag_name, pending.attrs, pending.close
            )
        elif pending.kind is EventKind.END_TAG:
            event = EndTagEvent(pending.line, pending.col, raw, pending.tag_name)
        elif pending.kind is EventKind.COMMENT:
            event = CommentEvent(pending.line, pending.col, raw)
        else:
            event = TextEvent(pending.line, pending.col, raw)
        self._fire(event)

    def _fire(self, event: ParseEvent) -> None:
        logger.trace("Event %s at %d:%d: %r", event.type.value, event.line, event.col, event.raw)
        listeners = self._listeners.get(event.type.value, []) + self._listeners.get(ALL_EVENTS, [])
        for callback in listeners:
            callback(event)

