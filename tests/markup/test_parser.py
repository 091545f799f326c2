# topmark:header:start
#
#   project      : BlockWords
#   file         : test_parser.py
#   file_relpath : tests/markup/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `html.parser` based event source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockwords.markup.events import (
    Attribute,
    CommentEvent,
    EndTagEvent,
    EventKind,
    StartTagEvent,
    TextEvent,
)
from blockwords.markup.parser import HtmlEventParser

if TYPE_CHECKING:
    from blockwords.markup.events import ParseEvent


def _events(html: str) -> list[ParseEvent]:
    parser = HtmlEventParser()
    seen: list[ParseEvent] = []
    parser.add_listener("all", seen.append)
    parser.parse(html)
    return seen


def test_raw_slices_cover_the_document() -> None:
    """Each event's raw text is its exact source slice, end to end."""
    html = '<div class="bad-name">hello</div>'
    events: list[ParseEvent] = _events(html)

    assert [e.raw for e in events] == ['<div class="bad-name">', "hello", "</div>"]
    assert "".join(e.raw for e in events) == html


def test_event_variants_and_fields() -> None:
    """Start tags carry name and attributes; end tags carry the name."""
    events: list[ParseEvent] = _events('<div class="x" id="y">t</div>')

    start, text, end = events
    assert isinstance(start, StartTagEvent)
    assert start.tag_name == "div"
    assert start.attrs == (Attribute("class", "x"), Attribute("id", "y"))
    assert start.close is False
    assert isinstance(text, TextEvent)
    assert text.tag_name is None
    assert isinstance(end, EndTagEvent)
    assert end.tag_name == "div"
    assert [e.type for e in events] == [EventKind.START_TAG, EventKind.TEXT, EventKind.END_TAG]


def test_positions_are_one_based() -> None:
    """Line and column point at the first character of each construct."""
    events: list[ParseEvent] = _events("<p>\n  <b>x</b>\n</p>")

    assert [(type(e).__name__, e.line, e.col) for e in events] == [
        ("StartTagEvent", 1, 1),
        ("TextEvent", 1, 4),
        ("StartTagEvent", 2, 3),
        ("TextEvent", 2, 6),
        ("EndTagEvent", 2, 7),
        ("TextEvent", 2, 11),
        ("EndTagEvent", 3, 1),
    ]


def test_names_are_lower_cased_values_are_not() -> None:
    """Tag and attribute names are normalized; values keep their case."""
    (start,) = _events('<DIV CLASS="Share-Panel">')

    assert isinstance(start, StartTagEvent)
    assert start.tag_name == "div"
    assert start.attrs == (Attribute("class", "Share-Panel"),)
    assert start.raw == '<DIV CLASS="Share-Panel">'


def test_self_closing_tag_is_one_event() -> None:
    """A self-closing tag is a single start tag flagged as closed."""
    events: list[ParseEvent] = _events("<br/><p>")

    assert len(events) == 2
    br = events[0]
    assert isinstance(br, StartTagEvent)
    assert br.close is True
    assert br.raw == "<br/>"


def test_duplicate_and_bare_attributes() -> None:
    """Attributes keep document order, duplicates and empty values."""
    (start,) = _events('<input x="1" x="2" disabled>')

    assert isinstance(start, StartTagEvent)
    assert start.attrs == (Attribute("x", "1"), Attribute("x", "2"), Attribute("disabled", ""))


def test_comments_are_their_own_events() -> None:
    """Comments are delivered with their full raw text."""
    events: list[ParseEvent] = _events("<!-- note --><p>")

    assert isinstance(events[0], CommentEvent)
    assert events[0].raw == "<!-- note -->"


def test_doctype_is_folded_into_text() -> None:
    """Declarations are delivered as text runs."""
    events: list[ParseEvent] = _events("<!DOCTYPE html><p>")

    assert isinstance(events[0], TextEvent)
    assert events[0].raw == "<!DOCTYPE html>"


def test_character_references_stay_raw() -> None:
    """Raw text is the source, not the decoded text."""
    events: list[ParseEvent] = _events("<p>a &amp; b</p>")

    assert events[1].raw == "a &amp; b"


def test_attribute_values_are_decoded() -> None:
    """Attribute values are unescaped; the raw start tag is not."""
    (start,) = _events('<p class="A&amp;Bad">')

    assert isinstance(start, StartTagEvent)
    assert start.attrs == (Attribute("class", "A&Bad"),)
    assert start.raw == '<p class="A&amp;Bad">'


def test_trailing_text_is_flushed() -> None:
    """Text after the last tag is delivered when parsing ends."""
    events: list[ParseEvent] = _events("just text")

    assert len(events) == 1
    assert isinstance(events[0], TextEvent)
    assert (events[0].line, events[0].col, events[0].raw) == (1, 1, "just text")


def test_empty_document_has_no_events() -> None:
    """Nothing is fired for an empty document."""
    assert _events("") == []


def test_typed_listeners_fire_before_all_listeners() -> None:
    """Listeners of the specific type run before ``"all"`` listeners."""
    parser = HtmlEventParser()
    order: list[str] = []
    parser.add_listener("all", lambda e: order.append(f"all:{e.type.value}"))
    parser.add_listener("tagstart", lambda e: order.append("tagstart"))
    parser.parse("<p>x</p>")

    assert order == ["tagstart", "all:tagstart", "all:text", "all:tagend"]


def test_remove_listener() -> None:
    """A removed listener no longer receives events."""
    parser = HtmlEventParser()
    seen: list[ParseEvent] = []
    parser.add_listener("text", seen.append)

    assert parser.remove_listener("text", seen.append) is True
    assert parser.remove_listener("text", seen.append) is False
    parser.parse("<p>x</p>")
    assert seen == []


def test_get_map_attrs_keeps_pairs() -> None:
    """Attribute pairs are returned in order, duplicates preserved."""
    parser = HtmlEventParser()

    assert parser.get_map_attrs((Attribute("a", "1"), Attribute("a", "2"))) == [
        ("a", "1"),
        ("a", "2"),
    ]


def test_parse_resets_between_documents() -> None:
    """A second parse starts over at line 1 with fresh raw slices."""
    parser = HtmlEventParser()
    seen: list[ParseEvent] = []
    parser.add_listener("all", seen.append)
    parser.parse("<a>\n<b>")
    seen.clear()
    parser.parse("<i>")

    assert [(e.raw, e.line, e.col) for e in seen] == [("<i>", 1, 1)]


def test_script_body_is_text() -> None:
    """Markup-like content inside ``<script>`` is not parsed as tags."""
    events: list[ParseEvent] = _events('<script>var a = "<b>";</script>')

    assert [e.type for e in events] == [EventKind.START_TAG, EventKind.TEXT, EventKind.END_TAG]
    assert events[1].raw == 'var a = "<b>";'
