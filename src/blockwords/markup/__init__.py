# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup events and the reference HTML event source."""

from __future__ import annotations

from blockwords.markup.events import (
    ALL_EVENTS,
    Attribute,
    CommentEvent,
    EndTagEvent,
    EventKind,
    ParseEvent,
    StartTagEvent,
    TextEvent,
)
from blockwords.markup.parser import HtmlEventParser

__all__ = [
    "ALL_EVENTS",
    "Attribute",
    "CommentEvent",
    "EndTagEvent",
    "EventKind",
    "HtmlEventParser",
    "ParseEvent",
    "StartTagEvent",
    "TextEvent",
]
