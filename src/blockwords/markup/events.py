# topmark:header:start
#
#   project      : BlockWords
#   file         : events.py
#   file_relpath : src/blockwords/markup/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse events delivered by a markup event source to rule listeners.

Events form a closed set of variants, one per construct a rule consumes. Each
variant exposes the ``type`` discriminant used on the wire by event sources
(``"tagstart"``, ``"tagend"``, ``"text"``, ``"comment"``), so listeners can
either match on the class or compare ``event.type``.

All positions are 1-based. ``raw`` is the exact source slice of the construct
and may be empty for synthetic events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Final, TypeAlias


class EventKind(str, Enum):
    """Discriminant values of the event variants."""

    START_TAG = "tagstart"
    END_TAG = "tagend"
    TEXT = "text"
    COMMENT = "comment"


# Listener subscription key that receives every event kind
ALL_EVENTS: Final[str] = "all"


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute of a start tag, in document order.

    Attributes:
        name (str): Attribute name as reported by the parser (lower-cased for HTML).
        value (str): Attribute value with quotes removed; empty for bare attributes.
    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class StartTagEvent:
    """An opening (or self-closing) tag such as ``<div class="x">``."""

    type: ClassVar[EventKind] = EventKind.START_TAG

    line: int
    col: int
    raw: str
    tag_name: str | None
    attrs: tuple[Attribute, ...] = field(default_factory=tuple)
    close: bool = False


@dataclass(frozen=True, slots=True)
class EndTagEvent:
    """A closing tag such as ``</div>``."""

    type: ClassVar[EventKind] = EventKind.END_TAG

    line: int
    col: int
    raw: str
    tag_name: str | None


@dataclass(frozen=True, slots=True)
class TextEvent:
    """A run of character data between two tags."""

    type: ClassVar[EventKind] = EventKind.TEXT

    line: int
    col: int
    raw: str
    tag_name: str | None = None


@dataclass(frozen=True, slots=True)
class CommentEvent:
    """A markup comment ``<!-- ... -->``."""

    type: ClassVar[EventKind] = EventKind.COMMENT

    line: int
    col: int
    raw: str
    tag_name: str | None = None


ParseEvent: TypeAlias = StartTagEvent | EndTagEvent | TextEvent | CommentEvent
