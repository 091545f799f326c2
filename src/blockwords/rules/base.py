# topmark:header:start
#
#   project      : BlockWords
#   file         : base.py
#   file_relpath : src/blockwords/rules/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule descriptor contract and the host interfaces a rule consumes.

A rule is a plain, immutable descriptor: a stable identifier, a description,
its default options, an ``init`` hook, and a set of example cases. The host
calls ``init(parser, reporter, options)`` once per run; the hook validates the
options and, when they are usable, subscribes a listener on the event source.
Everything after that happens inside the listener, synchronously per event.

Interfaces consumed from the host are expressed structurally:

* `EventSource`: ``add_listener(kind, callback)`` and ``get_map_attrs(attrs)``.
* `Reporter`: ``error(message, line, col, rule, raw)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from blockwords.markup.events import Attribute, ParseEvent

OptionsT = TypeVar("OptionsT")


class EventSource(Protocol):
    """Structural interface of a markup event source."""

    def add_listener(self, kind: str, callback: Callable[[ParseEvent], None]) -> None:
        """Subscribe ``callback`` to events of ``kind`` (``"all"`` for every event)."""
        ...

    def get_map_attrs(self, attrs: Sequence[Attribute]) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in document order, duplicates preserved."""
        ...


class Reporter(Protocol):
    """Structural interface of the diagnostic sink."""

    def error(
        self,
        message: str,
        line: int,
        col: int,
        rule: Rule[Any],
        raw: str,
    ) -> None:
        """Record one error-level finding for ``rule``."""
        ...


@dataclass(frozen=True)
class RuleCase(Generic[OptionsT]):
    """An example run of a rule, shipped with the rule itself.

    Attributes:
        description (str): What the case demonstrates.
        html (str): Markup fed to the event source.
        rule_options (OptionsT): Options passed to the rule's ``init`` hook. Cases
            that exercise validation pass deliberately malformed values here.
        failures (tuple[str, ...]): Expected diagnostic messages, in report order.
    """

    description: str
    html: str
    rule_options: OptionsT
    failures: tuple[str, ...] = ()


@dataclass(frozen=True, eq=False)
class Rule(Generic[OptionsT]):
    """Descriptor of a rule pluggable into a markup linting host.

    Attributes:
        id (str): Stable rule identifier (used in configuration and reports).
        description (str): Human-readable description.
        default_options (OptionsT): The rule's default (empty) configuration.
        init (Callable[[EventSource, Reporter, Any], None]): Initialization hook.
            It receives the raw, unvalidated options.
        cases (tuple[RuleCase[Any], ...]): Example cases with their expected failures.
    """

    id: str
    description: str
    default_options: OptionsT
    init: Callable[[EventSource, Reporter, Any], None] = field(repr=False)
    cases: tuple[RuleCase[Any], ...] = field(default=(), repr=False)

    def __str__(self) -> str:
        return self.id
