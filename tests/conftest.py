# topmark:header:start
#
#   project      : BlockWords
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BlockWords test suite.

This file sets up global fixtures, the fake host collaborators rules are
tested against, and the logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from blockwords.config import logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blockwords.markup.events import Attribute, ParseEvent
    from blockwords.rules.base import Rule

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)

# Selected with `pytest --hypothesis-profile thorough`
settings.register_profile("thorough", max_examples=1000, deadline=None)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_blockwords_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure BlockWords' runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("BLOCKWORDS_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class Reported:
    """One call made to `FakeReporter.error`."""

    message: str
    line: int
    col: int
    rule_id: str
    raw: str


@dataclass
class FakeReporter:
    """Reporter double that records every call in order."""

    calls: list[Reported] = field(default_factory=lambda: [])

    def error(self, message: str, line: int, col: int, rule: Rule[Any], raw: str) -> None:
        """Record one finding."""
        self.calls.append(Reported(message, line, col, rule.id, raw))

    def messages(self) -> list[str]:
        """Return the recorded messages in call order."""
        return [c.message for c in self.calls]


@dataclass
class FakeEventSource:
    """Event source double: collects listeners and replays events to them."""

    listeners: dict[str, list[Callable[[ParseEvent], None]]] = field(default_factory=lambda: {})

    def add_listener(self, kind: str, callback: Callable[[ParseEvent], None]) -> None:
        """Subscribe ``callback`` to ``kind``."""
        self.listeners.setdefault(kind, []).append(callback)

    def get_map_attrs(self, attrs: Sequence[Attribute]) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in order."""
        return [(a.name, a.value) for a in attrs]

    def emit(self, *events: ParseEvent) -> None:
        """Deliver ``events`` to the ``"all"`` listeners, in order."""
        for event in events:
            for callback in self.listeners.get("all", []):
                callback(event)

