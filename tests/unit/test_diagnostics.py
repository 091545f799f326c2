# topmark:header:start
#
#   project      : BlockWords
#   file         : test_diagnostics.py
#   file_relpath : tests/unit/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostic model."""

from __future__ import annotations

import dataclasses

import pytest

from blockwords.diagnostic import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)


def _log() -> DiagnosticLog:
    log = DiagnosticLog()
    log.add_error("first", 1, 1, "block-words", "<p>")
    log.add_warning("second", 2, 3, "block-words")
    log.add_info("third", 4, 5, "block-words")
    log.add_error("fourth", 6, 7, "block-words")
    return log


def test_insertion_order_is_kept() -> None:
    """Messages come back in the order they were reported."""
    assert _log().messages() == ["first", "second", "third", "fourth"]


def test_stats_and_counts() -> None:
    """Per-level counts add up to the total."""
    log: DiagnosticLog = _log()

    stats = log.stats()
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 1, 2, 4)
    assert log.to_dict() == {"info": 1, "warning": 1, "error": 2}
    assert log.has_error()
    assert not DiagnosticLog().has_error()


def test_freeze_snapshot() -> None:
    """Frozen snapshots are unaffected by later additions."""
    log: DiagnosticLog = _log()
    frozen: FrozenDiagnosticLog = log.freeze()
    log.add_error("fifth", 8, 9, "block-words")

    assert len(frozen) == 4
    assert len(log) == 5
    assert frozen.to_dict() == {"info": 1, "warning": 1, "error": 2}
    assert DiagnosticLog.from_iterable(frozen).messages() == log.messages()[:4]


def test_diagnostic_is_immutable() -> None:
    """Diagnostics cannot be modified after creation."""
    diag = Diagnostic(DiagnosticLevel.ERROR, "msg", 1, 1, "block-words")

    with pytest.raises(dataclasses.FrozenInstanceError):
        diag.message = "other"  # type: ignore[misc]


def test_render() -> None:
    """Plain rendering shows position, level, message and rule."""
    diag = Diagnostic(
        DiagnosticLevel.ERROR, 'Blocked word from /x/g detected: "x"', 3, 7, "block-words"
    )

    assert diag.render() == '3:7 [error] Blocked word from /x/g detected: "x" (block-words)'
    assert "Blocked word" in diag.render(color=True)


def test_compute_stats_on_empty() -> None:
    """An empty sequence has zero counts."""
    assert compute_diagnostic_stats([]).total == 0
