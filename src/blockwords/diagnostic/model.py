# topmark:header:start
#
#   project      : BlockWords
#   file         : model.py
#   file_relpath : src/blockwords/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for BlockWords.

Rules never build these objects themselves: they call ``reporter.error(...)``
and the host's reporter turns each call into a `Diagnostic` appended to a
`DiagnosticLog`.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable finding (level, message, position, rule, raw snippet).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-run collection with helpers for adding and
      summarizing diagnostics.
    * FrozenDiagnosticLog: immutable snapshot container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from blockwords.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from blockwords.config.logging import BlockWordsLogger


logger: BlockWordsLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics reported by rules.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single finding reported by a rule.

    Attributes:
        level (DiagnosticLevel): Severity of the finding.
        message (str): The rendered message string (the unit tests compare against).
        line (int): 1-based line of the originating event.
        col (int): 1-based column of the originating event.
        rule_id (str): Identifier of the reporting rule.
        raw (str): Raw source snippet of the originating event (may be empty).
    """

    level: DiagnosticLevel
    message: str
    line: int
    col: int
    rule_id: str
    raw: str = ""

    def render(self, *, color: bool = False) -> str:
        """Render the diagnostic as a single human-readable line.

        Args:
            color (bool): Colorize the severity tag using the level color.

        Returns:
            str: ``"<line>:<col> [<level>] <message> (<rule_id>)"``.
        """
        tag: str = f"[{self.level.value}]"
        if color:
            tag = self.level.color(tag)
        return f"{self.line}:{self.col} {tag} {self.message} ({self.rule_id})"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for one lint run.

    Diagnostics are kept in insertion order, which is the order in which rules
    reported them (document order, then per-event step order).
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics.
        """
        return cls(items=list(diagnostics))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the log.

        Args:
            diagnostic: The diagnostic object.
        """
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s] %d:%d: %r",
            diagnostic.level.value,
            diagnostic.line,
            diagnostic.col,
            diagnostic.message,
        )

    def add_error(
        self,
        message: str,
        line: int,
        col: int,
        rule_id: str,
        raw: str = "",
    ) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
            line: 1-based line of the finding.
            col: 1-based column of the finding.
            rule_id: Identifier of the reporting rule.
            raw: Raw source snippet.
        """
        self.add(Diagnostic(DiagnosticLevel.ERROR, message, line, col, rule_id, raw))

    def add_warning(
        self,
        message: str,
        line: int,
        col: int,
        rule_id: str,
        raw: str = "",
    ) -> None:
        """Add a ``warning`` diagnostic to the log."""
        self.add(Diagnostic(DiagnosticLevel.WARNING, message, line, col, rule_id, raw))

    def add_info(
        self,
        message: str,
        line: int,
        col: int,
        rule_id: str,
        raw: str = "",
    ) -> None:
        """Add an ``info`` diagnostic to the log."""
        self.add(Diagnostic(DiagnosticLevel.INFO, message, line, col, rule_id, raw))

    def messages(self) -> list[str]:
        """Return the message strings in insertion order."""
        return [d.message for d in self.items]

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``
            reflecting the number of diagnostics at each level.
        """
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics stored in this log, in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`."""

    items: tuple[Diagnostic, ...]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
