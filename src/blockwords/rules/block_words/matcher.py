# topmark:header:start
#
#   project      : BlockWords
#   file         : matcher.py
#   file_relpath : src/blockwords/rules/block_words/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Blocked-word pattern matching.

Pattern strings are user-supplied regular expressions (Python ``re`` syntax),
accepted verbatim. Matching is case-insensitive by lower-casing both the
pattern and the checkable text before scanning; the compiled pattern is
rendered in messages as ``/source/g``.

A malformed pattern raises ``re.error`` from [`compile_pattern`][blockwords.rules.block_words.matcher.compile_pattern]
the first time it is used. It is never caught here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Final, Literal

from blockwords.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from blockwords.config.logging import BlockWordsLogger

logger: BlockWordsLogger = get_logger(__name__)

Category = Literal["tag name", "attribute", "text"]

# Every pattern scans the whole text for all occurrences.
GLOBAL_FLAG: Final[str] = "g"

_LINE_TERMINATORS: Final[dict[str, str]] = {
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def escape_source(source: str) -> str:
    """Return ``source`` in the canonical slash-delimited form.

    Unescaped ``/`` outside character classes is escaped, line terminators are
    written as escapes and an empty source becomes ``(?:)``.

    Args:
        source (str): Pattern source as compiled.

    Returns:
        str: The escaped source, safe to place between two slashes.
    """
    if not source:
        return "(?:)"
    out: list[str] = []
    in_class = False
    escaped = False
    for ch in source:
        if ch in _LINE_TERMINATORS:
            out.append(_LINE_TERMINATORS[ch])
            escaped = False
            continue
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "[":
            in_class = True
        elif ch == "]":
            in_class = False
        elif ch == "/" and not in_class:
            out.append("\\")
        out.append(ch)
    return "".join(out)


@dataclass(frozen=True, slots=True)
class BlockPattern:
    """A compiled blocked-word pattern.

    Attributes:
        source (str): The lower-cased pattern source that was compiled.
        regex (re.Pattern[str]): The compiled regular expression.
    """

    source: str
    regex: re.Pattern[str]

    @property
    def flags(self) -> str:
        """Return the flag letters shown in the rendered form."""
        return GLOBAL_FLAG

    def finditer(self, text: str) -> Iterator[str]:
        """Yield every non-overlapping occurrence in ``text``, left to right."""
        for found in self.regex.finditer(text):
            yield found.group(0)

    def __str__(self) -> str:
        return f"/{escape_source(self.source)}/{self.flags}"


@dataclass(frozen=True, slots=True)
class Match:
    """One occurrence of a blocked pattern.

    Attributes:
        text (str): The exact matched substring.
        pattern (BlockPattern): The compiled pattern that produced it.
        category (Category | None): Where the occurrence was found; ``None`` for
            the raw-markup sweep.
    """

    text: str
    pattern: BlockPattern
    category: Category | None = None


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> BlockPattern:
    """Compile a raw pattern string into a `BlockPattern`.

    Args:
        pattern (str): Raw pattern string from the rule options.

    Returns:
        BlockPattern: The compiled pattern (cached per pattern string).

    Raises:
        re.error: If the lower-cased pattern is not a valid regular expression.
    """
    source: str = pattern.lower()
    logger.trace("Compiling blocked pattern %r", source)
    return BlockPattern(source=source, regex=re.compile(source))


def find_matches(
    check_text: str,
    patterns: Iterable[str],
    category: Category | None = None,
) -> list[Match]:
    """Find every occurrence of every pattern in ``check_text``.

    Patterns are processed in the given order, and occurrences of one pattern in
    left-to-right scan order, so the result order is fully determined by the
    inputs. An empty pattern list yields an empty result.

    Args:
        check_text (str): Text to scan. Lower-cased before matching.
        patterns (Iterable[str]): Raw pattern strings, in configuration order.
        category (Category | None): Category recorded on each match.

    Returns:
        list[Match]: One entry per occurrence.

    Raises:
        re.error: If one of the patterns is malformed.
    """
    text: str = check_text.lower()
    matches: list[Match] = []
    for raw_pattern in patterns:
        compiled: BlockPattern = compile_pattern(raw_pattern)
        matches.extend(Match(found, compiled, category) for found in compiled.finditer(text))
    return matches
