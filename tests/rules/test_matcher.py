# topmark:header:start
#
#   project      : BlockWords
#   file         : test_matcher.py
#   file_relpath : tests/rules/test_matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for blocked-word pattern compilation and matching."""

from __future__ import annotations

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blockwords.rules.block_words.matcher import (
    BlockPattern,
    Match,
    compile_pattern,
    escape_source,
    find_matches,
)
from tests.conftest import parametrize


def test_find_matches_single_occurrence() -> None:
    """A literal pattern yields exactly its occurrence."""
    matches: list[Match] = find_matches('<div class="bad-name">', ["bad-name"])

    assert [m.text for m in matches] == ["bad-name"]
    assert str(matches[0].pattern) == "/bad-name/g"
    assert matches[0].category is None


def test_find_matches_every_occurrence_left_to_right() -> None:
    """All non-overlapping occurrences are returned in scan order."""
    matches: list[Match] = find_matches("bad-name x bad-name y bad-name", ["bad-name"], "text")

    assert [m.text for m in matches] == ["bad-name"] * 3
    assert all(m.category == "text" for m in matches)


def test_find_matches_pattern_order_then_scan_order() -> None:
    """Results are grouped by pattern, in the order patterns were given."""
    matches: list[Match] = find_matches("foo bar foo bar", ["bar", "foo"])

    assert [m.text for m in matches] == ["bar", "bar", "foo", "foo"]


def test_find_matches_is_case_insensitive() -> None:
    """Both pattern and text are lower-cased before matching."""
    matches: list[Match] = find_matches("Lorem LOREM lorem", ["LoReM"])

    assert [m.text for m in matches] == ["lorem", "lorem", "lorem"]
    assert str(matches[0].pattern) == "/lorem/g"


def test_find_matches_supports_regular_expressions() -> None:
    """Patterns are regular expressions; the exact matched substring is reported."""
    matches: list[Match] = find_matches(
        "share-panel other share-panel", ["(?:^|\\s)share-panel(?:$|\\s)"]
    )

    assert [m.text for m in matches] == ["share-panel ", " share-panel"]


def test_find_matches_word_boundaries() -> None:
    """Word boundaries do not match inside longer words."""
    matches: list[Match] = find_matches("sharepanel share-panel xshare-panelx", ["\\bshare-panel\\b"])

    assert [m.text for m in matches] == ["share-panel"]


def test_find_matches_empty_patterns() -> None:
    """No patterns means no matches."""
    assert find_matches("anything at all", []) == []


def test_find_matches_no_occurrence() -> None:
    """A pattern that does not occur yields nothing."""
    assert find_matches("clean text", ["bad"]) == []


def test_malformed_pattern_raises() -> None:
    """A pattern that does not compile propagates ``re.error``."""
    with pytest.raises(re.error):
        find_matches("text", ["(unclosed"])


def test_compile_pattern_is_cached() -> None:
    """The same raw pattern string compiles to the same object."""
    first: BlockPattern = compile_pattern("cached-word")
    second: BlockPattern = compile_pattern("cached-word")

    assert first is second
    assert first.source == "cached-word"
    assert first.flags == "g"


@parametrize(
    "source, expected",
    [
        ("bad-name", "bad-name"),
        ("", "(?:)"),
        ("a/b", "a\\/b"),
        ("a\\/b", "a\\/b"),
        ("[/]", "[/]"),
        ("[a]/", "[a]\\/"),
        ("line\nbreak", "line\\nbreak"),
        ("cr\rhere", "cr\\rhere"),
        ("sep\u2028x", "sep\\u2028x"),
    ],
)
def test_escape_source(source: str, expected: str) -> None:
    """Slashes outside classes and line terminators are escaped."""
    assert escape_source(source) == expected


def test_pattern_renders_with_slashes() -> None:
    """A pattern renders as ``/source/g`` with its lower-cased source."""
    assert str(compile_pattern("A/B")) == "/a\\/b/g"
    assert str(compile_pattern("")) == "/(?:)/g"


@given(word=st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=12))
def test_literal_word_found_in_any_case(word: str) -> None:
    """A plain word is found whatever the case of the surrounding text."""
    text: str = f"before {word.upper()} after"
    matches: list[Match] = find_matches(text, [re.escape(word)])

    assert matches
    assert all(m.text == word for m in matches)


@given(
    text=st.text(max_size=40),
    patterns=st.lists(st.sampled_from(["a", "b", "ab", "\\d+", "x?"]), max_size=4),
)
def test_find_matches_is_deterministic(text: str, patterns: list[str]) -> None:
    """Identical inputs always produce identical results."""
    first: list[str] = [m.text for m in find_matches(text, patterns)]
    second: list[str] = [m.text for m in find_matches(text, patterns)]

    assert first == second
