# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/rules/block_words/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``block-words`` rule.

Submodules, leaves first:
    * ``matcher``: compile patterns and extract every occurrence.
    * ``messages``: render finding and configuration-error messages.
    * ``options``: options schema and validation.
    * ``rule``: per-event classification and the rule descriptor.
"""

from __future__ import annotations

from blockwords.rules.block_words.matcher import BlockPattern, Match, compile_pattern, find_matches
from blockwords.rules.block_words.messages import blocked_word_message, invalid_options_message
from blockwords.rules.block_words.options import (
    BLOCK_WORDS_RULE_ID,
    BLOCK_WORDS_SCHEMA,
    BlockWordsOptions,
    OptionKey,
    OptionsSchema,
    check_options,
    is_absent_options,
    parse_options,
)
from blockwords.rules.block_words.rule import (
    BLOCK_WORDS_RULE,
    BlockWordsListener,
    build_block_words_rule,
)

__all__ = [
    "BLOCK_WORDS_RULE",
    "BLOCK_WORDS_RULE_ID",
    "BLOCK_WORDS_SCHEMA",
    "BlockPattern",
    "BlockWordsListener",
    "BlockWordsOptions",
    "Match",
    "OptionKey",
    "OptionsSchema",
    "blocked_word_message",
    "build_block_words_rule",
    "check_options",
    "compile_pattern",
    "find_matches",
    "invalid_options_message",
    "is_absent_options",
    "parse_options",
]
