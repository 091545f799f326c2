# topmark:header:start
#
#   project      : BlockWords
#   file         : errors.py
#   file_relpath : src/blockwords/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for BlockWords.

Usage:
    Raise these exceptions from host-level code (rule lookup, config loading)
    to signal errors with a common base class.

Notes:
    Invalid *rule options* are not exceptions: they are reported as a single
    diagnostic by the rule itself. Malformed blocked-word patterns surface as
    ``re.error`` and are deliberately not wrapped.
"""

from __future__ import annotations


class BlockWordsError(Exception):
    """Base class for all BlockWords errors."""


class UnknownRuleError(BlockWordsError, KeyError):
    """Error raised when a rule identifier is not in the rule catalogue."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(rule_id)
        self.rule_id: str = rule_id

    def __str__(self) -> str:
        return f"Unknown rule: {self.rule_id}"


class ConfigFileError(BlockWordsError):
    """Error for configuration files that cannot be read or decoded."""
