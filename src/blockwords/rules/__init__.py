# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules shipped with BlockWords and the contract they satisfy.

* [`blockwords.rules.base`][blockwords.rules.base]: `Rule` descriptor, `RuleCase`,
  and the `EventSource` / `Reporter` host interfaces.
* [`blockwords.rules.registry`][blockwords.rules.registry]: read-only rule catalogue.
* [`blockwords.rules.block_words`][blockwords.rules.block_words]: the ``block-words`` rule.
"""

from __future__ import annotations

from blockwords.rules.base import EventSource, Reporter, Rule, RuleCase
from blockwords.rules.registry import RuleMeta, RuleRegistry

__all__ = [
    "EventSource",
    "Reporter",
    "Rule",
    "RuleCase",
    "RuleMeta",
    "RuleRegistry",
]
