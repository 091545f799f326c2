# topmark:header:start
#
#   project      : BlockWords
#   file         : registry.py
#   file_relpath : src/blockwords/rules/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only catalogue of the rules shipped with BlockWords.

Hosts use the catalogue to list available rules and to look a rule up by its
identifier before calling its ``init`` hook:

```python
from blockwords.rules.registry import RuleRegistry

for meta in RuleRegistry.iter_meta():
    print(meta.id, meta.description)
rule = RuleRegistry.get("block-words")
```

The catalogue is fixed at import time. Registering rules into a host's own
registry is the host's concern.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from blockwords.errors import UnknownRuleError
from blockwords.rules.block_words.rule import BLOCK_WORDS_RULE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from blockwords.rules.base import Rule


@dataclass(frozen=True)
class RuleMeta:
    """Stable, serializable metadata about a shipped rule."""

    id: str
    description: str = ""
    default_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def options_to_dict(options: object) -> dict[str, Any]:
    """Return rule options as a plain dict (for metadata and TOML rendering)."""
    to_dict = getattr(options, "to_dict", None)
    if callable(to_dict):
        return dict(to_dict())
    if isinstance(options, Mapping):
        return dict(options)
    return {}


class RuleRegistry:
    """Read-only view of the shipped rules, keyed by rule identifier."""

    _rules: Mapping[str, Rule[Any]] = MappingProxyType({BLOCK_WORDS_RULE.id: BLOCK_WORDS_RULE})

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all rule identifiers (sorted).

        Returns:
            tuple[str, ...]: Sorted rule identifiers.
        """
        return tuple(sorted(cls._rules))

    @classmethod
    def all_rules(cls) -> tuple[Rule[Any], ...]:
        """Return all rules, in registration order."""
        return tuple(cls._rules.values())

    @classmethod
    def is_registered(cls, rule_id: str) -> bool:
        """Return True if ``rule_id`` names a shipped rule."""
        return rule_id in cls._rules

    @classmethod
    def get(cls, rule_id: str) -> Rule[Any]:
        """Return the rule registered under ``rule_id``.

        Args:
            rule_id (str): Rule identifier.

        Returns:
            Rule[Any]: The rule descriptor.

        Raises:
            UnknownRuleError: If no rule has that identifier.
        """
        try:
            return cls._rules[rule_id]
        except KeyError:
            raise UnknownRuleError(rule_id) from None

    @classmethod
    def as_mapping(cls) -> Mapping[str, Rule[Any]]:
        """Return a read-only mapping of rule identifiers to rules."""
        return cls._rules

    @classmethod
    def iter_meta(cls) -> Iterator[RuleMeta]:
        """Iterate over stable metadata for the shipped rules.

        Yields:
            RuleMeta: Serializable metadata about each rule.
        """
        for rule_id, rule in cls._rules.items():
            yield RuleMeta(
                id=rule_id,
                description=rule.description,
                default_options=MappingProxyType(options_to_dict(rule.default_options)),
            )
