# topmark:header:start
#
#   project      : BlockWords
#   file         : options.py
#   file_relpath : src/blockwords/rules/block_words/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options schema and validation for the block-words rule.

The rule accepts an object mapping category keys to lists of pattern strings:

```toml
[rules.block-words]
all = ["bad-name"]
tagNames = ["^marquee$"]
attributeNames = ["^data-track"]
attributeValues = ["\\\\bshare-panel\\\\b"]
text = ["lorem"]
```

Validation is all-or-nothing: one unknown key, or one value that is not a
list of strings, rejects the whole object. The combined ``attributes`` key of
older configurations is not part of the schema and is rejected like any other
unknown key.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeGuard

from blockwords.config.logging import get_logger

if TYPE_CHECKING:
    from blockwords.config.logging import BlockWordsLogger

logger: BlockWordsLogger = get_logger(__name__)

BLOCK_WORDS_RULE_ID = "block-words"


class OptionKey(str, Enum):
    """Recognized option keys, in schema order."""

    ALL = "all"
    ATTRIBUTE_NAMES = "attributeNames"
    ATTRIBUTE_VALUES = "attributeValues"
    TAG_NAMES = "tagNames"
    TEXT = "text"


@dataclass(frozen=True)
class BlockWordsOptions:
    """Validated, immutable pattern groups.

    A group that is ``None`` was not configured and its category is not
    checked; an empty tuple is configured but cannot match anything.
    """

    all: tuple[str, ...] | None = field(default=None, metadata={"key": OptionKey.ALL})
    attribute_names: tuple[str, ...] | None = field(
        default=None, metadata={"key": OptionKey.ATTRIBUTE_NAMES}
    )
    attribute_values: tuple[str, ...] | None = field(
        default=None, metadata={"key": OptionKey.ATTRIBUTE_VALUES}
    )
    tag_names: tuple[str, ...] | None = field(default=None, metadata={"key": OptionKey.TAG_NAMES})
    text: tuple[str, ...] | None = field(default=None, metadata={"key": OptionKey.TEXT})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BlockWordsOptions:
        """Build options from an already validated mapping.

        Args:
            data (Mapping[str, Any]): Mapping that passed [`check_options`][blockwords.rules.block_words.options.check_options].

        Returns:
            BlockWordsOptions: The immutable options.
        """
        kwargs: dict[str, tuple[str, ...]] = {}
        for f in fields(cls):
            key: str = f.metadata["key"].value
            if key in data:
                kwargs[f.name] = tuple(data[key])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, list[str]]:
        """Return the configured groups keyed by their option key, in schema order."""
        out: dict[str, list[str]] = {}
        for f in fields(self):
            value: tuple[str, ...] | None = getattr(self, f.name)
            if value is not None:
                out[f.metadata["key"].value] = list(value)
        return out


@dataclass(frozen=True)
class OptionsSchema:
    """Immutable description of the accepted options.

    Constructed once and handed to both the validator and the rule factory.

    Attributes:
        rule_id (str): Identifier of the rule the schema belongs to.
        keys (tuple[str, ...]): Recognized keys, in the order listed in messages.
        default_options (BlockWordsOptions): Every group present and empty.
    """

    rule_id: str
    keys: tuple[str, ...]
    default_options: BlockWordsOptions


BLOCK_WORDS_SCHEMA = OptionsSchema(
    rule_id=BLOCK_WORDS_RULE_ID,
    keys=tuple(k.value for k in OptionKey),
    default_options=BlockWordsOptions(
        all=(),
        attribute_names=(),
        attribute_values=(),
        tag_names=(),
        text=(),
    ),
)


def is_string_list(value: object) -> TypeGuard[list[str] | tuple[str, ...]]:
    """Return True if ``value`` is a list (or tuple) whose items are all strings."""
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


def is_absent_options(value: object) -> bool:
    """Return True if ``value`` means "no options given".

    ``None`` and the other empty scalars (``False``, ``0``, ``""``) are absent.
    Empty mappings and empty lists are present: they validate and check nothing.
    """
    return not value and not isinstance(value, (Mapping, list, tuple))


def check_options(value: object, schema: OptionsSchema) -> TypeGuard[Mapping[str, Any]]:
    """Return True if ``value`` is an acceptable options object for ``schema``.

    Args:
        value (object): Raw rule options (already known not to be absent).
        schema (OptionsSchema): The schema to validate against.

    Returns:
        TypeGuard[Mapping[str, Any]]: True if every key is recognized and every
        value is a list of strings.
    """
    if not isinstance(value, Mapping):
        logger.debug("Options for %s are not a mapping: %r", schema.rule_id, type(value))
        return False
    for key, entry in value.items():
        if key not in schema.keys:
            logger.debug("Unknown option key for %s: %r", schema.rule_id, key)
            return False
        if not is_string_list(entry):
            logger.debug("Option %r for %s is not a list of strings", key, schema.rule_id)
            return False
    return True


def parse_options(value: object, schema: OptionsSchema) -> BlockWordsOptions | None:
    """Validate raw options and return them as `BlockWordsOptions`.

    Args:
        value (object): Raw rule options.
        schema (OptionsSchema): The schema to validate against.

    Returns:
        BlockWordsOptions | None: The validated options, or ``None`` when
        ``value`` is rejected.
    """
    if isinstance(value, BlockWordsOptions):
        return value
    if isinstance(value, (list, tuple)) and not value:
        # An empty list has no keys to reject
        return BlockWordsOptions()
    if not check_options(value, schema):
        return None
    return BlockWordsOptions.from_mapping(value)
