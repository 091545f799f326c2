# topmark:header:start
#
#   project      : BlockWords
#   file         : messages.py
#   file_relpath : src/blockwords/rules/block_words/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message construction for the block-words rule.

Both helpers are pure: identical inputs always render identical strings. These
strings are the contract compared by hosts and tests.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blockwords.rules.block_words.matcher import BlockPattern, Category
    from blockwords.rules.block_words.options import OptionsSchema


def blocked_word_message(
    blocked_match: str,
    pattern: BlockPattern,
    tag_name: str | None = None,
    category: Category | None = None,
) -> str:
    """Render the message for one blocked-word occurrence.

    Args:
        blocked_match (str): The matched substring.
        pattern (BlockPattern): The compiled pattern, rendered as ``/source/g``.
        tag_name (str | None): Lower-cased tag name of the originating element.
        category (Category | None): Where the match was found.

    Returns:
        str: ``Blocked {category }word from {pattern} detected{ in tag_name}: "{match}"``.

    Example:
        ```python
        >>> blocked_word_message("bad-name", compile_pattern("bad-name"), "div")
        'Blocked word from /bad-name/g detected in div: "bad-name"'
        ```
    """
    context_message: str = f"{category} " if category else ""
    tag_message: str = f" in {tag_name}" if tag_name else ""
    return f'Blocked {context_message}word from {pattern} detected{tag_message}: "{blocked_match}"'


def serialize_options(value: object) -> str:
    """Serialize arbitrary option input as compact JSON for error messages.

    Values JSON cannot represent natively are rendered with ``str()``. Input
    that cannot be encoded at all (non-string keys, circular references) is
    rendered whole with ``str()``.
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


def invalid_options_message(invalid_options: object, schema: OptionsSchema) -> str:
    """Render the configuration-error message for rejected rule options.

    Args:
        invalid_options (object): The complete input that failed validation.
        schema (OptionsSchema): The schema the input was validated against.

    Returns:
        str: A message listing the allowed keys and echoing the input.
    """
    return (
        f'Expected an object with keys from "{", ".join(schema.keys)}" and string array '
        f"values for rule {schema.rule_id} but got {serialize_options(invalid_options)}"
    )
