# topmark:header:start
#
#   project      : BlockWords
#   file         : keys.py
#   file_relpath : src/blockwords/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for BlockWords configuration.

Keys defined here represent the *external configuration API* as it appears in
``blockwords.toml`` and in ``[tool.blockwords]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by BlockWords configuration."""

    # pyproject.toml nesting: [tool.blockwords]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_BLOCKWORDS: Final[str] = "blockwords"

    # [rules]: one entry per rule identifier
    SECTION_RULES: Final[str] = "rules"
