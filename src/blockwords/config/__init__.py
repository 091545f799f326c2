# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for BlockWords.

Submodules:
    * [`blockwords.config.logging`][blockwords.config.logging]: TRACE-aware logging setup.
    * [`blockwords.config.keys`][blockwords.config.keys]: canonical TOML keys.
    * [`blockwords.config.io`][blockwords.config.io]: loading rule options from TOML and
      rendering the default configuration.
"""

from __future__ import annotations
