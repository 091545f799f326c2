# topmark:header:start
#
#   project      : BlockWords
#   file         : constants.py
#   file_relpath : src/blockwords/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BlockWords Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    BLOCKWORDS_VERSION: str = get_version("blockwords")
except PackageNotFoundError:  # running from a source checkout
    BLOCKWORDS_VERSION = "0.0.0"

# Name of the standalone config file
DEFAULT_CONFIG_NAME: Final[str] = "blockwords.toml"

# Environment variable consulted by `blockwords.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "BLOCKWORDS_LOG_LEVEL"

# Synthetic location used for diagnostics that do not belong to a source position
SYNTHETIC_LINE: Final[int] = 1
SYNTHETIC_COL: Final[int] = 1
