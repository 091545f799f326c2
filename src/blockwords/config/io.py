# topmark:header:start
#
#   project      : BlockWords
#   file         : io.py
#   file_relpath : src/blockwords/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for BlockWords rule configuration.

Rule options live under a ``[rules]`` table, keyed by rule identifier:

```toml
[rules.block-words]
all = ["bad-name"]
attributeValues = ["\\\\bshare-panel\\\\b"]
```

Inside ``pyproject.toml`` the same table is nested as ``[tool.blockwords.rules]``.
A rule set to ``false`` is disabled; ``true`` enables it with its defaults.

Reading uses ``toml``. Rendering the default configuration uses ``tomlkit`` so
the generated document carries comments (rule descriptions).

Option *values* are returned exactly as found: validating them is the job of
each rule's ``init`` hook, which reports problems as diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import toml
import tomlkit

from blockwords.config.keys import Toml
from blockwords.config.logging import get_logger
from blockwords.constants import DEFAULT_CONFIG_NAME
from blockwords.errors import ConfigFileError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from tomlkit.items import Table

    from blockwords.config.logging import BlockWordsLogger
    from blockwords.rules.base import Rule

logger: BlockWordsLogger = get_logger(__name__)

TomlTable = dict[str, Any]

PYPROJECT_NAME = "pyproject.toml"

__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "load_toml_dict",
    "rules_table",
    "load_rules_config",
    "load_rules_config_from_text",
    "find_config_file",
    "render_default_config",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``blockwords.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        return cast("TomlTable", toml.load(path))
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigFileError(f"Cannot read configuration file {path}: {e}") from e
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigFileError(f"Invalid TOML in {path}: {e}") from e


def rules_table(document: TomlTable, *, pyproject: bool = False) -> TomlTable:
    """Return the rules table of a parsed configuration document.

    Args:
        document (TomlTable): Parsed TOML document.
        pyproject (bool): Look under ``[tool.blockwords]`` instead of the top level.

    Returns:
        TomlTable: Rule identifier to raw options; empty if the table is missing.
    """
    if pyproject:
        tool: TomlTable = get_table_value(document, Toml.SECTION_TOOL)
        document = get_table_value(tool, Toml.SECTION_BLOCKWORDS)
    rules: Any = document.get(Toml.SECTION_RULES)
    if rules is None:
        return {}
    if not is_toml_table(rules):
        logger.warning("Ignoring [%s]: expected a table, got %r", Toml.SECTION_RULES, rules)
        return {}
    return rules


def load_rules_config_from_text(text: str, *, pyproject: bool = False) -> TomlTable:
    """Parse TOML text and return its rules table.

    Args:
        text (str): TOML document.
        pyproject (bool): ``text`` is a ``pyproject.toml`` document.

    Returns:
        TomlTable: Rule identifier to raw options.

    Raises:
        ConfigFileError: If ``text`` is not valid TOML.
    """
    try:
        document: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigFileError(f"Invalid TOML: {e}") from e
    return rules_table(document, pyproject=pyproject)


def load_rules_config(path: Path) -> TomlTable:
    """Load the rules table from ``path``.

    A file named ``pyproject.toml`` is read from ``[tool.blockwords.rules]``;
    any other file from its top-level ``[rules]`` table.

    Args:
        path (Path): Configuration file.

    Returns:
        TomlTable: Rule identifier to raw options.
    """
    rules: TomlTable = rules_table(load_toml_dict(path), pyproject=path.name == PYPROJECT_NAME)
    logger.debug("Loaded %d rule setting(s) from %s", len(rules), path)
    return rules


def find_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start``.

    In each directory ``blockwords.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.blockwords]`` table.

    Args:
        start (Path): A file or directory to start from.

    Returns:
        Path | None: The configuration file, or ``None`` if there is none.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_NAME
        if pyproject.is_file():
            tool: TomlTable = get_table_value(load_toml_dict(pyproject), Toml.SECTION_TOOL)
            if Toml.SECTION_BLOCKWORDS in tool:
                return pyproject
    return None


def render_default_config(rules: Iterable[Rule[Any]]) -> str:
    """Render a commented ``blockwords.toml`` enabling ``rules`` with their defaults.

    Args:
        rules (Iterable[Rule[Any]]): Rules to include, in output order.

    Returns:
        str: A TOML document with one ``[rules.<id>]`` table per rule.
    """
    from blockwords.rules.registry import options_to_dict

    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("BlockWords configuration"))
    doc.add(tomlkit.comment("Set a rule to `false` to disable it."))
    doc.add(tomlkit.nl())

    rules_tbl: Table = tomlkit.table(is_super_table=True)
    for rule in rules:
        rule_tbl: Table = tomlkit.table()
        rule_tbl.add(tomlkit.comment(rule.description))
        for key, value in options_to_dict(rule.default_options).items():
            rule_tbl.add(key, value)
        rules_tbl.add(rule.id, rule_tbl)
    doc.add(Toml.SECTION_RULES, rules_tbl)
    return tomlkit.dumps(doc)
