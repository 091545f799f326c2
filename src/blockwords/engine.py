# topmark:header:start
#
#   project      : BlockWords
#   file         : engine.py
#   file_relpath : src/blockwords/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host wiring: feed a document to configured rules and collect diagnostics.

This is the minimal host the rules need to run outside of a larger linting
framework:

* [`CollectingReporter`][blockwords.engine.CollectingReporter] implements the
  reporter interface on top of a `DiagnosticLog`.
* [`lint_text`][blockwords.engine.lint_text] initializes every configured rule
  on a fresh [`HtmlEventParser`][blockwords.markup.parser.HtmlEventParser],
  then parses the document.
* [`run_rule_case`][blockwords.engine.run_rule_case] runs one of a rule's
  example cases.

Error policy:
    A malformed blocked-word pattern raises ``re.error`` while the document is
    being parsed. It is not caught: the whole lint run aborts, and the
    diagnostics collected so far are discarded with it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blockwords.config.io import load_rules_config
from blockwords.config.logging import get_logger
from blockwords.constants import BLOCKWORDS_VERSION
from blockwords.diagnostic.model import DiagnosticLog
from blockwords.markup.parser import HtmlEventParser
from blockwords.rules.registry import RuleRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from blockwords.config.logging import BlockWordsLogger
    from blockwords.rules.base import Rule, RuleCase

logger: BlockWordsLogger = get_logger(__name__)


class CollectingReporter:
    """Reporter that appends every finding to a `DiagnosticLog`."""

    def __init__(self, log: DiagnosticLog | None = None) -> None:
        self.log: DiagnosticLog = log if log is not None else DiagnosticLog()

    def error(
        self,
        message: str,
        line: int,
        col: int,
        rule: Rule[Any],
        raw: str,
    ) -> None:
        """Record an error-level finding reported by ``rule``."""
        self.log.add_error(message, line, col, rule.id, raw)


def resolve_rule_options(rule: Rule[Any], value: Any) -> tuple[bool, Any]:
    """Map a configuration value to ``(enabled, options)`` for ``rule``.

    ``False`` disables the rule, ``True`` enables it with its default options,
    and any other value is handed to the rule unchanged (validation is the
    rule's own business).

    Args:
        rule (Rule[Any]): The configured rule.
        value (Any): The value found in the rules configuration.

    Returns:
        tuple[bool, Any]: Whether to initialize the rule, and the options to pass.
    """
    if value is False:
        return False, None
    if value is True:
        return True, rule.default_options
    return True, value


def lint_text(html: str, rules_config: Mapping[str, Any] | None = None) -> DiagnosticLog:
    """Run the configured rules over ``html`` and return their diagnostics.

    Args:
        html (str): The document to check.
        rules_config (Mapping[str, Any] | None): Rule identifier to options. ``None``
            or an empty mapping runs no rule.

    Returns:
        DiagnosticLog: Findings in report order (rule initialization first, then
        document order).

    Raises:
        UnknownRuleError: If the configuration names a rule that does not exist.
        re.error: If a configured pattern is not a valid regular expression.
    """
    logger.debug("Linting %d characters with BlockWords %s", len(html), BLOCKWORDS_VERSION)
    reporter = CollectingReporter()
    parser = HtmlEventParser()
    for rule_id, value in (rules_config or {}).items():
        rule: Rule[Any] = RuleRegistry.get(rule_id)
        enabled, options = resolve_rule_options(rule, value)
        if not enabled:
            logger.debug("Rule %s disabled by configuration", rule_id)
            continue
        logger.debug("Initializing rule %s", rule_id)
        rule.init(parser, reporter, options)
    parser.parse(html)
    logger.info("Lint finished with %d diagnostic(s)", len(reporter.log))
    return reporter.log


def lint_file(path: Path, config_path: Path | None = None) -> DiagnosticLog:
    """Read ``path`` as UTF-8 and lint it with the rules from ``config_path``.

    Args:
        path (Path): The markup file to check.
        config_path (Path | None): A ``blockwords.toml`` or ``pyproject.toml``. When
            ``None``, no rule runs.

    Returns:
        DiagnosticLog: The findings.
    """
    rules_config: dict[str, Any] = load_rules_config(config_path) if config_path else {}
    return lint_text(path.read_text(encoding="utf-8"), rules_config)


def run_rule_case(rule: Rule[Any], case: RuleCase[Any]) -> DiagnosticLog:
    """Run one example case of ``rule`` in isolation.

    The case options are passed to ``rule.init`` unchanged, including
    deliberately malformed ones.

    Args:
        rule (Rule[Any]): The rule under test.
        case (RuleCase[Any]): One of ``rule.cases``.

    Returns:
        DiagnosticLog: The diagnostics produced for the case.
    """
    reporter = CollectingReporter()
    parser = HtmlEventParser()
    rule.init(parser, reporter, case.rule_options)
    parser.parse(case.html)
    return reporter.log
