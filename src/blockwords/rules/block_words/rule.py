# topmark:header:start
#
#   project      : BlockWords
#   file         : rule.py
#   file_relpath : src/blockwords/rules/block_words/rule.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``block-words`` rule: user-defined blocked words in markup.

Lifecycle:
    1. The host calls the rule's ``init(parser, reporter, options)`` once.
    2. Absent options (``None``, ``False``, ``0``, ``""``) leave the rule inert. Options that fail validation
       produce a single diagnostic at line 1, column 1, and the rule stays
       inert. Only valid options subscribe a [`BlockWordsListener`][blockwords.rules.block_words.rule.BlockWordsListener].
    3. The listener classifies every event and reports each match, in a fixed
       step order: tag name, text, attributes (value then name, per pair),
       then the raw-markup sweep for ``all``.

The ``all`` sweep runs in addition to the category-specific checks, so the
same occurrence can be reported more than once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from blockwords.config.logging import get_logger
from blockwords.constants import SYNTHETIC_COL, SYNTHETIC_LINE
from blockwords.markup.events import ALL_EVENTS, CommentEvent, StartTagEvent, TextEvent
from blockwords.rules.base import Rule, RuleCase
from blockwords.rules.block_words.matcher import compile_pattern, find_matches
from blockwords.rules.block_words.messages import blocked_word_message, invalid_options_message
from blockwords.rules.block_words.options import (
    BLOCK_WORDS_SCHEMA,
    BlockWordsOptions,
    OptionsSchema,
    is_absent_options,
    parse_options,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blockwords.config.logging import BlockWordsLogger
    from blockwords.markup.events import ParseEvent
    from blockwords.rules.base import EventSource, Reporter
    from blockwords.rules.block_words.matcher import Category

logger: BlockWordsLogger = get_logger(__name__)

BLOCK_WORDS_DESCRIPTION = (
    "Block a user defined set of words from appearing in markup, per tag name, "
    "attribute name, attribute value, text, or all markup."
)


class BlockWordsListener:
    """Per-event classifier and dispatcher for one lint run.

    Instances are created only for validated options and hold no state besides
    their collaborators, so every event is processed independently.
    """

    def __init__(
        self,
        options: BlockWordsOptions,
        parser: EventSource,
        reporter: Reporter,
        rule: Rule[Any],
    ) -> None:
        self.options: BlockWordsOptions = options
        self.parser: EventSource = parser
        self.reporter: Reporter = reporter
        self.rule: Rule[Any] = rule

    def __call__(self, event: ParseEvent) -> None:
        """Classify ``event`` and report every blocked-word occurrence in it."""
        if isinstance(event, CommentEvent):
            return

        options: BlockWordsOptions = self.options

        if options.tag_names is not None and isinstance(event, StartTagEvent) and event.tag_name:
            self._report(event, event.tag_name.lower(), options.tag_names, "tag name")

        if options.text is not None and isinstance(event, TextEvent) and event.raw:
            self._report(event, event.raw, options.text, "text")

        if isinstance(event, StartTagEvent) and event.raw:
            for name, value in self.parser.get_map_attrs(event.attrs):
                if options.attribute_values is not None:
                    self._report(event, value, options.attribute_values, "attribute")
                if options.attribute_names is not None:
                    self._report(event, name, options.attribute_names, "attribute")

        if event.raw and options.all is not None:
            self._report(event, event.raw, options.all, None)

    def _report(
        self,
        event: ParseEvent,
        check_text: str,
        patterns: Sequence[str],
        category: Category | None,
    ) -> None:
        tag_name: str | None = event.tag_name.lower() if event.tag_name else None
        for match in find_matches(check_text.lower(), patterns, category):
            message: str = blocked_word_message(match.text, match.pattern, tag_name, category)
            logger.trace("%s at %d:%d: %s", self.rule.id, event.line, event.col, message)
            self.reporter.error(message, event.line, event.col, self.rule, event.raw or "")


def build_block_words_rule(schema: OptionsSchema = BLOCK_WORDS_SCHEMA) -> Rule[BlockWordsOptions]:
    """Create the block-words rule descriptor for ``schema``.

    Args:
        schema (OptionsSchema): Accepted keys and default options.

    Returns:
        Rule[BlockWordsOptions]: The rule descriptor, ready for a host registry.
    """

    def init(parser: EventSource, reporter: Reporter, options: Any) -> None:
        if is_absent_options(options):
            logger.debug("%s: no options given, rule stays inactive", schema.rule_id)
            return
        parsed: BlockWordsOptions | None = parse_options(options, schema)
        if parsed is None:
            logger.debug("%s: invalid options, rule stays inactive", schema.rule_id)
            reporter.error(
                invalid_options_message(options, schema),
                SYNTHETIC_LINE,
                SYNTHETIC_COL,
                rule,
                "",
            )
            return
        logger.debug("%s: listening with groups %s", schema.rule_id, list(parsed.to_dict()))
        parser.add_listener(ALL_EVENTS, BlockWordsListener(parsed, parser, reporter, rule))

    rule: Rule[BlockWordsOptions] = Rule(
        id=schema.rule_id,
        description=BLOCK_WORDS_DESCRIPTION,
        default_options=schema.default_options,
        init=init,
        cases=_example_cases(schema),
    )
    return rule


def _example_cases(schema: OptionsSchema) -> tuple[RuleCase[Any], ...]:
    """Return the example cases shipped with the rule."""
    bad_name = compile_pattern("bad-name")
    share_panel_ws = compile_pattern("(?:^|\\s)share-panel(?:$|\\s)")
    share_panel_b = compile_pattern("\\bshare-panel\\b")
    bad_attr = compile_pattern("bad-attribute-name")

    share_panel_html = """
        <html>
            <head></head>
            <body>
                What do we have here?
                <thing-ad-name-thing class="share-panel"></thing-ad-name-thing>
                <thing-ad-name-thing class="other class names before share-panel"></thing-ad-name-thing>
                <thing-ad-name-thing class="share-panel other class names after"></thing-ad-name-thing>
                <thing-ad-name-thing class="class names before share-panel and class names after"></thing-ad-name-thing>
            </body>
        </html>"""

    return (
        RuleCase(
            description="should block an easy word all word that is within a class",
            html='<html><head></head><body>What do we have here?<div class="bad-name"></div></body></html>',
            rule_options={"all": ["bad-name"]},
            failures=(blocked_word_message("bad-name", bad_name, "div"),),
        ),
        RuleCase(
            description="should error on option properties that are not an array",
            html="",
            rule_options={"all": "invalid-option"},
            failures=(invalid_options_message({"all": "invalid-option"}, schema),),
        ),
        RuleCase(
            description="should error on non-object options",
            html="",
            rule_options="invalid-option",
            failures=(invalid_options_message("invalid-option", schema),),
        ),
        RuleCase(
            description="should error on property arrays that are not purely string arrays",
            html="",
            rule_options={"all": [4, "invalid-option"]},
            failures=(invalid_options_message({"all": [4, "invalid-option"]}, schema),),
        ),
        RuleCase(
            description="should error on the combined attributes key",
            html="",
            rule_options={"attributes": ["bad-name"]},
            failures=(invalid_options_message({"attributes": ["bad-name"]}, schema),),
        ),
        RuleCase(
            description="should block an all word in a tag name and class name",
            html=(
                "<html><head></head><body>What do we have here?"
                '<thing-bad-name-thing class="bad-name"></thing-bad-name-thing></body></html>'
            ),
            rule_options={"all": ["bad-name"]},
            failures=(blocked_word_message("bad-name", bad_name, "thing-bad-name-thing"),) * 3,
        ),
        RuleCase(
            description="should block all matches of attribute value",
            html=share_panel_html,
            rule_options={"attributeValues": ["(?:^|\\s)share-panel(?:$|\\s)"]},
            failures=tuple(
                blocked_word_message(text, share_panel_ws, "thing-ad-name-thing", "attribute")
                for text in ("share-panel", " share-panel", "share-panel ", " share-panel ")
            ),
        ),
        RuleCase(
            description="should work with word boundaries",
            html=share_panel_html,
            rule_options={"attributeValues": ["\\bshare-panel\\b"]},
            failures=(
                blocked_word_message(
                    "share-panel", share_panel_b, "thing-ad-name-thing", "attribute"
                ),
            )
            * 4,
        ),
        RuleCase(
            description="should block only attributes when set to do so",
            html="""
                <html>
                    <head></head>
                    <body>
                        What do we have here?
                        <thing-bad-name-thing class="bad-name lots of other words bad-name more words bad-name"></thing-bad-name-thing>
                    </body>
                </html>""",
            rule_options={"attributeValues": ["bad-name"]},
            failures=(
                blocked_word_message("bad-name", bad_name, "thing-bad-name-thing", "attribute"),
            )
            * 3,
        ),
        RuleCase(
            description="should block attribute names",
            html="""
                <html>
                    <head></head>
                    <body>
                        What do we have here?
                        <thing-bad-name-thing bad-attribute-name="whatever"></thing-bad-name-thing>
                    </body>
                </html>""",
            rule_options={"attributeNames": ["bad-attribute-name"]},
            failures=(
                blocked_word_message(
                    "bad-attribute-name", bad_attr, "thing-bad-name-thing", "attribute"
                ),
            ),
        ),
        RuleCase(
            description="should block a word in tag names only",
            html=(
                "<html><head></head><body>What do we have here?"
                '<thing-bad-name-thing class="bad-name"></thing-bad-name-thing></body></html>'
            ),
            rule_options={"tagNames": ["bad-name"]},
            failures=(
                blocked_word_message("bad-name", bad_name, "thing-bad-name-thing", "tag name"),
            ),
        ),
        RuleCase(
            description="should block words in text only",
            html="<p>Lorem ipsum <b>LOREM</b></p>",
            rule_options={"text": ["lorem"]},
            failures=(
                blocked_word_message("lorem", compile_pattern("lorem"), None, "text"),
            )
            * 2,
        ),
        RuleCase(
            description="should ignore comments",
            html="<!-- bad-name --><p>fine</p>",
            rule_options={"all": ["bad-name"], "text": ["bad-name"]},
        ),
        RuleCase(
            description="should not block anything when no options are given",
            html=(
                "<html><head></head><body>What do we have here?"
                '<thing-bad-name-thing class="bad-name"></thing-bad-name-thing></body></html>'
            ),
            rule_options={},
        ),
    )


BLOCK_WORDS_RULE: Rule[BlockWordsOptions] = build_block_words_rule()
