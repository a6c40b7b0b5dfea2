"""Concrete strategy implementations."""

from proxyrules.strategies.grammar import (
    parse_proxy_rule,
    parse_rule,
    parse_rule_value,
    parse_template,
    parse_uri,
)
from proxyrules.strategies.loaders import (
    MarkdownRuleLoader,
)
from proxyrules.strategies.segmenters import (
    FencedCodeSegmenter,
    parse_markdown,
)

__all__ = [
    "FencedCodeSegmenter",
    "MarkdownRuleLoader",
    "parse_markdown",
    "parse_proxy_rule",
    "parse_rule",
    "parse_rule_value",
    "parse_template",
    "parse_uri",
]
