"""Proxy rule grammars and their models."""

from proxyrules.strategies.grammar.models import (
    Inline,
    Interpolation,
    OpValue,
    ProxyRule,
    Raw,
    RawString,
    Rule,
    TemplatePart,
    TemplateString,
    Uri,
    Value,
)
from proxyrules.strategies.grammar.proxy import parse_proxy_rule
from proxyrules.strategies.grammar.rules import parse_rule
from proxyrules.strategies.grammar.template import parse_template
from proxyrules.strategies.grammar.uri import parse_uri
from proxyrules.strategies.grammar.values import parse_rule_value

__all__ = [
    "Inline",
    "Interpolation",
    "OpValue",
    "ProxyRule",
    "Raw",
    "RawString",
    "Rule",
    "TemplatePart",
    "TemplateString",
    "Uri",
    "Value",
    "parse_proxy_rule",
    "parse_rule",
    "parse_rule_value",
    "parse_template",
    "parse_uri",
]
