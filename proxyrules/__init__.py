"""Parser for proxy routing rule lines and the documents that embed them.

Example:
    ```python
    from proxyrules import parse_proxy_rule

    rule = parse_proxy_rule("http://a.com http://b.com header://{X-Foo}")
    rule.rules[0].value  # Value(kind='braced', text='X-Foo')
    ```
"""

from proxyrules.interfaces import (
    Codeblock,
    Line,
    LoadedRule,
    MalformedRuleToken,
    MalformedUri,
    MalformedValueDelimiter,
    Markdown,
    ParseFailure,
    Plaintext,
    RuleLoadError,
    UnbalancedTemplateParenthesis,
    UnterminatedCodeFence,
    UnterminatedInterpolation,
    UnterminatedTemplateError,
    UnterminatedTemplateEscape,
    into_parts,
)
from proxyrules.strategies import (
    FencedCodeSegmenter,
    MarkdownRuleLoader,
    parse_markdown,
    parse_proxy_rule,
    parse_rule,
    parse_rule_value,
    parse_template,
    parse_uri,
)
from proxyrules.strategies.grammar import (
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

__version__ = "0.1.0"

__all__ = [
    "Codeblock",
    "FencedCodeSegmenter",
    "Inline",
    "Interpolation",
    "Line",
    "LoadedRule",
    "MalformedRuleToken",
    "MalformedUri",
    "MalformedValueDelimiter",
    "Markdown",
    "MarkdownRuleLoader",
    "OpValue",
    "ParseFailure",
    "Plaintext",
    "ProxyRule",
    "Raw",
    "RawString",
    "Rule",
    "RuleLoadError",
    "TemplatePart",
    "TemplateString",
    "UnbalancedTemplateParenthesis",
    "UnterminatedCodeFence",
    "UnterminatedInterpolation",
    "UnterminatedTemplateError",
    "UnterminatedTemplateEscape",
    "Uri",
    "Value",
    "into_parts",
    "parse_markdown",
    "parse_proxy_rule",
    "parse_rule",
    "parse_rule_value",
    "parse_template",
    "parse_uri",
]
