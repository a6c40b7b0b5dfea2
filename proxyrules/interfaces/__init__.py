"""Abstract base classes, shared records and parse failures."""

from proxyrules.interfaces.errors import (
    MalformedRuleToken,
    MalformedUri,
    MalformedValueDelimiter,
    ParseFailure,
    UnbalancedTemplateParenthesis,
    UnterminatedCodeFence,
    UnterminatedInterpolation,
    UnterminatedTemplateError,
    UnterminatedTemplateEscape,
)
from proxyrules.interfaces.loader import BaseRuleLoader, LoadedRule, RuleLoadError
from proxyrules.interfaces.segmenter import (
    BaseSegmenter,
    Codeblock,
    Line,
    Markdown,
    MarkdownInline,
    Plaintext,
    into_parts,
)

__all__ = [
    "BaseRuleLoader",
    "BaseSegmenter",
    "Codeblock",
    "Line",
    "LoadedRule",
    "MalformedRuleToken",
    "MalformedUri",
    "MalformedValueDelimiter",
    "Markdown",
    "MarkdownInline",
    "ParseFailure",
    "Plaintext",
    "RuleLoadError",
    "UnbalancedTemplateParenthesis",
    "UnterminatedCodeFence",
    "UnterminatedInterpolation",
    "UnterminatedTemplateError",
    "UnterminatedTemplateEscape",
    "into_parts",
]
