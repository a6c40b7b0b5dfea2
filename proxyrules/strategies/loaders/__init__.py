"""Concrete rule loader implementations."""

from proxyrules.strategies.loaders.markdown import MarkdownRuleLoader

__all__ = [
    "MarkdownRuleLoader",
]
