"""Concrete segmenter implementations."""

from proxyrules.strategies.segmenters.fenced import FencedCodeSegmenter, parse_markdown

__all__ = [
    "FencedCodeSegmenter",
    "parse_markdown",
]
