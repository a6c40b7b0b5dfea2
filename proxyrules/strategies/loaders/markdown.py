"""Markdown rule loader.

Reads proxy rules from fenced code blocks tagged with a rule language::

    ```proxy
    # comment lines and blank lines are ignored
    http://a.com http://b.com header://{X-Foo}
    ```
"""

import logging
from collections.abc import Iterable

from proxyrules.interfaces.errors import ParseFailure
from proxyrules.interfaces.loader import BaseRuleLoader, LoadedRule, RuleLoadError
from proxyrules.interfaces.segmenter import BaseSegmenter, into_parts
from proxyrules.strategies.grammar.proxy import parse_proxy_rule
from proxyrules.strategies.segmenters.fenced import FencedCodeSegmenter

logger = logging.getLogger(__name__)


class MarkdownRuleLoader(BaseRuleLoader):
    """Loader that parses rule lines from selected code blocks.

    Attributes:
        languages: Code block languages holding rule lines.
        comment_prefix: Lines starting with this prefix are ignored.
        skip_invalid: If True, failing lines are logged and skipped.
    """

    def __init__(
        self,
        segmenter: BaseSegmenter | None = None,
        languages: Iterable[str] = ("proxy", "proxyrules", "rules"),
        comment_prefix: str = "#",
        skip_invalid: bool = False,
    ) -> None:
        """Initialize the loader.

        Args:
            segmenter: Segmenter used to find code blocks. Defaults to
                a FencedCodeSegmenter.
            languages: Code block languages to read rules from.
            comment_prefix: Prefix marking comment lines inside rule blocks.
            skip_invalid: Log and skip failing lines instead of raising.
        """
        self._segmenter = segmenter or FencedCodeSegmenter()
        self._languages = frozenset(languages)
        self._comment_prefix = comment_prefix
        self._skip_invalid = skip_invalid

    def load(self, document: str) -> list[LoadedRule]:
        """Parse every rule line of the matching code blocks.

        Args:
            document: The markdown document text.

        Returns:
            Parsed rules in document order.

        Raises:
            RuleLoadError: A rule line failed and skip_invalid is False.
            UnterminatedCodeFence: The document has an unclosed fence.
        """
        _, codes = into_parts(self._segmenter.segment(document))
        loaded: list[LoadedRule] = []
        skipped = 0

        for block_index, (language, body) in enumerate(codes):
            if language not in self._languages:
                continue

            for line_number, line in enumerate(body.splitlines(), start=1):
                stripped = line.strip()
                if not stripped or stripped.startswith(self._comment_prefix):
                    continue

                try:
                    rule = parse_proxy_rule(stripped)
                except ParseFailure as e:
                    if not self._skip_invalid:
                        raise RuleLoadError(e, block_index, line_number) from e
                    logger.warning(f"Skipping invalid rule in block {block_index}, line {line_number}: {e}")
                    skipped += 1
                    continue

                loaded.append(LoadedRule(rule, block_index, line_number))

        logger.info(f"Loaded {len(loaded)} rules from {len(codes)} code blocks ({skipped} skipped)")
        return loaded
