"""Rule loading interfaces.

A loader turns a document that embeds rule lines into parsed ProxyRules.
Reading the document from disk or network is the caller's job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from proxyrules.interfaces.errors import ParseFailure

if TYPE_CHECKING:
    from proxyrules.strategies.grammar.models import ProxyRule


@dataclass(frozen=True)
class LoadedRule:
    """A parsed rule line and where it was found.

    Attributes:
        rule: The parsed rule line.
        block_index: Zero-based index of the code block among all code blocks.
        line_number: One-based line number within the code block body.
    """

    rule: "ProxyRule"
    block_index: int
    line_number: int


class RuleLoadError(Exception):
    """Exception raised when an embedded rule line fails to parse.

    The original ParseFailure is available as ``failure`` and as ``__cause__``.
    """

    def __init__(self, failure: ParseFailure, block_index: int, line_number: int) -> None:
        self.failure = failure
        self.block_index = block_index
        self.line_number = line_number
        super().__init__(f"code block {block_index}, line {line_number}: {failure}")


class BaseRuleLoader(ABC):
    """Abstract base class for rule loading strategies."""

    @abstractmethod
    def load(self, document: str) -> list[LoadedRule]:
        """Extract and parse every rule line in ``document``.

        Args:
            document: The full document text.

        Returns:
            Parsed rules in document order.

        Raises:
            RuleLoadError: If a rule line fails to parse and the loader
                does not skip invalid lines.
            UnterminatedCodeFence: If the document cannot be segmented.
        """
        ...
