"""Document segmentation interfaces.

Defines the records a segmenter produces and the abstract base class
for segmentation strategies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Plaintext:
    """Plain inline text of a single line."""

    text: str


MarkdownInline = Plaintext


@dataclass(frozen=True)
class Line:
    """A document line outside any code fence.

    Attributes:
        inlines: Inline content; empty for a blank line.
    """

    inlines: tuple[MarkdownInline, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Codeblock:
    """A fenced code block.

    Attributes:
        language: Tag following the opening fence.
        body: Everything between the tag line and the closing fence.
    """

    language: str
    body: str


Markdown = Line | Codeblock


class BaseSegmenter(ABC):
    """Abstract base class for document segmentation strategies.

    Example:
        ```python
        class FencedCodeSegmenter(BaseSegmenter):
            def segment(self, document: str) -> list[Markdown]:
                # Split into lines and code blocks
                pass
        ```
    """

    @abstractmethod
    def segment(self, document: str) -> list[Markdown]:
        """Split a document into ordered Line and Codeblock records.

        Args:
            document: The full document text.

        Returns:
            The records in document order.

        Raises:
            UnterminatedCodeFence: If an opening fence is never closed.
        """
        ...


def into_parts(parts: list[Markdown]) -> tuple[str, list[tuple[str, str]]]:
    """Break segmented records into joined text and code pairs.

    Args:
        parts: Records returned by a segmenter.

    Returns:
        A tuple of the line text (each line newline-terminated, blank
        lines as a bare newline) and the ``(language, body)`` pairs of
        every code block in order.
    """
    lines: list[str] = []
    codes: list[tuple[str, str]] = []
    for part in parts:
        match part:
            case Line(inlines=()):
                lines.append("\n")
            case Line(inlines=inlines):
                lines.append(inlines[0].text + "\n")
            case Codeblock(language=language, body=body):
                codes.append((language, body))
    return "".join(lines), codes
