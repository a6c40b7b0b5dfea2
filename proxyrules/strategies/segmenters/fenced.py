"""Fenced code block segmenter.

Splits a loosely markdown-formatted document into plain lines and
triple-backtick code blocks. No other markdown structure is recognized.
"""

import logging

from proxyrules.interfaces.errors import UnterminatedCodeFence
from proxyrules.interfaces.segmenter import BaseSegmenter, Codeblock, Line, Markdown, Plaintext

logger = logging.getLogger(__name__)

FENCE = "```"
NEWLINE = "\n"
UNKNOWN_LANGUAGE = "__UNKNOWN__"


class FencedCodeSegmenter(BaseSegmenter):
    """Segmenter that recognizes lines and fenced code blocks.

    A line runs up to a newline, the start of a fence, or the end of the
    document. A fence opens with a language tag on the same line and its
    body runs from the following line to the next fence.

    Attributes:
        unknown_language: Tag recorded when a fence has no language.
    """

    def __init__(self, unknown_language: str = UNKNOWN_LANGUAGE) -> None:
        """Initialize the segmenter.

        Args:
            unknown_language: Tag used for fences without a language.
        """
        self._unknown_language = unknown_language

    def segment(self, document: str) -> list[Markdown]:
        """Split a document into ordered Line and Codeblock records.

        Args:
            document: The document text.

        Returns:
            The records in document order, at least one. An empty
            document is a single blank line.

        Raises:
            UnterminatedCodeFence: If an opening fence has no tag line
                terminator or no closing fence.
        """
        if not document:
            return [Line(())]

        parts: list[Markdown] = []
        pos = 0

        while pos < len(document):
            if document.startswith(FENCE, pos):
                block, pos = self._read_codeblock(document, pos)
                parts.append(block)
            else:
                line, pos = self._read_line(document, pos)
                parts.append(line)

        logger.debug(f"Segmented {len(document)} characters into {len(parts)} parts")
        return parts

    def _read_line(self, document: str, pos: int) -> tuple[Line, int]:
        end = self._plaintext_end(document, pos)
        text = document[pos:end]
        if document.startswith(NEWLINE, end):
            end += len(NEWLINE)
        inlines = (Plaintext(text),) if text else ()
        return Line(inlines), end

    def _read_codeblock(self, document: str, pos: int) -> tuple[Codeblock, int]:
        tag_start = pos + len(FENCE)
        tag_end = self._plaintext_end(document, tag_start)
        language = document[tag_start:tag_end] or self._unknown_language

        if not document.startswith(NEWLINE, tag_end):
            raise UnterminatedCodeFence(document[pos:tag_end], "code fence tag must end with a newline")

        body_start = tag_end + len(NEWLINE)
        body_end = document.find(FENCE, body_start)
        if body_end == -1:
            raise UnterminatedCodeFence(document[pos:], "no closing code fence")

        return Codeblock(language, document[body_start:body_end]), body_end + len(FENCE)

    @staticmethod
    def _plaintext_end(document: str, pos: int) -> int:
        """Offset of the next newline or fence at or after ``pos``."""
        ends = [i for i in (document.find(NEWLINE, pos), document.find(FENCE, pos)) if i != -1]
        return min(ends, default=len(document))


def parse_markdown(document: str, unknown_language: str = UNKNOWN_LANGUAGE) -> list[Markdown]:
    """Segment ``document`` with a FencedCodeSegmenter."""
    return FencedCodeSegmenter(unknown_language).segment(document)
