"""URI grammar.

Permissive, ASCII-oriented split of a token into scheme, host, path and
query with the ``uri`` grammar rule. No decoding or normalization is
performed.
"""

import logging

from proxyrules.strategies.grammar.models import Uri
from proxyrules.strategies.grammar.syntax import GRAMMAR, visitor

logger = logging.getLogger(__name__)


def match_uri(token: str) -> tuple[Uri, int]:
    """Parse a URI prefix of ``token``.

    Returns:
        The Uri and the number of characters consumed.
    """
    node = GRAMMAR["uri"].match(token)
    return visitor.visit(node), node.end


def parse_uri(token: str) -> Uri:
    """Parse ``token`` into a Uri. Never fails; absent parts are empty."""
    uri, _ = match_uri(token)
    return uri
