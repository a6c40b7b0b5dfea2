"""Rule value grammar.

Classifies a rule value token by its opening delimiter:

- backticks   -> TemplateString (interior lexed by the template rule)
- ``(...)``     -> Inline
- ``{...}``     -> Value
- anything else -> Raw

A token that opens with a known delimiter must close with its partner as
the last character; otherwise it is malformed rather than Raw.
"""

import logging

from parsimonious.exceptions import IncompleteParseError, ParseError

from proxyrules.interfaces.errors import MalformedValueDelimiter
from proxyrules.strategies.grammar.models import OpValue
from proxyrules.strategies.grammar.syntax import GRAMMAR, visitor

logger = logging.getLogger(__name__)


def delimiter_failure(token: str, error: ParseError) -> MalformedValueDelimiter:
    """Describe a rule_value parse error as a MalformedValueDelimiter."""
    if isinstance(error, IncompleteParseError):
        return MalformedValueDelimiter(token, f"unexpected text after closing delimiter at offset {error.pos}")
    return MalformedValueDelimiter(token, f"missing closing delimiter for {token[:1]!r}")


def parse_rule_value(token: str) -> OpValue:
    """Parse one rule value token.

    Args:
        token: The text following ``name://`` in a rule token.

    Returns:
        A TemplateString, Inline, Value or Raw value.

    Raises:
        MalformedValueDelimiter: Opening delimiter without a matching
            close at the end of the token.
        ParseFailure: Template lexer failures for backtick values.
    """
    try:
        tree = GRAMMAR["rule_value"].parse(token)
    except ParseError as e:
        raise delimiter_failure(token, e) from e
    return visitor.visit(tree)
