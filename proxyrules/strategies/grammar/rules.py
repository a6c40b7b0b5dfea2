"""Rule grammar: ``<name>://<value>``."""

import logging

from parsimonious.exceptions import ParseError

from proxyrules.interfaces.errors import MalformedRuleToken
from proxyrules.strategies.grammar.models import Rule
from proxyrules.strategies.grammar.syntax import GRAMMAR, visitor
from proxyrules.strategies.grammar.values import delimiter_failure

logger = logging.getLogger(__name__)

RULE_SEPARATOR = "://"


def parse_rule(token: str) -> Rule:
    """Parse a rule token.

    The token splits at the first ``://``; everything after it is the
    value token. Errors before the value offset belong to the name and
    separator, errors at or after it to the value.

    Raises:
        MalformedRuleToken: No separator, or an empty or non-alphanumeric name.
        ParseFailure: Any failure from the value grammar.
    """
    try:
        tree = GRAMMAR["rule"].parse(token)
    except ParseError as e:
        separator = token.find(RULE_SEPARATOR)
        if separator == -1:
            raise MalformedRuleToken(token, f"missing {RULE_SEPARATOR!r} separator") from e
        value_offset = separator + len(RULE_SEPARATOR)
        if e.pos < value_offset:
            raise MalformedRuleToken(token, f"invalid rule name {token[:separator]!r}") from e
        raise delimiter_failure(token[value_offset:], e) from e
    return visitor.visit(tree)
