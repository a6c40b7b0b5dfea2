"""Proxy rule grammar, the entry point for rule lines.

A rule line reads ``<source-uri> <target-uri> [rule-token]*``::

    http://a.com http://b.com header://{X-Foo} timeout://(30)
"""

import logging

from parsimonious.exceptions import ParseError

from proxyrules.interfaces.errors import MalformedUri
from proxyrules.strategies.grammar.models import ProxyRule, Uri
from proxyrules.strategies.grammar.rules import parse_rule
from proxyrules.strategies.grammar.syntax import GRAMMAR, visitor

logger = logging.getLogger(__name__)


def _parse_full_uri(token: str, role: str) -> Uri:
    try:
        tree = GRAMMAR["uri"].parse(token)
    except ParseError as e:
        raise MalformedUri(token, f"malformed {role} URI, stopped at offset {e.pos}") from e
    return visitor.visit(tree)


def parse_proxy_rule(line: str) -> ProxyRule:
    """Parse a complete rule line.

    Args:
        line: One line of rule source.

    Returns:
        The ProxyRule. ``rules`` is empty when only two tokens are given.

    Raises:
        MalformedUri: A missing or not fully consumed source/target token.
        ParseFailure: Any rule token failure; no partial result is returned.
    """
    try:
        tokens = visitor.visit(GRAMMAR["proxy_line"].parse(line))
    except ParseError as e:
        raise MalformedUri(line, "expected source and target URIs") from e

    source = _parse_full_uri(tokens[0], "source")
    target = _parse_full_uri(tokens[1], "target")
    rules = tuple(parse_rule(token) for token in tokens[2:])

    logger.debug(f"Parsed proxy rule {source.to_text()} -> {target.to_text()} with {len(rules)} rules")
    return ProxyRule(source=source, target=target, rules=rules)
