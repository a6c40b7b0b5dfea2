"""Template lexer for backtick values.

Splits a template body into literal runs, ``${name}`` interpolations and
single-character backslash escapes using the ``template`` grammar rule.
"""

import logging

from proxyrules.strategies.grammar.models import TemplateString
from proxyrules.strategies.grammar.syntax import GRAMMAR, visitor

logger = logging.getLogger(__name__)


def parse_template(text: str) -> TemplateString:
    """Lex a template body into a TemplateString.

    An outer ``(...)`` wrapper is stripped first. A backslash followed by
    any character other than a backslash escapes it, and the character
    becomes its own one-character RawString. A ``\\\\`` pair is not an
    escape and stays in the literal text.

    Args:
        text: The interior of a backtick-delimited value.

    Returns:
        The ordered template parts.

    Raises:
        UnbalancedTemplateParenthesis: Leading '(' without trailing ')'.
        UnterminatedTemplateEscape: Trailing backslash.
        UnterminatedInterpolation: '${' with no closing '}'.
    """
    template = visitor.visit(GRAMMAR["template"].parse(text))
    logger.debug(f"Lexed template {text!r} into {len(template.parts)} parts")
    return template
