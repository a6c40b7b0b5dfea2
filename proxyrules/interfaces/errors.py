"""Parse failure taxonomy.

Every grammar raises a subclass of ``ParseFailure``. Failures carry the
sub-token that could not be parsed so callers can build a message or
decide whether to skip, log or abort.
"""


class ParseFailure(Exception):
    """Base exception raised when any grammar rejects its input.

    Attributes:
        fragment: The failing token or remaining input.
        detail: Optional extra explanation.
    """

    kind = "parse_failure"

    def __init__(self, fragment: str, detail: str = "") -> None:
        self.fragment = fragment
        self.detail = detail
        message = f"{self.kind}: {fragment!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MalformedUri(ParseFailure):
    """Source or target token not fully consumed by the URI grammar."""

    kind = "malformed_uri"


class MalformedRuleToken(ParseFailure):
    """Rule token without ``://`` or with an empty or non-alphanumeric name."""

    kind = "malformed_rule_token"


class MalformedValueDelimiter(ParseFailure):
    """Opening value delimiter present without a matching close."""

    kind = "malformed_value_delimiter"


class UnterminatedTemplateError(ParseFailure):
    """Template lexer reached the end of input mid-construct."""

    kind = "unterminated_template"


class UnterminatedTemplateEscape(UnterminatedTemplateError):
    """Trailing backslash with no escaped character."""

    kind = "unterminated_template_escape"


class UnterminatedInterpolation(UnterminatedTemplateError):
    """``${`` with no closing ``}``."""

    kind = "unterminated_interpolation"


class UnbalancedTemplateParenthesis(ParseFailure):
    """Template wrapped in ``(`` without the trailing ``)``."""

    kind = "unbalanced_template_parenthesis"


class UnterminatedCodeFence(ParseFailure):
    """Opening code fence with no closing fence."""

    kind = "unterminated_code_fence"
