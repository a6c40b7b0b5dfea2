"""Unit tests for the template lexer."""

import pytest

from proxyrules.interfaces.errors import (
    UnbalancedTemplateParenthesis,
    UnterminatedInterpolation,
    UnterminatedTemplateError,
    UnterminatedTemplateEscape,
)
from proxyrules.strategies.grammar.models import Interpolation, RawString, TemplateString
from proxyrules.strategies.grammar.template import parse_template


class TestParseTemplate:
    """Test suite for parse_template."""

    # =========================================================================
    # Literal and Interpolation Tests
    # =========================================================================

    def test_empty_template(self):
        """An empty body has no parts."""
        assert parse_template("") == TemplateString(parts=())

    def test_literal_only(self):
        """Text without markers is a single raw part."""
        result = parse_template("plain-text")
        assert result.parts == (RawString(text="plain-text"),)

    def test_literal_then_interpolation(self):
        """Literal text followed by an interpolation."""
        result = parse_template("Bearer ${token}")
        assert result.parts == (RawString(text="Bearer "), Interpolation(name="token"))

    def test_text_after_last_interpolation_is_kept(self):
        """Trailing literal text after an interpolation is not dropped."""
        result = parse_template("a${x}b")
        assert result.parts == (
            RawString(text="a"),
            Interpolation(name="x"),
            RawString(text="b"),
        )

    def test_interpolation_name_not_parsed(self):
        """Names keep any non-'}' characters, including empty names."""
        result = parse_template("${}${a.b c}")
        assert result.parts == (Interpolation(name=""), Interpolation(name="a.b c"))

    def test_lone_dollar_is_literal(self):
        """A '$' not followed by '{' is ordinary text."""
        assert parse_template("$5").parts == (RawString(text="$5"),)

    # =========================================================================
    # Escape Tests
    # =========================================================================

    def test_escape_becomes_single_character_part(self):
        """An escaped character is its own one-character raw part."""
        result = parse_template(r"a\${b}")
        assert result.parts == (
            RawString(text="a"),
            RawString(text="$"),
            RawString(text="{b}"),
        )

    def test_backslash_pair_is_literal(self):
        """A backslash followed by a backslash is not an escape."""
        assert parse_template("a\\\\b").parts == (RawString(text="a\\\\b"),)

    def test_backslash_pair_then_escape(self):
        """After a literal pair, the next backslash escapes normally."""
        assert parse_template("\\\\\\x").parts == (
            RawString(text="\\\\"),
            RawString(text="x"),
        )

    def test_odd_trailing_backslash_fails(self):
        with pytest.raises(UnterminatedTemplateEscape):
            parse_template("a\\\\\\")

    def test_escape_inside_parenthesis(self):
        assert parse_template("(a\\)b)").parts == (
            RawString(text="a"),
            RawString(text=")"),
            RawString(text="b"),
        )

    def test_backslash_before_closing_parenthesis_fails(self):
        with pytest.raises(UnterminatedTemplateEscape):
            parse_template("(a\\)")

    def test_unterminated_interpolation_inside_parenthesis(self):
        with pytest.raises(UnterminatedInterpolation):
            parse_template("(${x)")

    def test_escape_expansion_round_trip(self):
        """Joining raw parts gives the body with escapes expanded."""
        result = parse_template(r"x\-y\`z")
        assert "".join(p.text for p in result.parts) == "x-y`z"

    def test_trailing_backslash_fails(self):
        """A backslash at the end has nothing to escape."""
        with pytest.raises(UnterminatedTemplateEscape) as exc_info:
            parse_template("abc\\")
        assert exc_info.value.fragment == "abc\\"

    def test_unterminated_interpolation_fails(self):
        """'${' without a closing brace fails."""
        with pytest.raises(UnterminatedInterpolation):
            parse_template("hello ${name")

    def test_unterminated_errors_share_base(self):
        """Both unterminated conditions share one base class."""
        with pytest.raises(UnterminatedTemplateError):
            parse_template("${")

    # =========================================================================
    # Parenthesis Tests
    # =========================================================================

    def test_outer_parenthesis_stripped(self):
        """One outer '(...)' wrapper is removed."""
        result = parse_template("(id-${id})")
        assert result.parts == (RawString(text="id-"), Interpolation(name="id"))

    def test_only_one_parenthesis_pair_stripped(self):
        """Inner parentheses stay in the text."""
        assert parse_template("((x))").parts == (RawString(text="(x)"),)

    def test_unbalanced_parenthesis_fails(self):
        """A leading '(' requires a trailing ')'."""
        with pytest.raises(UnbalancedTemplateParenthesis):
            parse_template("(abc")

    def test_single_parenthesis_fails(self):
        with pytest.raises(UnbalancedTemplateParenthesis):
            parse_template("(")


class TestTemplateString:
    """Test suite for TemplateString helpers."""

    def test_names(self):
        template = parse_template("${a}-${b}-${a}")
        assert template.names == ["a", "b", "a"]

    def test_render(self):
        template = parse_template("Bearer ${token}")
        assert template.render({"token": "abc"}) == "Bearer abc"

    def test_render_missing_value(self):
        template = parse_template("${missing}")
        with pytest.raises(KeyError, match="missing"):
            template.render({})
