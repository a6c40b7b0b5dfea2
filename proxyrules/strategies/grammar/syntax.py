"""Rule DSL grammar - converts rule text to models using a PEG grammar.

Uses parsimonious for PEG parsing. One grammar holds every level of the
DSL: the rule line, URIs, ``name://value`` rules, the four value kinds and
the template lexer. Callers pick the level with ``GRAMMAR[rule_name]``.

Template errors are part of the grammar: ``open_interpolation``,
``dangling_escape`` and ``unbalanced_template`` match the malformed input
and the visitor raises the matching ParseFailure.
"""

import logging

from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor

from proxyrules.interfaces.errors import (
    ParseFailure,
    UnbalancedTemplateParenthesis,
    UnterminatedInterpolation,
    UnterminatedTemplateEscape,
)
from proxyrules.strategies.grammar.models import (
    Inline,
    Interpolation,
    Raw,
    RawString,
    Rule,
    TemplateString,
    Uri,
    Value,
)

logger = logging.getLogger(__name__)

# =============================================================================
# PEG Grammar
# =============================================================================

GRAMMAR = Grammar(r"""
proxy_line          = ws? token ws token rule_tokens ws?
rule_tokens         = (ws token)*
token               = ~r"\S+"
ws                  = ~r"\s+"

uri                 = scheme? host path query
scheme              = scheme_name "://"
scheme_name         = ~r"[A-Za-z0-9]+"
host                = ~r"[^/]*"
path                = ~r"[^?]*"
query               = ~r"\S*"

rule                = rule_name "://" rule_value
rule_name           = ~r"[A-Za-z0-9]+"
rule_value          = template_value / inline_value / braced_value / raw_value
template_value      = "`" template_source "`"
template_source     = ~r"(?:[^`\\]|\\.)*"s
inline_value        = "(" ~r"[^)\s]*" ")"
braced_value        = "{" ~r"[^}\s]*" "}"
raw_value           = !~r"[`({]" ~r".*"s

template            = wrapped_template / unbalanced_template / bare_template
wrapped_template    = "(" wrapped_parts ")" end
unbalanced_template = "(" ~r".*"s
bare_template       = bare_part*
wrapped_parts       = wrapped_part*
end                 = !~r"."s

bare_part           = escape / interpolation / open_interpolation / dangling_escape / literal
escape              = "\\" ~r"[^\\]"s
interpolation       = "${" ~r"[^}]*" "}"
open_interpolation  = "${" ~r"[^}]*"
dangling_escape     = "\\" end
literal             = ~r"(?:(?!\$\{)[^\\]|\\\\)+"s

wrapped_part        = wrapped_escape / interpolation / wrapped_open_interpolation / wrapped_dangling_escape / wrapped_literal
wrapped_escape      = "\\" ~r"(?!\)\Z)[^\\]"s
wrapped_open_interpolation = "${" ~r"(?:(?!\)\Z)[^}])*"
wrapped_dangling_escape    = "\\" &(")" end)
wrapped_literal     = ~r"(?:(?!\$\{)(?!\)\Z)[^\\]|\\\\)+"s
""")


# =============================================================================
# AST Visitor - transforms parse tree to models
# =============================================================================


class RuleVisitor(NodeVisitor):
    """Visits parse trees and builds the rule models."""

    unwrapped_exceptions = (ParseFailure,)

    # Rule line

    def visit_proxy_line(self, node, visited_children):
        _, source, _, target, rule_tokens, _ = visited_children
        return [source, target, *rule_tokens]

    def visit_rule_tokens(self, node, visited_children):
        return [token for _, token in visited_children]

    def visit_token(self, node, visited_children):
        return node.text

    # URI

    def visit_uri(self, node, visited_children):
        scheme, host, path, query = node.children
        return Uri(
            scheme=scheme.text[: -len("://")] if scheme.text else "",
            host=host.text,
            path=path.text,
            query=query.text,
        )

    # Rule and values

    def visit_rule(self, node, visited_children):
        name, _, value = visited_children
        return Rule(name=name, value=value)

    def visit_rule_name(self, node, visited_children):
        return node.text

    def visit_rule_value(self, node, visited_children):
        return visited_children[0]

    def visit_template_value(self, node, visited_children):
        _, source, _ = node.children
        return self.visit(GRAMMAR["template"].parse(source.text))

    def visit_inline_value(self, node, visited_children):
        return Inline(text=node.text[1:-1])

    def visit_braced_value(self, node, visited_children):
        return Value(text=node.text[1:-1])

    def visit_raw_value(self, node, visited_children):
        return Raw(text=node.text)

    # Template

    def visit_template(self, node, visited_children):
        return visited_children[0]

    def visit_wrapped_template(self, node, visited_children):
        _, parts, _, _ = visited_children
        return TemplateString(parts=tuple(parts))

    def visit_unbalanced_template(self, node, visited_children):
        raise UnbalancedTemplateParenthesis(node.full_text, "missing closing ')'")

    def visit_bare_template(self, node, visited_children):
        return TemplateString(parts=tuple(visited_children))

    def visit_wrapped_parts(self, node, visited_children):
        return list(visited_children)

    def visit_bare_part(self, node, visited_children):
        return visited_children[0]

    def visit_wrapped_part(self, node, visited_children):
        return visited_children[0]

    def visit_escape(self, node, visited_children):
        return RawString(text=node.text[1:])

    visit_wrapped_escape = visit_escape

    def visit_interpolation(self, node, visited_children):
        return Interpolation(name=node.text[2:-1])

    def visit_open_interpolation(self, node, visited_children):
        raise UnterminatedInterpolation(node.full_text, f"no '}}' after offset {node.start}")

    visit_wrapped_open_interpolation = visit_open_interpolation

    def visit_dangling_escape(self, node, visited_children):
        raise UnterminatedTemplateEscape(node.full_text, "backslash at end of template")

    visit_wrapped_dangling_escape = visit_dangling_escape

    def visit_literal(self, node, visited_children):
        return RawString(text=node.text)

    visit_wrapped_literal = visit_literal

    def generic_visit(self, node, visited_children):
        return visited_children or node


visitor = RuleVisitor()
