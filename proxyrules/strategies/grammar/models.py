"""Proxy rule domain models.

Frozen Pydantic models produced by the rule grammars. Tagged unions use a
``kind`` discriminator so parse results serialize with ``model_dump``.
"""

from collections.abc import Mapping
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Uri(_Frozen):
    """Raw URI fields; absent parts are empty strings."""

    scheme: str = Field(default="", description="Alphanumeric scheme before '://'")
    host: str = Field(default="", description="Text before the first '/'")
    path: str = Field(default="", description="Text up to the first '?'")
    query: str = Field(default="", description="Remaining non-whitespace text")

    @property
    def is_empty(self) -> bool:
        """True when every field is empty."""
        return not (self.scheme or self.host or self.path or self.query)

    def to_text(self) -> str:
        """Reassemble the URI as it appeared in the rule line."""
        prefix = f"{self.scheme}://" if self.scheme else ""
        return f"{prefix}{self.host}{self.path}{self.query}"


class RawString(_Frozen):
    """Literal text inside a template string."""

    kind: Literal["raw"] = "raw"
    text: str


class Interpolation(_Frozen):
    """A ``${name}`` marker inside a template string."""

    kind: Literal["value"] = "value"
    name: str


TemplatePart = Annotated[Union[RawString, Interpolation], Field(discriminator="kind")]


class TemplateString(_Frozen):
    """Ordered literal and interpolation parts of a backtick value."""

    kind: Literal["template"] = "template"
    parts: tuple[TemplatePart, ...] = ()

    @property
    def names(self) -> list[str]:
        """Interpolation names in order of appearance."""
        return [p.name for p in self.parts if isinstance(p, Interpolation)]

    def render(self, values: Mapping[str, str]) -> str:
        """Substitute every interpolation from ``values``.

        Raises:
            KeyError: If an interpolation name is missing from ``values``.
        """
        out = []
        for part in self.parts:
            if isinstance(part, RawString):
                out.append(part.text)
            elif part.name in values:
                out.append(str(values[part.name]))
            else:
                raise KeyError(f"No value for template variable: {part.name!r}")
        return "".join(out)


class Inline(_Frozen):
    """Parenthesis-delimited value, e.g. ``(30)``."""

    kind: Literal["inline"] = "inline"
    text: str


class Value(_Frozen):
    """Brace-delimited value, e.g. ``{X-Foo}``."""

    kind: Literal["braced"] = "braced"
    text: str


class Raw(_Frozen):
    """Bare token with no delimiters."""

    kind: Literal["raw_token"] = "raw_token"
    text: str


OpValue = Annotated[
    Union[TemplateString, Inline, Value, Raw],
    Field(discriminator="kind"),
]


class Rule(_Frozen):
    """A single ``name://value`` rule token."""

    name: str = Field(min_length=1, pattern=r"^[A-Za-z0-9]+$")
    value: OpValue


class ProxyRule(_Frozen):
    """A parsed rule line: source, target and the ordered rule tail."""

    source: Uri
    target: Uri
    rules: tuple[Rule, ...] = ()

    def rules_named(self, name: str) -> list[Rule]:
        """All rules with ``name``, in input order. Duplicates are kept."""
        return [rule for rule in self.rules if rule.name == name]
