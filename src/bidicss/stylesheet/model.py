"""Stylesheet source model: Text, TokenRef, and StylesheetSource dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TokenContext(StrEnum):
    """Where a token reference sits in the stylesheet text."""

    SELECTOR = "selector"
    PROPERTY = "property"  # property-name suffix, e.g. padding-<oppositeFloat>
    VALUE = "value"
    URL = "url"  # inside url(...)
    COMMENT = "comment"


@dataclass(frozen=True)
class Text:
    """A literal run of stylesheet text, copied to output unchanged."""

    raw: str


@dataclass(frozen=True)
class TokenRef:
    """A placeholder naming one of the directional tokens.

    ``name`` is the name as written, ``raw`` the exact placeholder text
    (``<defaultFloat>`` or ``#{$default-float}``). Line and column are
    1-based; 0 means the reference did not come from a source file.
    """

    name: str
    raw: str
    context: TokenContext
    line: int = 0
    column: int = 0


Fragment = Text | TokenRef


@dataclass(frozen=True)
class StylesheetSource:
    """A direction-agnostic stylesheet as an ordered sequence of fragments."""

    fragments: tuple[Fragment, ...]

    @property
    def text(self) -> str:
        """The original source text, rebuilt byte-for-byte."""
        return "".join(f.raw for f in self.fragments)

    @property
    def tokens(self) -> tuple[TokenRef, ...]:
        return tuple(f for f in self.fragments if isinstance(f, TokenRef))
