"""Hand-written scanner for direction-agnostic stylesheet sources.

Syntax example:
    .media { float: <defaultFloat>; padding-<oppositeFloat>: 10px; }
    .button { background-image: url("images/arrow-<defaultFloat>.png"); }
    .nav { text-align: #{$default-float}; }
    .nav { margin-#{ $opposite-float }: 0; }

Only token references are recognised; everything else is opaque text. A
#{...} interpolation that is not one of the accepted spellings is still
returned as a reference so generation can reject it.

The scanner tracks just enough structure (braces, declarations, url(),
strings, comments) to label each reference with a TokenContext.
"""

from __future__ import annotations

import re

from bidicss.stylesheet.model import Fragment, StylesheetSource, Text, TokenContext, TokenRef

__all__ = ["parse_source", "TOKEN_RE"]

# Matches a token reference in either accepted spelling. Any other Sass
# interpolation is captured as "other" so it can never pass through unnoticed.
TOKEN_RE = re.compile(
    r"""
    <[ \t]*(?P<angle>[A-Za-z_][A-Za-z0-9_-]*)[ \t]*>        # <defaultFloat>
    |
    \#\{\s*\$(?P<sass>[A-Za-z_][A-Za-z0-9_-]*)\s*\}       # #{$default-float}
    |
    \#\{(?P<other>[^}]*)\}                              # #{anything-else}
    """,
    re.VERBOSE,
)

_URL_OPEN_RE = re.compile(r"url\(", re.IGNORECASE)

# First structural character following a token in a declaration block.
_BLOCK_END_RE = re.compile(r"[{};]")


class _Scanner:
    """Walks literal text and remembers the structural state at its end."""

    def __init__(self) -> None:
        self.depth = 0
        self.in_value = False
        self.in_url = False
        self.in_comment = False
        self.quote = ""
        self.line = 1
        self.column = 1

    def feed(self, text: str) -> None:
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            step = 1
            if self.in_comment:
                if text.startswith("*/", i):
                    self.in_comment = False
                    step = 2
            elif self.quote:
                if ch == "\\":
                    step = 2
                elif ch == self.quote:
                    self.quote = ""
            elif text.startswith("/*", i):
                self.in_comment = True
                step = 2
            elif ch in "\"'":
                self.quote = ch
            elif self.in_url:
                if ch == ")":
                    self.in_url = False
            elif _URL_OPEN_RE.match(text, i):
                self.in_url = True
                step = 4
            elif ch == "{":
                self.depth += 1
                self.in_value = False
            elif ch == "}":
                self.depth = max(self.depth - 1, 0)
                self.in_value = False
            elif ch == ";":
                self.in_value = False
            elif ch == ":" and self.depth > 0:
                self.in_value = True
            self.advance(text[i : i + step])
            i += step

    def advance(self, chunk: str) -> None:
        for ch in chunk:
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1

    def context(self, rest: str) -> TokenContext:
        """Classify a token at the current position; *rest* is the text after it."""
        if self.in_comment:
            return TokenContext.COMMENT
        if self.in_url:
            return TokenContext.URL
        if self.depth == 0:
            return TokenContext.SELECTOR
        if self.in_value:
            return TokenContext.VALUE
        # Inside a block but before any colon: either a declaration name or a
        # nested selector (inside @media). A "{" before ";" or "}" decides.
        match = _BLOCK_END_RE.search(rest)
        if match is not None and match.group() == "{":
            return TokenContext.SELECTOR
        return TokenContext.PROPERTY


def parse_source(source: str) -> StylesheetSource:
    """Split *source* into literal text and token references.

    Unknown token names are recorded like any other reference; they are
    rejected at generation time.
    """
    fragments: list[Fragment] = []
    scanner = _Scanner()
    pos = 0
    for match in TOKEN_RE.finditer(source):
        if match.start() > pos:
            literal = source[pos : match.start()]
            fragments.append(Text(literal))
            scanner.feed(literal)
        # A stray interpolation keeps its full text as the name, which is never a token.
        name = match.group("angle") or match.group("sass") or match.group()
        fragments.append(
            TokenRef(
                name=name,
                raw=match.group(),
                context=scanner.context(source[match.end() :]),
                line=scanner.line,
                column=scanner.column,
            )
        )
        scanner.advance(match.group())
        pos = match.end()
    if pos < len(source):
        fragments.append(Text(source[pos:]))
    return StylesheetSource(fragments=tuple(fragments))
