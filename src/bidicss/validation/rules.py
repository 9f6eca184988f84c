"""Checks for stylesheet sources.

Each rule is a function taking a StylesheetSource and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from bidicss.generator import unknown_tokens
from bidicss.model.diagnostic import Diagnostic, Severity
from bidicss.model.direction import TOKEN_NAMES
from bidicss.stylesheet import StylesheetSource, TokenContext


def check_unknown_tokens(source: StylesheetSource) -> list[Diagnostic]:
    """Every token reference must name one of the four tokens."""
    known = ", ".join(TOKEN_NAMES)
    return [
        Diagnostic(
            rule="unknown_token",
            severity=Severity.ERROR,
            message=f"Unknown token {ref.raw} (known: {known})",
            line=ref.line,
            column=ref.column,
        )
        for ref in unknown_tokens(source)
    ]


def check_has_tokens(source: StylesheetSource) -> list[Diagnostic]:
    """A source without tokens produces identical ltr and rtl output."""
    if source.tokens:
        return []
    return [
        Diagnostic(
            rule="no_tokens",
            severity=Severity.INFO,
            message="No token references; ltr and rtl output will be identical",
        )
    ]


def check_comment_tokens(source: StylesheetSource) -> list[Diagnostic]:
    """Tokens inside comments are substituted too, which is rarely intended."""
    return [
        Diagnostic(
            rule="comment_token",
            severity=Severity.WARNING,
            message=f"Token {ref.raw} inside a comment will be substituted",
            line=ref.line,
            column=ref.column,
        )
        for ref in source.tokens
        if ref.context is TokenContext.COMMENT
    ]


ALL_RULES = [
    check_unknown_tokens,
    check_comment_tokens,
    check_has_tokens,
]
