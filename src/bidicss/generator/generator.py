"""Token substitution: turns a StylesheetSource into one stylesheet per direction."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bidicss.errors import UnknownTokenError
from bidicss.model.direction import (
    Direction,
    DirectionProfile,
    canonical_token_name,
    resolve_profile,
)
from bidicss.stylesheet import StylesheetSource, TokenRef, parse_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedStylesheet:
    """The fully substituted stylesheet for one direction."""

    direction: Direction
    text: str
    substitutions: int = 0


def _as_source(source: StylesheetSource | str) -> StylesheetSource:
    if isinstance(source, StylesheetSource):
        return source
    return parse_source(source)


def unknown_tokens(source: StylesheetSource) -> list[TokenRef]:
    """Return every token reference whose name is not one of the four tokens."""
    return [ref for ref in source.tokens if canonical_token_name(ref.name) is None]


def generate(
    source: StylesheetSource | str, profile: DirectionProfile
) -> GeneratedStylesheet:
    """Substitute every token reference in *source* with its bound literal.

    All references are checked before output is assembled, so an unknown
    name raises UnknownTokenError and no partial text escapes. Substituted
    literals are never rescanned.
    """
    src = _as_source(source)
    unknown = unknown_tokens(src)
    if unknown:
        raise UnknownTokenError(unknown)

    bindings = profile.bindings()
    parts: list[str] = []
    count = 0
    for fragment in src.fragments:
        if isinstance(fragment, TokenRef):
            value = bindings[canonical_token_name(fragment.name)]
            logger.debug(
                "%s %s:%s %s (%s) -> %s",
                profile.direction,
                fragment.line,
                fragment.column,
                fragment.raw,
                fragment.context,
                value,
            )
            parts.append(value)
            count += 1
        else:
            parts.append(fragment.raw)
    return GeneratedStylesheet(
        direction=profile.direction, text="".join(parts), substitutions=count
    )


def generate_all(source: StylesheetSource | str) -> dict[Direction, GeneratedStylesheet]:
    """Generate the ``ltr`` and ``rtl`` stylesheets for *source*."""
    src = _as_source(source)
    return {d: generate(src, resolve_profile(d)) for d in Direction}
