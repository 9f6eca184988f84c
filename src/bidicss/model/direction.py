"""Direction enum, direction profiles, and the four directional tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import cache

from bidicss.errors import InvalidDirectionError, UnknownTokenError
from bidicss.stylesheet.model import TokenContext, TokenRef


class Direction(StrEnum):
    """Text and layout direction. Exactly two values exist."""

    LTR = "ltr"
    RTL = "rtl"

    @property
    def opposite(self) -> Direction:
        return Direction.RTL if self is Direction.LTR else Direction.LTR

    @classmethod
    def parse(cls, value: object) -> Direction:
        """Coerce *value* to a Direction, raising InvalidDirectionError otherwise.

        Strings are matched leniently: case and surrounding whitespace are
        ignored, so ``" LTR "`` parses as ``Direction.LTR``.
        """
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDirectionError(value)


# Canonical token names in the order they are reported.
DEFAULT_FLOAT = "defaultFloat"
OPPOSITE_FLOAT = "oppositeFloat"
DEFAULT_DIRECTION = "defaultDirection"
OPPOSITE_DIRECTION = "oppositeDirection"

TOKEN_NAMES = (DEFAULT_FLOAT, OPPOSITE_FLOAT, DEFAULT_DIRECTION, OPPOSITE_DIRECTION)

_SEPARATOR_RE = re.compile(r"[-_]([a-z])")


def canonical_token_name(name: str) -> str | None:
    """Map a token name to its canonical camelCase spelling.

    ``default-float`` and ``default_float`` both map to ``defaultFloat``.
    Returns None when *name* is not one of the four tokens.
    """
    camel = _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)
    return camel if camel in TOKEN_NAMES else None


_FLOAT_SIDES = {Direction.LTR: "left", Direction.RTL: "right"}


@dataclass(frozen=True)
class DirectionProfile:
    """The four token bindings for one direction.

    ``default_float``/``opposite_float`` are complementary members of
    ``{left, right}``; ``default_direction``/``opposite_direction`` are
    complementary members of ``{ltr, rtl}``.
    """

    direction: Direction
    default_float: str
    opposite_float: str
    default_direction: str
    opposite_direction: str

    def __post_init__(self) -> None:
        sides = (_FLOAT_SIDES[self.direction], _FLOAT_SIDES[self.direction.opposite])
        if (self.default_float, self.opposite_float) != sides:
            raise ValueError(
                f"Floats for {self.direction} must be {sides[0]!r} and {sides[1]!r},"
                f" got {self.default_float!r} and {self.opposite_float!r}"
            )
        if (self.default_direction, self.opposite_direction) != (
            self.direction.value,
            self.direction.opposite.value,
        ):
            raise ValueError(
                f"Directions for {self.direction} must be {self.direction.value!r}"
                f" and {self.direction.opposite.value!r}"
            )

    def bindings(self) -> dict[str, str]:
        """Return the canonical token name -> literal mapping."""
        return {
            DEFAULT_FLOAT: self.default_float,
            OPPOSITE_FLOAT: self.opposite_float,
            DEFAULT_DIRECTION: self.default_direction,
            OPPOSITE_DIRECTION: self.opposite_direction,
        }

    def lookup(self, name: str) -> str:
        """Return the literal bound to token *name* (any accepted spelling)."""
        canonical = canonical_token_name(name)
        if canonical is None:
            ref = TokenRef(name=name, raw=f"<{name}>", context=TokenContext.VALUE)
            raise UnknownTokenError([ref])
        return self.bindings()[canonical]


def resolve_profile(direction: Direction | str) -> DirectionProfile:
    """Return the DirectionProfile for *direction*.

    Total over the two directions; anything else raises InvalidDirectionError.
    One profile instance exists per direction.
    """
    return _build_profile(Direction.parse(direction))


@cache
def _build_profile(d: Direction) -> DirectionProfile:
    return DirectionProfile(
        direction=d,
        default_float=_FLOAT_SIDES[d],
        opposite_float=_FLOAT_SIDES[d.opposite],
        default_direction=d.value,
        opposite_direction=d.opposite.value,
    )
