"""Logical-to-physical keyword helpers.

``left`` names the leading side and ``right`` the trailing side; under an
``rtl`` profile they swap. Anything else is treated as a literal CSS value
and returned as given.
"""

from __future__ import annotations

from bidicss.model.direction import DirectionProfile

_SIDES = ("left", "right")


def _side(profile: DirectionProfile, keyword: str) -> str:
    if keyword == "left":
        return profile.default_float
    if keyword == "right":
        return profile.opposite_float
    return keyword


def float_alias(profile: DirectionProfile, keyword: str) -> str:
    """Resolve a ``float`` keyword for *profile*."""
    return _side(profile, keyword)


def text_align_alias(profile: DirectionProfile, keyword: str) -> str:
    """Resolve a ``text-align`` keyword for *profile*."""
    return _side(profile, keyword)


def side_alias(profile: DirectionProfile, property_name: str) -> str:
    """Resolve a trailing ``-left``/``-right`` in a property name.

    ``padding-left`` becomes ``padding-right`` under ``rtl``; names without
    a side suffix pass through.
    """
    base, sep, suffix = property_name.rpartition("-")
    if sep and suffix in _SIDES:
        return f"{base}-{_side(profile, suffix)}"
    return property_name
