"""Tests for directions and direction profiles."""

import pytest

from bidicss.errors import InvalidDirectionError, UnknownTokenError
from bidicss.model import TOKEN_NAMES, Direction, DirectionProfile, canonical_token_name, resolve_profile


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------


class TestDirection:
    def test_exactly_two_values(self):
        assert [d.value for d in Direction] == ["ltr", "rtl"]

    def test_opposite(self):
        assert Direction.LTR.opposite is Direction.RTL
        assert Direction.RTL.opposite is Direction.LTR

    def test_parse_string(self):
        assert Direction.parse("rtl") is Direction.RTL

    def test_parse_is_case_and_space_insensitive(self):
        assert Direction.parse("  LTR ") is Direction.LTR

    def test_parse_passes_direction_through(self):
        assert Direction.parse(Direction.RTL) is Direction.RTL

    @pytest.mark.parametrize("bad", ["ttb", "", "left", None, 1])
    def test_parse_invalid(self, bad):
        with pytest.raises(InvalidDirectionError) as exc_info:
            Direction.parse(bad)
        assert exc_info.value.value == bad


# ---------------------------------------------------------------------------
# resolve_profile
# ---------------------------------------------------------------------------


class TestResolveProfile:
    def test_ltr_bindings(self):
        p = resolve_profile(Direction.LTR)
        assert p.default_float == "left"
        assert p.opposite_float == "right"
        assert p.default_direction == "ltr"
        assert p.opposite_direction == "rtl"

    def test_rtl_bindings(self):
        p = resolve_profile(Direction.RTL)
        assert p.default_float == "right"
        assert p.opposite_float == "left"
        assert p.default_direction == "rtl"
        assert p.opposite_direction == "ltr"

    @pytest.mark.parametrize("d", list(Direction))
    def test_complements(self, d):
        p = resolve_profile(d)
        assert {p.default_float, p.opposite_float} == {"left", "right"}
        assert {p.default_direction, p.opposite_direction} == {"ltr", "rtl"}
        assert p.default_direction == d.value

    def test_accepts_string(self):
        assert resolve_profile("rtl") == resolve_profile(Direction.RTL)

    def test_one_instance_per_direction(self):
        assert resolve_profile("ltr") is resolve_profile(Direction.LTR)

    def test_invalid_direction(self):
        with pytest.raises(InvalidDirectionError):
            resolve_profile("sideways")

    def test_profile_is_frozen(self):
        p = resolve_profile("ltr")
        with pytest.raises(AttributeError):
            p.default_float = "right"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Token names
# ---------------------------------------------------------------------------


class TestTokenNames:
    def test_bindings_use_canonical_names(self):
        assert tuple(resolve_profile("ltr").bindings()) == TOKEN_NAMES

    @pytest.mark.parametrize(
        "spelling", ["defaultFloat", "default-float", "default_float"]
    )
    def test_aliases(self, spelling):
        assert canonical_token_name(spelling) == "defaultFloat"

    def test_unknown_name(self):
        assert canonical_token_name("fooBar") is None

    def test_lookup(self):
        p = resolve_profile("rtl")
        assert p.lookup("opposite-direction") == "ltr"
        assert p.lookup("oppositeFloat") == "left"

    def test_lookup_unknown(self):
        with pytest.raises(UnknownTokenError) as exc_info:
            resolve_profile("ltr").lookup("fooBar")
        assert exc_info.value.names == ["fooBar"]

    def test_profile_equality(self):
        p = DirectionProfile(Direction.LTR, "left", "right", "ltr", "rtl")
        assert p == resolve_profile("ltr")


class TestProfileInvariant:
    def test_same_float_twice_rejected(self):
        with pytest.raises(ValueError):
            DirectionProfile(Direction.LTR, "left", "left", "ltr", "rtl")

    def test_floats_must_match_direction(self):
        with pytest.raises(ValueError):
            DirectionProfile(Direction.RTL, "left", "right", "rtl", "ltr")

    def test_directions_must_match(self):
        with pytest.raises(ValueError):
            DirectionProfile(Direction.LTR, "left", "right", "rtl", "ltr")

    def test_non_float_literal_rejected(self):
        with pytest.raises(ValueError):
            DirectionProfile(Direction.LTR, "center", "right", "ltr", "rtl")
