"""bidicss model layer -- public type re-exports."""

from bidicss.model.diagnostic import Diagnostic, Severity
from bidicss.model.direction import (
    TOKEN_NAMES,
    Direction,
    DirectionProfile,
    canonical_token_name,
    resolve_profile,
)

__all__ = [
    # direction
    "Direction",
    "DirectionProfile",
    "TOKEN_NAMES",
    "canonical_token_name",
    "resolve_profile",
    # diagnostic
    "Severity",
    "Diagnostic",
]
