"""Error hierarchy for bidicss."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bidicss.stylesheet.model import TokenRef


class BidiCssError(Exception):
    """Base error for all bidicss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidDirectionError(BidiCssError):
    """The requested direction is neither ``ltr`` nor ``rtl``."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid direction: {value!r} (expected 'ltr' or 'rtl')")
        self.value = value


class UnknownTokenError(BidiCssError):
    """One or more token references name something other than the four tokens.

    Carries every offending reference so the whole source can be fixed in
    one pass.
    """

    def __init__(self, refs: Sequence[TokenRef]) -> None:
        self.refs = tuple(refs)
        locations = ", ".join(
            f"{ref.raw} at {ref.line}:{ref.column}" if ref.line else ref.raw
            for ref in self.refs
        )
        super().__init__(f"Unknown token(s): {locations}")

    @property
    def names(self) -> list[str]:
        return [ref.name for ref in self.refs]


class ConfigError(BidiCssError):
    """The build configuration is malformed."""


class SourceReadError(BidiCssError):
    """The stylesheet source could not be read."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Cannot read source {path}: {cause}", cause=cause)
        self.path = path


class OutputWriteError(BidiCssError):
    """A generated stylesheet could not be written."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Cannot write output {path}: {cause}", cause=cause)
        self.path = path
