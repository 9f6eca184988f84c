"""Source checker: runs all rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from bidicss.model.diagnostic import Diagnostic
from bidicss.stylesheet import StylesheetSource, parse_source
from bidicss.validation.rules import ALL_RULES

RuleFunc = Callable[[StylesheetSource], list[Diagnostic]]


def check_source(
    source: StylesheetSource | str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run all rules against *source*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    if isinstance(source, str):
        source = parse_source(source)
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(source))
    return diagnostics
