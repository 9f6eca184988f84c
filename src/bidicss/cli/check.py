"""CLI command: bidicss check -- scan a source and report token problems."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bidicss.build import read_source
from bidicss.errors import BidiCssError
from bidicss.model.diagnostic import Severity
from bidicss.validation import check_source


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def check(source: str) -> None:
    """Check SOURCE for unknown or suspicious token references.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    """
    path = Path(source)
    try:
        stylesheet = read_source(path)
    except BidiCssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    diagnostics = check_source(stylesheet)
    tokens = len(stylesheet.tokens)

    if not diagnostics:
        click.echo(f"OK: {path.name} has {tokens} token reference(s)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]
    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
