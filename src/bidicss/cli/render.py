"""CLI command: bidicss render -- print one generated stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bidicss.build import read_source
from bidicss.errors import BidiCssError
from bidicss.generator import generate
from bidicss.model.direction import Direction, resolve_profile


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-d",
    "--direction",
    required=True,
    type=click.Choice([d.value for d in Direction]),
)
def render(source: str, direction: str) -> None:
    """Write the stylesheet for one direction to stdout."""
    try:
        generated = generate(read_source(Path(source)), resolve_profile(direction))
    except BidiCssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(generated.text, nl=False)
