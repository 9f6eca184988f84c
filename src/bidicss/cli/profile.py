"""CLI command: bidicss profile -- show token bindings."""

from __future__ import annotations

import click

from bidicss.model.direction import Direction, resolve_profile


@click.command()
@click.argument("direction", required=False, type=click.Choice([d.value for d in Direction]))
def profile(direction: str | None) -> None:
    """Print the token bindings for DIRECTION (default: both)."""
    directions = [Direction(direction)] if direction else list(Direction)
    for d in directions:
        click.echo(f"{d}:")
        for name, value in resolve_profile(d).bindings().items():
            click.echo(f"  {name:<18} {value}")
