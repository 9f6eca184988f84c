"""CLI command: bidicss build -- write the ltr and rtl stylesheets."""

from __future__ import annotations

import sys

import click
from click.core import ParameterSource

from bidicss.build import BuildConfig, build as run_build, load_config
from bidicss.build.config import DEFAULT_TEMPLATE
from bidicss.errors import BidiCssError
from bidicss.model.direction import Direction


@click.command()
@click.argument("source", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON build config (bidicss.json)",
)
@click.option("-o", "--output-dir", default=".", help="Directory for generated files")
@click.option(
    "--template",
    default=DEFAULT_TEMPLATE,
    show_default=True,
    help="Output file name; fields: {direction}, {stem}, {name}",
)
@click.option(
    "-d",
    "--direction",
    "directions",
    multiple=True,
    type=click.Choice([d.value for d in Direction]),
    help="Build only this direction (repeatable)",
)
@click.option("--parallel/--sequential", default=False, help="Build directions concurrently")
@click.option("--encoding", default="utf-8", show_default=True)
def build(
    source: str | None,
    config_file: str | None,
    output_dir: str,
    template: str,
    directions: tuple[str, ...],
    parallel: bool,
    encoding: str,
) -> None:
    """Generate one stylesheet per direction from SOURCE.

    Exits with code 1 if any direction failed.
    """
    if bool(source) == bool(config_file):
        raise click.UsageError("Give exactly one of SOURCE or --config")
    if config_file:
        ctx = click.get_current_context()
        given = [
            name
            for name in ("output_dir", "template", "directions", "parallel", "encoding")
            if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
        ]
        if given:
            raise click.UsageError(
                f"--config cannot be combined with: {', '.join(given)}"
            )

    try:
        if config_file:
            config = load_config(config_file)
        else:
            config = BuildConfig(
                source=source,
                output_dir=output_dir,
                output_template=template,
                encoding=encoding,
                directions=tuple(Direction(d) for d in directions) or tuple(Direction),
                parallel=parallel,
            )
        report = run_build(config)
    except BidiCssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for result in report.results:
        target = result.target
        if result.ok:
            click.echo(
                f"{target.direction}: {target.output} ({result.substitutions} substitutions)"
            )
        else:
            click.echo(f"{target.direction}: FAILED: {result.error}", err=True)

    if not report.ok:
        sys.exit(1)
