"""bidicss CLI entry point: Click group with subcommands."""

import logging

import click

from bidicss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="bidicss")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for per-token detail)")
def cli(verbose: int) -> None:
    """bidicss - generate LTR and RTL stylesheets from one source."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from bidicss.cli.build import build  # noqa: E402
from bidicss.cli.check import check  # noqa: E402
from bidicss.cli.profile import profile  # noqa: E402
from bidicss.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(profile)
cli.add_command(check)
