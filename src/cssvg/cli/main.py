"""cssvg CLI entry point: Click group with subcommands."""

import click

from cssvg import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssvg")
def cli() -> None:
    """cssvg - optimize SVG data URIs embedded in CSS."""


# Import and register subcommands
from cssvg.cli.minify import minify  # noqa: E402
from cssvg.cli.inspect import inspect  # noqa: E402

cli.add_command(minify)
cli.add_command(inspect)
