"""CLI command: cssvg minify -- optimize SVG data URIs in a CSS file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click

from cssvg.config import MinifyOptions
from cssvg.plugin import minify_css


def _coerce_option(raw: str) -> tuple[str, Any]:
    """Turn ``key`` / ``key=value`` into an optimizer option pair."""
    key, sep, value = raw.partition("=")
    key = key.strip().lstrip("-").replace("-", "_")
    if not sep:
        return key, True
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1", "on"):
        return key, True
    if lowered in ("false", "no", "0", "off"):
        return key, False
    return key, value.strip()


def read_source(path: str) -> str:
    """Read CSS from *path*, or from stdin when *path* is ``-``."""
    if path == "-":
        return click.get_text_stream("stdin").read()
    return Path(path).read_text(encoding="utf-8")


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(allow_dash=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result here instead of stdout.",
)
@click.option(
    "--encode/--no-encode",
    default=None,
    help="Force percent-encoded (or literal) output instead of keeping the source's choice.",
)
@click.option("--precision", type=int, default=None, help="Significant digits kept by scour.")
@click.option(
    "--scour-option",
    "scour_options",
    multiple=True,
    metavar="KEY[=VALUE]",
    help="Extra scour option, e.g. shorten_ids or set_c_precision=3. Repeatable.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every rewrite.")
def minify(
    input_path: str,
    output: str | None,
    encode: bool | None,
    precision: int | None,
    scour_options: tuple[str, ...],
    verbose: bool,
) -> None:
    """Optimize the SVG data URIs embedded in a CSS file.

    Diagnostics are printed to stderr. They never make the command fail:
    a url() that cannot be optimized is written out unchanged.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = read_source(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read {input_path}: {exc}", err=True)
        sys.exit(1)

    optimizer_options: dict[str, Any] = dict(_coerce_option(o) for o in scour_options)
    if precision is not None:
        optimizer_options["set_precision"] = precision
    options = MinifyOptions(encode=encode, optimizer=optimizer_options)

    result = minify_css(source, options)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
    else:
        click.echo(result.css, nl=False)

    for diag in result.diagnostics:
        click.echo(str(diag), err=True)
    if result.diagnostics:
        click.echo(f"Summary: {len(result.warnings)} warning(s)", err=True)
