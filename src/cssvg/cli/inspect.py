"""CLI command: cssvg inspect -- list SVG data URIs found in a CSS file."""

from __future__ import annotations

import sys

import click

from cssvg.cli.minify import read_source
from cssvg.datauri import UriMatch, classify, contains_svg_data_uri
from cssvg.errors import ParseError
from cssvg.stylesheet import parse_stylesheet
from cssvg.value import UNCHANGED, FunctionNode, Node, parse_value, walk


def _collect(nodes: list[Node]) -> list[UriMatch]:
    """Classify every url() argument without rewriting anything."""
    found: list[UriMatch] = []

    def visit(node: Node):
        if isinstance(node, FunctionNode) and node.is_url and node.nodes:
            match = classify(node.nodes[0].value)
            if match.matched:
                found.append(match)
        return UNCHANGED

    walk(nodes, visit)
    return found


@click.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(allow_dash=True))
def inspect(input_path: str) -> None:
    """List every SVG data URI in a CSS file with its location and size."""
    try:
        source = read_source(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read {input_path}: {exc}", err=True)
        sys.exit(1)

    stylesheet = parse_stylesheet(source)
    total = 0
    declarations = 0
    for decl in stylesheet.iter_declarations():
        if not contains_svg_data_uri(decl.value):
            continue
        try:
            matches = _collect(parse_value(decl.value))
        except ParseError as exc:
            click.echo(f"{decl.line}:{decl.column} {decl.prop}: unparseable ({exc})")
            continue
        if matches:
            declarations += 1
        for match in matches:
            total += 1
            click.echo(
                f"{decl.line}:{decl.column} {decl.prop}: "
                f"{match.kind.value} ({len(match.payload)} chars)"
            )

    click.echo(f"Found {total} SVG data URI(s) in {declarations} declaration(s)")
