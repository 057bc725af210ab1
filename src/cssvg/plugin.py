"""Declaration driver: optimize SVG data URIs across a stylesheet."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from cssvg.config import MinifyOptions
from cssvg.datauri import contains_svg_data_uri
from cssvg.errors import ParseError
from cssvg.model.diagnostic import Diagnostic, Severity
from cssvg.optimizer import Optimizer
from cssvg.rewriter import rewrite_value
from cssvg.stylesheet import Declaration, Stylesheet, parse_stylesheet
from cssvg.value import parse_value, stringify

PLUGIN = "cssvg"

logger = logging.getLogger("cssvg")

__all__ = [
    "PLUGIN",
    "ProcessResult",
    "WarnSink",
    "process_stylesheet",
    "minify_css",
    "minify_declaration_value",
]

WarnSink = Callable[[Declaration, str], None]
OptionsLike = Union[MinifyOptions, Mapping[str, Any], None]


@dataclass
class ProcessResult:
    """Rewritten CSS text plus the diagnostics raised while producing it."""

    css: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


def _coerce_options(options: OptionsLike) -> MinifyOptions:
    if isinstance(options, MinifyOptions):
        return options
    return MinifyOptions.from_mapping(options)


def _diagnostic(decl: Declaration, message: str) -> Diagnostic:
    return Diagnostic(
        plugin=PLUGIN,
        severity=Severity.WARNING,
        message=message,
        prop=decl.prop,
        line=decl.line,
        column=decl.column,
    )


def _minify_declaration(
    decl: Declaration,
    options: MinifyOptions,
    optimizer: Optimizer | None,
    warn: Callable[[str], None],
) -> None:
    try:
        nodes = parse_value(decl.value)
    except ParseError as exc:
        warn(f"Could not parse value: {exc}")
        return
    decl.value = stringify(rewrite_value(nodes, options, optimizer, warn))


def process_stylesheet(
    stylesheet: Stylesheet,
    options: OptionsLike = None,
    optimizer: Optimizer | None = None,
    warn: WarnSink | None = None,
) -> list[Diagnostic]:
    """Optimize every SVG data URI in *stylesheet*, rewriting declarations in place.

    Declarations without an SVG data URI are never parsed. Failures are
    reported through *warn* (and the returned diagnostics) and leave the
    offending ``url(...)`` untouched.
    """
    opts = _coerce_options(options)
    diagnostics: list[Diagnostic] = []

    for decl in stylesheet.iter_declarations():
        if not contains_svg_data_uri(decl.value):
            continue

        def _warn(message: str, decl: Declaration = decl) -> None:
            diagnostic = _diagnostic(decl, message)
            diagnostics.append(diagnostic)
            logger.warning("%s", diagnostic)
            if warn is not None:
                warn(decl, message)

        _minify_declaration(decl, opts, optimizer, _warn)

    return diagnostics


def minify_css(
    css: str,
    options: OptionsLike = None,
    optimizer: Optimizer | None = None,
    warn: WarnSink | None = None,
) -> ProcessResult:
    """Parse *css*, optimize its SVG data URIs, and return the rewritten text."""
    stylesheet = parse_stylesheet(css)
    diagnostics = process_stylesheet(stylesheet, options, optimizer, warn)
    return ProcessResult(css=str(stylesheet), diagnostics=diagnostics)


def minify_declaration_value(
    value: str,
    options: OptionsLike = None,
    optimizer: Optimizer | None = None,
) -> ProcessResult:
    """Optimize the SVG data URIs in a single declaration value."""
    decl = Declaration(prop="", value=value)
    diagnostics = process_stylesheet(Stylesheet(parts=[decl]), options, optimizer)
    return ProcessResult(css=decl.value, diagnostics=diagnostics)
