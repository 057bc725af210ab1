"""cssvg: optimize SVG data URIs embedded in CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from cssvg.config import MinifyOptions
from cssvg.datauri import UriKind, UriMatch, classify
from cssvg.errors import CssvgError, DecodeError, OptimizeError, ParseError
from cssvg.minify import MinifyOutcome, minify_svg
from cssvg.model.diagnostic import Diagnostic, Severity
from cssvg.optimizer import OptimizeResult, Optimizer, scour_optimize
from cssvg.plugin import ProcessResult, minify_css, minify_declaration_value, process_stylesheet
from cssvg.stylesheet import Declaration, Stylesheet, parse_stylesheet

__all__ = [
    "__version__",
    "MinifyOptions",
    "UriKind",
    "UriMatch",
    "classify",
    "CssvgError",
    "DecodeError",
    "OptimizeError",
    "ParseError",
    "MinifyOutcome",
    "minify_svg",
    "Diagnostic",
    "Severity",
    "OptimizeResult",
    "Optimizer",
    "scour_optimize",
    "ProcessResult",
    "minify_css",
    "minify_declaration_value",
    "process_stylesheet",
    "Declaration",
    "Stylesheet",
    "parse_stylesheet",
]
