"""Minify adapter: decode -> normalize -> optimize."""

from __future__ import annotations

from dataclasses import dataclass

from cssvg.config import MinifyOptions
from cssvg.errors import OptimizeError
from cssvg.markup import normalize_quotes
from cssvg.optimizer import Optimizer, scour_optimize
from cssvg.uri import try_decode

__all__ = ["MinifyOutcome", "minify_svg"]


@dataclass(frozen=True)
class MinifyOutcome:
    """Optimized markup plus whether it should be percent-encoded on the way out."""

    markup: str
    uri_encoded: bool


def minify_svg(
    payload: str,
    options: MinifyOptions | None = None,
    optimizer: Optimizer | None = None,
) -> MinifyOutcome:
    """Optimize an SVG payload that may or may not be percent-encoded.

    The payload counts as URI-encoded when it decodes cleanly to something
    different from itself. ``options.encode`` overrides that detection for the
    returned flag only; the decoded text is what gets optimized either way.

    Raises :class:`OptimizeError` when the optimizer reports an error.
    """
    options = options or MinifyOptions()
    optimize = optimizer or scour_optimize

    svg = payload
    decoded = try_decode(payload)
    uri_encoded = decoded is not None and decoded != payload
    if uri_encoded:
        svg = decoded

    if options.encode is not None:
        uri_encoded = options.encode

    svg = normalize_quotes(svg)

    result = optimize(svg, options.optimizer)
    if not result.ok:
        raise OptimizeError(result.error)
    if result.data is None:
        raise OptimizeError("Optimizer returned no data")

    return MinifyOutcome(markup=result.data, uri_encoded=uri_encoded)
