"""Rewrite SVG data URIs found in ``url(...)`` nodes of a CSS value."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import replace
from typing import Callable

from cssvg.config import MinifyOptions
from cssvg.datauri import (
    BASE64_PREFIX,
    PERCENT_ENCODED_PREFIX,
    UriKind,
    UriMatch,
    classify,
)
from cssvg.minify import minify_svg
from cssvg.optimizer import Optimizer
from cssvg.uri import encode
from cssvg.value.nodes import FunctionNode, Node, StringNode
from cssvg.value.walk import UNCHANGED, Decision, Replaced, walk

logger = logging.getLogger(__name__)

__all__ = ["SvgUrlVisitor", "rewrite_value", "rewrite_base64", "rewrite_percent_encoded"]

Warn = Callable[[str], None]


def _b64decode(payload: str) -> bytes:
    # Padding is optional and the URL-safe alphabet is accepted, as browsers do.
    return base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4))


def rewrite_base64(match: UriMatch, options: MinifyOptions, optimizer: Optimizer | None) -> str:
    """Optimize a base64 SVG payload and rebuild its data URI, fragment included."""
    try:
        svg = _b64decode(match.payload).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"Invalid base64 SVG payload: {exc}") from exc
    outcome = minify_svg(svg, options, optimizer)
    data = base64.b64encode(outcome.markup.encode("utf-8")).decode("ascii")
    return BASE64_PREFIX + data + match.fragment


def rewrite_percent_encoded(
    match: UriMatch, options: MinifyOptions, optimizer: Optimizer | None
) -> tuple[str, str]:
    """Optimize a percent-encoded (or literal) SVG payload.

    Returns the new data URI and the quote it must be wrapped in.
    """
    outcome = minify_svg(match.payload, options, optimizer)
    data = encode(outcome.markup) if outcome.uri_encoded else outcome.markup
    # An unescaped "#" ends the URI in Firefox, whatever the encoding mode.
    data = data.replace("#", "%23")
    quote = '"' if outcome.uri_encoded else "'"
    return PERCENT_ENCODED_PREFIX + data, quote


class SvgUrlVisitor:
    """Visitor that replaces the argument of SVG ``url(...)`` nodes.

    A node that fails at any stage is left as it was; *warn* receives the
    error text and the walk carries on with the next node.
    """

    def __init__(
        self,
        options: MinifyOptions | None = None,
        optimizer: Optimizer | None = None,
        warn: Warn | None = None,
    ) -> None:
        self.options = options or MinifyOptions()
        self.optimizer = optimizer
        self.warn = warn
        self.replaced = 0
        self.failed = 0

    def __call__(self, node: Node) -> Decision:
        if not isinstance(node, FunctionNode) or not node.is_url or not node.nodes:
            return UNCHANGED

        argument = node.nodes[0]
        match = classify(argument.value)
        if not match.matched:
            return UNCHANGED

        quote = getattr(argument, "quote", "")
        try:
            if match.kind is UriKind.BASE64:
                value = rewrite_base64(match, self.options, self.optimizer)
            else:
                value, quote = rewrite_percent_encoded(match, self.options, self.optimizer)
        except Exception as exc:
            self.failed += 1
            logger.debug("Leaving url() untouched: %s", exc)
            if self.warn is not None:
                self.warn(str(exc))
            return UNCHANGED

        self.replaced += 1
        logger.debug(
            "Rewrote %s SVG data URI: %d -> %d chars",
            match.kind.value,
            len(argument.value),
            len(value),
        )
        new_argument = StringNode(value=value, quote=quote)
        return Replaced(
            replace(node, nodes=[new_argument, *node.nodes[1:]], before="", after="")
        )


def rewrite_value(
    nodes: list[Node],
    options: MinifyOptions | None = None,
    optimizer: Optimizer | None = None,
    warn: Warn | None = None,
) -> list[Node]:
    """Return *nodes* with every SVG data URI in a ``url(...)`` optimized."""
    return walk(nodes, SvgUrlVisitor(options, optimizer, warn))
