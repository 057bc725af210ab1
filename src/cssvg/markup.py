"""Text-level fixups applied to SVG markup before optimization."""

from __future__ import annotations

import re

__all__ = ["normalize_quotes"]

# name=\"value\" as left behind by tools that escape quotes for JSON or JS.
_ESCAPED_QUOTES_RE = re.compile(r'\b([\w-]+)\s*=\s*\\"([\s\S]+?)\\"')


def normalize_quotes(markup: str) -> str:
    """Turn escaped attribute quotes (``attr=\\"v\\"``) into plain ones (``attr="v"``)."""
    return _ESCAPED_QUOTES_RE.sub(r'\1="\2"', markup)
