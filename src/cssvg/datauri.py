"""Classification of ``url(...)`` arguments as SVG data URIs.

Precedence:
    1. ``data:image/svg+xml;base64,``                     -> BASE64
    2. ``data:image/svg+xml[;charset=utf-8|;utf-8],``     -> PERCENT_ENCODED
    3. anything else                                      -> NO_MATCH

A value matching both patterns is classified BASE64.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "UriKind",
    "UriMatch",
    "NO_MATCH",
    "BASE64_PREFIX",
    "PERCENT_ENCODED_PREFIX",
    "classify",
    "contains_svg_data_uri",
]

BASE64_PREFIX = "data:image/svg+xml;base64,"
PERCENT_ENCODED_PREFIX = "data:image/svg+xml;charset=utf-8,"

# Any recognised SVG data URI prefix, anywhere in the text.
_DATA_URI_RE = re.compile(r"data:image/svg\+xml(;((charset=)?utf-8|base64))?,", re.IGNORECASE)

_BASE64_RE = re.compile(r"data:image/svg\+xml;base64,", re.IGNORECASE)
_PERCENT_ENCODED_RE = re.compile(r"data:image/svg\+xml(;(charset=)?utf-8)?,", re.IGNORECASE)


class UriKind(Enum):
    """How an SVG payload is carried inside a data URI."""

    BASE64 = "base64"
    PERCENT_ENCODED = "percent_encoded"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class UriMatch:
    """Result of classifying a candidate ``url(...)`` argument.

    Attributes:
        kind: Which data URI form was recognised.
        payload: Text after the prefix (base64 text stops before any ``?`` or ``#``).
        fragment: The ``#...`` suffix of a base64 URI, kept verbatim.
    """

    kind: UriKind
    payload: str = ""
    fragment: str = ""

    @property
    def matched(self) -> bool:
        return self.kind is not UriKind.NO_MATCH


NO_MATCH = UriMatch(kind=UriKind.NO_MATCH)


def classify(value: str) -> UriMatch:
    """Classify *value* as a base64 SVG, percent-encoded SVG, or neither."""
    match = _BASE64_RE.match(value)
    if match:
        rest, hash_sign, fragment = value[match.end():].partition("#")
        # a ?query is not part of the base64 text and is not carried over
        payload = rest.partition("?")[0]
        return UriMatch(UriKind.BASE64, payload, hash_sign + fragment)

    match = _PERCENT_ENCODED_RE.match(value)
    if match:
        return UriMatch(UriKind.PERCENT_ENCODED, value[match.end():])

    return NO_MATCH


def contains_svg_data_uri(text: str) -> bool:
    """Cheap pre-filter: does *text* mention an SVG data URI anywhere?"""
    return _DATA_URI_RE.search(text) is not None
