"""Percent-encoding for SVG markup embedded in ``data:`` URIs.

Only the characters that break a CSS string or a URI are escaped; everything
else (including non-ASCII text) is kept literal so encoded payloads stay small.
"""

from __future__ import annotations

import re
from urllib.parse import unquote

from cssvg.errors import DecodeError

__all__ = ["encode", "decode", "try_decode"]

_UNSAFE_RE = re.compile(r'[%<>&#"\\\x00-\x1f\x7f]')

# A "%" that does not start a two-digit hex escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode(text: str) -> str:
    """Percent-encode the characters of *text* that are unsafe in a URI."""
    return _UNSAFE_RE.sub(lambda m: "%{:02X}".format(ord(m.group())), text)


def decode(text: str) -> str:
    """Decode percent-escapes in *text* as UTF-8.

    Raises :class:`DecodeError` on a stray ``%`` or on escapes that do not
    form valid UTF-8.
    """
    bad = _BAD_ESCAPE_RE.search(text)
    if bad is not None:
        raise DecodeError(f"Malformed percent-escape at offset {bad.start()}")
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Percent-escapes are not valid UTF-8: {exc}", cause=exc) from exc


def try_decode(text: str) -> str | None:
    """Return the decoded text, or ``None`` if *text* is not percent-encoded."""
    if _BAD_ESCAPE_RE.search(text) is not None:
        return None
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return None
