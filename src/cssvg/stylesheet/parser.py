"""Hand-written scanner that finds declarations in a CSS stylesheet.

Only declarations are modelled; selectors, at-rule preludes, comments and
whitespace are kept as raw text. Example:
    .icon { background: url(data:image/svg+xml,...) no-repeat; }
    @media (min-width: 40em) { .icon { width: 2em } }
"""

from __future__ import annotations

import re

from cssvg.stylesheet.model import Declaration, Part, Stylesheet

__all__ = ["parse_stylesheet"]

# One lexical unit of CSS; every character of the input belongs to exactly one.
_TOKEN_RE = re.compile(
    r"""
    (?P<comment>/\*[\s\S]*?(?:\*/|\Z))
  | (?P<string>"(?:[^"\\]|\\[\s\S])*"?|'(?:[^'\\]|\\[\s\S])*'?)
  | (?P<url>url\((?!\s*["'])(?:[^)\\]|\\[\s\S])*\)?)   # unquoted url() is opaque
  | (?P<open>\()
  | (?P<close>\))
  | (?P<stop>[{};])
  | (?P<word>[-\w]+|\\[\s\S]|[^-\w"'(){};\\]|\\)
    """,
    re.VERBOSE | re.IGNORECASE,
)

# Whitespace and comments in front of a statement.
_LEADING_RE = re.compile(r"(?:\s+|/\*[\s\S]*?\*/)*")

_PROP_RE = re.compile(r"[*_]?[-\w]+")

_COLON_RE = re.compile(r":\s*")

_IMPORTANT_RE = re.compile(r"\s*!\s*important\Z", re.IGNORECASE)


def _position(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *offset* in *source*."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _find_colon(text: str) -> int | None:
    """Index of the first ``:`` outside strings, comments and parentheses."""
    depth = 0
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        if kind == "open":
            depth += 1
        elif kind == "close":
            depth = max(depth - 1, 0)
        elif kind == "word" and depth == 0 and match.group() == ":":
            return match.start()
    return None


def _parse_statement(statement: str, source: str, offset: int) -> list[Part]:
    """Split a statement ended by ``;`` or ``}`` into raw text and a declaration."""
    if not statement:
        return []
    leading = _LEADING_RE.match(statement).group()
    body = statement[len(leading):]
    if not body or body.startswith("@"):
        return [statement]

    colon = _find_colon(body)
    if colon is None:
        return [statement]
    prop = body[:colon].rstrip()
    if not _PROP_RE.fullmatch(prop):
        return [statement]

    value_start = _COLON_RE.match(body, colon).end()
    between = body[len(prop):value_start]
    rest = body[value_start:]
    value = rest.rstrip()
    after = rest[len(value):]

    important = ""
    bang = _IMPORTANT_RE.search(value)
    if bang:
        important = bang.group()
        value = value[: bang.start()]

    line, column = _position(source, offset + len(leading))
    decl = Declaration(
        prop=prop,
        value=value,
        between=between,
        important=important,
        after=after,
        line=line,
        column=column,
    )
    parts: list[Part] = [leading] if leading else []
    parts.append(decl)
    return parts


def parse_stylesheet(source: str) -> Stylesheet:
    """Scan CSS *source* into a Stylesheet.

    ``str(parse_stylesheet(s)) == s`` for any input.
    """
    parts: list[Part] = []
    start = 0
    depth = 0
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup
        if kind == "open":
            depth += 1
        elif kind == "close":
            depth = max(depth - 1, 0)
        elif kind == "stop" and depth == 0:
            statement = source[start:match.start()]
            if match.group() == "{":
                parts.append(statement + "{")
            else:
                parts.extend(_parse_statement(statement, source, start))
                parts.append(match.group())
            start = match.end()
    parts.extend(_parse_statement(source[start:], source, start))
    return Stylesheet(parts=parts)
