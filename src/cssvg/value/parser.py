"""Lark Transformer that converts a CSS value parse tree into value nodes."""

from __future__ import annotations

import re
from dataclasses import replace
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from cssvg.errors import ParseError
from cssvg.value.nodes import (
    CommentNode,
    DivNode,
    FunctionNode,
    Node,
    SpaceNode,
    StringNode,
    WordNode,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_DIV_RE = re.compile(r"(\s*)(\S)(\s*)\Z")
_URL_RE = re.compile(r"([^(]*)\((\s*)((?:[^)\\]|\\[\s\S]?)*?)(\s*)(\)?)\Z")


def _split_string(raw: str) -> StringNode:
    """Split a STRING token into quote, body and closed-ness."""
    quote = raw[0]
    body = re.match(r"(?:[^%s\\]|\\[\s\S]?)*" % quote, raw[1:]).group()
    unclosed = len(body) + 1 == len(raw)
    return StringNode(value=body, quote=quote, unclosed=unclosed)


def _strip_spaces(nodes: list[Node]) -> tuple[str, list[Node], str]:
    """Pull leading/trailing whitespace nodes out of a function's children."""
    before = after = ""
    if nodes and isinstance(nodes[0], SpaceNode):
        before = nodes[0].value
        nodes = nodes[1:]
    if nodes and isinstance(nodes[-1], SpaceNode):
        after = nodes[-1].value
        nodes = nodes[:-1]
    return before, nodes, after


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a flat list of value nodes."""

    def word(self, items: list[Token]) -> WordNode:
        return WordNode(str(items[0]))

    def space(self, items: list[Token]) -> SpaceNode:
        return SpaceNode(str(items[0]))

    def comment(self, items: list[Token]) -> CommentNode:
        raw = str(items[0])
        if len(raw) >= 4 and raw.endswith("*/"):
            return CommentNode(raw[2:-2])
        return CommentNode(raw[2:], unclosed=True)

    def string(self, items: list[Token]) -> StringNode:
        return _split_string(str(items[0]))

    def div(self, items: list[Token]) -> DivNode:
        before, value, after = _DIV_RE.match(str(items[0])).groups()
        return DivNode(value=value, before=before, after=after)

    def url(self, items: list[Token]) -> FunctionNode:
        name, before, content, after, closing = _URL_RE.match(str(items[0])).groups()
        nodes: list[Node] = [WordNode(content)] if content else []
        return FunctionNode(
            value=name, nodes=nodes, before=before, after=after, unclosed=not closing
        )

    def function(self, items: list[object]) -> FunctionNode:
        name = str(items[0])[:-1]
        before, nodes, after = _strip_spaces(list(items[1:]))  # type: ignore[arg-type]
        return FunctionNode(value=name, nodes=nodes, before=before, after=after)

    def unclosed(self, items: list[object]) -> FunctionNode:
        return replace(self.function(items), unclosed=True)

    def stray(self, items: list[Token]) -> WordNode:
        return WordNode(")")

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


@lru_cache(maxsize=1)
def _get_parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_value(source: str) -> list[Node]:
    """Parse a CSS declaration value into a list of value nodes.

    Malformed input is kept rather than rejected: a ``)`` with nothing to
    close becomes a word, and functions, strings and comments cut off by the
    end of the value are marked ``unclosed``.
    """
    try:
        tree = _get_parser().parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return ValueTransformer().transform(tree)
