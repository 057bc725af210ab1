"""CSS value nodes and their lossless serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class WordNode:
    """A bare token: keyword, number, hash, unquoted url argument."""

    value: str


@dataclass(frozen=True)
class StringNode:
    """A quoted string. ``value`` holds the raw text between the quotes.

    An empty ``quote`` serializes the value bare; this is how an unquoted
    ``url(...)`` argument looks once it has been replaced.
    """

    value: str
    quote: str = '"'
    unclosed: bool = False


@dataclass(frozen=True)
class SpaceNode:
    value: str


@dataclass(frozen=True)
class DivNode:
    """A separator (``,`` ``/`` ``:``) with the whitespace around it."""

    value: str
    before: str = ""
    after: str = ""


@dataclass(frozen=True)
class CommentNode:
    value: str
    unclosed: bool = False


@dataclass(frozen=True)
class FunctionNode:
    """A function call such as ``url(...)`` or ``calc(...)``.

    Whitespace just inside the parentheses lives in ``before`` and ``after``
    so that ``nodes[0]`` is always the first real argument. ``unclosed`` marks
    a call cut off by the end of the value; it serializes without ``)``.
    """

    value: str
    nodes: list[Node] = field(default_factory=list)
    before: str = ""
    after: str = ""
    unclosed: bool = False

    @property
    def is_url(self) -> bool:
        return self.value.lower() == "url"


Node = Union[WordNode, StringNode, SpaceNode, DivNode, CommentNode, FunctionNode]


def stringify(nodes: list[Node] | Node) -> str:
    """Serialize a node or node list back to CSS text."""
    if isinstance(nodes, list):
        return "".join(stringify(n) for n in nodes)

    node = nodes
    if isinstance(node, (WordNode, SpaceNode)):
        return node.value
    if isinstance(node, StringNode):
        closing = "" if node.unclosed else node.quote
        return f"{node.quote}{node.value}{closing}"
    if isinstance(node, DivNode):
        return f"{node.before}{node.value}{node.after}"
    if isinstance(node, CommentNode):
        return f"/*{node.value}" + ("" if node.unclosed else "*/")
    if isinstance(node, FunctionNode):
        closing = "" if node.unclosed else ")"
        return f"{node.value}({node.before}{stringify(node.nodes)}{node.after}{closing}"
    raise TypeError(f"Not a CSS value node: {node!r}")
