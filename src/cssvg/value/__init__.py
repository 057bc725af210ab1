from cssvg.value.nodes import (
    CommentNode,
    DivNode,
    FunctionNode,
    Node,
    SpaceNode,
    StringNode,
    WordNode,
    stringify,
)
from cssvg.value.parser import parse_value
from cssvg.value.walk import UNCHANGED, Decision, Replaced, Unchanged, walk

__all__ = [
    "parse_value",
    "stringify",
    "walk",
    "Decision",
    "Unchanged",
    "Replaced",
    "UNCHANGED",
    "Node",
    "WordNode",
    "StringNode",
    "SpaceNode",
    "DivNode",
    "CommentNode",
    "FunctionNode",
]
