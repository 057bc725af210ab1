"""Depth-first rewriting walk over CSS value nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Union

from cssvg.value.nodes import FunctionNode, Node


@dataclass(frozen=True)
class Unchanged:
    """Keep the node; descend into its children if it has any."""


@dataclass(frozen=True)
class Replaced:
    """Use ``node`` in place of the visited node; its children are not visited."""

    node: Node


UNCHANGED = Unchanged()

Decision = Union[Unchanged, Replaced]
Visitor = Callable[[Node], Decision]


def walk(nodes: list[Node], visit: Visitor) -> list[Node]:
    """Visit *nodes* depth-first in source order and return the rewritten list.

    The input list and its nodes are never mutated.
    """
    result: list[Node] = []
    for node in nodes:
        decision = visit(node)
        if isinstance(decision, Replaced):
            result.append(decision.node)
        elif isinstance(node, FunctionNode) and node.nodes:
            children = walk(node.nodes, visit)
            if any(new is not old for new, old in zip(children, node.nodes)):
                node = replace(node, nodes=children)
            result.append(node)
        else:
            result.append(node)
    return result
