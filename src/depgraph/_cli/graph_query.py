"""Query functions backing the graph inspection commands.

These are pure functions over a Graph; rendering lives in graph_render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from depgraph._graph import Graph


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """Summary of a single node for listing."""

    node: str
    indegree: int
    outdegree: int


@dataclass(slots=True)
class TreeNode:
    """A node in a reachability tree for rendering."""

    node: str
    children: list[TreeNode]


def list_nodes(graph: Graph[str]) -> list[NodeInfo]:
    """List all nodes of a graph with their degrees.

    Args:
        graph: The graph to summarize.

    Returns:
        List of NodeInfo in node insertion order.

    """
    return [
        NodeInfo(node=node, indegree=graph.indegree(node), outdegree=graph.outdegree(node))
        for node in graph.nodes()
    ]


def get_reach_tree(graph: Graph[str], node: str, *, max_depth: int | None = None) -> TreeNode:
    """Build the tree of nodes reachable from a node.

    Each node appears at most once; later edges to an already placed node
    are not expanded again, so cycles terminate.

    Args:
        graph: The graph to traverse.
        node: The root of the tree.
        max_depth: Maximum depth to traverse (None for unlimited).

    Returns:
        TreeNode rooted at ``node``.

    Raises:
        KeyError: If the node is not in the graph.

    """
    if node not in graph:
        msg = f"Node not found: {node}"
        raise KeyError(msg)

    root = TreeNode(node=node, children=[])
    visited: set[str] = {node}
    stack: list[tuple[TreeNode, Iterator[str], int]] = [(root, iter(graph.adjacent(node)), 0)]

    while stack:
        parent, targets, depth = stack[-1]
        if max_depth is not None and depth >= max_depth:
            stack.pop()
            continue
        for target in targets:
            if target not in visited:
                visited.add(target)
                child = TreeNode(node=target, children=[])
                parent.children.append(child)
                stack.append((child, iter(graph.adjacent(target)), depth + 1))
                break
        else:
            stack.pop()

    return root
