"""Graph algorithms for dependency ordering."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator

    from ._store import Graph

logger = logging.getLogger(__name__)


class CycleError(ValueError):
    """A traversal re-entered a node that is still on the depth-first stack.

    Attributes:
        node: The in-progress node that was reached again.
        edge: The (source, target) edge that closed the cycle.
        cycle: The nodes along the cycle, starting and ending with ``node``.

    """

    def __init__(self, node: object, edge: tuple[object, object], cycle: list[object]) -> None:
        self.node = node
        self.edge = edge
        self.cycle = cycle
        path = " -> ".join(repr(n) for n in cycle)
        super().__init__(f"Cycle detected at {node!r} (edge {edge[0]!r} -> {edge[1]!r}): {path}")


class _Mark(Enum):
    UNVISITED = auto()
    ACTIVE = auto()
    DONE = auto()


def _visit[T: Hashable](graph: Graph[T], start: T, marks: dict[T, _Mark], order: list[T]) -> None:
    """Append every node reachable from ``start`` to ``order`` in postorder.

    Iterative equivalent of the recursive visit: children are expanded in
    adjacency order and a node is appended once all its children are done.
    ``start`` is always the last node appended.
    """
    marks[start] = _Mark.ACTIVE
    stack: list[tuple[T, Iterator[T]]] = [(start, iter(graph.adjacent(start)))]

    while stack:
        node, successors = stack[-1]
        for target in successors:
            mark = marks.get(target, _Mark.UNVISITED)
            if mark is _Mark.ACTIVE:
                path = [n for n, _ in stack]
                cycle = [*path[path.index(target) :], target]
                logger.debug(f"Cycle closed by edge {node!r} -> {target!r}")
                raise CycleError(target, (node, target), cycle)
            if mark is _Mark.UNVISITED:
                marks[target] = _Mark.ACTIVE
                stack.append((target, iter(graph.adjacent(target))))
                break
        else:
            stack.pop()
            marks[node] = _Mark.DONE
            order.append(node)


def depth_first_search[T: Hashable](
    graph: Graph[T],
    seeds: Iterable[T],
    *,
    include_seeds: bool = True,
) -> list[T]:
    """Collect the nodes reachable from ``seeds`` in depth-first postorder.

    Seeds are visited in the order given. A node is emitted only after all
    of its successors, and never twice.

    Args:
        graph: The graph to traverse.
        seeds: Starting nodes. Unknown seeds behave as isolated nodes.
        include_seeds: If False, a seed that starts its own traversal is
            left out of the result. A seed already reached from an earlier
            seed is kept either way.

    Returns:
        List of nodes in postorder.

    Raises:
        CycleError: If a cycle is reachable from the seeds.

    """
    marks: dict[T, _Mark] = {}
    order: list[T] = []

    for seed in seeds:
        if marks.get(seed, _Mark.UNVISITED) is not _Mark.UNVISITED:
            continue
        logger.debug(f"Starting traversal from seed {seed!r}")
        _visit(graph, seed, marks, order)
        if not include_seeds:
            order.pop()

    return order


def topological_sort[T: Hashable](
    graph: Graph[T],
    seeds: Iterable[T],
    *,
    include_seeds: bool = False,
) -> list[T]:
    """Sort the nodes reachable from ``seeds`` topologically.

    For every edge (u -> v) with both ends in the result, u comes before v.

    Args:
        graph: The graph to sort.
        seeds: Starting nodes, processed in the order given.
        include_seeds: Whether seeds that start their own traversal are
            part of the result.

    Returns:
        List of nodes in topological order.

    Raises:
        CycleError: If a cycle is reachable from the seeds.

    Example:
        >>> from depgraph import Graph
        >>> graph = Graph.from_edges([("a", "b"), ("b", "c")])
        >>> topological_sort(graph, ["a"])
        ['b', 'c']

    """
    order = depth_first_search(graph, seeds, include_seeds=include_seeds)
    order.reverse()
    return order
