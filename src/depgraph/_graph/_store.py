"""Mutable directed graph store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._algorithms import CycleError, depth_first_search, topological_sort

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator


@dataclass(slots=True, repr=False)
class Graph[T: Hashable]:
    """A directed graph supporting in-place node and edge mutation.

    It is generic over the node type T (e.g., str, int, tuple).

    An edge (a, b) is stored in both directions:
    - _successors[a] contains b (a points to b)
    - _predecessors[b] contains a

    Both mappings always have the same keys, the node set. Each value is a
    dict used as an insertion-ordered set, so adjacency is reported in the
    order edges were added.

    Attributes:
        _successors: Mapping from node to targets of its outgoing edges.
        _predecessors: Mapping from node to sources of its incoming edges.

    """

    _successors: dict[T, dict[T, None]] = field(default_factory=dict, init=False)
    _predecessors: dict[T, dict[T, None]] = field(default_factory=dict, init=False)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]]) -> Graph[T]:
        """Build a graph from (source, target) edges.

        Example:
            >>> graph = Graph.from_edges([("a", "b"), ("b", "c")])
            >>> graph.adjacent("b")
            ['c']

        """
        graph = cls()
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    # --- Mutation ---

    def add_node(self, node: T) -> Graph[T]:
        """Add a node. Adding a node that is already present does nothing."""
        self._successors.setdefault(node, {})
        self._predecessors.setdefault(node, {})
        return self

    def remove_node(self, node: T) -> Graph[T]:
        """Remove a node together with all its incoming and outgoing edges.

        Removing an unknown node does nothing.
        """
        targets = self._successors.pop(node, None)
        if targets is None:
            return self
        sources = self._predecessors.pop(node)

        # A self-loop endpoint was popped above, so it is no longer a key
        for target in targets:
            if target in self._predecessors:
                del self._predecessors[target][node]
        for source in sources:
            if source in self._successors:
                del self._successors[source][node]
        return self

    def add_edge(self, source: T, target: T) -> Graph[T]:
        """Add the edge source -> target, creating missing endpoints."""
        self.add_node(source)
        self.add_node(target)
        self._successors[source][target] = None
        self._predecessors[target][source] = None
        return self

    def remove_edge(self, source: T, target: T) -> Graph[T]:
        """Remove the edge source -> target if it exists.

        Endpoints stay in the graph.
        """
        targets = self._successors.get(source)
        if targets is not None and target in targets:
            del targets[target]
            del self._predecessors[target][source]
        return self

    # --- Queries ---

    def nodes(self) -> list[T]:
        """All nodes, in the order they were first added."""
        return list(self._successors)

    def edges(self) -> list[tuple[T, T]]:
        """All edges as (source, target) pairs."""
        return [(source, target) for source, targets in self._successors.items() for target in targets]

    def adjacent(self, node: T) -> list[T]:
        """Nodes reachable from ``node`` by one outgoing edge.

        Returns an empty list for unknown nodes.
        """
        return list(self._successors.get(node, ()))

    def predecessors(self, node: T) -> list[T]:
        """Nodes with an edge pointing to ``node``."""
        return list(self._predecessors.get(node, ()))

    def has_node(self, node: T) -> bool:
        return node in self._successors

    def has_edge(self, source: T, target: T) -> bool:
        return target in self._successors.get(source, ())

    def outdegree(self, node: T) -> int:
        return len(self._successors.get(node, ()))

    def indegree(self, node: T) -> int:
        return len(self._predecessors.get(node, ()))

    def descendants(self, node: T) -> frozenset[T]:
        """Get all nodes transitively reachable from a node.

        Args:
            node: The node to query.

        Returns:
            Set of reachable nodes. The node itself is included only when it
            lies on a cycle.

        """
        visited: set[T] = set()
        stack = self.adjacent(node)
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self._successors[current])
        return frozenset(visited)

    # --- Algorithms ---

    def depth_first_search(self, seeds: Iterable[T] | None = None, *, include_seeds: bool = True) -> list[T]:
        """Nodes reachable from ``seeds`` in postorder. See ``depth_first_search``."""
        return depth_first_search(self, self.nodes() if seeds is None else seeds, include_seeds=include_seeds)

    def topological_sort(self, seeds: Iterable[T] | None = None, *, include_seeds: bool = False) -> list[T]:
        """Nodes reachable from ``seeds`` in dependency order.

        Args:
            seeds: Starting nodes. Defaults to every node in the graph.
            include_seeds: Whether seeds that start their own traversal are
                part of the result.

        Raises:
            CycleError: If a cycle is reachable from the seeds.

        """
        return topological_sort(self, self.nodes() if seeds is None else seeds, include_seeds=include_seeds)

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.topological_sort(include_seeds=True)
        except CycleError:
            return True
        return False

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._successors)

    def __contains__(self, node: object) -> bool:
        return node in self._successors

    def __iter__(self) -> Iterator[T]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        edge_count = sum(len(targets) for targets in self._successors.values())
        return f"Graph(nodes={len(self._successors)}, edges={edge_count})"
