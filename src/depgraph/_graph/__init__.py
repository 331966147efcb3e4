"""Graph module providing the directed graph store and its algorithms.

This module contains:
- Graph[T]: A generic, mutable directed graph
- topological_sort: Dependency ordering from a set of seed nodes
- depth_first_search: Postorder traversal from a set of seed nodes
- CycleError: Raised when a traversal runs into a cycle
"""

from ._algorithms import CycleError, depth_first_search, topological_sort
from ._store import Graph

__all__ = ["CycleError", "Graph", "depth_first_search", "topological_sort"]
