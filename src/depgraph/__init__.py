"""Directed graphs with dependency ordering."""

__all__ = [
    "CycleError",
    "Graph",
    "Manifest",
    "ManifestError",
    "depth_first_search",
    "load_manifest",
    "topological_sort",
]

from ._graph import CycleError, Graph, depth_first_search, topological_sort
from ._manifest import Manifest, ManifestError, load_manifest
