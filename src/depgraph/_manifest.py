"""Loading graphs from TOML dependency manifests.

A manifest lists edges as a table from a node to the nodes it points to,
plus optional isolated nodes:

    nodes = ["standalone"]

    [edges]
    socks = ["shoes"]
    pants = ["shoes", "belt"]

An edge ``socks -> shoes`` means socks come before shoes in a
topological sort.
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._graph import Graph

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Error reading or validating a dependency manifest."""


class Manifest(BaseModel):
    """Validated contents of a dependency manifest."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    nodes: list[str] = Field(default_factory=list)
    edges: dict[str, list[str]] = Field(default_factory=dict)

    def to_graph(self) -> Graph[str]:
        """Build a graph from the manifest.

        Nodes are added in manifest order: first the ``nodes`` array, then
        each key of the ``edges`` table followed by its targets.
        """
        graph: Graph[str] = Graph()
        for node in self.nodes:
            graph.add_node(node)
        for source, targets in self.edges.items():
            graph.add_node(source)
            for target in targets:
                graph.add_edge(source, target)
        return graph


def load_manifest(path: Path | str) -> Manifest:
    """Load and validate a manifest file.

    Args:
        path: Path to the manifest TOML file.

    Returns:
        The validated Manifest.

    Raises:
        ManifestError: If the file is missing, is not valid TOML, or does not
            match the manifest schema.

    """
    path = Path(path)

    try:
        with path.open("rb") as f:
            contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Manifest not found: {path}"
        raise ManifestError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ManifestError(msg) from e

    try:
        manifest = Manifest.model_validate(contents)
    except ValidationError as e:
        msg = f"Invalid manifest {path}: {e}"
        raise ManifestError(msg) from e

    logger.debug(f"Loaded manifest from {path} ({len(manifest.edges)} sources)")
    return manifest
