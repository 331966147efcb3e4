"""Tests for loading dependency manifests."""

from pathlib import Path

import pytest

from depgraph import Manifest, ManifestError, load_manifest


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "deps.toml"
    path.write_text(
        """
nodes = ["standalone"]

[edges]
socks = ["shoes"]
pants = ["shoes", "belt"]
underpants = ["pants"]
""",
    )
    return path


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_loads_edges_and_nodes(self, manifest_path: Path) -> None:
        manifest = load_manifest(manifest_path)

        assert manifest.nodes == ["standalone"]
        assert manifest.edges["pants"] == ["shoes", "belt"]

    def test_accepts_string_path(self, manifest_path: Path) -> None:
        manifest = load_manifest(str(manifest_path))
        assert "socks" in manifest.edges

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("")

        manifest = load_manifest(path)

        assert manifest == Manifest()
        assert manifest.to_graph().nodes() == []

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="Manifest not found"):
            load_manifest(tmp_path / "missing.toml")

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[edges\n")

        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)

    def test_wrong_types_raise_error(self, tmp_path: Path) -> None:
        path = tmp_path / "wrong.toml"
        path.write_text('[edges]\na = "b"\n')

        with pytest.raises(ManifestError, match="Invalid manifest"):
            load_manifest(path)

    def test_unknown_keys_raise_error(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.toml"
        path.write_text('weights = { a = 1 }\n')

        with pytest.raises(ManifestError, match="Invalid manifest"):
            load_manifest(path)


class TestManifestToGraph:
    """Tests for Manifest.to_graph."""

    def test_builds_graph(self, manifest_path: Path) -> None:
        graph = load_manifest(manifest_path).to_graph()

        assert graph.nodes() == ["standalone", "socks", "shoes", "pants", "belt", "underpants"]
        assert graph.adjacent("pants") == ["shoes", "belt"]
        assert graph.adjacent("standalone") == []

    def test_source_without_targets_is_a_node(self) -> None:
        graph = Manifest(edges={"lonely": []}).to_graph()
        assert graph.nodes() == ["lonely"]

    def test_sorted_order(self, manifest_path: Path) -> None:
        graph = load_manifest(manifest_path).to_graph()

        order = graph.topological_sort(include_seeds=True)

        assert order.index("underpants") < order.index("pants")
        assert order.index("pants") < order.index("shoes")
        assert order.index("socks") < order.index("shoes")
