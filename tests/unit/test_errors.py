"""Tests for error handling paths."""

import tempfile
from pathlib import Path

import pytest

from linkgraph import config
from linkgraph.core.exceptions import (
    EdgeFileError,
    GraphTooLargeError,
    LinkGraphError,
    NoPathError,
    UnknownLabelError,
)
from linkgraph.core.graph import LabelRegistry, LinkGraph, build_graph, read_edges


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def disconnected_graph() -> LinkGraph:
    """Two separate edges: A -> B, C -> D."""
    return build_graph([("A", "B"), ("C", "D")])


class TestUnknownLabel:
    """Tests for queries naming labels that were never added."""

    def test_registry_id_of(self) -> None:
        registry = LabelRegistry()
        with pytest.raises(UnknownLabelError) as exc_info:
            registry.id_of("www.missing.com")

        assert "www.missing.com" in str(exc_info.value)

    def test_unknown_source(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(UnknownLabelError) as exc_info:
            disconnected_graph.get_shortest_path("Z", "A")

        assert "'Z'" in str(exc_info.value)

    def test_unknown_destination(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(UnknownLabelError):
            disconnected_graph.get_shortest_path("A", "Z")

    def test_unknown_same_label(self) -> None:
        with pytest.raises(UnknownLabelError):
            LinkGraph().get_shortest_path("Z", "Z")

    def test_is_key_error(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(KeyError):
            disconnected_graph.vertex_id("Z")

    def test_lookup_does_not_add_vertex(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(UnknownLabelError):
            disconnected_graph.get_shortest_path("A", "Z")

        assert "Z" not in disconnected_graph
        assert disconnected_graph.num_vertices == 4


class TestNoPath:
    """Tests for unreachable destinations."""

    def test_disconnected(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(NoPathError) as exc_info:
            disconnected_graph.get_shortest_path("A", "D")

        assert "'A'" in str(exc_info.value)
        assert "'D'" in str(exc_info.value)

    def test_against_edge_direction(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(NoPathError):
            disconnected_graph.get_shortest_path("B", "A")

    def test_graph_unchanged_after_error(self, disconnected_graph: LinkGraph) -> None:
        with pytest.raises(NoPathError):
            disconnected_graph.get_shortest_path("A", "D")

        assert disconnected_graph.get_shortest_path("C", "D") == 1
        assert disconnected_graph.num_edges == 2


class TestNoResultIsNotAnError:
    """Empty answers are returned, not raised."""

    def test_no_hamiltonian_path(self, disconnected_graph: LinkGraph) -> None:
        assert disconnected_graph.get_hamiltonian_path() == []

    def test_only_singleton_components(self, disconnected_graph: LinkGraph) -> None:
        result = disconnected_graph.get_strongly_connected_components()
        assert all(len(c) == 1 for c in result)


class TestGraphTooLarge:
    """Tests for the Hamiltonian vertex cap."""

    def test_over_mask_width(self) -> None:
        n = config.MASK_WIDTH + 1
        graph = build_graph((f"v{i}", f"v{i + 1}") for i in range(n - 1))

        with pytest.raises(GraphTooLargeError) as exc_info:
            graph.get_hamiltonian_path()

        assert str(n) in str(exc_info.value)

    def test_respects_configured_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "MASK_WIDTH", 3)
        graph = build_graph([("A", "B"), ("B", "C"), ("C", "D")])

        with pytest.raises(GraphTooLargeError):
            graph.get_hamiltonian_path()

    def test_other_queries_unaffected(self) -> None:
        n = config.MASK_WIDTH + 10
        graph = build_graph((f"v{i}", f"v{(i + 1) % n}") for i in range(n))

        assert len(graph.get_strongly_connected_components()) == 1
        assert graph.get_shortest_path("v0", f"v{n - 1}") == n - 1


class TestEdgeFileErrors:
    """Tests for reading malformed edge list files."""

    def test_odd_label_count(self, temp_dir: Path) -> None:
        file_path = temp_dir / "odd.txt"
        file_path.write_text("www.a.com\nwww.b.com\nwww.c.com\n")

        with pytest.raises(EdgeFileError) as exc_info:
            read_edges(file_path)

        assert "3 labels" in str(exc_info.value)

    def test_missing_file(self, temp_dir: Path) -> None:
        with pytest.raises(EdgeFileError) as exc_info:
            read_edges(temp_dir / "missing.txt")

        assert "Cannot read" in str(exc_info.value)

    def test_bad_encoding(self, temp_dir: Path) -> None:
        file_path = temp_dir / "bad.txt"
        file_path.write_bytes(b"\xff\xfe invalid utf-8 \x80\x81")

        with pytest.raises(EdgeFileError):
            read_edges(file_path)


class TestHierarchy:
    """All engine errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [UnknownLabelError, NoPathError, GraphTooLargeError, EdgeFileError],
    )
    def test_subclass_of_base(self, error: type[Exception]) -> None:
        assert issubclass(error, LinkGraphError)
