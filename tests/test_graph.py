"""Tests for graph data model."""

import pytest

from graph.errors import ConfigurationError, DependencyTreeError, ExtractionError
from graph.model import DependencyGraph


class TestDependencyGraph:
    """Tests for DependencyGraph class."""

    def test_empty_graph(self):
        """Test empty graph initialization."""
        graph = DependencyGraph()
        assert len(graph) == 0
        assert graph.nodes == set()
        assert graph.edges == {}
        assert not graph.has_missing()

    def test_add_node(self):
        """Test adding nodes."""
        graph = DependencyGraph()

        graph.add_node("/repo/a.js")

        assert len(graph) == 1
        assert "/repo/a.js" in graph
        assert graph.get_targets("/repo/a.js") == []

    def test_add_edge(self):
        """Test adding edges."""
        graph = DependencyGraph()

        graph.add_edge("/repo/a.js", "/repo/b.js")

        assert len(graph) == 2
        assert "/repo/b.js" in graph
        assert graph.get_targets("/repo/a.js") == ["/repo/b.js"]

    def test_edges_keep_order_without_duplicates(self):
        """Test that targets stay in insertion order and appear once."""
        graph = DependencyGraph()

        graph.add_edge("/a", "/c")
        graph.add_edge("/a", "/b")
        graph.add_edge("/a", "/c")

        assert graph.get_targets("/a") == ["/c", "/b"]

    def test_cycle_edges(self):
        """Test flagging the edge that closed a cycle."""
        graph = DependencyGraph()

        graph.add_edge("/a", "/b")
        graph.add_edge("/b", "/a", cycle=True)

        assert graph.is_cycle_edge("/b", "/a")
        assert not graph.is_cycle_edge("/a", "/b")

    def test_get_roots(self):
        """Test getting root nodes (nodes that are never targets)."""
        graph = DependencyGraph()

        graph.add_edge("/app.js", "/shared.js")
        graph.add_edge("/admin.js", "/shared.js")
        graph.add_edge("/shared.js", "/leaf.js")

        assert graph.get_roots() == {"/app.js", "/admin.js"}

    def test_get_sources(self):
        """Test getting files that depend on a target."""
        graph = DependencyGraph()

        graph.add_edge("/app.js", "/shared.js")
        graph.add_edge("/admin.js", "/shared.js")

        assert graph.get_sources("/shared.js") == {"/app.js", "/admin.js"}
        assert graph.get_sources("/app.js") == set()

    def test_iter_edges(self):
        """Test iterating over edges."""
        graph = DependencyGraph()

        graph.add_edge("/a", "/b")
        graph.add_edge("/a", "/c")
        graph.add_edge("/b", "/c")

        assert list(graph.iter_edges()) == [("/a", "/b"), ("/a", "/c"), ("/b", "/c")]

    def test_missing_specifiers(self):
        """Test tracking unresolved specifiers."""
        graph = DependencyGraph()

        graph.add_missing("/a", "./gone")
        graph.add_missing("/a", "./gone")
        graph.add_missing("/a", "./lost")

        assert "/a" in graph
        assert graph.has_missing()
        assert graph.get_missing("/a") == ["./gone", "./lost"]
        assert graph.missing == {"/a": ["./gone", "./lost"]}
        assert list(graph.iter_missing()) == [("/a", "./gone"), ("/a", "./lost")]

    def test_properties_are_copies(self):
        """Test that mutating returned collections leaves the graph intact."""
        graph = DependencyGraph()
        graph.add_edge("/a", "/b")

        graph.edges["/a"].append("/z")
        graph.get_targets("/a").append("/z")

        assert graph.get_targets("/a") == ["/b"]

    def test_repr(self):
        """Test string representation."""
        graph = DependencyGraph()
        graph.add_edge("/a", "/b")
        graph.add_edge("/b", "/a", cycle=True)
        graph.add_missing("/a", "./x")

        assert repr(graph) == "DependencyGraph(nodes=2, edges=2, cycles=1, missing=1)"


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, DependencyTreeError)
        assert issubclass(ExtractionError, DependencyTreeError)

    def test_extraction_error_attributes(self):
        error = ExtractionError("/a.js", "bad bytes")

        assert error.file_path == "/a.js"
        assert error.reason == "bad bytes"
        assert "/a.js" in str(error)

        with pytest.raises(DependencyTreeError):
            raise error
