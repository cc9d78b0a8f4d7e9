"""Tests for KuzuGraph.

Test categories:
- TestProtocolCompliance: isinstance checks and configuration
- TestKuzuNodes: add, attributes, drop, ordering, id validation
- TestKuzuEdges: add, typing rules, listing, missing endpoints
- TestKuzuNeighbors: outgoing / incoming / both, undirected edges
- TestKuzuPersistence: reopening a database keeps order and numbering
- TestKuzuCopying: null_copy is an empty in-memory graph

All tests use real Kuzu databases via tmp_path.
"""

from __future__ import annotations

import pytest

from graph_components.graph import Direction, Graph, GraphType, KuzuGraph, TraversableGraph


# ── fixtures ──────────────────────────────────────────────────


@pytest.fixture
def kgraph(tmp_path):
    """Fresh mixed KuzuGraph for each test."""
    g = KuzuGraph(db_path=tmp_path / "test_graph_db")
    yield g
    g.close()


@pytest.fixture
def star(kgraph):
    """hub -> out, in -> hub, hub ~ both (undirected)."""
    for node in ["hub", "out", "in", "both"]:
        kgraph.add_node(node)
    kgraph.add_edge("hub", "out", {"w": 1})
    kgraph.add_edge("in", "hub", {"w": 2})
    kgraph.add_edge("hub", "both", {"w": 3}, undirected=True)
    return kgraph


# ── TestProtocolCompliance ────────────────────────────────────


class TestProtocolCompliance:
    """KuzuGraph satisfies both graph protocols."""

    def test_isinstance_checks(self, kgraph):
        assert isinstance(kgraph, TraversableGraph)
        assert isinstance(kgraph, Graph)

    def test_defaults(self, kgraph, tmp_path):
        assert kgraph.graph_type is GraphType.MIXED
        assert kgraph.db_path == str(tmp_path / "test_graph_db")
        assert kgraph.order == 0
        assert kgraph.size == 0

    def test_in_memory_database(self):
        g = KuzuGraph()
        assert g.db_path == ":memory:"
        g.add_node("a")
        assert g.nodes() == ["a"]
        g.close()

    def test_invalid_table_name(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid table name"):
            KuzuGraph(db_path=tmp_path / "db", node_table="bad name")


# ── TestKuzuNodes ─────────────────────────────────────────────


class TestKuzuNodes:
    """Node insertion, lookup and deletion."""

    def test_nodes_in_insertion_order(self, kgraph):
        for node in ["c", "a", "b"]:
            kgraph.add_node(node)
        assert kgraph.nodes() == ["c", "a", "b"]
        assert kgraph.order == 3

    def test_attributes_round_trip(self, kgraph):
        kgraph.add_node("a", {"name": "Alice", "age": 30, "tags": ["x", "y"]})
        assert kgraph.get_node_attributes("a") == {
            "name": "Alice",
            "age": 30,
            "tags": ["x", "y"],
        }

    def test_has_node(self, kgraph):
        kgraph.add_node("a")
        assert kgraph.has_node("a")
        assert not kgraph.has_node("b")
        assert not kgraph.has_node(1)

    def test_duplicate_node_raises(self, kgraph):
        kgraph.add_node("a")
        with pytest.raises(ValueError, match="already exists"):
            kgraph.add_node("a")

    def test_non_string_id_raises(self, kgraph):
        with pytest.raises(ValueError, match="must be strings"):
            kgraph.add_node(1)

    def test_missing_attributes_raise(self, kgraph):
        with pytest.raises(KeyError):
            kgraph.get_node_attributes("ghost")

    def test_drop_node_cascades(self, star):
        star.drop_node("hub")
        assert star.nodes() == ["out", "in", "both"]
        assert star.size == 0

    def test_drop_missing_node_raises(self, kgraph):
        with pytest.raises(KeyError):
            kgraph.drop_node("ghost")


# ── TestKuzuEdges ─────────────────────────────────────────────


class TestKuzuEdges:
    """Edge creation and listing."""

    def test_add_edge(self, kgraph):
        kgraph.add_node("a")
        kgraph.add_node("b")
        edge = kgraph.add_edge("a", "b", {"since": "2023"}, key="e1")
        assert edge.key == "e1"
        assert edge.attributes == {"since": "2023"}
        assert edge.undirected is False
        assert kgraph.edges() == [edge]
        assert kgraph.size == 1

    def test_duplicate_key_raises(self, kgraph):
        kgraph.add_node("a")
        kgraph.add_node("b")
        kgraph.add_edge("a", "b", key="k")
        with pytest.raises(ValueError, match="already exists"):
            kgraph.add_edge("b", "a", key="k")
        assert kgraph.size == 1

    def test_edges_in_insertion_order(self, star):
        edges = star.edges()
        assert [(e.source, e.target) for e in edges] == [
            ("hub", "out"),
            ("in", "hub"),
            ("hub", "both"),
        ]
        assert [e.attributes["w"] for e in edges] == [1, 2, 3]
        assert [e.undirected for e in edges] == [False, False, True]

    def test_missing_source_raises(self, kgraph):
        kgraph.add_node("b")
        with pytest.raises(KeyError, match="Source node not found"):
            kgraph.add_edge("nonexistent", "b")

    def test_missing_target_raises(self, kgraph):
        kgraph.add_node("a")
        with pytest.raises(KeyError, match="Target node not found"):
            kgraph.add_edge("a", "nonexistent")

    def test_directed_graph_rejects_undirected_edge(self, tmp_path):
        g = KuzuGraph(db_path=tmp_path / "db", graph_type=GraphType.DIRECTED)
        g.add_node("a")
        with pytest.raises(ValueError, match="undirected edge"):
            g.add_edge("a", "a", undirected=True)
        g.close()

    def test_undirected_graph_default(self, tmp_path):
        g = KuzuGraph(db_path=tmp_path / "db", graph_type=GraphType.UNDIRECTED)
        g.add_node("a")
        g.add_node("b")
        assert g.add_edge("a", "b").undirected is True
        g.close()

    def test_self_loop_and_parallel_edges(self, kgraph):
        kgraph.add_node("a")
        kgraph.add_node("b")
        kgraph.add_edge("a", "a")
        kgraph.add_edge("a", "b")
        kgraph.add_edge("a", "b")
        assert kgraph.size == 3
        assert kgraph.neighbors("a", Direction.OUTGOING) == ["a", "b"]


# ── TestKuzuNeighbors ─────────────────────────────────────────


class TestKuzuNeighbors:
    """Neighbor queries in each direction."""

    def test_outgoing(self, star):
        assert star.neighbors("hub", Direction.OUTGOING) == ["out", "both"]

    def test_incoming(self, star):
        assert star.neighbors("hub", Direction.INCOMING) == ["both", "in"]

    def test_both(self, star):
        assert set(star.neighbors("hub")) == {"out", "in", "both"}

    def test_undirected_edge_from_stored_target(self, star):
        assert star.neighbors("both", Direction.OUTGOING) == ["hub"]
        assert star.neighbors("both", Direction.INCOMING) == ["hub"]

    def test_directed_edge_not_followed_backwards(self, star):
        assert star.neighbors("out", Direction.OUTGOING) == []
        assert star.neighbors("in", Direction.INCOMING) == []

    def test_missing_node_raises(self, kgraph):
        with pytest.raises(KeyError):
            kgraph.neighbors("ghost")


# ── TestKuzuPersistence ───────────────────────────────────────


class TestKuzuPersistence:
    """Reopening an on-disk database."""

    def test_reopen_keeps_graph(self, tmp_path):
        path = tmp_path / "persist_db"
        g = KuzuGraph(db_path=path, graph_type=GraphType.DIRECTED)
        g.add_node("a", {"x": 1})
        g.add_node("b")
        g.add_edge("a", "b", key="ab")
        g.close()
        del g

        reopened = KuzuGraph(db_path=path, graph_type=GraphType.DIRECTED)
        reopened.add_node("c")
        reopened.add_edge("b", "c", key="bc")
        assert reopened.nodes() == ["a", "b", "c"]
        assert [e.key for e in reopened.edges()] == ["ab", "bc"]
        assert reopened.get_node_attributes("a") == {"x": 1}
        reopened.close()


# ── TestKuzuCopying ───────────────────────────────────────────


class TestKuzuCopying:
    """null_copy behaviour."""

    def test_null_copy(self, tmp_path):
        g = KuzuGraph(db_path=tmp_path / "db", graph_type=GraphType.DIRECTED)
        g.add_node("a")
        empty = g.null_copy()
        assert isinstance(empty, KuzuGraph)
        assert empty.db_path == ":memory:"
        assert empty.graph_type is GraphType.DIRECTED
        assert empty.order == 0
        empty.close()
        g.close()
