"""InMemoryGraph -- dict-backed implementation of the Graph protocol.

Public API:
    InMemoryGraph: Graph held in plain dicts, safe for use without a database.
    create_graph: Factory function for creating graphs on any backend.
"""

from __future__ import annotations

import threading
import uuid
from typing import Any

from .types import Direction, GraphEdge, GraphType, Node


# ── InMemoryGraph ───────────────────────────────────────────────────


class InMemoryGraph:
    """Dict-based graph supporting directed, undirected and mixed edges.

    Parallel edges and self-loops are accepted.  Node and neighbor
    enumeration follow insertion order.  Every public method takes a
    reentrant lock, so independent threads may read and write; a
    component walk still expects the graph not to change under it.

    Args:
        graph_type: Which edge kinds the graph accepts.
    """

    def __init__(self, graph_type: GraphType = GraphType.MIXED) -> None:
        self._graph_type = GraphType(graph_type)
        self._nodes: dict[Node, dict[str, Any]] = {}  # node -> attributes
        # node -> {neighbor -> [edge keys]}, one map per adjacency kind.
        self._out: dict[Node, dict[Node, list[str]]] = {}
        self._in: dict[Node, dict[Node, list[str]]] = {}
        self._undirected: dict[Node, dict[Node, list[str]]] = {}
        self._edges: dict[str, GraphEdge] = {}
        self._lock = threading.RLock()

    @property
    def graph_type(self) -> GraphType:
        return self._graph_type

    @property
    def order(self) -> int:
        with self._lock:
            return len(self._nodes)

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._edges)

    def __len__(self) -> int:
        return self.order

    def __contains__(self, node: object) -> bool:
        return self.has_node(node)

    def __repr__(self) -> str:
        return (
            f"InMemoryGraph(type={self._graph_type.value}, "
            f"order={self.order}, size={self.size})"
        )

    # ── node operations ──────────────────────────────────────

    def nodes(self) -> list[Node]:
        with self._lock:
            return list(self._nodes)

    def has_node(self, node: Node) -> bool:
        with self._lock:
            return node in self._nodes

    def add_node(
        self,
        node: Node,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        with self._lock:
            if node in self._nodes:
                raise ValueError(f"Node already exists: {node!r}")
            self._nodes[node] = dict(attributes or {})
            self._out[node] = {}
            self._in[node] = {}
            self._undirected[node] = {}

    def get_node_attributes(self, node: Node) -> dict[str, Any]:
        with self._lock:
            if node not in self._nodes:
                raise KeyError(f"Node not found: {node!r}")
            return dict(self._nodes[node])

    def drop_node(self, node: Node) -> None:
        with self._lock:
            if node not in self._nodes:
                raise KeyError(f"Node not found: {node!r}")
            doomed = {
                key
                for adjacency in (self._out, self._in, self._undirected)
                for keys in adjacency[node].values()
                for key in keys
            }
            for key in doomed:
                self._unlink(self._edges.pop(key))
            del self._nodes[node]
            del self._out[node]
            del self._in[node]
            del self._undirected[node]

    # ── edge operations ──────────────────────────────────────

    def add_edge(
        self,
        source: Node,
        target: Node,
        attributes: dict[str, Any] | None = None,
        *,
        undirected: bool | None = None,
        key: str | None = None,
    ) -> GraphEdge:
        if undirected is None:
            undirected = self._graph_type.default_undirected
        if not self._graph_type.allows(undirected):
            kind = "undirected" if undirected else "directed"
            raise ValueError(
                f"Cannot add a {kind} edge to a {self._graph_type.value} graph"
            )
        with self._lock:
            if source not in self._nodes:
                raise KeyError(f"Source node not found: {source!r}")
            if target not in self._nodes:
                raise KeyError(f"Target node not found: {target!r}")
            eid = key or uuid.uuid4().hex
            if eid in self._edges:
                raise ValueError(f"Edge already exists: {eid!r}")
            edge = GraphEdge(
                key=eid,
                source=source,
                target=target,
                attributes=dict(attributes or {}),
                undirected=undirected,
            )
            self._edges[eid] = edge
            if undirected:
                self._undirected[source].setdefault(target, []).append(eid)
                self._undirected[target].setdefault(source, []).append(eid)
            else:
                self._out[source].setdefault(target, []).append(eid)
                self._in[target].setdefault(source, []).append(eid)
        return edge

    def edges(self) -> list[GraphEdge]:
        with self._lock:
            return list(self._edges.values())

    def neighbors(
        self,
        node: Node,
        direction: Direction = Direction.BOTH,
    ) -> list[Node]:
        with self._lock:
            if node not in self._nodes:
                raise KeyError(f"Node not found: {node!r}")
            maps: list[dict[Node, list[str]]] = []
            if direction in (Direction.OUTGOING, Direction.BOTH):
                maps.append(self._out[node])
            if direction in (Direction.INCOMING, Direction.BOTH):
                maps.append(self._in[node])
            maps.append(self._undirected[node])
            # dict.fromkeys deduplicates while keeping first-seen order.
            return list(dict.fromkeys(n for adjacency in maps for n in adjacency))

    # ── copying ──────────────────────────────────────────────

    def null_copy(self) -> InMemoryGraph:
        return InMemoryGraph(graph_type=self._graph_type)

    def close(self) -> None:
        """Drop all nodes and edges."""
        with self._lock:
            self._nodes.clear()
            self._out.clear()
            self._in.clear()
            self._undirected.clear()
            self._edges.clear()

    # ── private helpers ──────────────────────────────────────

    def _unlink(self, edge: GraphEdge) -> None:
        """Remove *edge* from the adjacency maps of both endpoints."""
        if edge.undirected:
            pairs = [
                (self._undirected, edge.source, edge.target),
                (self._undirected, edge.target, edge.source),
            ]
        else:
            pairs = [
                (self._out, edge.source, edge.target),
                (self._in, edge.target, edge.source),
            ]
        for adjacency, owner, other in pairs:
            keys = adjacency[owner].get(other)
            if keys is None or edge.key not in keys:
                continue
            # An undirected self-loop holds its key twice in one bucket,
            # one removal per endpoint.
            keys.remove(edge.key)
            if not keys:
                del adjacency[owner][other]


# ── Factory ─────────────────────────────────────────────────────────


def create_graph(backend: str = "memory", **kwargs: Any) -> Any:
    """Create an empty graph.

    Args:
        backend: ``"memory"`` (dicts, default) or ``"kuzu"`` (embedded
            Kuzu database).
        **kwargs: Backend-specific configuration.  Both backends accept
            ``graph_type``; ``"kuzu"`` also accepts ``db_path``,
            ``node_table`` and ``rel_table``.

    Returns:
        A Graph implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
    """
    graph_type = kwargs.get("graph_type", GraphType.MIXED)
    if backend == "memory":
        return InMemoryGraph(graph_type=graph_type)
    elif backend == "kuzu":
        from .kuzu_graph import KuzuGraph

        return KuzuGraph(
            db_path=kwargs.get("db_path"),
            graph_type=graph_type,
            node_table=kwargs.get("node_table", "ComponentNode"),
            rel_table=kwargs.get("rel_table", "ComponentLink"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  Choose from: 'memory', 'kuzu'"
        )


__all__ = ["InMemoryGraph", "create_graph"]
