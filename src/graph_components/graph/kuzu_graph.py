"""KuzuGraph -- Kuzu-backed implementation of the Graph protocol.

One node table and one rel table hold the whole graph.  Node and edge
attributes are stored as JSON text, and a ``seq`` column keeps
enumeration in insertion order across queries.

Public API:
    KuzuGraph: Graph stored in an embedded Kuzu database.
"""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from .types import Direction, GraphEdge, GraphType

logger = logging.getLogger(__name__)

_MEMORY_PATH = ":memory:"


class KuzuGraph:
    """Kuzu graph database implementation of the Graph protocol.

    Node identifiers must be strings (they are the table's primary key).
    Undirected edges are stored once, from the endpoint given first, and
    flagged so neighbor queries can follow them backwards.  All Cypher
    queries use parameterised bindings for values.

    Args:
        db_path: Filesystem path for the Kuzu database directory.  None or
            ``":memory:"`` opens an in-memory database.
        graph_type: Which edge kinds the graph accepts.
        node_table: Name of the node table.
        rel_table: Name of the relationship table.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(
        self,
        db_path: Path | str | None = None,
        graph_type: GraphType = GraphType.MIXED,
        node_table: str = "ComponentNode",
        rel_table: str = "ComponentLink",
    ) -> None:
        for label in (node_table, rel_table):
            if not label.isidentifier():
                raise ValueError(f"Invalid table name: {label!r}")

        self._db_path = _MEMORY_PATH if db_path is None else str(db_path)
        self._graph_type = GraphType(graph_type)
        self._node_table = node_table
        self._rel_table = rel_table
        self._db = kuzu.Database(self._db_path)
        self._conn = kuzu.Connection(self._db)
        self._ensure_schema()

        # Continue numbering after whatever an existing database holds.
        self._node_seq = self._scalar(
            f"MATCH (n:{node_table}) RETURN max(n.seq)"
        ) or 0
        self._edge_seq = self._scalar(
            f"MATCH (:{node_table})-[r:{rel_table}]->(:{node_table}) "
            f"RETURN max(r.seq)"
        ) or 0

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def graph_type(self) -> GraphType:
        return self._graph_type

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def _ensure_schema(self) -> None:
        """Create the node and rel tables if they do not exist yet."""
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {self._node_table}"
            f"(node_id STRING, seq INT64, attributes STRING, PRIMARY KEY(node_id))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {self._rel_table}"
            f"(FROM {self._node_table} TO {self._node_table}, "
            f"edge_id STRING, seq INT64, undirected BOOLEAN, attributes STRING)"
        )
        logger.debug(
            "Kuzu schema ready at %s (%s, %s)",
            self._db_path, self._node_table, self._rel_table,
        )

    # ── counts ────────────────────────────────────────────────

    @property
    def order(self) -> int:
        return int(self._scalar(f"MATCH (n:{self._node_table}) RETURN count(n)"))

    @property
    def size(self) -> int:
        return int(
            self._scalar(
                f"MATCH (:{self._node_table})-[r:{self._rel_table}]->"
                f"(:{self._node_table}) RETURN count(r)"
            )
        )

    # ── node operations ───────────────────────────────────────

    def nodes(self) -> list[str]:
        return self._column(
            f"MATCH (n:{self._node_table}) RETURN n.node_id ORDER BY n.seq"
        )

    def has_node(self, node: str) -> bool:
        if not isinstance(node, str):
            return False
        return bool(
            self._scalar(
                f"MATCH (n:{self._node_table}) WHERE n.node_id = $nid "
                f"RETURN count(n)",
                {"nid": node},
            )
        )

    def add_node(
        self,
        node: str,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        if not isinstance(node, str):
            raise ValueError(f"Kuzu node ids must be strings, got {node!r}")
        if self.has_node(node):
            raise ValueError(f"Node already exists: {node!r}")
        self._node_seq += 1
        self._conn.execute(
            f"CREATE (:{self._node_table} "
            f"{{node_id: $nid, seq: $seq, attributes: $attrs}})",
            {
                "nid": node,
                "seq": self._node_seq,
                "attrs": json.dumps(attributes or {}),
            },
        )

    def get_node_attributes(self, node: str) -> dict[str, Any]:
        result = self._conn.execute(
            f"MATCH (n:{self._node_table}) WHERE n.node_id = $nid "
            f"RETURN n.attributes",
            {"nid": node},
        )
        if not result.has_next():
            raise KeyError(f"Node not found: {node!r}")
        return json.loads(result.get_next()[0] or "{}")

    def drop_node(self, node: str) -> None:
        if not self.has_node(node):
            raise KeyError(f"Node not found: {node!r}")
        self._conn.execute(
            f"MATCH (n:{self._node_table}) WHERE n.node_id = $nid DETACH DELETE n",
            {"nid": node},
        )

    # ── edge operations ───────────────────────────────────────

    def add_edge(
        self,
        source: str,
        target: str,
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
        if not self.has_node(source):
            raise KeyError(f"Source node not found: {source!r}")
        if not self.has_node(target):
            raise KeyError(f"Target node not found: {target!r}")

        eid = key or uuid.uuid4().hex
        if self._scalar(
            f"MATCH (:{self._node_table})-[r:{self._rel_table}]->"
            f"(:{self._node_table}) WHERE r.edge_id = $eid RETURN count(r)",
            {"eid": eid},
        ):
            raise ValueError(f"Edge already exists: {eid!r}")
        props = dict(attributes or {})
        self._edge_seq += 1
        self._conn.execute(
            f"MATCH (a:{self._node_table}), (b:{self._node_table}) "
            f"WHERE a.node_id = $sid AND b.node_id = $tid "
            f"CREATE (a)-[:{self._rel_table} {{edge_id: $eid, seq: $seq, "
            f"undirected: $undirected, attributes: $attrs}}]->(b)",
            {
                "sid": source,
                "tid": target,
                "eid": eid,
                "seq": self._edge_seq,
                "undirected": undirected,
                "attrs": json.dumps(props),
            },
        )
        return GraphEdge(
            key=eid,
            source=source,
            target=target,
            attributes=props,
            undirected=undirected,
        )

    def edges(self) -> list[GraphEdge]:
        result = self._conn.execute(
            f"MATCH (a:{self._node_table})-[r:{self._rel_table}]->"
            f"(b:{self._node_table}) "
            f"RETURN r.edge_id, a.node_id, b.node_id, r.attributes, r.undirected "
            f"ORDER BY r.seq"
        )
        edges: list[GraphEdge] = []
        while result.has_next():
            eid, source, target, attrs, undirected = result.get_next()
            edges.append(
                GraphEdge(
                    key=eid,
                    source=source,
                    target=target,
                    attributes=json.loads(attrs or "{}"),
                    undirected=bool(undirected),
                )
            )
        return edges

    def neighbors(
        self,
        node: str,
        direction: Direction = Direction.BOTH,
    ) -> list[str]:
        if not self.has_node(node):
            raise KeyError(f"Node not found: {node!r}")

        # Stored direction of an edge only matters when it is directed.
        outgoing = direction in (Direction.OUTGOING, Direction.BOTH)
        incoming = direction in (Direction.INCOMING, Direction.BOTH)
        pattern = (
            f"MATCH (a:{self._node_table})-[r:{self._rel_table}]->"
            f"(b:{self._node_table}) "
        )
        found: list[str] = self._column(
            pattern
            + "WHERE a.node_id = $nid"
            + ("" if outgoing else " AND r.undirected")
            + " RETURN b.node_id ORDER BY r.seq",
            {"nid": node},
        )
        found += self._column(
            pattern
            + "WHERE b.node_id = $nid"
            + ("" if incoming else " AND r.undirected")
            + " RETURN a.node_id ORDER BY r.seq",
            {"nid": node},
        )
        return list(dict.fromkeys(found))

    # ── copying ───────────────────────────────────────────────

    def null_copy(self) -> KuzuGraph:
        """Return an empty in-memory KuzuGraph with the same type and tables."""
        return KuzuGraph(
            db_path=None,
            graph_type=self._graph_type,
            node_table=self._node_table,
            rel_table=self._rel_table,
        )

    # ── private helpers ───────────────────────────────────────

    def _scalar(self, cypher: str, params: dict[str, Any] | None = None) -> Any:
        """Run *cypher* and return the first column of the first row."""
        result = self._conn.execute(cypher, params or {})
        if not result.has_next():
            return None
        return result.get_next()[0]

    def _column(self, cypher: str, params: dict[str, Any] | None = None) -> list[Any]:
        """Run *cypher* and return the first column of every row."""
        result = self._conn.execute(cypher, params or {})
        values: list[Any] = []
        while result.has_next():
            values.append(result.get_next()[0])
        return values

    def __repr__(self) -> str:
        return f"KuzuGraph(db_path={self._db_path!r}, type={self._graph_type.value})"


__all__ = ["KuzuGraph"]
