"""Graph access protocols -- the interface the component algorithms consume.

Public API:
    TraversableGraph: Read-only contract needed by the component walkers.
    Graph: Full contract, adding attributes, edge listing and mutation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .types import Direction, GraphEdge, GraphType, Node


@runtime_checkable
class TraversableGraph(Protocol):
    """What a graph must expose for components to be computed on it.

    Node enumeration order must be stable for the duration of a call:
    the walkers discover components in that order.
    """

    # ── counts / classification ───────────────────────────────

    @property
    def order(self) -> int:
        """Number of nodes."""
        ...

    @property
    def size(self) -> int:
        """Number of edges."""
        ...

    @property
    def graph_type(self) -> GraphType:
        """Directed, undirected or mixed."""
        ...

    # ── enumeration ───────────────────────────────────────────

    def nodes(self) -> list[Node]:
        """Every node, in a stable order."""
        ...

    def neighbors(
        self,
        node: Node,
        direction: Direction = Direction.BOTH,
    ) -> list[Node]:
        """Distinct nodes adjacent to *node* in the given direction.

        Raises:
            KeyError: If *node* is not in the graph.
        """
        ...


@runtime_checkable
class Graph(TraversableGraph, Protocol):
    """A graph that can also be copied from and mutated."""

    def has_node(self, node: Node) -> bool:
        ...

    def get_node_attributes(self, node: Node) -> dict[str, Any]:
        """Return a copy of the attributes stored on *node*.

        Raises:
            KeyError: If *node* is not in the graph.
        """
        ...

    def edges(self) -> list[GraphEdge]:
        """Every edge, in insertion order."""
        ...

    def null_copy(self) -> Graph:
        """Return a new empty graph of the same type and backend."""
        ...

    def add_node(
        self,
        node: Node,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Insert *node*.

        Raises:
            ValueError: If *node* already exists.
        """
        ...

    def add_edge(
        self,
        source: Node,
        target: Node,
        attributes: dict[str, Any] | None = None,
        *,
        undirected: bool | None = None,
        key: str | None = None,
    ) -> GraphEdge:
        """Insert an edge between two existing nodes.

        Raises:
            KeyError: If either endpoint does not exist.
            ValueError: If the edge kind is not allowed by the graph type.
        """
        ...

    def drop_node(self, node: Node) -> None:
        """Delete *node* and every edge touching it.

        Raises:
            KeyError: If *node* is not in the graph.
        """
        ...


__all__ = ["TraversableGraph", "Graph"]
