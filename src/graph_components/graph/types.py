"""Graph data structures shared by the component algorithms and backends.

Public API:
    Direction: Neighbor traversal direction enum.
    GraphType: Directionality classification of a graph.
    GraphEdge: Immutable edge record.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Node = Hashable


class Direction(Enum):
    """Direction for neighbor queries.

    ``OUTGOING`` and ``INCOMING`` also include neighbors reached through
    undirected edges, since those can be followed either way.
    """

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


class GraphType(Enum):
    """Which kinds of edges a graph accepts."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"
    MIXED = "mixed"

    @property
    def default_undirected(self) -> bool:
        """Whether a new edge is undirected when the caller does not say."""
        return self is GraphType.UNDIRECTED

    def allows(self, undirected: bool) -> bool:
        if self is GraphType.MIXED:
            return True
        return undirected == (self is GraphType.UNDIRECTED)


@dataclass(frozen=True)
class GraphEdge:
    """An immutable edge in the graph.

    Attributes:
        key: Unique identifier for the edge.
        source: Source (tail) node. For undirected edges, the endpoint
            given first on insertion.
        target: Target (head) node.
        attributes: Arbitrary key-value attributes stored on the edge.
        undirected: True when the edge can be followed both ways.
    """

    key: str = ""
    source: Node = None
    target: Node = None
    attributes: dict[str, Any] = field(default_factory=dict)
    undirected: bool = False


__all__ = ["Direction", "GraphType", "GraphEdge", "Node"]
