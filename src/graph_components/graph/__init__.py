"""Graph access layer consumed by the component algorithms.

Public API:
    Direction: Neighbor traversal direction.
    GraphType: Directed / undirected / mixed classification.
    GraphEdge: Immutable graph edge.
    TraversableGraph: Protocol needed for component walks.
    Graph: Protocol adding attributes, copying and mutation.
    InMemoryGraph: Dict-based implementation.
    KuzuGraph: Kuzu-backed implementation.
    create_graph: Factory for creating graphs on either backend.
"""

from __future__ import annotations

from .kuzu_graph import KuzuGraph
from .memory_graph import InMemoryGraph, create_graph
from .protocol import Graph, TraversableGraph
from .types import Direction, GraphEdge, GraphType

__all__ = [
    "Direction",
    "GraphType",
    "GraphEdge",
    "TraversableGraph",
    "Graph",
    "InMemoryGraph",
    "KuzuGraph",
    "create_graph",
]
