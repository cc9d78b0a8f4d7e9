"""Operations that rebuild or trim a graph around its largest weak component.

Public API:
    largest_weak_component_subgraph: Copy the largest component into a new graph.
    crop_to_largest_weak_component: Delete every node outside it, in place.
"""

from __future__ import annotations

import logging

from ..graph.protocol import Graph
from .largest import largest_weak_component
from .validation import require_graph

logger = logging.getLogger(__name__)


def largest_weak_component_subgraph(graph: Graph) -> Graph:
    """Return a new graph holding only the largest weak component.

    The result comes from ``graph.null_copy()``, so it has the same type
    and backend.  Node attributes are copied, then every edge whose source
    lies in the component is copied with its key, attributes and
    directionality.  A weak component is closed under adjacency, so the
    target of such an edge is always in the component too.

    Raises:
        InvalidGraphError: If *graph* does not implement Graph.
    """
    require_graph(graph, Graph)
    component = largest_weak_component(graph)

    subgraph = graph.null_copy()
    for node in component:
        subgraph.add_node(node, graph.get_node_attributes(node))

    members = set(component)
    copied = 0
    for edge in graph.edges():
        if edge.source in members:
            subgraph.add_edge(
                edge.source,
                edge.target,
                dict(edge.attributes),
                undirected=edge.undirected,
                key=edge.key,
            )
            copied += 1

    logger.debug(
        "Extracted largest component: %d node(s), %d edge(s)",
        len(component), copied,
    )
    return subgraph


def crop_to_largest_weak_component(graph: Graph) -> None:
    """Delete every node that is not in the largest weak component.

    Edges touching a deleted node are removed by the graph itself.  The
    change is made in place and cannot be undone.

    Raises:
        InvalidGraphError: If *graph* does not implement Graph.
    """
    require_graph(graph, Graph)
    keep = set(largest_weak_component(graph))

    dropped = 0
    for node in graph.nodes():
        if node not in keep:
            graph.drop_node(node)
            dropped += 1

    logger.debug("Cropped %d node(s) outside the largest component", dropped)


__all__ = ["largest_weak_component_subgraph", "crop_to_largest_weak_component"]
