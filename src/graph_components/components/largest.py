"""Largest weakly connected component with early exit.

Public API:
    largest_weak_component: Return the nodes of the biggest weak component.
"""

from __future__ import annotations

import logging

from ..graph.protocol import TraversableGraph
from ..graph.types import Node
from .validation import require_graph
from .weak import walk_component

logger = logging.getLogger(__name__)


def largest_weak_component(graph: TraversableGraph) -> list[Node]:
    """Return the weak component with the most nodes.

    Components are discovered one at a time in ``graph.nodes()`` order,
    and the first one to reach the maximum size is kept: a later
    component of equal size does not replace it.

    The walk stops as soon as the best component found so far is larger
    than the number of nodes not yet visited, since those nodes could not
    form a bigger component even if they were all connected.

    Args:
        graph: Any graph; edge direction is ignored.

    Returns:
        The component's nodes in discovery order, or an empty list for a
        graph without nodes.

    Raises:
        InvalidGraphError: If *graph* does not implement TraversableGraph.
    """
    require_graph(graph)
    order = graph.order
    if not order:
        return []

    seen: set[Node] = set()
    largest: list[Node] = []

    for node in graph.nodes():
        if node in seen:
            continue

        component = list(walk_component(graph, node, seen))
        if len(component) > len(largest):
            largest = component

        remaining = order - len(seen)
        if len(largest) > remaining:
            logger.debug(
                "Largest component (%d nodes) settled with %d of %d nodes unvisited",
                len(largest), remaining, order,
            )
            break

    return largest


__all__ = ["largest_weak_component"]
