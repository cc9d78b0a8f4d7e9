"""Weakly connected components.

Edge direction is ignored: two nodes share a component when some path
joins them using edges either way round.

Public API:
    for_each_weak_component: Call back once per component with its nodes.
    for_each_weak_component_size: Call back once per component with its size.
    weak_components: Return every component as a list of nodes.
    count_weak_components: Return the number of components.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from ..graph.protocol import TraversableGraph
from ..graph.types import Direction, Node
from .validation import require_graph

logger = logging.getLogger(__name__)


def walk_component(
    graph: TraversableGraph,
    root: Node,
    seen: set[Node],
) -> Iterator[Node]:
    """Yield the nodes of *root*'s weak component, marking them in *seen*.

    Iterative depth-first search on an explicit stack, so component size
    is not bounded by the interpreter's recursion limit.  *seen* belongs
    to the caller's traversal and is shared across the components it
    discovers.
    """
    stack = [root]
    while stack:
        source = stack.pop()
        if source in seen:
            continue
        seen.add(source)
        yield source
        stack.extend(
            n for n in graph.neighbors(source, Direction.BOTH) if n not in seen
        )


def _roots(graph: TraversableGraph, seen: set[Node]) -> Iterator[Node]:
    """Yield nodes in enumeration order that no earlier walk has reached."""
    for node in graph.nodes():
        if node not in seen:
            yield node


def for_each_weak_component(
    graph: TraversableGraph,
    callback: Callable[[list[Node]], Any],
) -> None:
    """Call *callback* with the node list of each weak component.

    Components are reported in the order their first node appears in
    ``graph.nodes()``.  A graph with no nodes triggers no calls.

    Raises:
        InvalidGraphError: If *graph* does not implement TraversableGraph.
    """
    require_graph(graph)
    if not graph.order:
        return

    seen: set[Node] = set()
    for root in _roots(graph, seen):
        callback(list(walk_component(graph, root, seen)))


def for_each_weak_component_size(
    graph: TraversableGraph,
    callback: Callable[[int], Any],
) -> None:
    """Call *callback* with the number of nodes in each weak component.

    Same traversal and order as ``for_each_weak_component`` without
    building the member lists.
    """
    require_graph(graph)
    if not graph.order:
        return

    seen: set[Node] = set()
    for root in _roots(graph, seen):
        callback(sum(1 for _ in walk_component(graph, root, seen)))


def weak_components(graph: TraversableGraph) -> list[list[Node]]:
    """Return the weak components of *graph* as lists of nodes."""
    components: list[list[Node]] = []
    for_each_weak_component(graph, components.append)
    logger.debug("Found %d weak component(s)", len(components))
    return components


def count_weak_components(graph: TraversableGraph) -> int:
    """Return how many weak components *graph* has."""
    sizes: list[int] = []
    for_each_weak_component_size(graph, sizes.append)
    return len(sizes)


__all__ = [
    "for_each_weak_component",
    "for_each_weak_component_size",
    "weak_components",
    "count_weak_components",
    "walk_component",
]
