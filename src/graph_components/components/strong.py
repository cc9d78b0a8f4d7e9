"""Strongly connected components.

Path-based, single-pass search (Pearce / Gabow style): each node is
visited once and no low-link numbers are kept.  A path stack of open
nodes is collapsed whenever an edge reaches back into it, and a second
stack holds visited nodes awaiting assignment to a component.

The search runs on explicit ``(node, neighbor iterator)`` frames rather
than recursion, so long directed paths cannot exhaust the call stack.
Visiting and collapsing happen in the same order as the recursive form.

Public API:
    for_each_strong_component: Call back once per strong component.
    strongly_connected_components: Return every strong component.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import WrongDirectionalityError
from ..graph.protocol import TraversableGraph
from ..graph.types import Direction, GraphType, Node
from .validation import require_graph

logger = logging.getLogger(__name__)


@dataclass
class _SearchState:
    """Working storage for one call; never shared between calls.

    Attributes:
        preorder: Discovery rank of every visited node, starting at 1.
        assigned: Nodes already placed in a finished component.
        path: Open nodes that may still merge into one component (``P``).
        pending: Visited nodes not yet assigned, in visit order (``S``).
    """

    preorder: dict[Node, int] = field(default_factory=dict)
    assigned: set[Node] = field(default_factory=set)
    path: list[Node] = field(default_factory=list)
    pending: list[Node] = field(default_factory=list)


def _strong_connect(
    graph: TraversableGraph,
    root: Node,
    state: _SearchState,
    emit: Callable[[list[Node]], Any],
) -> None:
    """Visit everything reachable from *root*, emitting finished components."""
    frames: list[tuple[Node, Iterator[Node]]] = []

    def enter(node: Node) -> None:
        state.preorder[node] = len(state.preorder) + 1
        state.path.append(node)
        state.pending.append(node)
        frames.append((node, iter(graph.neighbors(node, Direction.OUTGOING))))

    enter(root)
    while frames:
        node, neighbors = frames[-1]
        for neighbor in neighbors:
            rank = state.preorder.get(neighbor)
            if rank is None:
                # Descend; this frame resumes after *neighbor* once it is done.
                enter(neighbor)
                break
            if neighbor not in state.assigned:
                while state.preorder[state.path[-1]] > rank:
                    state.path.pop()
        else:
            frames.pop()
            if state.path[-1] == node:
                component: list[Node] = []
                while True:
                    member = state.pending.pop()
                    component.append(member)
                    state.assigned.add(member)
                    if member == node:
                        break
                state.path.pop()
                emit(component)


def for_each_strong_component(
    graph: TraversableGraph,
    callback: Callable[[list[Node]], Any],
) -> None:
    """Call *callback* with the node list of each strongly connected component.

    Components are produced in reverse topological order of the
    condensation: a component is reported before any component that
    has an edge into it.

    Args:
        graph: A directed or mixed graph.  Undirected edges in a mixed
            graph can be followed both ways.
        callback: Receives each component's nodes.

    Raises:
        InvalidGraphError: If *graph* does not implement TraversableGraph.
        WrongDirectionalityError: If *graph* is undirected.
    """
    require_graph(graph)
    if not graph.order:
        return
    if graph.graph_type is GraphType.UNDIRECTED:
        raise WrongDirectionalityError(
            "Strongly connected components need a directed or mixed graph; "
            "use weak components on an undirected graph"
        )

    nodes = graph.nodes()

    # Without edges every node is its own component.
    if not graph.size:
        for node in nodes:
            callback([node])
        return

    state = _SearchState()
    for root in nodes:
        if root not in state.preorder:
            _strong_connect(graph, root, state, callback)


def strongly_connected_components(graph: TraversableGraph) -> list[list[Node]]:
    """Return the strongly connected components of a directed graph.

    See ``for_each_strong_component`` for ordering and errors.
    """
    components: list[list[Node]] = []
    for_each_strong_component(graph, components.append)
    logger.debug("Found %d strong component(s)", len(components))
    return components


__all__ = ["for_each_strong_component", "strongly_connected_components"]
