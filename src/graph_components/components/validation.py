"""Entry checks shared by the component operations."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidGraphError
from ..graph.protocol import TraversableGraph


def require_graph(graph: Any, protocol: type = TraversableGraph) -> None:
    """Raise InvalidGraphError unless *graph* satisfies *protocol*.

    Args:
        graph: Object passed in by the caller.
        protocol: ``TraversableGraph`` for read-only walks, ``Graph`` for
            operations that copy or mutate.

    Raises:
        InvalidGraphError: If a required member is missing.
    """
    if not isinstance(graph, protocol):
        raise InvalidGraphError(
            f"Expected a graph implementing {protocol.__name__}, "
            f"got {type(graph).__name__}"
        )


__all__ = ["require_graph"]
