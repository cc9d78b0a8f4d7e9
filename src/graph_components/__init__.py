"""graph-components-lib: weak and strong connected components of graphs."""

__version__ = "0.1.0"

from .components import (
    count_weak_components,
    crop_to_largest_weak_component,
    for_each_strong_component,
    for_each_weak_component,
    for_each_weak_component_size,
    largest_weak_component,
    largest_weak_component_subgraph,
    strongly_connected_components,
    weak_components,
)
from .exceptions import (
    ComponentsError,
    InvalidGraphError,
    WrongDirectionalityError,
)
from .graph import (
    Direction,
    Graph,
    GraphEdge,
    GraphType,
    InMemoryGraph,
    KuzuGraph,
    TraversableGraph,
    create_graph,
)

__all__ = [
    # Weak components
    "for_each_weak_component",
    "for_each_weak_component_size",
    "weak_components",
    "count_weak_components",
    "largest_weak_component",
    "largest_weak_component_subgraph",
    "crop_to_largest_weak_component",
    # Strong components
    "for_each_strong_component",
    "strongly_connected_components",
    # Graph access layer
    "Direction",
    "GraphType",
    "GraphEdge",
    "TraversableGraph",
    "Graph",
    "InMemoryGraph",
    "KuzuGraph",
    "create_graph",
    # Exceptions
    "ComponentsError",
    "InvalidGraphError",
    "WrongDirectionalityError",
]
