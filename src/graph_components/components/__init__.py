"""Connected-component algorithms over the graph protocols.

Public API:
    for_each_weak_component: Push-style weak component enumeration.
    for_each_weak_component_size: Push-style weak component sizes.
    weak_components: Every weak component as a list of nodes.
    count_weak_components: Number of weak components.
    largest_weak_component: Biggest weak component, with early exit.
    largest_weak_component_subgraph: Largest component as a new graph.
    crop_to_largest_weak_component: Drop nodes outside the largest component.
    for_each_strong_component: Push-style strong component enumeration.
    strongly_connected_components: Every strong component as a list of nodes.
"""

from __future__ import annotations

from .largest import largest_weak_component
from .strong import for_each_strong_component, strongly_connected_components
from .subgraph import crop_to_largest_weak_component, largest_weak_component_subgraph
from .weak import (
    count_weak_components,
    for_each_weak_component,
    for_each_weak_component_size,
    weak_components,
)

__all__ = [
    "for_each_weak_component",
    "for_each_weak_component_size",
    "weak_components",
    "count_weak_components",
    "largest_weak_component",
    "largest_weak_component_subgraph",
    "crop_to_largest_weak_component",
    "for_each_strong_component",
    "strongly_connected_components",
]
