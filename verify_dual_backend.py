#!/usr/bin/env python3
"""Verification script for the two graph backends.

Demonstrates that the in-memory and Kuzu graphs give the same components
through the same API.
"""

import random
import shutil
import tempfile
from pathlib import Path

from graph_components import (
    GraphType,
    create_graph,
    crop_to_largest_weak_component,
    largest_weak_component,
    largest_weak_component_subgraph,
    strongly_connected_components,
    weak_components,
)


def partition(components):
    return {frozenset(c) for c in components}


def build(backend_name: str, graph_type: GraphType, edges, workdir: Path):
    """Create a graph on *backend_name* holding nodes 0..49 and *edges*."""
    kwargs = {"graph_type": graph_type}
    if backend_name == "kuzu":
        kwargs["db_path"] = workdir / f"verify-{graph_type.value}"
    graph = create_graph(backend_name, **kwargs)
    for i in range(50):
        graph.add_node(f"n{i}", {"index": i})
    for source, target in edges:
        graph.add_edge(f"n{source}", f"n{target}")
    return graph


def check_backend(backend_name: str, edges, workdir: Path):
    """Run every component operation on one backend and return the results."""
    print(f"\n{'='*60}")
    print(f"Testing {backend_name.upper()} Backend")
    print('='*60)

    undirected = build(backend_name, GraphType.UNDIRECTED, edges, workdir)
    weak = partition(weak_components(undirected))
    print(f"✓ {len(weak)} weak components")

    largest = largest_weak_component(undirected)
    print(f"✓ Largest component has {len(largest)} nodes")

    sub = largest_weak_component_subgraph(undirected)
    assert set(sub.nodes()) == set(largest)
    for edge in sub.edges():
        assert sub.has_node(edge.source) and sub.has_node(edge.target)
    print(f"✓ Subgraph: {sub.order} nodes, {sub.size} edges")

    crop_to_largest_weak_component(undirected)
    assert len(weak_components(undirected)) == 1
    print(f"✓ Cropped to {undirected.order} nodes")

    directed = build(backend_name, GraphType.DIRECTED, edges, workdir)
    strong = partition(strongly_connected_components(directed))
    print(f"✓ {len(strong)} strong components")

    print(f"\n{backend_name.upper()} Backend: ALL CHECKS PASSED ✓")
    return weak, strong


def main():
    """Main verification runner."""
    print("\n" + "=" * 60)
    print("Dual-Backend Verification")
    print("=" * 60)

    rng = random.Random(42)
    edges = [(rng.randrange(50), rng.randrange(50)) for _ in range(45)]
    workdir = Path(tempfile.mkdtemp(prefix="graph-components-"))

    try:
        memory_results = check_backend("memory", edges, workdir)
        kuzu_results = check_backend("kuzu", edges, workdir)

        assert memory_results == kuzu_results
        print("\n" + "=" * 60)
        print("SUCCESS: Both backends agree!")
        print("=" * 60)

    except Exception as e:
        print(f"\n❌ ERROR: {e}")
        import traceback

        traceback.print_exc()
        return 1

    finally:
        shutil.rmtree(workdir, ignore_errors=True)

    return 0


if __name__ == "__main__":
    exit(main())
