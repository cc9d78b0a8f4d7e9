"""Basic usage example for graph-components-lib."""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from graph_components import (
    GraphType,
    WrongDirectionalityError,
    create_graph,
    crop_to_largest_weak_component,
    for_each_weak_component_size,
    largest_weak_component,
    largest_weak_component_subgraph,
    strongly_connected_components,
    weak_components,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("graph-components-lib - Basic Usage Example")
    print("=" * 60)

    # 1. Build a small road network
    print("\n1. Building an undirected graph...")
    roads = create_graph("memory", graph_type=GraphType.UNDIRECTED)
    for town in ["Ashford", "Bexley", "Crawley", "Dover", "Epsom", "Frome"]:
        roads.add_node(town, {"county": "Kent" if town in ("Ashford", "Dover") else "Other"})
    roads.add_edge("Ashford", "Bexley", {"miles": 48})
    roads.add_edge("Bexley", "Crawley", {"miles": 35})
    roads.add_edge("Crawley", "Ashford", {"miles": 60})
    roads.add_edge("Dover", "Epsom", {"miles": 80})
    print(f"   {roads}")

    # 2. Weak components
    print("\n2. Weak components...")
    for component in weak_components(roads):
        print(f"   - {component}")
    sizes = []
    for_each_weak_component_size(roads, sizes.append)
    print(f"   Sizes: {sizes}")

    # 3. Largest component
    print("\n3. Largest component...")
    print(f"   {largest_weak_component(roads)}")
    mainland = largest_weak_component_subgraph(roads)
    print(f"   As subgraph: {mainland}")

    # 4. Strong components need directions
    print("\n4. Strong components...")
    try:
        strongly_connected_components(roads)
    except WrongDirectionalityError as e:
        print(f"   Undirected graph rejected: {e}")

    calls = create_graph("memory", graph_type=GraphType.DIRECTED)
    for fn in ["main", "parse", "lex", "emit", "log"]:
        calls.add_node(fn)
    for caller, callee in [
        ("main", "parse"), ("parse", "lex"), ("lex", "parse"),
        ("main", "emit"), ("emit", "log"), ("log", "emit"),
    ]:
        calls.add_edge(caller, callee)
    for component in strongly_connected_components(calls):
        print(f"   - {component}")

    # 5. Crop in place
    print("\n5. Cropping to the largest component...")
    crop_to_largest_weak_component(roads)
    print(f"   Remaining: {roads.nodes()}")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
