"""Pytest configuration and fixtures for graph-components-lib tests."""

from __future__ import annotations

import itertools

import pytest

from graph_components.graph import GraphType, InMemoryGraph, KuzuGraph


@pytest.fixture(params=["memory", "kuzu"])
def make_graph(request, tmp_path):
    """Factory building a graph on each backend from node and edge lists.

    Usage::

        g = make_graph(["a", "b"], [("a", "b")], graph_type=GraphType.DIRECTED)

    Node ids are strings so the same graph works on Kuzu.  Every Kuzu
    graph gets its own database directory under ``tmp_path``.
    """
    counter = itertools.count()
    opened: list[KuzuGraph] = []

    def build(nodes=(), edges=(), graph_type=GraphType.UNDIRECTED):
        if request.param == "memory":
            graph = InMemoryGraph(graph_type=graph_type)
        else:
            graph = KuzuGraph(
                db_path=tmp_path / f"graph_db_{next(counter)}",
                graph_type=graph_type,
            )
            opened.append(graph)
        for node in nodes:
            graph.add_node(node)
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    yield build

    for graph in opened:
        graph.close()
