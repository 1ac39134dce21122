import networkx as nx
import pytest

from prufer.errors import UnsupportedTargetError
from prufer.graph import TargetGraph, as_target_graph, integer_vertex_factory


def test_integer_vertex_factory():
    factory = integer_vertex_factory(1)
    assert [factory() for _ in range(3)] == [1, 2, 3]


def test_mint_vertex():
    target = TargetGraph()
    assert [target.mint_vertex() for _ in range(3)] == [0, 1, 2]
    assert target.vertices() == [0, 1, 2]
    target.add_edge(0, 2)
    assert target.number_of_edges() == 1
    assert not target.is_directed()
    assert not target.is_multigraph()


def test_custom_vertex_factory():
    labels = iter("abc")
    target = TargetGraph(nx.Graph(), vertex_factory=lambda: next(labels))
    assert target.mint_vertex() == "a"
    assert target.graph.has_node("a")


def test_vertex_factory_returning_existing_vertex():
    target = TargetGraph(vertex_factory=lambda: 7)
    target.mint_vertex()
    with pytest.raises(UnsupportedTargetError):
        target.mint_vertex()


def test_as_target_graph():
    assert as_target_graph(None) is None
    target = TargetGraph()
    assert as_target_graph(target) is target
    graph = nx.DiGraph()
    wrapped = as_target_graph(graph)
    assert wrapped.graph is graph
    assert wrapped.is_directed()


def test_mint_vertices():
    target = TargetGraph(vertex_factory=integer_vertex_factory(1))
    assert target.mint_vertices(3) == [1, 2, 3]
    assert target.vertices() == [1, 2, 3]


def test_mint_vertices_repeated_label_adds_nothing():
    labels = iter([0, 1, 1, 2])
    target = TargetGraph(vertex_factory=lambda: next(labels))
    with pytest.raises(UnsupportedTargetError):
        target.mint_vertices(4)
    assert target.number_of_vertices() == 0
