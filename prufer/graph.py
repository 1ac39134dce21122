import itertools

import networkx as nx

from prufer.errors import UnsupportedTargetError


def integer_vertex_factory(start=0):
    """Returns a function that mints the consecutive integers start, start + 1, ..."""
    counter = itertools.count(start)
    return lambda: next(counter)


class TargetGraph:
    """
    Class used to represent the graph that receives a generated tree.
    It pairs a networkx graph with the function that creates new vertices,
    the generator never chooses vertex labels itself.

    ...

    Attributes
    ----------
    graph: networkx.Graph
        graph the vertices and edges are added to
    vertex_factory: callable
        function without arguments returning a new vertex label

    Methods
    -------
    mint_vertex:
        creates a new vertex with vertex_factory, adds it to graph and returns it
    mint_vertices:
        creates count new vertices, adds them to graph only if all of them are new
    add_edge:
        adds an undirected edge between two vertices of graph
    is_directed, is_multigraph:
        structural queries forwarded to graph
    vertices:
        returns the list of vertices of graph
    """

    def __init__(self, graph=None, vertex_factory=None):
        self.graph = nx.Graph() if graph is None else graph
        self.vertex_factory = integer_vertex_factory() if vertex_factory is None else vertex_factory

    def mint_vertex(self):
        vertex = self.vertex_factory()
        if self.graph.has_node(vertex):
            raise UnsupportedTargetError(f"vertex factory returned {vertex!r} which is already in the graph")
        self.graph.add_node(vertex)
        return vertex

    def mint_vertices(self, count):
        # all labels are checked before any is added
        vertices = [self.vertex_factory() for _ in range(count)]
        seen = set()
        for vertex in vertices:
            if vertex in seen or self.graph.has_node(vertex):
                raise UnsupportedTargetError(f"vertex factory returned {vertex!r} twice or one already in the graph")
            seen.add(vertex)
        self.graph.add_nodes_from(vertices)
        return vertices

    def add_edge(self, u, v):
        self.graph.add_edge(u, v)

    def is_directed(self):
        return self.graph.is_directed()

    def is_multigraph(self):
        return self.graph.is_multigraph()

    def vertices(self):
        return list(self.graph.nodes)

    def number_of_vertices(self):
        return self.graph.number_of_nodes()

    def number_of_edges(self):
        return self.graph.number_of_edges()

    def __repr__(self):
        return f"TargetGraph({self.number_of_vertices()} vertices, {self.number_of_edges()} edges)"


def as_target_graph(graph):
    """
    Returns graph wrapped in a TargetGraph that mints the integers 0, 1, ...
    None and TargetGraph instances are returned unchanged.
    """
    if graph is None or isinstance(graph, TargetGraph):
        return graph
    return TargetGraph(graph)
