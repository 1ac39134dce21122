import logging

import networkx as nx

from prufer.decode import FRONTIERS, decode_prufer
from prufer.errors import NotATreeError, NullSourceError, NullTargetError, UnsupportedTargetError
from prufer.graph import TargetGraph, as_target_graph
from prufer.random_source import check_random_source, get_default_random_source, make_random_source
from prufer.sampling import sample_prufer_sequence
from prufer.util import is_tree, merge_config
from prufer.validation import validate_number_vertices, validate_sequence

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {'frontier': 'scan', 'check_tree': False}

# marks a random_source argument that was not passed at all, None means passed but empty
_DEFAULT_SOURCE = object()


class ExplicitSequence:
    """
    Tree given by its Prüfer sequence. The sequence is validated on creation.

    Parameters
    ----------
    sequence: list of ints or 1D np.array
    number_vertices: int, optional
        if given, the length of sequence must be max(number_vertices - 2, 0)
    """

    def __init__(self, sequence, number_vertices=None):
        self.sequence = validate_sequence(sequence, number_vertices)
        if number_vertices is None:
            self.number_vertices = len(self.sequence) + 2
        else:
            self.number_vertices = int(number_vertices)

    def __repr__(self):
        return f"ExplicitSequence({self.sequence.tolist()}, number_vertices={self.number_vertices})"


class RandomByCount:
    """
    Tree with number_vertices vertices drawn uniformly at random.

    Parameters
    ----------
    number_vertices: int
    random_source: np.random.Generator, np.random.RandomState or object with a next_int(bound) method, optional
        if not given, a source seeded with seed is created, or the process-wide
        default source is used when seed is not given either
    seed: int, optional
    """

    def __init__(self, number_vertices, random_source=_DEFAULT_SOURCE, seed=None):
        self.number_vertices = validate_number_vertices(number_vertices)
        if random_source is None:
            raise NullSourceError("random_source was given but is None")
        if random_source is not _DEFAULT_SOURCE and seed is not None:
            raise ValueError("give either a random source or a seed, not both")

        if random_source is not _DEFAULT_SOURCE:
            self.random_source = check_random_source(random_source)
        elif seed is not None:
            self.random_source = make_random_source(seed)
        else:
            self.random_source = get_default_random_source()
        self.seed = seed

    def __repr__(self):
        return f"RandomByCount({self.number_vertices}, seed={self.seed})"


class PruferTree:
    """
    Class used to generate a labelled tree from a Prüfer sequence into an
    empty undirected graph.

    ...

    Attributes
    ----------
    mode: ExplicitSequence or RandomByCount
        where the Prüfer sequence comes from
    number_vertices: int
        number of vertices of the generated tree
    config: dict
        dictionary containing configuration parameters, see DEFAULT_CONFIG
        frontier: "scan" or "heap", the leaf frontier used to decode
        check_tree: if True, the generated graph is checked to be a tree
    sequence: np.array
        Prüfer sequence of the last generated tree, None before the first
        call to generate_graph in random mode

    Methods
    -------
    from_sequence:
        creates a generator for the tree encoded by a given sequence
    from_number_vertices:
        creates a generator of random trees with a given number of vertices
    generate_graph:
        adds the vertices and edges of the tree to an empty graph.
        The graph must be undirected, not a multigraph and have no vertex.
        Vertices are created in order 0..n-1 of the sequence indices.
    """

    def __init__(self, mode, config=None):
        if not isinstance(mode, (ExplicitSequence, RandomByCount)):
            raise TypeError(f"mode must be ExplicitSequence or RandomByCount, got {type(mode).__name__}")
        self.config = merge_config(DEFAULT_CONFIG, config)
        if self.config['frontier'] not in FRONTIERS:
            raise ValueError(f"unknown frontier {self.config['frontier']!r}, expected one of {FRONTIERS}")
        self.mode = mode
        self.number_vertices = mode.number_vertices
        self.sequence = mode.sequence if isinstance(mode, ExplicitSequence) else None

    @classmethod
    def from_sequence(cls, sequence, number_vertices=None, config=None):
        return cls(ExplicitSequence(sequence, number_vertices), config=config)

    @classmethod
    def from_number_vertices(cls, number_vertices, random_source=_DEFAULT_SOURCE, seed=None, config=None):
        return cls(RandomByCount(number_vertices, random_source=random_source, seed=seed), config=config)

    def _check_target(self, target):
        if target is None:
            raise NullTargetError("target graph must not be None")
        if target.is_directed():
            raise UnsupportedTargetError("target graph must be undirected")
        if target.is_multigraph():
            raise UnsupportedTargetError("target graph must be simple, got a multigraph")
        if target.number_of_vertices() > 0:
            raise UnsupportedTargetError(
                f"target graph must be empty, it has {target.number_of_vertices()} vertices"
            )

    def _next_sequence(self):
        if isinstance(self.mode, ExplicitSequence):
            return self.mode.sequence
        return sample_prufer_sequence(self.number_vertices, self.mode.random_source)

    def generate_graph(self, target_graph):
        target = as_target_graph(target_graph)
        self._check_target(target)

        prufer = self._next_sequence()
        n = self.number_vertices
        vertices = target.mint_vertices(n)
        for u, v in decode_prufer(prufer, number_vertices=n, frontier=self.config['frontier']):
            target.add_edge(vertices[u], vertices[v])
        self.sequence = prufer

        logger.info("generated tree with %d vertices and %d edges", n, target.number_of_edges())
        if self.config['check_tree']:
            if not is_tree(target.graph):
                raise NotATreeError(f"generated graph with {n} vertices is not a tree")
        return vertices

    def __repr__(self):
        return f"PruferTree({self.mode!r})"


def generate_prufer_tree(number_vertices, seed=None, random_source=_DEFAULT_SOURCE, config=None):
    """
    Returns a new networkx.Graph holding a uniformly random tree on the
    vertices 0..number_vertices-1.

    Parameters
    ----------
    number_vertices: int
    seed: int, optional
        same seed gives the same tree
    random_source: optional, see RandomByCount
    config: dict, optional
    """
    target = TargetGraph(nx.Graph())
    generator = PruferTree.from_number_vertices(number_vertices, random_source=random_source,
                                                seed=seed, config=config)
    generator.generate_graph(target)
    return target.graph
