import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

# File containing utility functions used by the decoder, the generator and the tests


def degree_table(prufer, number_vertices):
	"""
	returns the degree of every vertex in the tree encoded by prufer,
	i.e. 1 + number of occurrences of the vertex in the sequence

	...

	Parameters
	----------
	prufer: 1D np.array of ints
		validated Prüfer sequence
	number_vertices: int
	"""
	prufer = np.asarray(prufer, dtype=np.int64)
	return np.bincount(prufer, minlength=number_vertices) + 1


def is_tree(graph):
	"""
	Returns True if graph (a networkx graph) is a tree: connected, with
	exactly one edge less than vertices and no self loops. A graph with
	a single vertex is a tree, the empty graph is not.

	Parameters
	----------
	graph: networkx.Graph
	"""
	n = graph.number_of_nodes()
	if n == 0 or graph.number_of_edges() != n - 1:
		return False
	if n == 1:
		return True

	index = {v: i for i, v in enumerate(graph.nodes)}
	edges = np.array([(index[u], index[v]) for u, v in graph.edges()], dtype=np.int64)
	if np.any(edges[:, 0] == edges[:, 1]):
		return False
	adjacency = coo_matrix((np.ones(len(edges)), (edges[:, 0], edges[:, 1])), shape=(n, n))
	n_components, _ = connected_components(adjacency, directed=False)
	return n_components == 1


def merge_config(default_config, config):
	# unknown keys are refused
	if config is None:
		return dict(default_config)
	unknown = set(config) - set(default_config)
	if unknown:
		raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
	merged = dict(default_config)
	merged.update(config)
	return merged
