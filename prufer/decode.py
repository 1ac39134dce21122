import heapq
import logging

import numpy as np

from prufer.util import degree_table

logger = logging.getLogger(__name__)

FRONTIERS = ("scan", "heap")


def _decode_scan(p, degree):
    # ptr always points at an index already used as a leaf (or at the first leaf
    # before the loop), every degree 1 vertex below ptr is taken as soon as it appears
    ptr = 0
    while degree[ptr] != 1:
        ptr += 1
    leaf = ptr
    for u in p:
        yield leaf, u
        degree[leaf] -= 1
        degree[u] -= 1
        if degree[u] == 1 and u < ptr:
            leaf = u
        else:
            ptr += 1
            while degree[ptr] != 1:
                ptr += 1
            leaf = ptr
    # the largest index is never the smallest leaf, it is always one end of the last edge
    yield leaf, len(degree) - 1


def _decode_heap(p, degree):
    frontier = [v for v in range(len(degree)) if degree[v] == 1]
    heapq.heapify(frontier)
    for u in p:
        leaf = heapq.heappop(frontier)
        yield leaf, u
        degree[u] -= 1
        if degree[u] == 1:
            heapq.heappush(frontier, u)
    leaf = heapq.heappop(frontier)
    yield leaf, heapq.heappop(frontier)


def decode_prufer(p, number_vertices=None, frontier="scan"):
    """
    Generative function that converts iteratively a Prüfer sequence into the
    list of undirected edges (leaf, other) of the tree it encodes.
    To get the whole list at once call list(decode_prufer(p))

    At each step the smallest vertex of degree 1 is joined to the next
    element of the sequence. This tie break fixes the exact tree of a
    sequence, both frontiers give the same edges in the same order.
    The sequence is assumed to be valid (see prufer.validation).

    ...

    Parameters
    ---------
    p : list of ints or 1D np.array
        Prüfer sequence
    number_vertices: int, optional
        only needed to ask for the single vertex tree (number_vertices=1),
        otherwise it is len(p) + 2
    frontier: str
        "scan": index ordered scan, O(n)
        "heap": binary min heap, O(n log n)
    """
    if frontier not in FRONTIERS:
        raise ValueError(f"unknown frontier {frontier!r}, expected one of {FRONTIERS}")
    if number_vertices == 1:
        return

    p = np.asarray(p, dtype=np.int64)
    n = len(p) + 2
    logger.debug("decoding Prüfer sequence of %d vertices with %s frontier", n, frontier)
    # plain python ints in the decode loop
    degree = degree_table(p, n).tolist()
    p = p.tolist()
    if frontier == "scan":
        yield from _decode_scan(p, degree)
    else:
        yield from _decode_heap(p, degree)


def decode_prufer_edges(p, number_vertices=None, frontier="scan"):
    """Returns the edges of decode_prufer as a (n - 1, 2) np.array."""
    edges = list(decode_prufer(p, number_vertices=number_vertices, frontier=frontier))
    return np.array(edges, dtype=np.int64).reshape(len(edges), 2)
