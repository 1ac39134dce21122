import logging

import numpy as np

from prufer.random_source import check_random_source
from prufer.validation import validate_number_vertices

logger = logging.getLogger(__name__)


def _draw(random_source, high, size):
    if isinstance(random_source, np.random.Generator):
        return random_source.integers(0, high, size=size)
    if isinstance(random_source, np.random.RandomState):
        return random_source.randint(0, high=high, size=size)
    return np.array([random_source.next_int(high) for _ in range(size)], dtype=np.int64)


def sample_prufer_sequence(number_vertices, random_source):
    """
    Samples a Prüfer sequence uniformly at random, i.e. a labelled tree with
    number_vertices vertices uniformly at random.

    Each of the max(number_vertices - 2, 0) positions is drawn independently
    and uniformly from [0, number_vertices - 1]. For 1 or 2 vertices there is
    a single tree, the sequence is empty and random_source is left untouched.

    ...

    Parameters
    ----------
    number_vertices: int
        number of vertices of the tree
    random_source: np.random.Generator, np.random.RandomState or object with a next_int(bound) method
        source of randomness, same state gives the same sequence
    """
    check_random_source(random_source)
    n = validate_number_vertices(number_vertices)
    size = max(n - 2, 0)
    if size == 0:
        return np.zeros(0, dtype=np.int64)

    prufer = np.asarray(_draw(random_source, n, size), dtype=np.int64)
    logger.debug("sampled Prüfer sequence of length %d for %d vertices", size, n)
    return prufer
