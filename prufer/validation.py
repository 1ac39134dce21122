import numbers

import numpy as np

from prufer.errors import InvalidSequenceError


def validate_number_vertices(number_vertices):
    """
    Returns number_vertices as an int, raises InvalidSequenceError if it is not
    an integer or if it is smaller than 1.

    Parameters
    ----------
    number_vertices: int
        number of vertices of the tree
    """
    if isinstance(number_vertices, bool) or not isinstance(number_vertices, numbers.Integral):
        raise InvalidSequenceError(f"number of vertices must be an integer, got {number_vertices!r}")
    if number_vertices < 1:
        raise InvalidSequenceError(f"number of vertices must be at least 1, got {number_vertices}")
    return int(number_vertices)


def _as_index_array(sequence):
    if sequence is None:
        raise InvalidSequenceError("Prüfer sequence must not be None")
    try:
        array = np.asarray(sequence)
    except ValueError as e:
        raise InvalidSequenceError(f"Prüfer sequence is not a flat sequence of integers: {e}") from e
    if array.ndim != 1:
        raise InvalidSequenceError(f"Prüfer sequence must be one dimensional, got shape {array.shape}")
    if array.size == 0:
        return np.zeros(0, dtype=np.int64)
    if array.dtype == bool or not np.issubdtype(array.dtype, np.integer):
        raise InvalidSequenceError(f"Prüfer sequence must hold integers, got dtype {array.dtype}")
    return array.astype(np.int64)


def validate_sequence(sequence, number_vertices=None):
    """
    Checks that sequence is a valid Prüfer sequence and returns it as a
    read-only int64 numpy array.

    If number_vertices is given, the sequence must have length
    max(number_vertices - 2, 0). Otherwise the number of vertices is
    len(sequence) + 2. In both cases every element must lie in
    [0, number_vertices - 1].

    ...

    Parameters
    ----------
    sequence: list of ints or 1D np.array
        candidate Prüfer sequence
    number_vertices: int, optional
        number of vertices of the tree encoded by sequence
    """
    p = _as_index_array(sequence)

    if number_vertices is None:
        n = len(p) + 2
    else:
        n = validate_number_vertices(number_vertices)
        if len(p) != max(n - 2, 0):
            raise InvalidSequenceError(
                f"Prüfer sequence of a tree with {n} vertices must have length {max(n - 2, 0)}, got {len(p)}"
            )

    if len(p) > 0:
        out_of_range = (p < 0) | (p >= n)
        if np.any(out_of_range):
            position = int(np.argmax(out_of_range))
            raise InvalidSequenceError(
                f"element {int(p[position])} at position {position} is not in [0, {n - 1}]"
            )

    p.setflags(write=False)
    return p
