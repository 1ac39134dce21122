class PruferError(Exception):
    """Base class of the errors raised while building a tree from a Prüfer sequence."""


class InvalidSequenceError(PruferError, ValueError):
    """
    Raised when a Prüfer sequence is missing, malformed, of the wrong length
    or holds a vertex index outside [0, n-1], or when the number of vertices
    is smaller than 1.
    """


class NullSourceError(PruferError, TypeError):
    """Raised when a random source is required but None was given."""


class NullTargetError(PruferError, TypeError):
    """Raised when the graph to fill is None."""


class UnsupportedTargetError(PruferError, ValueError):
    """Raised when the graph to fill is directed, a multigraph or not empty."""


class InvalidSourceError(PruferError, TypeError):
    """Raised when a random source is neither a numpy random generator nor has a next_int method."""


class NotATreeError(PruferError, RuntimeError):
    """Raised by the check_tree option when the generated graph is not a tree."""
