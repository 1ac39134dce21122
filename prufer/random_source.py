import numpy as np

from prufer.errors import InvalidSourceError, NullSourceError

# Process-wide source used when no source or seed is given. Sharing it between
# threads requires locking on the caller's side.
_default_random_source = None


def make_random_source(seed=None):
    """Returns a new numpy Generator seeded with seed."""
    return np.random.default_rng(seed)


def get_default_random_source():
    global _default_random_source
    if _default_random_source is None:
        _default_random_source = make_random_source()
    return _default_random_source


def set_default_random_source(random_source):
    """
    Replaces the process-wide random source and returns the previous one, so
    that a test can restore it afterwards.

    Parameters
    ----------
    random_source: np.random.Generator, np.random.RandomState or object with a next_int(bound) method
    """
    global _default_random_source
    check_random_source(random_source)
    previous = _default_random_source
    _default_random_source = random_source
    return previous


def reset_default_random_source(seed=None):
    global _default_random_source
    _default_random_source = make_random_source(seed)
    return _default_random_source


def check_random_source(random_source):
    """
    Returns random_source if it can be used to sample Prüfer sequences, i.e. it
    is a numpy Generator or RandomState or has a callable next_int(bound) method.
    Raises NullSourceError on None and InvalidSourceError otherwise.
    """
    if random_source is None:
        raise NullSourceError("random source must not be None")
    if isinstance(random_source, (np.random.Generator, np.random.RandomState)):
        return random_source
    if callable(getattr(random_source, "next_int", None)):
        return random_source
    raise InvalidSourceError(
        f"random source must be a numpy Generator, a RandomState or have a next_int method, "
        f"got {type(random_source).__name__}"
    )
