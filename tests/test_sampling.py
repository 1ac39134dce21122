import numpy as np
import pytest

from prufer.errors import InvalidSequenceError, InvalidSourceError, NullSourceError
from prufer.random_source import (
    get_default_random_source,
    make_random_source,
    reset_default_random_source,
    set_default_random_source,
)
from prufer.sampling import sample_prufer_sequence


class CyclingSource:
    def __init__(self):
        self.i = 0

    def next_int(self, bound):
        self.i += 1
        return self.i % bound


@pytest.fixture
def restore_default_source():
    previous = get_default_random_source()
    yield
    set_default_random_source(previous)


def test_length_and_range():
    rng = np.random.default_rng(0)
    for n in [3, 10, 1000]:
        p = sample_prufer_sequence(n, rng)
        assert len(p) == n - 2
        assert p.min() >= 0
        assert p.max() <= n - 1


@pytest.mark.parametrize("n", [1, 2])
def test_small_trees_do_not_draw(n):
    rng = np.random.default_rng(0)
    state = rng.bit_generator.state
    assert len(sample_prufer_sequence(n, rng)) == 0
    assert rng.bit_generator.state == state


def test_same_seed_same_sequence():
    a = sample_prufer_sequence(500, make_random_source(42))
    b = sample_prufer_sequence(500, make_random_source(42))
    assert a.tolist() == b.tolist()


def test_random_state_source():
    a = sample_prufer_sequence(50, np.random.RandomState(2020))
    b = np.random.RandomState(2020).randint(0, high=50, size=48)
    assert a.tolist() == b.tolist()


def test_next_int_source():
    assert sample_prufer_sequence(4, CyclingSource()).tolist() == [1, 2]


def test_roughly_uniform():
    rng = np.random.default_rng(7)
    draws = np.concatenate([sample_prufer_sequence(5, rng) for _ in range(2000)])
    frequencies = np.bincount(draws, minlength=5) / len(draws)
    assert np.all(np.abs(frequencies - 0.2) < 0.03)


def test_none_source():
    with pytest.raises(NullSourceError):
        sample_prufer_sequence(10, None)


def test_invalid_number_vertices():
    with pytest.raises(InvalidSequenceError):
        sample_prufer_sequence(0, np.random.default_rng(0))


def test_default_source_override(restore_default_source):
    source = make_random_source(1)
    set_default_random_source(source)
    assert get_default_random_source() is source
    with pytest.raises(NullSourceError):
        set_default_random_source(None)
    assert get_default_random_source() is source


def test_reset_default_source(restore_default_source):
    a = sample_prufer_sequence(100, reset_default_random_source(3))
    b = sample_prufer_sequence(100, reset_default_random_source(3))
    assert a.tolist() == b.tolist()


def test_unusable_source():
    with pytest.raises(InvalidSourceError):
        sample_prufer_sequence(10, 42)


def test_unusable_default_source(restore_default_source):
    with pytest.raises(InvalidSourceError):
        set_default_random_source(42)
