import itertools

import pytest

from tsp_core import City, Itinerary


class SequenceRng:
    """Replays fixed draws in a loop, shaped like numpy's Generator."""

    def __init__(self, randoms=(0.5,), integers=(0, 1), uniforms=(0.5,), normals=(0.0,)):
        self._randoms = itertools.cycle(randoms)
        self._integers = itertools.cycle(integers)
        self._uniforms = itertools.cycle(uniforms)
        self._normals = itertools.cycle(normals)

    def random(self):
        return next(self._randoms)

    def integers(self, low, high):
        return low + next(self._integers) % (high - low)

    def uniform(self, low, high):
        return low + next(self._uniforms) * (high - low)

    def standard_normal(self):
        return next(self._normals)


class NoDrawRng(SequenceRng):
    """Fails the test if a uniform acceptance draw is requested."""

    def random(self):
        raise AssertionError("no random draw expected")


@pytest.fixture
def sequence_rng():
    return SequenceRng


@pytest.fixture
def no_draw_rng():
    return NoDrawRng()


@pytest.fixture
def square_cities():
    # Unit square visited in order: closed tour of length 4
    return [City(0, 0.0, 0.0), City(1, 1.0, 0.0), City(2, 1.0, 1.0), City(3, 0.0, 1.0)]


@pytest.fixture
def square_tour(square_cities):
    return Itinerary(square_cities)
