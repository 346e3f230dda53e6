"""
TSP Solver - Core Module
Contains the fundamental data structures for representing the TSP problem.
"""

import numpy as np
from typing import Iterator, List, Sequence, Tuple


class ConfigurationError(ValueError):
    """Raised when annealing parameters would make a run ill-defined."""


class City:
    """Represents a city with an index and x, y coordinates."""

    __slots__ = ("_index", "_x", "_y")

    def __init__(self, index: int, x: float, y: float):
        self._index = int(index)
        self._x = float(x)
        self._y = float(y)

    @property
    def index(self) -> int:
        return self._index

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def distance_to(self, city: 'City') -> float:
        """Calculate Manhattan distance to another city."""
        return manhattan(self, city)

    def __repr__(self):
        return f"City({self._index}, {self._x:.2f}, {self._y:.2f})"

    def __eq__(self, other):
        if not isinstance(other, City):
            return False
        return (self._index, self._x, self._y) == (other._index, other._x, other._y)

    def __hash__(self):
        return hash((self._index, self._x, self._y))


def manhattan(start: City, finish: City) -> float:
    """Sum of absolute coordinate differences between two cities."""
    return abs(start.x - finish.x) + abs(start.y - finish.y)


def tour_cost(cities: Sequence[City]) -> float:
    """Total length of the closed tour, including the edge back to the start."""
    if len(cities) == 0:
        raise ValueError("cannot compute the cost of an empty tour")

    cost = manhattan(cities[0], cities[-1])
    for i in range(1, len(cities)):
        cost += manhattan(cities[i], cities[i - 1])
    return cost


class Itinerary:
    """
    An ordered, closed tour over a set of cities together with its cost.

    The city order is stored as a tuple and the cost is computed once in the
    constructor, so an Itinerary never exposes a cost that disagrees with its
    sequence. Moves produce new instances via ``generate_new``.
    """

    __slots__ = ("_cities", "_cost")

    def __init__(self, cities: Sequence[City]):
        self._cities: Tuple[City, ...] = tuple(cities)
        self._cost = tour_cost(self._cities)

    @property
    def cities(self) -> Tuple[City, ...]:
        return self._cities

    @property
    def cost(self) -> float:
        return self._cost

    def generate_new(self, rng) -> 'Itinerary':
        """
        Propose a neighbouring tour with a 2-opt move.

        Two distinct positions are picked at random and the segment between
        them (inclusive) is reversed on a copy of the sequence.

        Args:
            rng: Randomness source offering ``integers(low, high)``

        Returns:
            A new Itinerary; ``self`` is left untouched
        """
        i, j = generate_swap_indices(len(self._cities), rng)
        cities = list(self._cities)
        cities[i:j + 1] = cities[i:j + 1][::-1]
        return Itinerary(cities)

    def average_step_length(self) -> float:
        return self._cost / len(self._cities)

    def coordinates(self) -> List[Tuple[float, float]]:
        """City coordinates in visiting order."""
        return [(city.x, city.y) for city in self._cities]

    def __len__(self):
        return len(self._cities)

    def __iter__(self) -> Iterator[City]:
        return iter(self._cities)

    def __getitem__(self, index):
        return self._cities[index]

    def __eq__(self, other):
        if not isinstance(other, Itinerary):
            return False
        return self._cities == other._cities

    def __hash__(self):
        return hash(self._cities)

    def __repr__(self):
        return f"Itinerary(cities={len(self._cities)}, cost={self._cost:.2f})"


def generate_swap_indices(length: int, rng) -> Tuple[int, int]:
    """Randomly pick two different positions in ``range(length)``, smaller first."""
    if length < 2:
        raise ValueError("need at least two positions to pick a segment")

    while True:
        index_one = int(rng.integers(0, length))
        index_two = int(rng.integers(0, length))
        if index_one != index_two:
            return min(index_one, index_two), max(index_one, index_two)


def generate_random_cities(n: int, rng=None) -> List[City]:
    """
    Generate random cities for a new problem.

    Cities are placed uniformly in the square [1, sqrt(n)] x [1, sqrt(n)],
    which keeps the density of cities constant as ``n`` grows.

    Args:
        n: Number of cities to generate
        rng: Randomness source offering ``uniform(low, high)``

    Returns:
        List of randomly placed cities, indexed 0..n-1
    """
    if rng is None:
        rng = np.random.default_rng()

    side = float(np.sqrt(n))
    cities = []
    for i in range(n):
        x = rng.uniform(1.0, side)
        y = rng.uniform(1.0, side)
        cities.append(City(i, x, y))
    return cities
