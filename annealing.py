"""
TSP Solver - Simulated Annealing
Runs the Metropolis sampler over tours at a sequence of decreasing temperatures.
"""

import math
from typing import Callable, List, Optional, Tuple

import numpy as np

import metropolis
from tsp_core import ConfigurationError, Itinerary, generate_random_cities


ProgressCallback = Callable[[float, float], None]


class Schedule:
    """
    An annealing schedule over a randomly generated TSP instance.

    The schedule is itself a ``metropolis.Simulatable`` over itineraries: the
    current temperature is a hidden parameter of ``pdf`` and ``accept``. Each
    temperature level runs one Metropolis chain of ``sample_size`` steps and
    keeps the chain's last state as the tour for the next level.
    """

    def __init__(
        self,
        start_temperature: float,
        temperature_step: float,
        min_temperature: float,
        num_cities: int,
        sample_size: int,
        rng=None,
        progress: Optional[ProgressCallback] = None,
    ):
        """
        Args:
            start_temperature: Temperature of the first level
            temperature_step: Amount the temperature drops after each level
            min_temperature: Levels run while the temperature is above this
            num_cities: Number of cities to generate
            sample_size: Length of the Markov chain at each level
            rng: Randomness source (defaults to ``numpy.random.default_rng()``)
            progress: Optional ``progress(temperature, cost)`` called per level

        Raises:
            ConfigurationError: if the parameters cannot give a finite run
        """
        validate_parameters(
            start_temperature, temperature_step, min_temperature, num_cities, sample_size
        )

        self.start_temperature = float(start_temperature)
        self.temperature_step = float(temperature_step)
        self.min_temperature = float(min_temperature)
        self.current_temperature = self.start_temperature
        self.num_cities = int(num_cities)
        self.sample_size = int(sample_size)

        self.rng = rng if rng is not None else np.random.default_rng()
        self.progress = progress

        self.itinerary = Itinerary(generate_random_cities(self.num_cities, self.rng))
        self.history: List[Tuple[float, float]] = []

    @property
    def num_levels(self) -> int:
        """Number of temperature levels a full run performs."""
        return count_levels(self.start_temperature, self.min_temperature, self.temperature_step)

    # ---------------------------------------
    # Simulatable over itineraries
    # ---------------------------------------

    def pdf(self, state: Itinerary) -> float:
        return math.exp(-state.cost / self.current_temperature)

    def generate(self, current: Optional[Itinerary]) -> Itinerary:
        if current is None:
            return self.itinerary
        return current.generate_new(self.rng)

    def accept(self, current: Optional[Itinerary], proposed: Itinerary) -> bool:
        """Boltzmann criterion: improvements always pass, others with exp(-delta/T)."""
        if current is None:
            return True

        delta = proposed.cost - current.cost
        if delta < 0:
            return True

        cutoff = self.rng.random()
        return cutoff < math.exp(-delta / self.current_temperature)

    # ---------------------------------------
    # Outer loop
    # ---------------------------------------

    def run(self) -> Itinerary:
        """
        Anneal from the start temperature down to the minimum.

        Each level runs while the temperature is above the minimum, then the
        temperature drops by ``temperature_step``.

        Returns:
            The itinerary left after the last level
        """
        while self.current_temperature > self.min_temperature:
            chain = metropolis.sample(self, self.sample_size)
            self.itinerary = chain[-1][0]

            record = (self.current_temperature, self.itinerary.cost)
            self.history.append(record)
            if self.progress:
                self.progress(*record)

            self.current_temperature -= self.temperature_step

        return self.itinerary


def level_temperatures(start_temperature: float, min_temperature: float, temperature_step: float):
    """Yield the temperature of each level, stepping down the way ``Schedule.run`` does."""
    temperature = start_temperature
    while temperature > min_temperature:
        yield temperature
        temperature -= temperature_step


def count_levels(start_temperature: float, min_temperature: float, temperature_step: float) -> int:
    """Number of levels a schedule runs, about ceil((start - min) / step)."""
    return sum(1 for _ in level_temperatures(start_temperature, min_temperature, temperature_step))


def validate_parameters(
    start_temperature: float,
    temperature_step: float,
    min_temperature: float,
    num_cities: int,
    sample_size: int,
):
    """Reject parameter sets that would not terminate or have no defined cost."""
    for name, value in (
        ("start_temperature", start_temperature),
        ("temperature_step", temperature_step),
        ("min_temperature", min_temperature),
    ):
        if not math.isfinite(value):
            raise ConfigurationError(f"{name} must be finite, got {value}")

    if temperature_step <= 0:
        raise ConfigurationError(f"temperature_step must be positive, got {temperature_step}")
    if start_temperature <= min_temperature:
        raise ConfigurationError(
            f"start_temperature ({start_temperature}) must be above "
            f"min_temperature ({min_temperature})"
        )
    if min_temperature < 0:
        # Levels below zero would divide by a non-positive temperature
        lowest = min(level_temperatures(start_temperature, min_temperature, temperature_step))
        if lowest <= 0:
            raise ConfigurationError(
                f"a level would run at temperature {lowest}; "
                f"raise min_temperature ({min_temperature}) or start_temperature"
            )
    if num_cities < 2:
        raise ConfigurationError(f"num_cities must be at least 2, got {num_cities}")
    if sample_size < 1:
        raise ConfigurationError(f"sample_size must be at least 1, got {sample_size}")
