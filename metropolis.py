"""
TSP Solver - Metropolis Sampler
A generic Metropolis sampler over anything that can propose and judge moves.
"""

import math
from typing import List, Optional, Protocol, Tuple, TypeVar

import numpy as np


T = TypeVar("T")


class Simulatable(Protocol[T]):
    """
    Distributions that can be simulated with the Metropolis algorithm.

    ``pdf`` returns a value proportional to the probability of a state,
    ``generate`` seeds the chain (``current is None``) or proposes a move from
    ``current``, and ``accept`` decides whether the chain moves to the proposal.
    ``accept`` must return True when ``current is None``.
    """

    def pdf(self, state: T) -> float:
        ...

    def generate(self, current: Optional[T]) -> T:
        ...

    def accept(self, current: Optional[T], proposed: T) -> bool:
        ...


def sample(simulatable: Simulatable[T], n: int) -> List[Tuple[T, float]]:
    """
    Run a Markov chain of length ``n`` over ``simulatable``.

    A rejected proposal repeats the previous state and its weight, so the
    result always has exactly ``n`` entries.

    Args:
        simulatable: The distribution to sample from
        n: Number of samples, at least 1

    Returns:
        List of (state, weight) pairs in chain order
    """
    if n < 1:
        raise ValueError(f"sample size must be at least 1, got {n}")

    state = simulatable.generate(None)
    weight = simulatable.pdf(state)
    chain = [(state, weight)]

    for _ in range(1, n):
        proposed = simulatable.generate(state)
        if simulatable.accept(state, proposed):
            state = proposed
            weight = simulatable.pdf(proposed)
        chain.append((state, weight))

    return chain


class Exponential:
    """Standard exponential distribution explored with a Gaussian random walk."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def pdf(self, state: float) -> float:
        if state < 0.0:
            return 0.0
        return math.exp(-state)

    def generate(self, current: Optional[float]) -> float:
        drift = float(self.rng.standard_normal())
        if current is None:
            return drift
        return current + drift

    def accept(self, current: Optional[float], proposed: float) -> bool:
        if current is None:
            return True

        proposed_density = self.pdf(proposed)
        current_density = self.pdf(current)
        if current_density == 0.0:
            # Infinite ratio when leaving a zero-density state, undefined otherwise
            return proposed_density > 0.0

        cutoff = self.rng.random()
        return cutoff < proposed_density / current_density
