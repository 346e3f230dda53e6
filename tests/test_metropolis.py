import math

import numpy as np
import pytest

import metropolis


class Counter:
    """Walks 0, 1, 2, ... and accepts according to a fixed rule."""

    def __init__(self, accept_all):
        self.accept_all = accept_all

    def pdf(self, state):
        return float(state + 1)

    def generate(self, current):
        return 0 if current is None else current + 1

    def accept(self, current, proposed):
        return current is None or self.accept_all


@pytest.mark.parametrize("n", [1, 2, 7, 50])
@pytest.mark.parametrize("accept_all", [True, False])
def test_chain_has_exactly_n_entries(n, accept_all):
    chain = metropolis.sample(Counter(accept_all), n)
    assert len(chain) == n


def test_accepted_chain_follows_proposals():
    chain = metropolis.sample(Counter(True), 5)
    assert chain == [(0, 1.0), (1, 2.0), (2, 3.0), (3, 4.0), (4, 5.0)]


def test_rejection_repeats_previous_state():
    chain = metropolis.sample(Counter(False), 4)
    assert chain == [(0, 1.0)] * 4


def test_sample_size_must_be_positive():
    with pytest.raises(ValueError):
        metropolis.sample(Counter(True), 0)


def test_exponential_pdf():
    dist = metropolis.Exponential()
    assert dist.pdf(-0.1) == 0.0
    assert dist.pdf(0.0) == 1.0
    assert dist.pdf(2.0) == pytest.approx(math.exp(-2.0))


def test_exponential_generate_adds_drift(sequence_rng):
    dist = metropolis.Exponential(sequence_rng(normals=(0.25, -1.0)))
    assert dist.generate(None) == 0.25
    assert dist.generate(3.0) == 2.0


def test_exponential_accept_rules(sequence_rng):
    always_high = metropolis.Exponential(sequence_rng(randoms=(0.999999,)))
    assert always_high.accept(None, -5.0)
    # Moving towards higher density has ratio above one
    assert always_high.accept(2.0, 1.0)
    # Leaving a zero-density state for a positive one
    assert always_high.accept(-1.0, 0.5)
    assert not always_high.accept(-1.0, -2.0)
    assert not always_high.accept(1.0, 3.0)

    low = metropolis.Exponential(sequence_rng(randoms=(0.1,)))
    # exp(-2) ~ 0.135 > 0.1
    assert low.accept(1.0, 3.0)


def test_exponential_sample_mean():
    dist = metropolis.Exponential(np.random.default_rng(5))
    chain = metropolis.sample(dist, 40000)
    values = np.array([state for state, _ in chain[4000:]])

    assert values.min() >= 0.0
    assert values.mean() == pytest.approx(1.0, abs=0.15)
