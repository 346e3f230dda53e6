"""
Simple Example - Quick Start Guide
Run this to see the Metropolis sampler and the annealing schedule in action!
"""

import numpy as np

import metropolis
from annealing import Schedule


def exponential_example(n_samples: int = 20000, seed: int = 0):
    """Sample the standard exponential distribution with the generic sampler."""
    print("\n" + "="*60)
    print("METROPOLIS SAMPLER - EXPONENTIAL DISTRIBUTION")
    print("="*60 + "\n")

    distribution = metropolis.Exponential(np.random.default_rng(seed))
    chain = metropolis.sample(distribution, n_samples)
    values = np.array([state for state, _ in chain])

    # Drop the start of the chain, which still remembers the seed
    burned = values[n_samples // 10:]

    print(f"Samples:        {n_samples}")
    print(f"Sample mean:    {burned.mean():.3f} (expected 1.0)")
    print(f"Sample std:     {burned.std():.3f} (expected 1.0)")
    print(f"Distinct moves: {len(np.unique(values))}")
    return burned


def annealing_example(seed: int = 0):
    """Anneal a small instance and report the improvement."""
    print("\n" + "="*60)
    print("SIMULATED ANNEALING - 25 RANDOM CITIES")
    print("="*60 + "\n")

    schedule = Schedule(
        start_temperature=5.0,
        temperature_step=0.25,
        min_temperature=0.0,
        num_cities=25,
        sample_size=2000,
        rng=np.random.default_rng(seed),
    )
    initial = schedule.itinerary.cost
    final = schedule.run()

    improvement = ((initial - final.cost) / initial) * 100
    print(f"Initial distance: {initial:.2f}")
    print(f"Final distance:   {final.cost:.2f}")
    print(f"Improvement:      {improvement:.2f}%")
    print(f"Levels:           {len(schedule.history)}")
    return final


if __name__ == "__main__":
    exponential_example()
    annealing_example()
