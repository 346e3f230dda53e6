import os
import time

import numpy as np
import pandas as pd
from tqdm import tqdm

from annealing import Schedule


# ================================
# CONFIGURATION
# ================================
OUTPUT_DIR = "benchmarks"
RUNS_PER_CONFIG = 10
BASE_SEED = 1234

CONFIGS = [
    {"start_temperature": 10.0, "temperature_step": 1.0, "min_temperature": 0.1,
     "num_cities": 25, "sample_size": 1000},
    {"start_temperature": 10.0, "temperature_step": 0.5, "min_temperature": 0.1,
     "num_cities": 25, "sample_size": 1000},
    {"start_temperature": 20.0, "temperature_step": 1.0, "min_temperature": 0.0,
     "num_cities": 50, "sample_size": 2000},
]


# =============================================================
# SINGLE CONFIG
# =============================================================
def benchmark_config(config, runs=RUNS_PER_CONFIG, base_seed=BASE_SEED):
    """Run one configuration with ``runs`` consecutive seeds and summarise it."""
    initial_costs = []
    final_costs = []
    times = []

    label = "N{num_cities} T{start_temperature}/{temperature_step} S{sample_size}".format(**config)

    for run in tqdm(range(runs), desc=label):
        schedule = Schedule(rng=np.random.default_rng(base_seed + run), **config)
        initial_costs.append(schedule.itinerary.cost)

        start = time.time()
        final = schedule.run()
        times.append(time.time() - start)
        final_costs.append(final.cost)

    initial_costs = np.array(initial_costs)
    final_costs = np.array(final_costs)

    return {
        **config,
        "runs": runs,
        "avg_initial": float(np.mean(initial_costs)),
        "avg_final": float(np.mean(final_costs)),
        "best_final": float(np.min(final_costs)),
        "std_final": float(np.std(final_costs)),
        "avg_improvement_pct": float(np.mean((initial_costs - final_costs) / initial_costs) * 100),
        "avg_time": float(np.mean(times)),
    }


# =============================================================
# MAIN
# =============================================================
def run_benchmark_all(configs=CONFIGS, runs=RUNS_PER_CONFIG, output_dir=OUTPUT_DIR):
    rows = [benchmark_config(config, runs=runs) for config in configs]

    df = pd.DataFrame(rows)
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "annealing_results.csv")
    df.to_csv(path, index=False)

    print("\n=== Annealing benchmark (lower avg_final = better) ===")
    print(df[["num_cities", "temperature_step", "sample_size", "avg_final", "best_final",
              "std_final", "avg_time"]])
    print(f"\nSaved: {path}")
    return df


if __name__ == "__main__":
    run_benchmark_all()
