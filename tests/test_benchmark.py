import benchmark


def test_benchmark_writes_summary(tmp_path):
    config = {"start_temperature": 3.0, "temperature_step": 1.0, "min_temperature": 0.0,
              "num_cities": 8, "sample_size": 30}

    df = benchmark.run_benchmark_all(configs=[config], runs=3, output_dir=str(tmp_path))

    assert len(df) == 1
    row = df.iloc[0]
    assert row["runs"] == 3
    assert row["best_final"] <= row["avg_final"]
    assert (tmp_path / "annealing_results.csv").exists()
