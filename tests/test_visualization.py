import os

from visualization import TSPVisualizer


def test_plot_path_writes_svg(tmp_path, square_tour):
    path = TSPVisualizer().plot_path(square_tour, 10.0, 5, str(tmp_path / "plots"))

    assert os.path.basename(path) == "pathT10.0N4S5.svg"
    assert os.path.getsize(path) > 0


def test_plot_scatter_writes_svg(tmp_path):
    history = [(3.0, 12.5), (2.0, 10.0), (1.0, 9.25)]
    path = TSPVisualizer().plot_scatter(
        history,
        start_temperature=3.0,
        temperature_step=1.0,
        sample_size=50,
        num_cities=8,
        temperature=0.0,
        out_dir=str(tmp_path),
    )

    assert os.path.basename(path) == "scatterT0.0N8S50.svg"
    with open(path) as f:
        assert "<svg" in f.read()
