"""
TSP Solver - Visualization Module
Render annealing results to image files.
"""

import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from typing import List, Tuple

from tsp_core import Itinerary


class TSPVisualizer:
    """Save plots of tours and of the cost reached at each temperature."""

    def __init__(self, figsize=(10, 8), color="#35C788"):
        self.figsize = figsize
        self.color = color

    def plot_path(
        self,
        itinerary: Itinerary,
        temperature: float,
        sample_size: int,
        out_dir: str = "plots"
    ) -> str:
        """
        Plot the closed tour of an itinerary.

        Args:
            itinerary: The tour to draw
            temperature: Temperature the tour was reached at (used in labels)
            sample_size: Chain length per level (used in the file name)
            out_dir: Directory the figure is written to

        Returns:
            Path of the saved SVG
        """
        num_cities = len(itinerary)
        points = itinerary.coordinates()
        points.append(points[0])
        x_coords = [p[0] for p in points]
        y_coords = [p[1] for p in points]

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.scatter(x_coords[:-1], y_coords[:-1], c=self.color, s=30, zorder=3)
        ax.plot(x_coords, y_coords, color=self.color, linewidth=1.5, zorder=1)

        limit = np.sqrt(num_cities) + 2.0
        ax.set_xlim(0.0, limit)
        ax.set_ylim(0.0, limit)
        ax.set_xlabel(f"X coordinate. Cities: {num_cities}, temperature: {temperature}")
        ax.set_ylabel("Y coordinate")
        ax.set_title(f"Manhattan travel distance: {itinerary.cost:.2f}")
        ax.set_aspect('equal')

        path = os.path.join(out_dir, f"pathT{temperature}N{num_cities}S{sample_size}.svg")
        return self._save(fig, path)

    def plot_scatter(
        self,
        history: List[Tuple[float, float]],
        start_temperature: float,
        temperature_step: float,
        sample_size: int,
        num_cities: int,
        temperature: float,
        out_dir: str = "plots"
    ) -> str:
        """
        Scatter the tour cost kept at each temperature level.

        Args:
            history: (temperature, cost) pairs, one per level
            start_temperature: First temperature of the schedule
            temperature_step: Temperature decrement per level
            sample_size: Chain length per level
            num_cities: Number of cities in the instance
            temperature: Final temperature (used in the file name)
            out_dir: Directory the figure is written to

        Returns:
            Path of the saved SVG
        """
        fig, ax = plt.subplots(figsize=self.figsize)

        if history:
            temperatures, costs = zip(*history)
            ax.scatter(temperatures, costs, c=self.color, s=20)

        ax.set_xlabel(
            f"Temperature. Start temp: {start_temperature}, temp step: {temperature_step}, "
            f"sample size: {sample_size}, cities: {num_cities}"
        )
        ax.set_ylabel("Manhattan travel distance")
        ax.grid(True, alpha=0.3)

        path = os.path.join(out_dir, f"scatterT{temperature}N{num_cities}S{sample_size}.svg")
        return self._save(fig, path)

    def _save(self, fig, path: str) -> str:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig.tight_layout()
        fig.savefig(path)
        plt.close(fig)
        return path
