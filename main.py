"""
TSP Solver - Main Application
Simulated annealing for a random travelling salesman instance.
"""

import argparse
import sys

import numpy as np
from tqdm import tqdm

from annealing import Schedule
from tsp_core import ConfigurationError
from visualization import TSPVisualizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulated Annealing for Traveling Salesman",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 cities, 20 temperature levels of 10000 samples each
  python main.py --start-temp 20 --min-temp 0 --temp-step 1 --sample-size 10000 --num-cities 100

  # Reproducible run without plots
  python main.py --start-temp 10 --min-temp 0.1 --temp-step 1 --sample-size 500 --num-cities 30 --seed 7 --no-viz
        """
    )

    parser.add_argument('--start-temp', dest='start_temperature', type=float, required=True,
                        metavar='START_TEMPERATURE', help='Temperature of the first level')
    parser.add_argument('--min-temp', dest='min_temperature', type=float, required=True,
                        metavar='MIN_TEMPERATURE', help='Stop once the temperature reaches this value')
    parser.add_argument('--temp-step', dest='temperature_step', type=float, required=True,
                        metavar='TEMPERATURE_STEP', help='Temperature decrement per level')
    parser.add_argument('--sample-size', dest='sample_size', type=int, required=True,
                        metavar='SAMPLE_SIZE', help='Markov chain length at each level')
    parser.add_argument('--num-cities', dest='num_cities', type=int, required=True,
                        metavar='NUM_CITIES', help='Number of random cities')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator (default: fresh entropy)')
    parser.add_argument('--plot-dir', default='plots',
                        help='Directory for SVG plots (default: plots)')
    parser.add_argument('--no-viz', action='store_true',
                        help='Disable plots')
    return parser


def main(argv=None) -> int:
    """Main entry point for the annealing solver."""
    parser = build_parser()
    args = parser.parse_args(argv)

    progress_bar = None

    def report(temperature, cost):
        progress_bar.update(1)
        progress_bar.write(
            f"Current temperature: {temperature - args.temperature_step}. "
            f"Current average travel leg: {cost / args.num_cities}."
        )

    try:
        schedule = Schedule(
            start_temperature=args.start_temperature,
            temperature_step=args.temperature_step,
            min_temperature=args.min_temperature,
            num_cities=args.num_cities,
            sample_size=args.sample_size,
            rng=np.random.default_rng(args.seed),
            progress=report,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    visualizer = None if args.no_viz else TSPVisualizer()

    if visualizer:
        visualizer.plot_path(schedule.itinerary, schedule.current_temperature,
                             args.sample_size, args.plot_dir)

    with tqdm(total=schedule.num_levels, desc="Annealing", file=sys.stdout) as progress_bar:
        final_itinerary = schedule.run()

    if visualizer:
        visualizer.plot_scatter(
            schedule.history,
            start_temperature=schedule.start_temperature,
            temperature_step=schedule.temperature_step,
            sample_size=args.sample_size,
            num_cities=args.num_cities,
            temperature=schedule.current_temperature,
            out_dir=args.plot_dir,
        )
        saved = visualizer.plot_path(final_itinerary, schedule.current_temperature,
                                     args.sample_size, args.plot_dir)
        print(f"Plots saved to {args.plot_dir} (final tour: {saved})")

    print(f"Average step size: {final_itinerary.average_step_length()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
