# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Command line entry point for the Monty Hall simulation.

Plays a batch of games and prints the stay/switch proportions table.
"""

import argparse
from typing import List, Optional

from .montecarlo import MonteCarloConfig, MontyHallSimulator, MonteCarloResults


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments for a simulation run."""
    parser = argparse.ArgumentParser(
        prog="monty_hall",
        description="Estimate Monty Hall win rates for the stay and switch strategies",
    )
    parser.add_argument(
        "-n", "--num-games",
        type=int,
        default=MonteCarloConfig.num_games,
        help="Number of games to play (default: %(default)s).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run.",
    )
    return parser.parse_args(argv)


def run_simulation(args: argparse.Namespace) -> MonteCarloResults:
    """Play the requested games and print the report."""
    config = MonteCarloConfig(num_games=args.num_games, random_seed=args.seed)

    print("=" * 40)
    print(f"Monty Hall simulation: {config.num_games} games")
    if config.random_seed is not None:
        print(f"Random seed: {config.random_seed}")
    print("=" * 40 + "\n")

    results = MontyHallSimulator(config).play_n_games()

    print(results.summary())
    print()
    print(f"   • Win rate when staying:   {results.win_rate('stay'):.1%}")
    print(f"   • Win rate when switching: {results.win_rate('switch'):.1%}")
    return results


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry-point for the simulation."""
    args = parse_args(argv)
    try:
        run_simulation(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e


if __name__ == "__main__":
    main()
