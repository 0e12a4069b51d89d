# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Monty Hall simulation orchestrator.

This module provides the MontyHallSimulator class which plays single rounds
under both strategies and repeats them to estimate win probabilities.
"""

from typing import Iterator, Optional
import numpy as np
import pandas as pd

from ..game import (
    Strategy,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from .config import MonteCarloConfig, check_game_count
from .results import MonteCarloResults, RESULT_COLUMNS


class MontyHallSimulator:
    """Plays batches of Monty Hall games with paired strategies.

    Every game is set up once (doors, pick and opened door) and then scored
    for both staying and switching, so the two strategies always face the
    same round.

    Example:
        >>> simulator = MontyHallSimulator(MonteCarloConfig(num_games=1000, random_seed=7))
        >>> results = simulator.play_n_games()
        >>> print(results.summary())
    """

    def __init__(self,
                 config: Optional[MonteCarloConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """Initialize the simulator.

        Args:
            config: Simulation configuration. If None, uses defaults.
            rng: Random generator to use. If None, one is created from
                 config.random_seed.
        """
        self.config = config or MonteCarloConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.random_seed)

    def play_game(self) -> pd.DataFrame:
        """Play one round and score it for both strategies.

        Returns:
            Two row DataFrame with 'strategy' and 'outcome' columns, the stay
            row first
        """
        new_game = create_game(self.rng)
        first_pick = select_door(self.rng)
        opened_door = open_goat_door(new_game, first_pick, self.rng)

        rows = []
        for strategy in Strategy:
            final_pick = change_door(strategy is Strategy.STAY, opened_door, first_pick)
            outcome = determine_winner(final_pick, new_game)
            rows.append((strategy.value, outcome.value))

        return pd.DataFrame(rows, columns=RESULT_COLUMNS)

    def iter_games(self, n: int) -> Iterator[pd.DataFrame]:
        """Lazily play ``n`` games, yielding each game's result frame."""
        for _ in range(n):
            yield self.play_game()

    def play_n_games(self, n: Optional[int] = None) -> MonteCarloResults:
        """Play ``n`` games and aggregate the outcomes.

        Args:
            n: Number of games. Defaults to config.num_games.

        Returns:
            MonteCarloResults over 2n rows

        Raises:
            ValueError: If n is not a positive integer
        """
        if n is None:
            n = self.config.num_games
        check_game_count(n)

        return MonteCarloResults(list(self.iter_games(n)))


def play_game(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    """Play a single game, returning the stay and switch outcomes."""
    return MontyHallSimulator(rng=rng).play_game()


def play_n_games(n: int = 100, rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    """Play ``n`` games, print the win/lose proportions and return all rows.

    Args:
        n: Number of games to play
        rng: Random generator. A fresh unseeded one if None.

    Returns:
        DataFrame of 2n rows with 'strategy', 'outcome' and 'game' columns
    """
    results = MontyHallSimulator(MonteCarloConfig(num_games=n), rng=rng).play_n_games()
    print(results.summary())
    return results.raw_results
