# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Monty Hall simulation results aggregation.

This module provides the MonteCarloResults class which tabulates the
stay/switch outcomes of a batch of games into counts and win proportions.
"""

from typing import List, Optional
import pandas as pd

from ..game import Outcome, Strategy


RESULT_COLUMNS = ['strategy', 'outcome']


class MonteCarloResults:
    """Aggregates the outcomes of many Monty Hall games.

    Each game contributes two rows, one per strategy, so a batch of N games
    holds 2N rows.

    Example:
        >>> results = MontyHallSimulator(MonteCarloConfig(1000, 42)).play_n_games()
        >>> print(results.summary())
        >>> print(f"Switch wins: {results.win_rate('switch'):.1%}")
    """

    def __init__(self, game_results: List[pd.DataFrame]):
        """Initialize with per-game results.

        Args:
            game_results: List of DataFrames, one per game, each with
                          'strategy' and 'outcome' columns.
        """
        self.num_games = len(game_results)

        if self.num_games > 0:
            frames = [df.assign(game=idx) for idx, df in enumerate(game_results, start=1)]
            self.raw_results = pd.concat(frames, ignore_index=True)
        else:
            self.raw_results = pd.DataFrame(columns=RESULT_COLUMNS + ['game'])

    def counts(self) -> pd.DataFrame:
        """Strategy by outcome contingency table of game counts."""
        strategies = [s.value for s in Strategy]
        outcomes = [o.value for o in Outcome]
        if self.num_games == 0:
            table = pd.DataFrame(0, index=strategies, columns=outcomes)
        else:
            table = pd.crosstab(self.raw_results['strategy'], self.raw_results['outcome'])
            table = table.reindex(index=strategies, columns=outcomes, fill_value=0)
        return table.rename_axis(index='strategy', columns='outcome')

    def proportions(self, decimals: Optional[int] = 2) -> pd.DataFrame:
        """Row-wise proportions of the contingency table.

        Args:
            decimals: Places to round to, or None to leave unrounded

        Returns:
            DataFrame indexed by strategy with WIN and LOSE columns, each row
            summing to 1 (before rounding)
        """
        counts = self.counts()
        totals = counts.sum(axis=1).replace(0, float('nan'))
        table = counts.div(totals, axis=0).fillna(0.0)
        if decimals is not None:
            table = table.round(decimals)
        return table

    def win_rate(self, strategy) -> float:
        """Share of games won with ``strategy`` ('stay' or 'switch').

        Raises:
            ValueError: If strategy is not a known strategy
        """
        strategy = Strategy(strategy)
        if self.num_games == 0:
            return 0.0
        return float(self.proportions(decimals=None).loc[strategy.value, Outcome.WIN.value])

    def summary(self) -> str:
        """Text rendering of the rounded proportions table."""
        return self.proportions().to_string()

    def __len__(self) -> int:
        return len(self.raw_results)

    def __repr__(self) -> str:
        return f"MonteCarloResults(num_games={self.num_games})"
