# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Monte Carlo estimation of Monty Hall win rates.

This module repeats single games, scoring each one for both the stay and
switch strategies, and tabulates how often each strategy wins.
"""

from .config import MonteCarloConfig
from .results import MonteCarloResults
from .simulator import MontyHallSimulator, play_game, play_n_games

__all__ = [
    'MonteCarloConfig',
    'MonteCarloResults',
    'MontyHallSimulator',
    'play_game',
    'play_n_games',
]
