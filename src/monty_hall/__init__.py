# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Monty Hall Simulation

Simulates the three door game from "Let's Make a Deal" and estimates how
often staying and switching win.

Example usage:
    from monty_hall import play_n_games, MontyHallSimulator, MonteCarloConfig

    results_df = play_n_games(n=1000)

    simulator = MontyHallSimulator(MonteCarloConfig(num_games=1000, random_seed=42))
    results = simulator.play_n_games()
    print(results.win_rate('switch'))
"""

# Single round
from .game import (
    DOORS,
    GameState,
    InvalidGameError,
    Label,
    Outcome,
    Strategy,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
    validate_door,
    validate_game,
)

# Monte Carlo Simulation
from .montecarlo import (
    MonteCarloConfig,
    MonteCarloResults,
    MontyHallSimulator,
    play_game,
    play_n_games,
)

# Version
from .__meta__ import __version__

__all__ = [
    # Game
    'DOORS', 'GameState', 'InvalidGameError', 'Label', 'Outcome', 'Strategy',
    'create_game', 'select_door', 'open_goat_door', 'change_door',
    'determine_winner', 'validate_door', 'validate_game',
    # Monte Carlo
    'MonteCarloConfig', 'MonteCarloResults', 'MontyHallSimulator',
    'play_game', 'play_n_games',
    # Version
    '__version__',
]
