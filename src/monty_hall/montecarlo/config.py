# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""Configuration for Monty Hall simulations."""

from dataclasses import dataclass
from typing import Optional


def check_game_count(n, name: str = "n") -> int:
    """Return ``n`` if it is a positive whole number of games.

    Raises:
        ValueError: If n is not an int, is a bool, or is less than 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"{name} must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"{name} must be at least 1")
    return n


@dataclass
class MonteCarloConfig:
    """How many games a batch plays and how its doors are drawn.

    Attributes:
        num_games: Games per batch; each game yields a stay and a switch
            row. Default 100.
        random_seed: Seed for the door draws so a batch can be replayed.
            None draws fresh entropy.
    """
    num_games: int = 100
    random_seed: Optional[int] = None

    def __post_init__(self):
        check_game_count(self.num_games, "num_games")
        if self.random_seed is not None and (
                isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)):
            raise ValueError(f"random_seed must be an integer or None, got {self.random_seed!r}")
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError("random_seed must be non-negative")
