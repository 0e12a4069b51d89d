# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Single round of the Monty Hall game.

Three doors, one car and two goats. The player picks a door, the host opens
a goat door the player did not pick, and the player either stays or switches
to the last closed door. Doors are numbered 1 through 3.
"""

from enum import Enum
from typing import Optional, Tuple
import numpy as np


DOORS = (1, 2, 3)


class InvalidGameError(ValueError):
    """Raised when a door number or game state is not well formed."""


class Label(str, Enum):
    """What sits behind a door."""
    CAR = "car"
    GOAT = "goat"


class Strategy(str, Enum):
    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"


GameState = Tuple[Label, Label, Label]


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def validate_door(door) -> int:
    """Check that ``door`` is one of 1, 2 or 3 and return it as an int.

    Raises:
        InvalidGameError: If the value is not a valid door number
    """
    if isinstance(door, (bool, np.bool_)) or not isinstance(door, (int, np.integer)):
        raise InvalidGameError(f"Door must be an integer in {DOORS}, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidGameError(f"Door must be one of {DOORS}, got {door}")
    return int(door)


def validate_game(game) -> GameState:
    """Check that ``game`` holds three labels with exactly one car.

    Plain strings ("car"/"goat") are accepted and converted to labels.

    Raises:
        InvalidGameError: If the game is not a valid three door setup
    """
    if isinstance(game, str):
        raise InvalidGameError(f"Game must be a sequence of labels, got {game!r}")
    try:
        size = len(game)
    except TypeError as e:
        raise InvalidGameError(f"Game must be a sequence of labels, got {game!r}") from e
    if size != len(DOORS):
        raise InvalidGameError(f"Game must have exactly {len(DOORS)} doors, got {game!r}")
    try:
        labels = tuple(Label(item) for item in game)
    except ValueError as e:
        raise InvalidGameError(f"Unknown label in game {game!r}") from e
    if labels.count(Label.CAR) != 1:
        raise InvalidGameError(f"Game must hide exactly one car, got {game!r}")
    return labels


def create_game(rng: Optional[np.random.Generator] = None) -> GameState:
    """Randomly place one car and two goats behind the three doors.

    Args:
        rng: Random generator to draw from. A fresh unseeded one if None.

    Returns:
        Tuple of three labels, e.g. ``(GOAT, CAR, GOAT)``

    Example:
        >>> create_game(np.random.default_rng(1))  # doctest: +SKIP
        (<Label.GOAT: 'goat'>, <Label.GOAT: 'goat'>, <Label.CAR: 'car'>)
    """
    order = _rng(rng).permutation(len(DOORS))
    prizes = (Label.GOAT, Label.GOAT, Label.CAR)
    return tuple(prizes[i] for i in order)


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """The contestant's initial pick, uniform over doors 1 to 3."""
    return int(_rng(rng).integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(game, a_pick, rng: Optional[np.random.Generator] = None) -> int:
    """Have the host open a goat door that the contestant did not pick.

    If the contestant picked the car, the host chooses one of the two goat
    doors at random. Otherwise only one goat door is left and it is opened
    without any random draw.

    Args:
        game: Labels behind doors 1 to 3
        a_pick: The contestant's door
        rng: Random generator for the car branch

    Returns:
        Number of the opened door
    """
    game = validate_game(game)
    a_pick = validate_door(a_pick)

    goat_doors = [door for door in DOORS if game[door - 1] is Label.GOAT]
    if game[a_pick - 1] is Label.CAR:
        return int(_rng(rng).choice(goat_doors))

    # Picked a goat: the other goat door is forced
    return next(door for door in goat_doors if door != a_pick)


def change_door(stay: bool = True, opened_door=None, a_pick=None) -> int:
    """Return the contestant's final door.

    Args:
        stay: Keep the original pick if True, otherwise switch
        opened_door: The door the host opened
        a_pick: The contestant's original door

    Returns:
        ``a_pick`` when staying, else the one door that is neither
        ``opened_door`` nor ``a_pick``

    Raises:
        InvalidGameError: If ``stay`` is not a bool, a door is invalid, or
            the opened door is the picked door
    """
    if not isinstance(stay, (bool, np.bool_)):
        raise InvalidGameError(f"stay must be a bool, got {stay!r}")
    opened_door = validate_door(opened_door)
    a_pick = validate_door(a_pick)
    if opened_door == a_pick:
        raise InvalidGameError("The host cannot open the door the contestant picked")

    if stay:
        return a_pick
    return next(door for door in DOORS if door not in (opened_door, a_pick))


def determine_winner(final_pick, game) -> Outcome:
    """WIN if the car is behind ``final_pick``, LOSE otherwise."""
    game = validate_game(game)
    final_pick = validate_door(final_pick)
    if game[final_pick - 1] is Label.CAR:
        return Outcome.WIN
    return Outcome.LOSE
