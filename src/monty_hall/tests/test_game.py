# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

"""
Tests for the single round Monty Hall operations.
"""

import unittest
import numpy as np
from unittest.mock import Mock

from ..game import (
    DOORS,
    InvalidGameError,
    Label,
    Outcome,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
    validate_door,
    validate_game,
)

CAR, GOAT = Label.CAR, Label.GOAT


class TestCreateGame(unittest.TestCase):
    """Tests for create_game."""

    def test_one_car_two_goats(self):
        """Every game has three doors with exactly one car."""
        rng = np.random.default_rng(0)
        for _ in range(200):
            game = create_game(rng)
            self.assertEqual(len(game), 3)
            self.assertEqual(game.count(CAR), 1)
            self.assertEqual(game.count(GOAT), 2)

    def test_car_position_varies(self):
        """The car ends up behind each of the three doors."""
        rng = np.random.default_rng(1)
        positions = {create_game(rng).index(CAR) for _ in range(200)}
        self.assertEqual(positions, {0, 1, 2})

    def test_seeded_games_are_reproducible(self):
        first = [create_game(np.random.default_rng(5)) for _ in range(3)]
        second = [create_game(np.random.default_rng(5)) for _ in range(3)]
        self.assertEqual(first, second)

    def test_without_rng(self):
        """A generator is created when none is passed."""
        self.assertEqual(create_game().count(CAR), 1)


class TestSelectDoor(unittest.TestCase):
    """Tests for select_door."""

    def test_door_in_range(self):
        rng = np.random.default_rng(2)
        picks = [select_door(rng) for _ in range(300)]
        self.assertTrue(all(isinstance(p, int) for p in picks))
        self.assertEqual(set(picks), set(DOORS))

    def test_without_rng(self):
        self.assertIn(select_door(), DOORS)


class TestOpenGoatDoor(unittest.TestCase):
    """Tests for open_goat_door."""

    def test_opened_door_is_goat_and_not_pick(self):
        """For every game and pick the host opens an unpicked goat door."""
        rng = np.random.default_rng(3)
        for game in [(CAR, GOAT, GOAT), (GOAT, CAR, GOAT), (GOAT, GOAT, CAR)]:
            for pick in DOORS:
                for _ in range(20):
                    opened = open_goat_door(game, pick, rng)
                    self.assertNotEqual(opened, pick)
                    self.assertIs(game[opened - 1], GOAT)

    def test_goat_pick_is_forced(self):
        """Picking a goat leaves the host exactly one door to open."""
        game = (GOAT, GOAT, CAR)
        self.assertEqual(open_goat_door(game, 1), 2)
        self.assertEqual(open_goat_door(game, 2), 1)

    def test_goat_pick_uses_no_randomness(self):
        rng = Mock()
        self.assertEqual(open_goat_door((CAR, GOAT, GOAT), 2, rng), 3)
        rng.choice.assert_not_called()

    def test_car_pick_draws_between_goats(self):
        """Picking the car lets the host choose either goat door."""
        rng = np.random.default_rng(4)
        opened = {open_goat_door((CAR, GOAT, GOAT), 1, rng) for _ in range(100)}
        self.assertEqual(opened, {2, 3})

    def test_car_pick_uses_rng(self):
        rng = Mock()
        rng.choice.return_value = 3
        self.assertEqual(open_goat_door((CAR, GOAT, GOAT), 1, rng), 3)
        rng.choice.assert_called_once_with([2, 3])

    def test_accepts_string_labels(self):
        self.assertEqual(open_goat_door(["goat", "goat", "car"], 1), 2)

    def test_game_without_length_raises(self):
        """A game that is not a sequence is rejected, not a TypeError."""
        with self.assertRaises(InvalidGameError):
            open_goat_door(None, 1)
        with self.assertRaises(InvalidGameError):
            determine_winner(1, 5)

    def test_invalid_inputs_raise(self):
        with self.assertRaises(InvalidGameError):
            open_goat_door((CAR, GOAT, GOAT), 4)
        with self.assertRaises(InvalidGameError):
            open_goat_door((CAR, CAR, GOAT), 1)


class TestChangeDoor(unittest.TestCase):
    """Tests for change_door."""

    def test_stay_keeps_pick(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened != pick:
                    self.assertEqual(change_door(True, opened, pick), pick)

    def test_switch_takes_remaining_door(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened == pick:
                    continue
                final = change_door(False, opened, pick)
                self.assertIn(final, DOORS)
                self.assertNotIn(final, (opened, pick))

    def test_stay_is_default(self):
        self.assertEqual(change_door(opened_door=2, a_pick=1), 1)

    def test_opened_equals_pick_raises(self):
        with self.assertRaises(InvalidGameError):
            change_door(False, 2, 2)

    def test_non_bool_stay_raises(self):
        with self.assertRaises(InvalidGameError):
            change_door("no", 2, 1)

    def test_missing_door_raises(self):
        with self.assertRaises(InvalidGameError):
            change_door(False)


class TestDetermineWinner(unittest.TestCase):
    """Tests for determine_winner."""

    def test_matches_label(self):
        for game in [(CAR, GOAT, GOAT), (GOAT, CAR, GOAT), (GOAT, GOAT, CAR)]:
            for door in DOORS:
                expected = Outcome.WIN if game[door - 1] is CAR else Outcome.LOSE
                self.assertEqual(determine_winner(door, game), expected)

    def test_outcome_values(self):
        self.assertEqual(determine_winner(1, ("car", "goat", "goat")), "WIN")
        self.assertEqual(determine_winner(2, ("car", "goat", "goat")), "LOSE")


class TestRoundScenarios(unittest.TestCase):
    """Full rounds through reveal, decision and outcome."""

    def test_goat_pick_round(self):
        """Car behind door 3, contestant picks door 1."""
        game = (GOAT, GOAT, CAR)
        opened = open_goat_door(game, 1)
        self.assertEqual(opened, 2)

        stay = change_door(True, opened, 1)
        switch = change_door(False, opened, 1)
        self.assertEqual((stay, switch), (1, 3))
        self.assertEqual(determine_winner(stay, game), Outcome.LOSE)
        self.assertEqual(determine_winner(switch, game), Outcome.WIN)

    def test_car_pick_round(self):
        """Car behind door 1, contestant picks it; either reveal gives the same result."""
        game = (CAR, GOAT, GOAT)
        rng = np.random.default_rng(6)
        for _ in range(20):
            opened = open_goat_door(game, 1, rng)
            self.assertIn(opened, (2, 3))

            stay = change_door(True, opened, 1)
            switch = change_door(False, opened, 1)
            self.assertEqual(stay, 1)
            self.assertEqual(switch, 5 - opened)
            self.assertEqual(determine_winner(stay, game), Outcome.WIN)
            self.assertEqual(determine_winner(switch, game), Outcome.LOSE)


class TestValidation(unittest.TestCase):
    """Tests for the boundary checks."""

    def test_validate_door(self):
        self.assertEqual(validate_door(np.int64(2)), 2)
        for bad in (0, 4, -1, 1.0, "1", None, True):
            with self.assertRaises(InvalidGameError):
                validate_door(bad)

    def test_validate_game(self):
        self.assertEqual(validate_game(["goat", "car", "goat"]), (GOAT, CAR, GOAT))
        for bad in [(CAR, GOAT), (GOAT, GOAT, GOAT), (CAR, GOAT, "boat"),
                    "car", (CAR, GOAT, GOAT, GOAT), None, 5]:
            with self.assertRaises(InvalidGameError):
                validate_game(bad)

    def test_invalid_game_error_is_value_error(self):
        self.assertTrue(issubclass(InvalidGameError, ValueError))


if __name__ == '__main__':
    unittest.main()
