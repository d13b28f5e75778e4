# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for the single-game Monty Hall engine.
"""

import unittest
from collections import Counter
from unittest.mock import Mock

import numpy as np

from ..game import (
    DOORS,
    DoorContents,
    Game,
    InvalidDoorError,
    InvalidGameError,
    InvalidStrategyError,
    MontyHallError,
    Outcome,
    Strategy,
    change_door,
    create_game,
    determine_winner,
    get_default_rng,
    open_goat_door,
    seed_default_rng,
    select_door,
    to_strategy,
)

PRIZE = DoorContents.PRIZE
DECOY = DoorContents.DECOY


class TestGame(unittest.TestCase):
    """Tests for the Game value type."""

    def test_one_based_indexing(self):
        """Test that doors are addressed 1-3."""
        game = Game((DECOY, DECOY, PRIZE))
        self.assertEqual(game[1], DECOY)
        self.assertEqual(game[3], PRIZE)
        self.assertEqual(game.prize_door, 3)
        self.assertEqual(game.goat_doors, (1, 2))

    def test_from_labels(self):
        """Test building a game from car/goat labels."""
        game = Game.from_labels(["goat", "car", "goat"])
        self.assertEqual(game.doors, (DECOY, PRIZE, DECOY))
        self.assertEqual(game.labels(), ("goat", "car", "goat"))

    def test_games_are_immutable(self):
        game = Game((PRIZE, DECOY, DECOY))
        with self.assertRaises(Exception):
            game.doors = (DECOY, DECOY, PRIZE)

    def test_no_car_raises(self):
        with self.assertRaises(InvalidGameError):
            Game((DECOY, DECOY, DECOY))

    def test_two_cars_raises(self):
        with self.assertRaises(InvalidGameError):
            Game((PRIZE, PRIZE, DECOY))

    def test_wrong_length_raises(self):
        """Test that only three-door games are accepted."""
        with self.assertRaises(InvalidGameError):
            Game((PRIZE, DECOY))
        with self.assertRaises(InvalidGameError):
            Game((PRIZE, DECOY, DECOY, DECOY))

    def test_unknown_label_raises(self):
        with self.assertRaises(InvalidGameError):
            Game.from_labels(["goat", "car", "donkey"])

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidGameError, MontyHallError))
        self.assertTrue(issubclass(InvalidDoorError, ValueError))

    def test_out_of_range_door_raises(self):
        game = Game((PRIZE, DECOY, DECOY))
        for door in (0, 4, -1):
            with self.assertRaises(InvalidDoorError):
                game[door]


class TestCreateGame(unittest.TestCase):
    """Tests for create_game."""

    def test_one_car_two_goats(self):
        """Test that every generated game has exactly one car."""
        rng = np.random.default_rng(1)
        for _ in range(200):
            game = create_game(rng)
            self.assertEqual(len(game), 3)
            self.assertEqual(game.doors.count(PRIZE), 1)
            self.assertEqual(game.doors.count(DECOY), 2)

    def test_arrangements_are_uniform(self):
        """Test that each car position is about equally likely."""
        rng = np.random.default_rng(42)
        num_games = 3000
        counts = Counter(create_game(rng).prize_door for _ in range(num_games))

        self.assertEqual(set(counts), set(DOORS))
        for door in DOORS:
            self.assertAlmostEqual(counts[door] / num_games, 1 / 3, delta=0.05)

    def test_uses_default_rng(self):
        seed_default_rng(7)
        first = [create_game().doors for _ in range(10)]
        seed_default_rng(7)
        second = [create_game().doors for _ in range(10)]
        self.assertEqual(first, second)


class TestSelectDoor(unittest.TestCase):
    """Tests for select_door."""

    def test_returns_valid_door(self):
        rng = np.random.default_rng(3)
        picks = [select_door(rng) for _ in range(300)]
        self.assertTrue(all(pick in DOORS for pick in picks))
        self.assertTrue(all(isinstance(pick, int) for pick in picks))
        self.assertEqual(set(picks), set(DOORS))

    def test_picks_are_uniform(self):
        rng = np.random.default_rng(42)
        num_picks = 3000
        counts = Counter(select_door(rng) for _ in range(num_picks))
        for door in DOORS:
            self.assertAlmostEqual(counts[door] / num_picks, 1 / 3, delta=0.05)

    def test_default_rng_is_shared(self):
        self.assertIs(get_default_rng(), get_default_rng())


class TestOpenGoatDoor(unittest.TestCase):
    """Tests for open_goat_door."""

    def test_goat_pick_opens_only_other_goat(self):
        """Test the example game with the car behind door 3 and pick 1."""
        game = Game((DECOY, DECOY, PRIZE))
        rng = Mock()

        for _ in range(20):
            self.assertEqual(open_goat_door(game, 1, rng), 2)

        # No coin flip is needed when the contestant is on a goat
        rng.choice.assert_not_called()

    def test_goat_pick_is_deterministic_for_every_game(self):
        for prize_door in DOORS:
            contents = [DECOY, DECOY, DECOY]
            contents[prize_door - 1] = PRIZE
            game = Game(tuple(contents))
            for pick in DOORS:
                if pick == prize_door:
                    continue
                expected = next(d for d in DOORS if d not in (pick, prize_door))
                self.assertEqual(open_goat_door(game, pick), expected)

    def test_car_pick_uses_coin_flip(self):
        """Test that a scripted generator picks which goat door opens."""
        game = Game((PRIZE, DECOY, DECOY))

        rng = Mock()
        rng.choice.return_value = 3
        self.assertEqual(open_goat_door(game, 1, rng), 3)
        candidates = rng.choice.call_args[0][0]
        self.assertEqual(sorted(candidates), [2, 3])

        rng.choice.return_value = 2
        self.assertEqual(open_goat_door(game, 1, rng), 2)

    def test_car_pick_is_roughly_even(self):
        """Test the example game with the car behind door 1 and pick 1."""
        game = Game((PRIZE, DECOY, DECOY))
        rng = np.random.default_rng(42)
        num_samples = 2000

        counts = Counter(open_goat_door(game, 1, rng) for _ in range(num_samples))

        self.assertEqual(set(counts), {2, 3})
        self.assertAlmostEqual(counts[2] / num_samples, 0.5, delta=0.05)

    def test_never_opens_pick_or_car(self):
        rng = np.random.default_rng(11)
        for _ in range(500):
            game = create_game(rng)
            pick = select_door(rng)
            opened = open_goat_door(game, pick, rng)
            self.assertNotEqual(opened, pick)
            self.assertEqual(game[opened], DECOY)

    def test_accepts_label_sequence(self):
        self.assertEqual(open_goat_door(["goat", "goat", "car"], 2), 1)

    def test_malformed_game_raises(self):
        with self.assertRaises(InvalidGameError):
            open_goat_door(["goat", "goat", "goat"], 1)
        with self.assertRaises(InvalidGameError):
            open_goat_door("car", 1)
        with self.assertRaises(InvalidGameError):
            open_goat_door(None, 1)
        with self.assertRaises(InvalidGameError):
            open_goat_door(123, 1)
        with self.assertRaises(InvalidGameError):
            determine_winner(1, None)

    def test_non_iterable_contents_raise(self):
        """Test that Game rejects contents that are not a sequence."""
        with self.assertRaises(InvalidGameError):
            Game(None)
        with self.assertRaises(InvalidGameError):
            Game(42)
        with self.assertRaises(InvalidGameError):
            Game.from_labels(None)

    def test_invalid_pick_raises(self):
        game = Game((PRIZE, DECOY, DECOY))
        for pick in (0, 4, 1.5, "1", True, None):
            with self.assertRaises(InvalidDoorError):
                open_goat_door(game, pick)

    def test_accepts_numpy_integer_pick(self):
        game = Game((DECOY, PRIZE, DECOY))
        self.assertEqual(open_goat_door(game, np.int64(1)), 3)


class TestChangeDoor(unittest.TestCase):
    """Tests for change_door."""

    def test_stay_returns_pick(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened == pick:
                    continue
                self.assertEqual(change_door(Strategy.STAY, opened, pick), pick)
                self.assertEqual(change_door(True, opened, pick), pick)

    def test_switch_returns_remaining_door(self):
        for pick in DOORS:
            for opened in DOORS:
                if opened == pick:
                    continue
                final = change_door(Strategy.SWITCH, opened, pick)
                self.assertNotIn(final, (pick, opened))
                self.assertIn(final, DOORS)
                self.assertEqual(change_door(False, opened, pick), final)

    def test_default_is_stay(self):
        self.assertEqual(change_door(opened_door=2, a_pick=1), 1)

    def test_specific_switch(self):
        self.assertEqual(change_door(Strategy.SWITCH, opened_door=2, a_pick=1), 3)
        self.assertEqual(change_door(Strategy.SWITCH, opened_door=1, a_pick=3), 2)

    def test_opened_equal_to_pick_raises(self):
        with self.assertRaises(InvalidDoorError):
            change_door(Strategy.SWITCH, 2, 2)

    def test_invalid_doors_raise(self):
        with self.assertRaises(InvalidDoorError):
            change_door(Strategy.STAY, 4, 1)
        with self.assertRaises(InvalidDoorError):
            change_door(Strategy.STAY, 2, 0)
        with self.assertRaises(InvalidDoorError):
            change_door(Strategy.STAY, None, 1)

    def test_invalid_strategy_raises(self):
        with self.assertRaises(InvalidStrategyError):
            change_door("maybe", 2, 1)
        with self.assertRaises(InvalidStrategyError):
            to_strategy(None)

    def test_invalid_strategy_message_lists_names(self):
        with self.assertRaises(MontyHallError) as ctx:
            to_strategy("maybe")
        self.assertIn("stay", str(ctx.exception))
        self.assertIn("switch", str(ctx.exception))

    def test_to_strategy(self):
        self.assertIs(to_strategy(True), Strategy.STAY)
        self.assertIs(to_strategy(False), Strategy.SWITCH)
        self.assertIs(to_strategy("switch"), Strategy.SWITCH)
        self.assertIs(to_strategy(Strategy.STAY), Strategy.STAY)


class TestDetermineWinner(unittest.TestCase):
    """Tests for determine_winner."""

    def test_car_wins_goat_loses(self):
        game = Game((DECOY, DECOY, PRIZE))
        self.assertEqual(determine_winner(3, game), Outcome.WIN)
        self.assertEqual(determine_winner(1, game), Outcome.LOSE)
        self.assertEqual(determine_winner(2, game), Outcome.LOSE)

    def test_consistent_with_contents(self):
        rng = np.random.default_rng(5)
        for _ in range(100):
            game = create_game(rng)
            for door in DOORS:
                expected = Outcome.WIN if game[door] is PRIZE else Outcome.LOSE
                self.assertEqual(determine_winner(door, game), expected)

    def test_invalid_inputs_raise(self):
        game = Game((DECOY, DECOY, PRIZE))
        with self.assertRaises(InvalidDoorError):
            determine_winner(5, game)
        with self.assertRaises(InvalidGameError):
            determine_winner(1, ["car", "car", "goat"])


class TestExampleScenarios(unittest.TestCase):
    """Walk through complete games by hand."""

    def test_contestant_on_goat(self):
        game = Game((DECOY, DECOY, PRIZE))
        opened = open_goat_door(game, 1)
        self.assertEqual(opened, 2)

        stay = change_door(Strategy.STAY, opened, 1)
        switch = change_door(Strategy.SWITCH, opened, 1)

        self.assertEqual(stay, 1)
        self.assertEqual(switch, 3)
        self.assertEqual(determine_winner(stay, game), Outcome.LOSE)
        self.assertEqual(determine_winner(switch, game), Outcome.WIN)

    def test_contestant_on_car(self):
        game = Game((PRIZE, DECOY, DECOY))
        rng = np.random.default_rng(0)
        for _ in range(20):
            opened = open_goat_door(game, 1, rng)
            self.assertIn(opened, (2, 3))

            stay = change_door(Strategy.STAY, opened, 1)
            switch = change_door(Strategy.SWITCH, opened, 1)

            self.assertEqual(determine_winner(stay, game), Outcome.WIN)
            self.assertEqual(determine_winner(switch, game), Outcome.LOSE)
            self.assertEqual(switch, 5 - opened)


if __name__ == '__main__':
    unittest.main()
