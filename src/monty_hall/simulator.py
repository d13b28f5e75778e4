# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monty Hall simulation orchestrator.

This module plays complete games and repeats them to estimate how often
staying and switching win.
"""

from datetime import datetime
from typing import Optional
import numpy as np
import pandas as pd

from .config import SimulationConfig, validate_count
from .game import (
    Strategy,
    change_door,
    create_game,
    determine_winner,
    get_default_rng,
    open_goat_door,
    select_door,
)
from .reporting import log_message, log_time_elapsed, print_proportion_table
from .results import MontyHallResults, TrialRecord


def play_game(rng: Optional[np.random.Generator] = None) -> TrialRecord:
    """Play one game and evaluate both strategies.

    Both strategies use the same game, first pick and opened door.

    Args:
        rng: Random generator. Uses the process-wide generator if None.

    Returns:
        TrialRecord with the outcome for staying and for switching
    """
    rng = rng or get_default_rng()

    new_game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(new_game, first_pick, rng)

    outcomes = {}
    for strategy in Strategy:
        final_pick = change_door(strategy, opened_door, first_pick)
        outcomes[strategy] = determine_winner(final_pick, new_game)

    return TrialRecord(
        game=new_game,
        first_pick=first_pick,
        opened_door=opened_door,
        outcomes=outcomes,
    )


class MontyHallSimulator:
    """Runs repeated Monty Hall games.

    Example:
        >>> simulator = MontyHallSimulator(SimulationConfig(num_games=10000, random_seed=42))
        >>> results = simulator.run()
        >>> print(f"Switch win rate: {results.win_rate(Strategy.SWITCH):.1%}")
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize the simulator.

        Args:
            config: Simulation configuration. If None, uses defaults.
        """
        self.config = config or SimulationConfig()

    def _get_rng(self, rng: Optional[np.random.Generator]) -> np.random.Generator:
        if rng is not None:
            return rng
        if self.config.random_seed is not None:
            return np.random.default_rng(self.config.random_seed)
        return get_default_rng()

    def run(self, num_games: Optional[int] = None,
            rng: Optional[np.random.Generator] = None) -> MontyHallResults:
        """Play many independent games.

        Args:
            num_games: Number of games. Defaults to config.num_games.
            rng: Random generator. If None, a generator seeded from
                config.random_seed is used, or the process-wide one.

        Returns:
            MontyHallResults with one TrialRecord per game

        Raises:
            ValueError: If num_games is less than 1
        """
        if num_games is None:
            num_games = self.config.num_games
        num_games = validate_count("num_games", num_games, 1)

        rng = self._get_rng(rng)
        interval = self.config.progress_interval
        start_time = datetime.now()

        trials = []
        for game_idx in range(num_games):
            trials.append(play_game(rng))

            if interval and (game_idx + 1) % interval == 0:
                log_message(f"Played {game_idx + 1}/{num_games} games")

        if interval:
            log_time_elapsed(start_time, f"Finished {num_games} games")

        return MontyHallResults(trials)

    def run_single(self, rng: Optional[np.random.Generator] = None) -> TrialRecord:
        """Play a single game and return its record.

        Useful for debugging or inspecting one playthrough.
        """
        return play_game(self._get_rng(rng))


def play_n_games(n: int = 100,
                 rng: Optional[np.random.Generator] = None,
                 verbose: bool = True,
                 decimals: int = 2) -> pd.DataFrame:
    """Play ``n`` games and return every outcome.

    Args:
        n: Number of games to play. Default 100.
        rng: Random generator. Uses the process-wide generator if None.
        verbose: Print the row-normalized proportion table
        decimals: Decimal places for the printed table

    Returns:
        DataFrame with 'strategy' and 'outcome' columns, two rows per game
    """
    config = SimulationConfig(num_games=n, decimals=decimals)
    results = MontyHallSimulator(config).run(rng=rng)

    if verbose:
        print_proportion_table(results, config.decimals)

    return results.to_dataframe()[['strategy', 'outcome']]
