# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monty Hall Problem Simulator

Simulates the three-door game from "Let's Make a Deal": one door hides a car
and two hide goats. The contestant picks a door, the host opens a goat door,
and the contestant either stays or switches. Playing many games estimates the
win rate of each strategy.

Example usage:
    from monty_hall import MontyHallSimulator, SimulationConfig, Strategy

    simulator = MontyHallSimulator(SimulationConfig(num_games=10000, random_seed=42))
    results = simulator.run()
    print(results.win_rate(Strategy.SWITCH))
    print(results.get_proportion_table())
"""

# Single game
from .game import (
    DOORS,
    DoorContents,
    Game,
    Strategy,
    Outcome,
    MontyHallError,
    InvalidGameError,
    InvalidDoorError,
    InvalidStrategyError,
    create_game,
    select_door,
    open_goat_door,
    change_door,
    determine_winner,
    get_default_rng,
    seed_default_rng,
)

# Repeated games
from .config import SimulationConfig
from .results import TrialRecord, MontyHallResults
from .simulator import MontyHallSimulator, play_game, play_n_games

# Reporting
from .reporting import print_summary, print_proportion_table, format_proportion_table

# Version
from .__meta__ import __version__

__all__ = [
    # Single game
    'DOORS', 'DoorContents', 'Game', 'Strategy', 'Outcome',
    'MontyHallError', 'InvalidGameError', 'InvalidDoorError',
    'InvalidStrategyError',
    'create_game', 'select_door', 'open_goat_door', 'change_door',
    'determine_winner', 'get_default_rng', 'seed_default_rng',
    # Repeated games
    'SimulationConfig', 'TrialRecord', 'MontyHallResults',
    'MontyHallSimulator', 'play_game', 'play_n_games',
    # Reporting
    'print_summary', 'print_proportion_table', 'format_proportion_table',
    # Version
    '__version__',
]
