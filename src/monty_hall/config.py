# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Configuration for Monty Hall simulations."""

import numbers
from dataclasses import dataclass
from typing import Optional


def validate_count(name: str, value, minimum: int) -> int:
    """Check that ``value`` is an integer no smaller than ``minimum``.

    Raises:
        ValueError: If the value is a bool, not an integer, or too small
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        if minimum == 0:
            raise ValueError(f"{name} must be non-negative")
        raise ValueError(f"{name} must be at least {minimum}")
    return int(value)


@dataclass
class SimulationConfig:
    """Configuration for repeated Monty Hall games.

    Attributes:
        num_games: Number of games to play. Default 100.
        random_seed: Optional seed for reproducible results. Default None.
        decimals: Decimal places for the printed proportion table. Default 2.
        progress_interval: Print a progress line every N games. 0 disables.
    """
    num_games: int = 100
    random_seed: Optional[int] = None
    decimals: int = 2
    progress_interval: int = 0

    def __post_init__(self):
        self.num_games = validate_count("num_games", self.num_games, 1)
        self.decimals = validate_count("decimals", self.decimals, 0)
        self.progress_interval = validate_count("progress_interval", self.progress_interval, 0)
