# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Console output for Monty Hall simulation results."""

from datetime import datetime

from .game import Strategy
from .results import MontyHallResults

LOG_PREFIX = "[monty-hall]"
TIME_FORMAT = '%H:%M:%S'


def log_message(message: str) -> None:
    print(f"{LOG_PREFIX} {message}")


def log_time_elapsed(start_time: datetime, message: str) -> float:
    """
    Log elapsed time since start_time

    Parameters:
    start_time (datetime): Start time
    message (str): Message to log

    Returns:
    float: Elapsed time in seconds
    """
    elapsed = (datetime.now() - start_time).total_seconds()
    log_message(f"{message}: {elapsed:.1f} seconds")
    return elapsed


def format_proportion_table(results: MontyHallResults, decimals: int = 2) -> str:
    """Render the row-normalized proportion table as text."""
    table = results.get_proportion_table(decimals)
    return table.to_string(float_format=lambda value: f"{value:.{decimals}f}")


def print_proportion_table(results: MontyHallResults, decimals: int = 2) -> None:
    print(format_proportion_table(results, decimals))


def print_summary(results: MontyHallResults, decimals: int = 2) -> None:
    """Print a summary of win rates and the proportion table"""
    if results.num_games == 0:
        print("No games played")
        return

    print("\n" + "="*50)
    print("MONTY HALL SUMMARY")
    print("="*50)

    print(f"\nGames played: {results.num_games}")

    stats = results.get_statistics()
    for strategy in Strategy:
        s = stats[strategy.value]
        print(f"  {strategy.value:<7} win rate: {s['win_rate']:.2%} "
              f"(+/- {1.96 * s['std_error']:.2%})")

    print("\nOutcome proportions:")
    print(format_proportion_table(results, decimals))
