# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Command-line entry point for Monty Hall simulations."""

import argparse
import sys
from datetime import datetime
from typing import List, Optional

from .config import SimulationConfig
from .reporting import TIME_FORMAT, log_message, log_time_elapsed, print_summary
from .simulator import MontyHallSimulator


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Monty Hall Problem Simulation')
    parser.add_argument('--games', type=int, default=100,
                        help='Number of games to play (default: 100)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible results')
    parser.add_argument('--decimals', type=int, default=2,
                        help='Decimal places in the proportion table (default: 2)')
    parser.add_argument('--progress', type=int, default=0,
                        help='Print progress every N games (default: off)')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the summary')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line execution."""
    try:
        args = parse_args(argv)
    except SystemExit as e:
        # --help exits cleanly; usage errors report like any other failure
        if not e.code:
            raise
        print("Simulation failed: invalid arguments")
        return 1

    try:
        config = SimulationConfig(
            num_games=args.games,
            random_seed=args.seed,
            decimals=args.decimals,
            progress_interval=args.progress,
        )
        start_time = datetime.now()
        if not args.quiet:
            log_message(f"Starting {config.num_games} games at {start_time.strftime(TIME_FORMAT)}")

        results = MontyHallSimulator(config).run()

        if not args.quiet:
            log_time_elapsed(start_time, "Simulation completed")
        print_summary(results, config.decimals)
    except Exception as e:
        print(f"Simulation failed: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
