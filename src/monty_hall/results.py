# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monty Hall simulation results aggregation and analysis.

This module provides the TrialRecord for one playthrough and the
MontyHallResults class for tabulating outcomes across many games.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
import numpy as np
import pandas as pd

from .game import Game, Outcome, Strategy, to_strategy

STRATEGY_ORDER = [s.value for s in Strategy]
OUTCOME_ORDER = [o.value for o in Outcome]


@dataclass(frozen=True)
class TrialRecord:
    """Result of one playthrough under both strategies.

    Attributes:
        game: Door contents for the playthrough
        first_pick: Contestant's initial door
        opened_door: Goat door opened by the host
        outcomes: Read-only outcome for each strategy
    """
    game: Game
    first_pick: int
    opened_door: int
    outcomes: Mapping[Strategy, Outcome]

    def __post_init__(self):
        object.__setattr__(self, 'outcomes', MappingProxyType(dict(self.outcomes)))

    def __hash__(self):
        return hash((self.game, self.first_pick, self.opened_door,
                     tuple(self.outcomes[strategy] for strategy in Strategy)))

    def outcome(self, strategy) -> Outcome:
        return self.outcomes[to_strategy(strategy)]

    def to_rows(self) -> List[Tuple[str, str]]:
        """Return one (strategy, outcome) row per strategy."""
        return [(strategy.value, self.outcomes[strategy].value) for strategy in Strategy]


class MontyHallResults:
    """Aggregates and analyzes the outcomes of many games.

    Example:
        >>> results = MontyHallSimulator().run(10000)
        >>> print(f"Switch win rate: {results.win_rate('switch'):.1%}")
        >>> print(results.get_proportion_table())
    """

    def __init__(self, trials: List[TrialRecord]):
        """Initialize with trial records.

        Args:
            trials: List of TrialRecord, one per game played
        """
        self.trials = list(trials)
        self.num_games = len(self.trials)

    def to_dataframe(self) -> pd.DataFrame:
        """Get results in long format, two rows per game.

        Returns:
            DataFrame with 'game', 'strategy' and 'outcome' columns
        """
        rows = [
            {'game': game_idx + 1, 'strategy': strategy, 'outcome': outcome}
            for game_idx, trial in enumerate(self.trials)
            for strategy, outcome in trial.to_rows()
        ]
        return pd.DataFrame(rows, columns=['game', 'strategy', 'outcome'])

    def get_counts(self) -> pd.DataFrame:
        """Get WIN/LOSE counts per strategy.

        Returns:
            DataFrame indexed by strategy with one column per outcome
        """
        if self.num_games == 0:
            counts = pd.DataFrame(0, index=STRATEGY_ORDER, columns=OUTCOME_ORDER)
        else:
            df = self.to_dataframe()
            counts = pd.crosstab(df['strategy'], df['outcome'])
        counts = counts.reindex(index=STRATEGY_ORDER, columns=OUTCOME_ORDER, fill_value=0)
        counts.index.name = 'strategy'
        counts.columns.name = 'outcome'
        return counts.astype(int)

    def get_proportion_table(self, decimals: int = 2) -> pd.DataFrame:
        """Get row-normalized outcome proportions per strategy.

        Args:
            decimals: Decimal places to round to

        Returns:
            DataFrame indexed by strategy; each row sums to 1 (before rounding).
            Rows are all zero when no games were played.
        """
        counts = self.get_counts()
        totals = counts.sum(axis=1).replace(0, np.nan)
        proportions = counts.div(totals, axis=0).fillna(0.0)
        return proportions.round(decimals)

    def win_rate(self, strategy) -> float:
        """Calculate the win rate for a strategy.

        Args:
            strategy: Strategy, strategy name or bool (True for stay)

        Returns:
            Win rate as decimal (0.0 to 1.0)
        """
        if self.num_games == 0:
            return 0.0
        strategy = to_strategy(strategy)
        wins = sum(1 for trial in self.trials if trial.outcomes[strategy] is Outcome.WIN)
        return wins / self.num_games

    def get_statistics(self) -> Dict[str, Dict[str, float]]:
        """Get summary statistics for each strategy.

        Returns:
            Dict keyed by strategy name with wins, losses, win_rate and the
            binomial standard error of the win rate
        """
        counts = self.get_counts()
        stats = {}
        for strategy in STRATEGY_ORDER:
            wins = int(counts.loc[strategy, Outcome.WIN.value])
            losses = int(counts.loc[strategy, Outcome.LOSE.value])
            rate = wins / self.num_games if self.num_games else 0.0
            std_error = float(np.sqrt(rate * (1 - rate) / self.num_games)) if self.num_games else 0.0
            stats[strategy] = {
                'wins': wins,
                'losses': losses,
                'win_rate': rate,
                'std_error': std_error,
            }
        return stats

    def merge(self, other: 'MontyHallResults') -> 'MontyHallResults':
        """Combine with another set of results."""
        return MontyHallResults(self.trials + other.trials)

    def __len__(self) -> int:
        return self.num_games

    def __repr__(self) -> str:
        return (f"MontyHallResults(num_games={self.num_games}, "
                f"stay={self.win_rate(Strategy.STAY):.3f}, "
                f"switch={self.win_rate(Strategy.SWITCH):.3f})")
