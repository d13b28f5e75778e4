# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Single-game engine for the Monty Hall problem.

This module provides the building blocks of one playthrough: setting up the
doors, the contestant's first pick, the host opening a goat door, the
stay/switch decision and determining the winner.

All random draws go through a numpy ``Generator``. Each function accepts an
optional ``rng`` so callers can supply a seeded or scripted generator; when it
is omitted the process-wide default generator is used.
"""

from dataclasses import dataclass
from enum import Enum
from collections import abc
from typing import Iterable, Optional, Sequence, Tuple, Union
import numpy as np

DOORS: Tuple[int, ...] = (1, 2, 3)

_default_rng: Optional[np.random.Generator] = None


def get_default_rng() -> np.random.Generator:
    """Return the process-wide random generator, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = np.random.default_rng()
    return _default_rng


def seed_default_rng(seed: Optional[int]) -> np.random.Generator:
    """Replace the process-wide generator with one seeded from ``seed``."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng


class MontyHallError(ValueError):
    """Base class for invalid game inputs."""


class InvalidGameError(MontyHallError):
    """Raised when door contents do not hold exactly one car and two goats."""


class InvalidDoorError(MontyHallError):
    """Raised when a door position is outside 1-3 or otherwise not allowed."""


class InvalidStrategyError(MontyHallError):
    """Raised when a value cannot be read as stay or switch."""


class DoorContents(Enum):
    """What sits behind a door."""
    PRIZE = "car"
    DECOY = "goat"

    @classmethod
    def from_label(cls, label: Union[str, 'DoorContents']) -> 'DoorContents':
        if isinstance(label, cls):
            return label
        if isinstance(label, str):
            for member in cls:
                if label.strip().lower() in (member.value, member.name.lower()):
                    return member
        raise InvalidGameError(f"Unknown door label: {label!r}")


class Strategy(Enum):
    """Contestant's choice once a goat door is opened."""
    STAY = "stay"
    SWITCH = "switch"


class Outcome(Enum):
    WIN = "WIN"
    LOSE = "LOSE"


@dataclass(frozen=True)
class Game:
    """Contents of the three doors for one playthrough.

    Doors are addressed by position 1-3, so ``game[1]`` is the first door.

    Attributes:
        doors: Tuple of three DoorContents values. Exactly one must be PRIZE.
    """
    doors: Tuple[DoorContents, ...]

    def __post_init__(self):
        doors = _as_door_tuple(self.doors)
        if len(doors) != len(DOORS):
            raise InvalidGameError(
                f"A game needs exactly {len(DOORS)} doors, got {len(doors)}"
            )
        if not all(isinstance(door, DoorContents) for door in doors):
            raise InvalidGameError(f"Door contents must be DoorContents values: {doors!r}")
        num_prizes = doors.count(DoorContents.PRIZE)
        if num_prizes != 1:
            raise InvalidGameError(f"A game needs exactly one car, got {num_prizes}")
        object.__setattr__(self, 'doors', doors)

    @classmethod
    def from_labels(cls, labels: Iterable[Union[str, DoorContents]]) -> 'Game':
        """Build a game from labels such as ``["goat", "goat", "car"]``."""
        labels = _as_door_tuple(labels)
        return cls(tuple(DoorContents.from_label(label) for label in labels))

    @property
    def prize_door(self) -> int:
        return self.doors.index(DoorContents.PRIZE) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        return tuple(door for door in DOORS if self[door] is DoorContents.DECOY)

    def __getitem__(self, door: int) -> DoorContents:
        return self.doors[validate_door(door) - 1]

    def __iter__(self):
        return iter(self.doors)

    def __len__(self) -> int:
        return len(self.doors)

    def labels(self) -> Tuple[str, ...]:
        return tuple(door.value for door in self.doors)


GameLike = Union[Game, Sequence[Union[str, DoorContents]]]


def validate_door(door, name: str = "door") -> int:
    """Check that ``door`` is a door position and return it as an int.

    Raises:
        InvalidDoorError: If the value is not an integer in 1-3
    """
    if isinstance(door, (bool, np.bool_)) or not isinstance(door, (int, np.integer)):
        raise InvalidDoorError(f"{name} must be an integer in {DOORS}, got {door!r}")
    if int(door) not in DOORS:
        raise InvalidDoorError(f"{name} must be one of {DOORS}, got {door}")
    return int(door)


def _as_door_tuple(contents) -> tuple:
    if isinstance(contents, (str, bytes)) or not isinstance(contents, abc.Iterable):
        raise InvalidGameError(f"Door contents must be a sequence of labels, got {contents!r}")
    return tuple(contents)


def _as_game(game: GameLike) -> Game:
    if isinstance(game, Game):
        return game
    return Game.from_labels(game)


def create_game(rng: Optional[np.random.Generator] = None) -> Game:
    """Create a new game with two goats and one car in random order.

    Args:
        rng: Random generator. Uses the process-wide generator if None.

    Returns:
        Game with each of the three arrangements equally likely
    """
    rng = rng or get_default_rng()
    contents = [DoorContents.DECOY, DoorContents.DECOY, DoorContents.PRIZE]
    order = rng.permutation(len(contents))
    return Game(tuple(contents[int(i)] for i in order))


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Pick a door uniformly at random.

    Args:
        rng: Random generator. Uses the process-wide generator if None.

    Returns:
        Door position between 1 and 3
    """
    rng = rng or get_default_rng()
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(game: GameLike, a_pick: int,
                   rng: Optional[np.random.Generator] = None) -> int:
    """Open a goat door that the contestant did not pick.

    If the contestant picked the car, either of the two goat doors can be
    opened and one is chosen at random. If the contestant picked a goat, only
    one goat door remains and it is always the one opened.

    Args:
        game: Door contents for this playthrough
        a_pick: Door the contestant selected (1-3)
        rng: Random generator for the car-picked case. Uses the process-wide
            generator if None.

    Returns:
        Door position that is neither the car nor ``a_pick``

    Raises:
        InvalidGameError: If the door contents are malformed
        InvalidDoorError: If ``a_pick`` is not a door position
    """
    game = _as_game(game)
    a_pick = validate_door(a_pick, "a_pick")

    candidates = [door for door in DOORS
                  if door != a_pick and game[door] is DoorContents.DECOY]

    if game[a_pick] is DoorContents.PRIZE:
        rng = rng or get_default_rng()
        return int(rng.choice(candidates))
    # Contestant is on a goat: exactly one goat is left to open
    return candidates[0]


def change_door(stay: Union[bool, Strategy] = True,
                opened_door: Optional[int] = None,
                a_pick: Optional[int] = None) -> int:
    """Return the contestant's final door for the given strategy.

    Args:
        stay: Strategy.STAY / True keeps ``a_pick``; Strategy.SWITCH / False
            moves to the last unopened door
        opened_door: Goat door opened by the host (1-3)
        a_pick: Contestant's first pick (1-3)

    Returns:
        Final door position

    Raises:
        InvalidDoorError: If either door is invalid or they are the same door
    """
    strategy = to_strategy(stay)
    opened_door = validate_door(opened_door, "opened_door")
    a_pick = validate_door(a_pick, "a_pick")
    if opened_door == a_pick:
        raise InvalidDoorError(f"Host cannot open the picked door ({a_pick})")

    if strategy is Strategy.STAY:
        return a_pick
    remaining = [door for door in DOORS if door not in (opened_door, a_pick)]
    return remaining[0]


def determine_winner(final_pick: int, game: GameLike) -> Outcome:
    """Return WIN if the final pick is the car, LOSE if it is a goat."""
    game = _as_game(game)
    contents = game[validate_door(final_pick, "final_pick")]
    if contents is DoorContents.PRIZE:
        return Outcome.WIN
    if contents is DoorContents.DECOY:
        return Outcome.LOSE
    raise InvalidGameError(f"Unexpected door contents: {contents!r}")


def to_strategy(stay: Union[bool, Strategy, str]) -> Strategy:
    """Normalize a bool, Strategy or strategy name to a Strategy."""
    if isinstance(stay, Strategy):
        return stay
    if isinstance(stay, (bool, np.bool_)):
        return Strategy.STAY if stay else Strategy.SWITCH
    if isinstance(stay, str):
        try:
            return Strategy(stay.strip().lower())
        except ValueError:
            pass
    names = tuple(s.value for s in Strategy)
    raise InvalidStrategyError(
        f"stay must be a bool, a Strategy or one of {names}, got {stay!r}"
    )
