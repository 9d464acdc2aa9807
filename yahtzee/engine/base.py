"""
Yahtzee - Game Engine Base Classes

This module defines the foundational enums, constants and immutable data
structures used throughout the game engine.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

NUM_DICE = 5
DIE_FACES = 6
MAX_ROLLS = 3

UPPER_BONUS_THRESHOLD = 62  # bonus once the upper total exceeds this
UPPER_BONUS_POINTS = 35
YAHTZEE_BONUS_POINTS = 100


class Category(Enum):
    """The thirteen scoring slots, in scorecard order."""
    ONES = auto()
    TWOS = auto()
    THREES = auto()
    FOURS = auto()
    FIVES = auto()
    SIXES = auto()

    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FULL_HOUSE = auto()
    SMALL_STRAIGHT = auto()
    LARGE_STRAIGHT = auto()
    YAHTZEE = auto()
    CHANCE = auto()

    @property
    def is_upper(self) -> bool:
        """True for the six face-value categories."""
        return self in UPPER_CATEGORIES

    @property
    def face(self) -> int | None:
        """Face value counted by an upper category, None for the lower section."""
        return UPPER_CATEGORIES.index(self) + 1 if self.is_upper else None

    @property
    def label(self) -> str:
        """Display name, e.g. "Three of a kind"."""
        text = self.name.replace("_", " ")
        return text[0] + text[1:].lower()

    def __str__(self) -> str:
        return self.label


UPPER_CATEGORIES: tuple[Category, ...] = (
    Category.ONES,
    Category.TWOS,
    Category.THREES,
    Category.FOURS,
    Category.FIVES,
    Category.SIXES,
)

LOWER_CATEGORIES: tuple[Category, ...] = (
    Category.THREE_OF_A_KIND,
    Category.FOUR_OF_A_KIND,
    Category.FULL_HOUSE,
    Category.SMALL_STRAIGHT,
    Category.LARGE_STRAIGHT,
    Category.YAHTZEE,
    Category.CHANCE,
)

ALL_CATEGORIES: tuple[Category, ...] = UPPER_CATEGORIES + LOWER_CATEGORIES


class DiceStatus(Enum):
    """Status of the dice rack within a turn."""
    READY = "ready"
    ROLLING = "rolling"
    OUT_OF_ROLLS = "out_of_rolls"


class GameStatus(Enum):
    """Overall game status.

    Only UNINITIALIZED, INITIALIZED and GAME_IN_PROGRESS are used by the
    engine; the remaining labels are reserved for renderers.
    """
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    GAME_IN_PROGRESS = "game_in_progress"
    ROLLING = "rolling"
    GAME_OVER = "game_over"
    WAITING = "waiting"
    SCORING = "scoring"
    FINAL = "final"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of the five dice on the rack.

    Attributes:
        values: Tuple of five face values
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate the roll has five dice within range."""
        if len(self.values) != NUM_DICE:
            raise ValueError(
                f"A roll has exactly {NUM_DICE} dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __iter__(self):
        return iter(self.values)

    @property
    def total(self) -> int:
        return sum(self.values)

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))
