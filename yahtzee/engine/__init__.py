"""
Yahtzee Game Engine.

Pure Python game rules with no presentation dependencies.
Handles dice rolling, scoring, score cards and turn rotation.
"""

from yahtzee.engine.base import (
    ALL_CATEGORIES,
    LOWER_CATEGORIES,
    MAX_ROLLS,
    NUM_DICE,
    UPPER_CATEGORIES,
    Category,
    DiceRoll,
    DiceStatus,
    GameStatus,
)
from yahtzee.engine.coordinator import TurnCoordinator
from yahtzee.engine.dice import DiceRack
from yahtzee.engine.errors import (
    GameError,
    InvalidCategoryError,
    OutOfRollsError,
    StaleTurnError,
)
from yahtzee.engine.player import Player, PlayerIdentity
from yahtzee.engine.scorecard import ScoreCard, ScoreEntry
from yahtzee.engine.scoring import ScoringEngine

__all__ = [
    # Data Classes
    "DiceRoll",
    "PlayerIdentity",
    "ScoreEntry",
    # Enums and constants
    "ALL_CATEGORIES",
    "Category",
    "DiceStatus",
    "GameStatus",
    "LOWER_CATEGORIES",
    "MAX_ROLLS",
    "NUM_DICE",
    "UPPER_CATEGORIES",
    # Errors
    "GameError",
    "InvalidCategoryError",
    "OutOfRollsError",
    "StaleTurnError",
    # Components
    "DiceRack",
    "Player",
    "ScoreCard",
    "ScoringEngine",
    "TurnCoordinator",
]
