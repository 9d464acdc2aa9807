"""
Yahtzee Session Layer.

The application context that owns a game and its pydantic snapshots.
"""

from yahtzee.session.manager import GameSession
from yahtzee.session.models import (
    DiceState,
    GameSnapshot,
    PlayerState,
    ScoreCardState,
    ScoreEntryState,
)

__all__ = [
    "DiceState",
    "GameSession",
    "GameSnapshot",
    "PlayerState",
    "ScoreCardState",
    "ScoreEntryState",
]
