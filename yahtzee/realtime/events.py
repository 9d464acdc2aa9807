"""
Yahtzee - Change Event Definitions

Event types and payloads published by the dice rack, scorecards and the
turn coordinator. Payloads only say what changed; subscribers re-query
the state they care about.
"""

from dataclasses import dataclass
from enum import Enum, auto


class GameEvent(Enum):
    """Changes that can occur during a game."""

    PLAYER_JOINED = auto()
    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DICE_HELD = auto()
    DICE_RESET = auto()
    SCORE_TAKEN = auto()
    BONUS_AWARDED = auto()
    TURN_ADVANCED = auto()
    AGENT_TURN_STARTED = auto()
    AGENT_TURN_ENDED = auto()
    SCORES_RESET = auto()
    GAME_RESET = auto()
    GAME_WON = auto()
    STATE_UPDATED = auto()


@dataclass(frozen=True)
class EventPayload:
    """A change notification.

    Attributes:
        event: What kind of change happened
        source: Name of the publishing component ("dice", "coordinator",
            or "scorecard")
    """

    event: GameEvent
    source: str


