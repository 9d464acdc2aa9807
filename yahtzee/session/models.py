"""
Yahtzee - Snapshot Models

Pydantic models describing the full observable state of a session, for
renderers that re-query after a change notification.
"""

from pydantic import BaseModel, Field

from yahtzee.engine.base import Category, DiceStatus, GameStatus


class DiceState(BaseModel):
    """The rack as a renderer sees it."""

    values: list[int] = Field(min_length=5, max_length=5)
    held: list[bool] = Field(min_length=5, max_length=5)
    roll_count: int = Field(ge=0, le=3)
    status: DiceStatus

    model_config = {"from_attributes": True}


class ScoreEntryState(BaseModel):
    """One scorecard line."""

    category: Category
    label: str
    score: int = 0
    taken: bool = False

    model_config = {"from_attributes": True}


class ScoreCardState(BaseModel):
    """A player's scorecard with totals and bonuses."""

    entries: list[ScoreEntryState]
    upper_total: int = 0
    upper_bonus: int = 0
    lower_total: int = 0
    yahtzee_bonus: int = 0
    yahtzee_scored: bool = False
    final_score: int = 0

    model_config = {"from_attributes": True}


class PlayerState(BaseModel):
    """A seat in the rotation."""

    name: str = Field(max_length=30)
    strategy: str
    cumulative_score: int = 0
    is_first: bool = False
    scorecard: ScoreCardState

    model_config = {"from_attributes": True}


class GameSnapshot(BaseModel):
    """Everything a renderer needs, players in turn order."""

    status: GameStatus
    agent_turn_in_progress: bool = False
    think_time_ms: int
    players: list[PlayerState] = Field(default_factory=list)
    dice: DiceState

    @property
    def active_player(self) -> PlayerState | None:
        return self.players[0] if self.players else None

    model_config = {"from_attributes": True}
