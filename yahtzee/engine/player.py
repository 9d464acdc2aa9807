"""
Yahtzee - Players

A player couples an immutable identity (name and agent) with a mutable
score card and a cumulative score carried across games.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yahtzee.engine.base import Category
from yahtzee.engine.scorecard import ScoreCard
from yahtzee.engine.validators import validate_category, validate_player_name

if TYPE_CHECKING:
    from yahtzee.agents.base import Agent


@dataclass(frozen=True)
class PlayerIdentity:
    """
    Who a player is and how they decide.

    Attributes:
        name: Display name
        agent: Decision maker taking this player's turns
    """
    name: str
    agent: "Agent"


class Player:
    """A seat in the rotation."""

    def __init__(self, name: str, agent: "Agent") -> None:
        self._identity = PlayerIdentity(name=validate_player_name(name), agent=agent)
        self._scorecard = ScoreCard()
        self._cumulative_score = 0
        self._first = False

    @property
    def identity(self) -> PlayerIdentity:
        return self._identity

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def agent(self) -> "Agent":
        return self._identity.agent

    @property
    def strategy_name(self) -> str:
        return self._identity.agent.name

    @property
    def scorecard(self) -> ScoreCard:
        return self._scorecard

    @property
    def cumulative_score(self) -> int:
        return self._cumulative_score

    @property
    def is_first(self) -> bool:
        return self._first

    def take_score(self, category: Category, value: int) -> bool:
        """Record a score on this player's card; False if already taken."""
        return self._scorecard.set_score(validate_category(category), value)

    def increment_score(self, points: int) -> None:
        """Add a finished game's final score to the cumulative score."""
        self._cumulative_score += points

    def reset_scorecard(self) -> None:
        """Replace the score card for a new game.

        The new card publishes through the old card's notifier, so
        subscriptions survive.
        """
        self._scorecard = ScoreCard(notifier=self._scorecard.notifier)

    def reset_score(self) -> None:
        self._cumulative_score = 0

    def mark_first(self) -> None:
        self._first = True

    def clear_first(self) -> None:
        self._first = False

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, strategy={self.strategy_name!r})"
