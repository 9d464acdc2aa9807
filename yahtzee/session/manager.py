"""
Yahtzee - Game Session

Top-level application context. A session owns one dice rack and one turn
coordinator and exposes the command and query surface used by renderers
and drivers. Sessions are independent; any number may coexist.
"""

from __future__ import annotations

import logging
import random

from yahtzee.agents.base import AgentKind
from yahtzee.agents.registry import create_agent
from yahtzee.config.settings import Settings, get_settings
from yahtzee.engine.base import Category, DiceRoll, GameStatus
from yahtzee.engine.coordinator import ErrorHook, TurnCoordinator
from yahtzee.engine.dice import DiceRack
from yahtzee.engine.player import Player
from yahtzee.engine.scorecard import ScoreCard
from yahtzee.realtime.notifier import Subscriber
from yahtzee.session.models import (
    DiceState,
    GameSnapshot,
    PlayerState,
    ScoreCardState,
    ScoreEntryState,
)

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the state of one game and the commands that drive it.

    Wraps the DiceRack and TurnCoordinator with player creation by agent
    kind, settings-driven defaults and pydantic snapshots.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: random.Random | None = None,
        on_error: ErrorHook | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._rng = rng or random.Random(self._settings.random_seed)
        self.dice = DiceRack(rng=self._spawn_rng())
        self.coordinator = TurnCoordinator(
            self.dice,
            think_time_ms=self._settings.think_time_ms,
            on_error=on_error,
        )

    def _spawn_rng(self) -> random.Random:
        return random.Random(self._rng.getrandbits(64))

    # -- Subscription -------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> None:
        """Receive dice and coordinator notifications.

        Score card events of seated players are relayed by the
        coordinator, so this covers the whole game.
        """
        self.dice.notifier.subscribe(callback)
        self.coordinator.notifier.subscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self.dice.notifier.unsubscribe(callback)
        self.coordinator.notifier.unsubscribe(callback)

    # -- Commands -----------------------------------------------------------

    def add_player(self, name: str, kind: AgentKind | str = AgentKind.HUMAN) -> Player | None:
        """Create a player with an agent of `kind` and seat them.

        Returns:
            The new player, or None if a game is in progress
        """
        player = Player(name, create_agent(kind, rng=self._spawn_rng()))
        if not self.coordinator.add_player(player):
            logger.warning("Cannot add %s while a game is in progress", player.name)
            return None
        return player

    def roll(self) -> DiceRoll | None:
        """Roll for the active human player (None when not their turn)."""
        return self.coordinator.roll()

    def toggle_hold(self, index: int) -> bool:
        return self.coordinator.toggle_hold(index)

    def take_score(self, category: Category) -> bool:
        """Score the current dice in `category` for the active human player."""
        return self.coordinator.commit_roll(category)

    def set_play_speed(self, percent: int) -> int:
        """Set the computer play speed (0-100); returns the think time in ms."""
        return self.coordinator.set_play_speed(percent)

    def new_game(self, timeout: float | None = None) -> bool:
        return self.coordinator.new_game(self._settings.min_players, timeout)

    def reset_game(self) -> None:
        self.coordinator.reset_game()

    def next_turn(self, timeout: float | None = None) -> bool:
        return self.coordinator.next_turn(timeout)

    def wait_until_finished(self, timeout: float | None = None) -> bool:
        return self.coordinator.wait_until_finished(timeout)

    # -- Queries ------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def status(self) -> GameStatus:
        return self.coordinator.status

    @property
    def players(self) -> list[Player]:
        return self.coordinator.players

    def snapshot(self) -> GameSnapshot:
        """Capture the whole observable state."""
        return GameSnapshot(
            status=self.coordinator.status,
            agent_turn_in_progress=self.coordinator.agent_turn_in_progress,
            think_time_ms=self.coordinator.think_time_ms,
            players=[self._player_state(p) for p in self.coordinator.players],
            dice=DiceState(
                values=list(self.dice.current_roll().values),
                held=list(self.dice.held),
                roll_count=self.dice.roll_count,
                status=self.dice.status,
            ),
        )

    @staticmethod
    def _player_state(player: Player) -> PlayerState:
        return PlayerState(
            name=player.name,
            strategy=player.strategy_name,
            cumulative_score=player.cumulative_score,
            is_first=player.is_first,
            scorecard=GameSession._scorecard_state(player.scorecard),
        )

    @staticmethod
    def _scorecard_state(card: ScoreCard) -> ScoreCardState:
        return ScoreCardState(
            entries=[
                ScoreEntryState(
                    category=entry.category,
                    label=entry.category.label,
                    score=entry.score,
                    taken=entry.taken,
                )
                for entry in card
            ],
            upper_total=card.upper_total,
            upper_bonus=card.upper_bonus,
            lower_total=card.lower_total,
            yahtzee_bonus=card.yahtzee_bonus,
            yahtzee_scored=card.yahtzee_scored,
            final_score=card.final_score,
        )
