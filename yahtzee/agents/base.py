"""
Yahtzee - Agent Base Classes

An agent decides a player's turn. Automated agents run each turn on their
own daemon thread: roll, pause, choose holds, pause, up to three rolls,
then commit a category through the coordinator.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from yahtzee.engine.base import MAX_ROLLS, Category, DiceRoll
from yahtzee.engine.errors import GameError, StaleTurnError
from yahtzee.engine.scorecard import ScoreCard
from yahtzee.engine.scoring import ScoringEngine

if TYPE_CHECKING:
    from yahtzee.engine.coordinator import TurnCoordinator
    from yahtzee.engine.player import Player

logger = logging.getLogger(__name__)


class AgentKind(Enum):
    """Available decision makers."""
    HUMAN = "human"
    HOLD_ABOVE_THRESHOLD = "four_and_up"
    HOLD_REPEATS = "of_a_kinder"
    UPPER_SECTION = "upper_section"
    RANDOM = "random"


class Agent(ABC):
    """Takes turns for one player."""

    kind: ClassVar[AgentKind]
    name: ClassVar[str]

    @property
    def is_automated(self) -> bool:
        return True

    @abstractmethod
    def take_turn(self, coordinator: "TurnCoordinator") -> None:
        """Start the active player's turn.

        Implementations must eventually call `coordinator.end_agent_turn()`.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AutomatedAgent(Agent):
    """
    Base for computer players.

    Subclasses supply the hold policy (`select_holds`) and may override
    the category policy (`select_category`, default: best untaken score).

    Attributes:
        rng: Random source for the policy
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self._thread: threading.Thread | None = None

    def take_turn(self, coordinator: "TurnCoordinator") -> None:
        player = coordinator.active_player
        if player is None:
            return
        generation = coordinator.generation
        coordinator.begin_agent_turn()

        thread = threading.Thread(
            target=self._run_turn,
            args=(coordinator, player, generation),
            daemon=True,
            name=f"agent-{player.name}",
        )
        self._thread = thread
        thread.start()

    def join(self, timeout: float | None = None) -> None:
        """Wait for the most recent turn thread to finish."""
        if self._thread is not None:
            self._thread.join(timeout)

    @abstractmethod
    def select_holds(self, roll: DiceRoll, held: tuple[bool, ...]) -> set[int]:
        """Indices of dice to hold after `roll`.

        Dice already held stay held.
        """

    def select_category(self, roll: DiceRoll, scorecard: ScoreCard) -> Category:
        """Untaken category with the highest score for `roll`."""
        best = ScoringEngine.best_category(roll, scorecard.available())
        if best is None:
            raise GameError("No category left to score")
        return best[0]

    # -- Turn thread --------------------------------------------------------

    def _run_turn(
        self,
        coordinator: "TurnCoordinator",
        player: "Player",
        generation: int,
    ) -> None:
        error: Exception | None = None
        try:
            self._play(coordinator, player, generation)
            coordinator.dice.reset()
        except StaleTurnError:
            logger.debug("Dropped %s's turn from game %d", player.name, generation)
            return
        except Exception as exc:
            error = exc
        finally:
            coordinator.end_agent_turn()

        if error is not None:
            logger.error(
                "%s turn failed for %s", self.name, player.name, exc_info=error
            )
            coordinator.report_agent_error(player, error)
            return

        try:
            coordinator.advance(generation)
        except Exception:
            logger.exception("Could not advance after %s's turn", player.name)

    def _play(
        self,
        coordinator: "TurnCoordinator",
        player: "Player",
        generation: int,
    ) -> None:
        dice = coordinator.dice
        pause = coordinator.think_time

        while dice.roll_count < MAX_ROLLS:
            if coordinator.agent_roll(generation) is None:
                raise StaleTurnError(generation)
            self._pause(pause)
            self._apply_holds(coordinator, generation)
            self._pause(pause)

        roll = dice.current_roll()
        category = self.select_category(roll, player.scorecard)
        points = ScoringEngine.score(category, roll)
        if not coordinator.take_score(
            category, points, player=player, generation=generation
        ):
            if not coordinator.is_current_game(generation):
                raise StaleTurnError(generation)
            raise GameError(f"{player.name} could not score {category.label}")

    def _apply_holds(self, coordinator: "TurnCoordinator", generation: int) -> None:
        dice = coordinator.dice
        held = dice.held
        for index in sorted(self.select_holds(dice.current_roll(), held)):
            if not held[index] and not coordinator.agent_toggle_hold(generation, index):
                raise StaleTurnError(generation)

    @staticmethod
    def _pause(seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
