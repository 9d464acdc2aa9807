"""
Yahtzee - Turn Coordinator

Owns the player rotation, the game status and the "agent turn in
progress" gate. Every score submission and turn hand-off goes through
here.

State machine:
    UNINITIALIZED --start_game--> GAME_IN_PROGRESS --finish_game--> INITIALIZED
    INITIALIZED   --start_game--> GAME_IN_PROGRESS
    any           --reset_game--> UNINITIALIZED

At most one automated agent turn runs at a time. `next_turn` blocks on a
condition variable until the running turn releases the gate.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable

from yahtzee.engine.base import Category, DiceRoll, DiceStatus, GameStatus
from yahtzee.engine.dice import DiceRack
from yahtzee.engine.player import Player
from yahtzee.engine.scoring import ScoringEngine
from yahtzee.engine.validators import validate_category, validate_play_speed
from yahtzee.realtime.events import EventPayload, GameEvent
from yahtzee.realtime.notifier import ChangeNotifier

logger = logging.getLogger(__name__)

ErrorHook = Callable[[Player, BaseException], None]

DEFAULT_THINK_TIME_MS = 500


class TurnCoordinator:
    """Rotation, status and turn gate for one game.

    The player at the head of the rotation is the active player. A
    successful score moves the head to the tail.
    """

    def __init__(
        self,
        dice: DiceRack,
        *,
        think_time_ms: int = DEFAULT_THINK_TIME_MS,
        on_error: ErrorHook | None = None,
    ) -> None:
        self._dice = dice
        self._players: deque[Player] = deque()
        self._status = GameStatus.UNINITIALIZED
        self._agent_playing = False
        self._think_time_ms = think_time_ms
        self._generation = 0
        self._restart_pending = False
        self._cond = threading.Condition(threading.RLock())
        self.notifier = ChangeNotifier("coordinator")
        self.on_error = on_error

        dice.notifier.subscribe(self._on_dice_changed)

    # -- Queries ----------------------------------------------------------

    @property
    def dice(self) -> DiceRack:
        return self._dice

    @property
    def status(self) -> GameStatus:
        with self._cond:
            return self._status

    @property
    def players(self) -> list[Player]:
        """Players in turn order; the first is the active player."""
        with self._cond:
            return list(self._players)

    @property
    def active_player(self) -> Player | None:
        with self._cond:
            return self._players[0] if self._players else None

    @property
    def agent_turn_in_progress(self) -> bool:
        with self._cond:
            return self._agent_playing

    @property
    def generation(self) -> int:
        """Counter identifying the current game; bumps on every start or reset."""
        with self._cond:
            return self._generation

    @property
    def think_time_ms(self) -> int:
        return self._think_time_ms

    @property
    def think_time(self) -> float:
        """Think time in seconds."""
        return self._think_time_ms / 1000.0

    def set_play_speed(self, percent: int) -> int:
        """Map a 0-100 play speed to a think time of 1000 - 10 × percent ms."""
        self._think_time_ms = 1000 - 10 * validate_play_speed(percent)
        logger.debug("Think time set to %d ms", self._think_time_ms)
        self.notifier.publish(GameEvent.STATE_UPDATED)
        return self._think_time_ms

    def is_current_game(self, generation: int) -> bool:
        """True while `generation` identifies the game in progress."""
        with self._cond:
            return (
                generation == self._generation
                and self._status == GameStatus.GAME_IN_PROGRESS
            )

    def is_over(self) -> bool:
        """True when every player's score card is full. Changes nothing."""
        with self._cond:
            if self._status == GameStatus.UNINITIALIZED or not self._players:
                return False
            return all(p.scorecard.is_full() for p in self._players)

    # -- Rotation -----------------------------------------------------------

    def add_player(self, player: Player) -> bool:
        """Append a player to the rotation.

        Returns:
            False if a game is in progress, True otherwise
        """
        with self._cond:
            if self._status == GameStatus.GAME_IN_PROGRESS:
                return False
            if not self._players:
                player.mark_first()
            self._players.append(player)
        player.scorecard.notifier.subscribe(self.notifier.relay)

        logger.info("Player %s joined (%s)", player.name, player.strategy_name)
        self.notifier.publish(GameEvent.PLAYER_JOINED)
        return True

    def take_score(
        self,
        category: Category,
        value: int,
        *,
        player: Player | None = None,
        generation: int | None = None,
    ) -> bool:
        """Record a score for the active player and pass the turn.

        Args:
            category: Category to fill
            value: Points to record
            player: If given, the score is only recorded while this player
                is at the head of the rotation
            generation: If given, the score is only recorded while this game
                is still in progress

        Returns:
            False if the active player already used `category`, or the
            player or game no longer match
        """
        validate_category(category)
        with self._cond:
            if not self._players:
                return False
            if generation is not None and not self.is_current_game(generation):
                return False
            head = self._players[0]
            if player is not None and head is not player:
                return False
            if not head.take_score(category, value):
                return False
            self._players.rotate(-1)

        logger.info("%s scored %d in %s", head.name, value, category.label)
        self.notifier.publish(GameEvent.TURN_ADVANCED)
        return True

    def commit_roll(self, category: Category) -> bool:
        """Score the current dice for the active human player.

        Scores the category, resets the dice and advances to the next turn.

        Returns:
            False if no game is running, an agent is playing, the dice have
            not been rolled this turn, or the category is already taken
        """
        validate_category(category)
        with self._cond:
            if self._status != GameStatus.GAME_IN_PROGRESS or self._agent_playing:
                return False
            if self._dice.status == DiceStatus.READY:
                return False
            generation = self._generation
            value = ScoringEngine.score(category, self._dice.current_roll())
            if not self.take_score(category, value):
                return False
            self._dice.reset()

        self.advance(generation)
        return True

    def show_winner(self) -> Player | None:
        """Rotate the highest final score to the head of the rotation.

        Ties go to the first top scorer met from the current head.

        Returns:
            The winner, or None if the game is not over
        """
        with self._cond:
            if not self.is_over():
                return None
            best = max(p.scorecard.final_score for p in self._players)
            while self._players[0].scorecard.final_score != best:
                self._players.rotate(-1)
            winner = self._players[0]

        logger.info("%s wins with %d", winner.name, best)
        self.notifier.publish(GameEvent.GAME_WON)
        return winner

    def record_scores(self) -> None:
        """Add this game's final scores to every player's cumulative score."""
        with self._cond:
            for player in self._players:
                player.increment_score(player.scorecard.final_score)

        self.notifier.publish(GameEvent.STATE_UPDATED)

    def reset_scores(self) -> None:
        """Rotate back to the first player and hand out fresh score cards."""
        with self._cond:
            for _ in range(len(self._players)):
                if self._players[0].is_first:
                    break
                self._players.rotate(-1)
            for player in self._players:
                player.reset_scorecard()

        self.notifier.publish(GameEvent.SCORES_RESET)

    def reset_game(self) -> None:
        """Drop every player, clear the dice and return to UNINITIALIZED.

        A running agent turn belongs to the old game from here on; its
        remaining rolls, holds and score are refused.
        """
        with self._cond:
            for player in self._players:
                player.clear_first()
                player.scorecard.notifier.unsubscribe(self.notifier.relay)
            self._players = deque()
            self._status = GameStatus.UNINITIALIZED
            self._generation += 1
            self._dice.reset()
            self._cond.notify_all()

        logger.info("Game reset")
        self.notifier.publish(GameEvent.GAME_RESET)

    # -- Game lifecycle -----------------------------------------------------

    def start_game(self) -> int:
        """Enter GAME_IN_PROGRESS and return the new game's generation."""
        with self._cond:
            self._status = GameStatus.GAME_IN_PROGRESS
            self._generation += 1
            generation = self._generation

        logger.info("Game %d started with %d players", generation, len(self._players))
        self.notifier.publish(GameEvent.GAME_STARTED)
        return generation

    def new_game(self, min_players: int = 1, timeout: float | None = None) -> bool:
        """Start a fresh game and hand the first turn out.

        A finished game's scores are added to the cumulative scores first.
        A game in progress is abandoned once its running agent turn, if
        any, completes.

        Returns:
            False if there are too few players or the wait timed out
        """
        with self._cond:
            if len(self._players) < min_players:
                logger.warning(
                    "Need at least %d players, have %d", min_players, len(self._players)
                )
                return False
            # Keeps the running turn from handing out another one while we wait.
            self._restart_pending = True
            try:
                if not self._cond.wait_for(lambda: not self._agent_playing, timeout):
                    return False

                if self._status == GameStatus.INITIALIZED:
                    self.record_scores()
                if self._status in (GameStatus.GAME_IN_PROGRESS, GameStatus.INITIALIZED):
                    self.reset_scores()
                self._dice.reset()
                self.start_game()
            finally:
                self._restart_pending = False
            return self.next_turn()

    def finish_game(self) -> None:
        """Leave GAME_IN_PROGRESS once every card is full."""
        with self._cond:
            self._status = GameStatus.INITIALIZED
            self._cond.notify_all()

        self.notifier.publish(GameEvent.STATE_UPDATED)

    def next_turn(self, timeout: float | None = None) -> bool:
        """Hand the turn to the active player's agent.

        Blocks until no agent turn is in progress.

        Returns:
            False if the wait timed out or there are no players
        """
        with self._cond:
            if not self._cond.wait_for(lambda: not self._agent_playing, timeout):
                logger.warning("Timed out waiting for the running agent turn")
                return False
            if not self._players:
                return False
            player = self._players[0]
            logger.debug("Turn for %s (%s)", player.name, player.strategy_name)
            player.agent.take_turn(self)
            return True

    def advance(self, generation: int) -> bool:
        """Move on after a committed turn: next turn, or finish and crown a winner.

        Calls from a game that has since been restarted or reset are ignored.
        """
        with self._cond:
            if self._restart_pending:
                logger.debug("Ignoring advance for game %d, restart pending", generation)
                return False
            if generation != self._generation or self._status != GameStatus.GAME_IN_PROGRESS:
                logger.debug("Ignoring advance for stale game %d", generation)
                return False
            if self.is_over():
                self.finish_game()
                self.show_winner()
                return True
            return self.next_turn()

    def wait_until_finished(self, timeout: float | None = None) -> bool:
        """Block until the current game leaves GAME_IN_PROGRESS."""
        with self._cond:
            return self._cond.wait_for(
                lambda: self._status != GameStatus.GAME_IN_PROGRESS, timeout
            )

    # -- Agent gate ---------------------------------------------------------

    def begin_agent_turn(self) -> None:
        with self._cond:
            self._agent_playing = True

        self.notifier.publish(GameEvent.AGENT_TURN_STARTED)

    def end_agent_turn(self) -> None:
        with self._cond:
            self._agent_playing = False
            self._cond.notify_all()

        self.notifier.publish(GameEvent.AGENT_TURN_ENDED)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until no agent turn is in progress."""
        with self._cond:
            return self._cond.wait_for(lambda: not self._agent_playing, timeout)

    def agent_roll(self, generation: int) -> DiceRoll | None:
        """Roll for an agent turn; None once that turn's game is gone."""
        with self._cond:
            if not self.is_current_game(generation):
                return None
            return self._dice.roll()

    def agent_toggle_hold(self, generation: int, index: int) -> bool:
        with self._cond:
            if not self.is_current_game(generation):
                return False
            self._dice.toggle_hold(index)
            return True

    def report_agent_error(self, player: Player, error: BaseException) -> None:
        """Forward an agent fault to the error hook, if any."""
        if self.on_error is None:
            return
        try:
            self.on_error(player, error)
        except Exception:
            logger.exception("Error hook failed for %s", player.name)

    # -- Human commands -----------------------------------------------------

    def roll(self) -> DiceRoll | None:
        """Roll for the active human player.

        Returns:
            The new roll, or None if no game is running or an agent is playing

        Raises:
            OutOfRollsError: If the dice were already rolled three times
        """
        with self._cond:
            if self._status != GameStatus.GAME_IN_PROGRESS or self._agent_playing:
                return None
            return self._dice.roll()

    def toggle_hold(self, index: int) -> bool:
        """Flip a hold for the active human player.

        Only allowed while a game is running, no agent is playing, and the
        dice have been rolled with rolls remaining.
        """
        with self._cond:
            if self._status != GameStatus.GAME_IN_PROGRESS or self._agent_playing:
                return False
            if self._dice.status != DiceStatus.ROLLING:
                return False
            self._dice.toggle_hold(index)
            return True

    # -- Dice subscription --------------------------------------------------

    def _on_dice_changed(self, payload: EventPayload) -> None:
        """Grant the Yahtzee bonus when the active player rolls another Yahtzee."""
        if payload.event != GameEvent.DICE_ROLLED:
            return
        with self._cond:
            if self._status != GameStatus.GAME_IN_PROGRESS or not self._players:
                return
            card = self._players[0].scorecard
            if not card.yahtzee_scored:
                return
            if ScoringEngine.score(Category.YAHTZEE, self._dice.current_roll()) > 0:
                if card.take_yahtzee_bonus():
                    logger.info("Yahtzee bonus for %s", self._players[0].name)
