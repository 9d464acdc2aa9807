"""
Yahtzee - Dice Rack

The five dice shared by every player, with hold flags and the per-turn
roll counter. One rack exists per game session; it is reset at the start
of every turn.
"""

from __future__ import annotations

import logging
import random
import threading

from yahtzee.engine.base import DIE_FACES, MAX_ROLLS, NUM_DICE, DiceRoll, DiceStatus
from yahtzee.engine.errors import OutOfRollsError
from yahtzee.engine.validators import validate_die_index
from yahtzee.realtime.events import GameEvent
from yahtzee.realtime.notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class DiceRack:
    """Five dice, their hold flags, the roll count and a status.

    Invariant: status is OUT_OF_ROLLS exactly when the roll count is
    MAX_ROLLS. Mutations are serialised by a lock because an agent thread
    and the dispatcher share the rack.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self._values = [self._draw() for _ in range(NUM_DICE)]
        self._held = [False] * NUM_DICE
        self._rolls = 0
        self._status = DiceStatus.READY
        self.notifier = ChangeNotifier("dice")

    def _draw(self) -> int:
        return self._rng.randint(1, DIE_FACES)

    def roll(self) -> DiceRoll:
        """Roll every die that is not held.

        Returns:
            The new roll

        Raises:
            OutOfRollsError: If the dice were already rolled three times
                this turn. Nothing is changed in that case.
        """
        with self._lock:
            if self._rolls >= MAX_ROLLS:
                raise OutOfRollsError(self._rolls)

            for i in range(NUM_DICE):
                if not self._held[i]:
                    self._values[i] = self._draw()
            self._rolls += 1
            self._status = (
                DiceStatus.OUT_OF_ROLLS if self._rolls >= MAX_ROLLS else DiceStatus.ROLLING
            )
            result = DiceRoll(values=tuple(self._values))

        logger.debug("Roll %d: %s", self._rolls, result.values)
        self.notifier.publish(GameEvent.DICE_ROLLED)
        return result

    def toggle_hold(self, index: int) -> bool:
        """Flip the held flag of die `index` and return the new flag."""
        validate_die_index(index)
        with self._lock:
            self._held[index] = not self._held[index]
            held = self._held[index]

        self.notifier.publish(GameEvent.DICE_HELD)
        return held

    def reset(self) -> None:
        """Clear all holds and the roll counter for a new turn."""
        with self._lock:
            self._held = [False] * NUM_DICE
            self._rolls = 0
            self._status = DiceStatus.READY

        self.notifier.publish(GameEvent.DICE_RESET)

    def current_roll(self) -> DiceRoll:
        """Snapshot of the five current values."""
        with self._lock:
            return DiceRoll(values=tuple(self._values))

    def is_held(self, index: int) -> bool:
        validate_die_index(index)
        with self._lock:
            return self._held[index]

    @property
    def held(self) -> tuple[bool, ...]:
        with self._lock:
            return tuple(self._held)

    @property
    def roll_count(self) -> int:
        with self._lock:
            return self._rolls

    @property
    def status(self) -> DiceStatus:
        with self._lock:
            return self._status

    @property
    def rolls_remaining(self) -> int:
        with self._lock:
            return MAX_ROLLS - self._rolls
