"""
Yahtzee - Score Card

Per-player record of the thirteen categories plus the upper-section and
Yahtzee bonuses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from yahtzee.engine.base import (
    ALL_CATEGORIES,
    LOWER_CATEGORIES,
    UPPER_BONUS_POINTS,
    UPPER_BONUS_THRESHOLD,
    UPPER_CATEGORIES,
    YAHTZEE_BONUS_POINTS,
    Category,
)
from yahtzee.engine.validators import validate_category
from yahtzee.realtime.events import GameEvent
from yahtzee.realtime.notifier import ChangeNotifier

logger = logging.getLogger(__name__)


@dataclass
class ScoreEntry:
    """
    A single line on the score card.

    Attributes:
        category: The category this line records
        score: Points recorded (0 until taken)
        taken: Whether the category has been used
    """
    category: Category
    score: int = 0
    taken: bool = False

    def __str__(self) -> str:
        return f"{self.category.label}\t{self.score}"


class ScoreCard:
    """Thirteen score entries and the derived bonuses.

    The upper bonus is a one-way latch: once the upper total exceeds 62 it
    is set to 35 and never reverts. The Yahtzee bonus is granted at most
    once per fill count, so it can be requested every time a Yahtzee is
    rolled within the same turn.
    """

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        self._entries: dict[Category, ScoreEntry] = {
            category: ScoreEntry(category) for category in ALL_CATEGORIES
        }
        self._filled = 0
        self._yahtzee_scored = False
        self._yahtzee_bonus = 0
        self._bonus_fill_marker = 0
        self._upper_bonus = 0
        self.notifier = notifier or ChangeNotifier("scorecard")

    def set_score(self, category: Category, value: int) -> bool:
        """Record `value` for `category`.

        Returns:
            True if recorded, False if the category was already taken
        """
        entry = self._entries[validate_category(category)]
        if entry.taken:
            return False

        entry.score = value
        entry.taken = True
        self._filled += 1
        if category == Category.YAHTZEE and value > 0:
            self._yahtzee_scored = True
        if self._upper_bonus != UPPER_BONUS_POINTS and self.upper_total > UPPER_BONUS_THRESHOLD:
            self._upper_bonus = UPPER_BONUS_POINTS
            logger.debug("Upper bonus earned at upper total %d", self.upper_total)

        self.notifier.publish(GameEvent.SCORE_TAKEN)
        return True

    def take_yahtzee_bonus(self) -> bool:
        """Award the Yahtzee bonus if a Yahtzee was scored earlier.

        Returns:
            True if 100 points were added
        """
        if not self._yahtzee_scored or self._filled == self._bonus_fill_marker:
            return False

        self._yahtzee_bonus += YAHTZEE_BONUS_POINTS
        self._bonus_fill_marker = self._filled
        self.notifier.publish(GameEvent.BONUS_AWARDED)
        return True

    def entry(self, category: Category) -> ScoreEntry:
        return self._entries[validate_category(category)]

    def is_taken(self, category: Category) -> bool:
        return self.entry(category).taken

    def available(self) -> list[Category]:
        """Untaken categories in scorecard order."""
        return [c for c in ALL_CATEGORIES if not self._entries[c].taken]

    def is_full(self) -> bool:
        return self._filled == len(ALL_CATEGORIES)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries[c] for c in ALL_CATEGORIES)

    @property
    def filled(self) -> int:
        return self._filled

    @property
    def yahtzee_scored(self) -> bool:
        return self._yahtzee_scored

    @property
    def upper_total(self) -> int:
        """Sum of Ones..Sixes, without the bonus."""
        return sum(self._entries[c].score for c in UPPER_CATEGORIES)

    @property
    def lower_total(self) -> int:
        """Sum of the seven lower categories, without the Yahtzee bonus."""
        return sum(self._entries[c].score for c in LOWER_CATEGORIES)

    @property
    def upper_bonus(self) -> int:
        return self._upper_bonus

    @property
    def yahtzee_bonus(self) -> int:
        return self._yahtzee_bonus

    @property
    def final_score(self) -> int:
        return self.upper_total + self._upper_bonus + self.lower_total + self._yahtzee_bonus

    def __str__(self) -> str:
        lines = [str(entry) for entry in self]
        if self._upper_bonus:
            lines.append(f"Upper Bonus: {self._upper_bonus}")
        if self._yahtzee_bonus:
            lines.append(f"Yahtzee Bonus: {self._yahtzee_bonus}")
        return "\n".join(lines)
