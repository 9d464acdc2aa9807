"""
Yahtzee - Computer Strategies

Hold and category policies for the automated agents:

    - Four and Up: hold every die showing 4 or more
    - Of a Kinder: hold every die whose face appears at least twice
    - Upper Section: Of a Kinder holds, prefer the upper section when scoring
    - Random: hold unheld dice by coin flip, score a random open category
"""

from __future__ import annotations

import random
from collections import Counter

from yahtzee.agents.base import AgentKind, AutomatedAgent
from yahtzee.engine.base import ALL_CATEGORIES, UPPER_CATEGORIES, Category, DiceRoll
from yahtzee.engine.errors import GameError
from yahtzee.engine.scorecard import ScoreCard
from yahtzee.engine.scoring import ScoringEngine


class HoldAboveThresholdAgent(AutomatedAgent):
    """Holds high dice, scores the best open category."""

    kind = AgentKind.HOLD_ABOVE_THRESHOLD
    name = "Four and Up"

    def __init__(self, rng: random.Random | None = None, threshold: int = 4) -> None:
        super().__init__(rng)
        self.threshold = threshold

    def select_holds(self, roll: DiceRoll, held: tuple[bool, ...]) -> set[int]:
        return {i for i, value in enumerate(roll) if value >= self.threshold}


class HoldRepeatsAgent(AutomatedAgent):
    """Holds pairs and better, scores the best open category."""

    kind = AgentKind.HOLD_REPEATS
    name = "Of a Kinder"

    def select_holds(self, roll: DiceRoll, held: tuple[bool, ...]) -> set[int]:
        counts = Counter(roll.values)
        return {i for i, value in enumerate(roll) if counts[value] >= 2}


class UpperSectionAgent(HoldRepeatsAgent):
    """Scores the best open upper category when it is worth anything."""

    kind = AgentKind.UPPER_SECTION
    name = "Upper Section"

    def select_category(self, roll: DiceRoll, scorecard: ScoreCard) -> Category:
        open_upper = [c for c in UPPER_CATEGORIES if not scorecard.is_taken(c)]
        best_upper = ScoringEngine.best_category(roll, open_upper)
        if best_upper is not None and best_upper[1] > 0:
            return best_upper[0]
        return super().select_category(roll, scorecard)


class RandomAgent(AutomatedAgent):
    """Coin-flip holds and a random open category."""

    kind = AgentKind.RANDOM
    name = "Random"

    def select_holds(self, roll: DiceRoll, held: tuple[bool, ...]) -> set[int]:
        return {i for i in range(len(roll)) if not held[i] and self.rng.random() < 0.5}

    def select_category(self, roll: DiceRoll, scorecard: ScoreCard) -> Category:
        if scorecard.is_full():
            raise GameError("No category left to score")
        category = self.rng.choice(ALL_CATEGORIES)
        while scorecard.is_taken(category):
            category = self.rng.choice(ALL_CATEGORIES)
        return category
