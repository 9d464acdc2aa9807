"""
Yahtzee - Scoring Engine

Stateless scoring of a five-dice roll against any of the thirteen
categories.

Scoring Rules:
    - Ones..Sixes: face value × number of dice showing it
    - Three/Four of a kind: sum of all dice if any face shows 3/4+ times
    - Full house: 25 for exactly a three and a pair
    - Small straight: 30 for four in a row
    - Large straight: 40 for five in a row
    - Yahtzee: 50 for five of a kind
    - Chance: sum of all dice
"""

from collections import Counter
from typing import Iterable, Sequence

from yahtzee.engine.base import ALL_CATEGORIES, Category, DiceRoll
from yahtzee.engine.validators import validate_category, validate_dice_values


class ScoringEngine:
    """
    Stateless scoring engine.

    All methods are class methods operating on immutable data.
    """

    FULL_HOUSE_POINTS = 25
    SMALL_STRAIGHT_POINTS = 30
    LARGE_STRAIGHT_POINTS = 40
    YAHTZEE_POINTS = 50

    @classmethod
    def score(cls, category: Category, roll: Sequence[int] | DiceRoll) -> int:
        """
        Score a roll for a category.

        Args:
            category: The category to score
            roll: Five dice values

        Returns:
            Points the roll is worth in that category

        Raises:
            InvalidCategoryError: If category is missing or unknown
            ValueError: If the roll is not five dice in 1-6
        """
        category = validate_category(category)
        values = validate_dice_values(roll)

        if category.is_upper:
            return cls._score_face(category.face, values)
        if category == Category.CHANCE:
            return sum(values)
        if category in (Category.SMALL_STRAIGHT, Category.LARGE_STRAIGHT):
            return cls._score_straight(category, values)
        return cls._score_of_a_kind(category, values)

    @classmethod
    def potential_scores(cls, roll: Sequence[int] | DiceRoll) -> dict[Category, int]:
        """Score a roll against every category, in scorecard order."""
        return {category: cls.score(category, roll) for category in ALL_CATEGORIES}

    @classmethod
    def best_category(
        cls,
        roll: Sequence[int] | DiceRoll,
        candidates: Iterable[Category],
    ) -> tuple[Category, int] | None:
        """
        Pick the highest scoring category among `candidates`.

        Ties go to the category declared first.

        Returns:
            (category, points), or None if there are no candidates
        """
        best: tuple[Category, int] | None = None
        for category in sorted(candidates, key=ALL_CATEGORIES.index):
            points = cls.score(category, roll)
            if best is None or points > best[1]:
                best = (category, points)
        return best

    @staticmethod
    def _score_face(face: int, values: tuple[int, ...]) -> int:
        return face * values.count(face)

    @classmethod
    def _score_of_a_kind(cls, category: Category, values: tuple[int, ...]) -> int:
        counts = Counter(values).values()

        if category == Category.FULL_HOUSE:
            return cls.FULL_HOUSE_POINTS if sorted(counts) == [2, 3] else 0
        if category == Category.THREE_OF_A_KIND:
            return sum(values) if any(c >= 3 for c in counts) else 0
        if category == Category.FOUR_OF_A_KIND:
            return sum(values) if any(c >= 4 for c in counts) else 0
        if category == Category.YAHTZEE:
            return cls.YAHTZEE_POINTS if 5 in counts else 0
        return 0

    @classmethod
    def _score_straight(cls, category: Category, values: tuple[int, ...]) -> int:
        distinct = sorted(set(values))
        if len(distinct) < 4:
            return 0

        # A gap is a jump of more than one between neighbouring distinct faces
        gaps = [
            i for i in range(1, len(distinct))
            if distinct[i] - distinct[i - 1] > 1
        ]

        if category == Category.LARGE_STRAIGHT:
            if len(distinct) == 5 and not gaps:
                return cls.LARGE_STRAIGHT_POINTS
            return 0

        if not gaps:
            return cls.SMALL_STRAIGHT_POINTS
        # Five distinct faces with one break at either end still hold four in a row
        if len(distinct) == 5 and len(gaps) == 1 and gaps[0] in (1, len(distinct) - 1):
            return cls.SMALL_STRAIGHT_POINTS
        return 0
