"""
Yahtzee - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable, Iterable

import pytest

from yahtzee.config.settings import Settings
from yahtzee.engine.base import ALL_CATEGORIES, Category
from yahtzee.engine.coordinator import TurnCoordinator
from yahtzee.engine.dice import DiceRack
from yahtzee.engine.scorecard import ScoreCard
from yahtzee.session.manager import GameSession


class ScriptedRandom:
    """Stand-in random source whose randint() replays a fixed sequence of faces."""

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = list(faces)

    def randint(self, a: int, b: int) -> int:
        if not self._faces:
            raise AssertionError("ScriptedRandom ran out of faces")
        return self._faces.pop(0)


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_table() -> dict[str, tuple[Category, tuple[int, ...], int]]:
    """
    Known rolls with expected scores.

    Returns:
        Dict mapping name to (category, dice_values, expected_points)
    """
    return {
        "yahtzee_sixes": (Category.YAHTZEE, (6, 6, 6, 6, 6), 50),
        "four_kind_sixes": (Category.FOUR_OF_A_KIND, (6, 6, 6, 6, 6), 30),
        "three_kind_sixes": (Category.THREE_OF_A_KIND, (6, 6, 6, 6, 6), 30),
        "full_house_yahtzee": (Category.FULL_HOUSE, (6, 6, 6, 6, 6), 0),
        "sixes_yahtzee": (Category.SIXES, (6, 6, 6, 6, 6), 30),
        "full_house": (Category.FULL_HOUSE, (1, 1, 2, 2, 2), 25),
        "three_kind_full_house": (Category.THREE_OF_A_KIND, (1, 1, 2, 2, 2), 8),
        "four_kind_full_house": (Category.FOUR_OF_A_KIND, (1, 1, 2, 2, 2), 0),
        "small_low_run": (Category.SMALL_STRAIGHT, (1, 2, 3, 4, 5), 30),
        "large_low_run": (Category.LARGE_STRAIGHT, (1, 2, 3, 4, 5), 40),
        "small_end_gap": (Category.SMALL_STRAIGHT, (1, 2, 3, 4, 6), 30),
        "large_end_gap": (Category.LARGE_STRAIGHT, (1, 2, 3, 4, 6), 0),
        "small_interior_gap": (Category.SMALL_STRAIGHT, (1, 1, 3, 4, 5), 0),
    }


# =============================================================================
# COMPONENT FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with no think time so agent turns run back to back."""
    return Settings(think_time_ms=0, min_players=2, random_seed=7)


@pytest.fixture
def scripted_rng() -> Callable[[Iterable[int]], ScriptedRandom]:
    """Factory for random sources that roll a fixed sequence of faces."""
    return ScriptedRandom


@pytest.fixture
def dice() -> DiceRack:
    return DiceRack(rng=random.Random(1234))


@pytest.fixture
def coordinator(dice: DiceRack) -> TurnCoordinator:
    return TurnCoordinator(dice, think_time_ms=0)


@pytest.fixture
def scorecard() -> ScoreCard:
    return ScoreCard()


@pytest.fixture
def session(settings: Settings) -> GameSession:
    return GameSession(settings)


@pytest.fixture
def fill_card() -> Callable[..., ScoreCard]:
    """Fill every open category on a card; `scores` overrides the default 0."""

    def _fill(card: ScoreCard, scores: dict[Category, int] | None = None) -> ScoreCard:
        scores = scores or {}
        for category in ALL_CATEGORIES:
            if not card.is_taken(category):
                card.set_score(category, scores.get(category, 0))
        return card

    return _fill
