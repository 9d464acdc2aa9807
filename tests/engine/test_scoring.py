"""
Yahtzee - Scoring Engine Tests

Tests for every category, with extra coverage of straight detection.
"""

import itertools

import pytest

from yahtzee.engine.base import ALL_CATEGORIES, UPPER_CATEGORIES, Category, DiceRoll
from yahtzee.engine.errors import InvalidCategoryError
from yahtzee.engine.scoring import ScoringEngine

# Every distinct sorted roll of five dice
ALL_ROLLS = list(itertools.combinations_with_replacement(range(1, 7), 5))


# === Known Rolls ===


class TestKnownRolls:
    """Tests against the fixture table of hand-checked rolls."""

    def test_scoring_table(self, scoring_table):
        for name, (category, roll, expected) in scoring_table.items():
            assert ScoringEngine.score(category, roll) == expected, name

    def test_accepts_dice_roll_object(self):
        roll = DiceRoll(values=(6, 6, 6, 6, 6))
        assert ScoringEngine.score(Category.YAHTZEE, roll) == 50

    def test_order_does_not_matter(self):
        assert ScoringEngine.score(Category.LARGE_STRAIGHT, (5, 3, 1, 4, 2)) == 40


# === Upper Section and Chance ===


class TestFaceCategories:
    """Tests for Ones..Sixes and Chance over every roll."""

    def test_chance_is_sum(self):
        for roll in ALL_ROLLS:
            assert ScoringEngine.score(Category.CHANCE, roll) == sum(roll)

    @pytest.mark.parametrize("face,category", list(enumerate(UPPER_CATEGORIES, start=1)))
    def test_upper_is_face_times_count(self, face, category):
        for roll in ALL_ROLLS:
            assert ScoringEngine.score(category, roll) == face * roll.count(face)


# === Of a Kind ===


class TestOfAKind:
    """Tests for three/four of a kind, full house and Yahtzee."""

    def test_three_of_a_kind_sums_all_dice(self):
        assert ScoringEngine.score(Category.THREE_OF_A_KIND, (3, 3, 3, 5, 6)) == 20

    def test_three_of_a_kind_accepts_four(self):
        assert ScoringEngine.score(Category.THREE_OF_A_KIND, (2, 2, 2, 2, 6)) == 14

    def test_three_of_a_kind_needs_three(self):
        assert ScoringEngine.score(Category.THREE_OF_A_KIND, (2, 2, 3, 3, 6)) == 0

    def test_four_of_a_kind(self):
        assert ScoringEngine.score(Category.FOUR_OF_A_KIND, (5, 5, 5, 5, 1)) == 21

    def test_four_of_a_kind_needs_four(self):
        assert ScoringEngine.score(Category.FOUR_OF_A_KIND, (5, 5, 5, 1, 1)) == 0

    def test_full_house_shuffled(self):
        assert ScoringEngine.score(Category.FULL_HOUSE, (4, 2, 4, 2, 4)) == 25

    def test_full_house_needs_pair(self):
        assert ScoringEngine.score(Category.FULL_HOUSE, (4, 4, 4, 2, 3)) == 0

    def test_yahtzee_needs_five(self):
        assert ScoringEngine.score(Category.YAHTZEE, (1, 1, 1, 1, 2)) == 0

    @pytest.mark.parametrize("face", range(1, 7))
    def test_yahtzee_any_face(self, face):
        assert ScoringEngine.score(Category.YAHTZEE, (face,) * 5) == 50


# === Straights ===


class TestStraights:
    """Tests for the gap-counting straight rules."""

    @pytest.mark.parametrize("roll", [(1, 2, 3, 4, 5), (2, 3, 4, 5, 6)])
    def test_large_straights(self, roll):
        assert ScoringEngine.score(Category.LARGE_STRAIGHT, roll) == 40
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, roll) == 30

    @pytest.mark.parametrize("roll", [
        (1, 2, 3, 4, 4),
        (2, 3, 4, 5, 5),
        (3, 4, 5, 6, 3),
        (6, 5, 4, 3, 6),
    ])
    def test_four_distinct_run(self, roll):
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, roll) == 30
        assert ScoringEngine.score(Category.LARGE_STRAIGHT, roll) == 0

    @pytest.mark.parametrize("roll", [(1, 2, 3, 4, 6), (1, 3, 4, 5, 6)])
    def test_five_distinct_gap_at_end(self, roll):
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, roll) == 30
        assert ScoringEngine.score(Category.LARGE_STRAIGHT, roll) == 0

    @pytest.mark.parametrize("roll", [(1, 2, 4, 5, 6), (1, 2, 3, 5, 6)])
    def test_five_distinct_interior_gap(self, roll):
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, roll) == 0

    def test_four_distinct_with_gap(self):
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, (1, 1, 3, 4, 5)) == 0

    def test_three_distinct(self):
        assert ScoringEngine.score(Category.SMALL_STRAIGHT, (1, 2, 3, 3, 3)) == 0

    def test_matches_run_of_four_definition(self):
        """Every small straight found contains four consecutive faces."""
        runs = [{1, 2, 3, 4}, {2, 3, 4, 5}, {3, 4, 5, 6}]
        for roll in ALL_ROLLS:
            has_run = any(run <= set(roll) for run in runs)
            expected = 30 if has_run else 0
            assert ScoringEngine.score(Category.SMALL_STRAIGHT, roll) == expected, roll


# === Helpers ===


class TestPotentialScores:
    """Tests for potential_scores() and best_category()."""

    def test_potential_scores_covers_all_categories(self):
        scores = ScoringEngine.potential_scores((1, 2, 3, 4, 5))
        assert list(scores) == list(ALL_CATEGORIES)
        assert scores[Category.LARGE_STRAIGHT] == 40
        assert scores[Category.CHANCE] == 15

    def test_best_category_picks_maximum(self):
        best = ScoringEngine.best_category((6, 6, 6, 6, 6), ALL_CATEGORIES)
        assert best == (Category.YAHTZEE, 50)

    def test_best_category_ties_go_to_declaration_order(self):
        # Sixes, three of a kind, four of a kind and chance all score 30
        candidates = [Category.CHANCE, Category.FOUR_OF_A_KIND, Category.SIXES]
        best = ScoringEngine.best_category((6, 6, 6, 6, 6), candidates)
        assert best == (Category.SIXES, 30)

    def test_best_category_no_candidates(self):
        assert ScoringEngine.best_category((1, 2, 3, 4, 5), []) is None


# === Validation ===


class TestValidation:
    """Tests for invalid inputs."""

    def test_missing_category(self):
        with pytest.raises(InvalidCategoryError):
            ScoringEngine.score(None, (1, 2, 3, 4, 5))

    def test_category_name_string_rejected(self):
        with pytest.raises(InvalidCategoryError):
            ScoringEngine.score("CHANCE", (1, 2, 3, 4, 5))

    def test_invalid_category_is_value_error(self):
        with pytest.raises(ValueError):
            ScoringEngine.score(None, (1, 2, 3, 4, 5))

    def test_too_few_dice(self):
        with pytest.raises(ValueError, match="Exactly 5 dice"):
            ScoringEngine.score(Category.CHANCE, (1, 2, 3, 4))

    def test_die_out_of_range(self):
        with pytest.raises(ValueError, match="between 1 and 6"):
            ScoringEngine.score(Category.CHANCE, (1, 2, 3, 4, 7))
