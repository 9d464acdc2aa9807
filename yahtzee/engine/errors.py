"""
Yahtzee - Engine Exceptions
"""


class GameError(Exception):
    """Base class for rule violations raised by the engine."""


class OutOfRollsError(GameError):
    """Raised when the dice are rolled a fourth time in one turn.

    Recoverable: the caller must stop rolling and commit a category.
    """

    def __init__(self, rolls: int) -> None:
        super().__init__(f"Dice already rolled {rolls} times this turn; score the hand.")
        self.rolls = rolls


class InvalidCategoryError(GameError, ValueError):
    """Raised for a missing or unknown scoring category (programmer error)."""

    def __init__(self, category: object) -> None:
        super().__init__(f"Invalid scoring category: {category!r}")
        self.category = category


class StaleTurnError(GameError):
    """Raised inside an agent turn whose game was restarted or reset."""

    def __init__(self, generation: int) -> None:
        super().__init__(f"Turn belongs to game {generation}, which is no longer in progress.")
        self.generation = generation
