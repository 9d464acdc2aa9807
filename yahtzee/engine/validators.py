"""
Yahtzee - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from yahtzee.engine.base import DIE_FACES, NUM_DICE, Category, DiceRoll
from yahtzee.engine.errors import InvalidCategoryError


def validate_dice_values(values: Sequence[int] | DiceRoll) -> tuple[int, ...]:
    """
    Validate and normalize a five-dice roll.

    Args:
        values: Sequence of dice values or a DiceRoll

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if isinstance(values, DiceRoll):
        return values.values

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count != NUM_DICE:
        raise ValueError(f"Exactly {NUM_DICE} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(
                f"Die value at index {i} must be an integer, got {type(value).__name__}."
            )
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_die_index(index: int) -> int:
    """
    Validate the index of a die on the rack.

    Raises:
        ValueError: If the index is not 0-4
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < NUM_DICE):
        raise ValueError(
            f"Die index {index} is out of range. Must be between 0 and {NUM_DICE - 1}."
        )

    return index


def validate_category(category: object) -> Category:
    """
    Validate a scoring category.

    Raises:
        InvalidCategoryError: If category is None or not a Category
    """
    if not isinstance(category, Category):
        raise InvalidCategoryError(category)
    return category


def validate_play_speed(percent: int) -> int:
    """
    Validate a play speed percentage.

    Raises:
        ValueError: If percent is not an integer in 0-100
    """
    if not isinstance(percent, int) or isinstance(percent, bool):
        raise ValueError(f"Play speed must be an integer, got {type(percent).__name__}.")

    if not (0 <= percent <= 100):
        raise ValueError(f"Play speed must be 0-100, got {percent}.")

    return percent


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a player name.

    Raises:
        ValueError: If the name is blank or too long
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Player name cannot be empty.")
    if len(stripped) > 30:
        raise ValueError(f"Player name must be at most 30 characters, got {len(stripped)}.")

    return stripped
