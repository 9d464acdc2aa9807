"""
Yahtzee rules and state engine.

Dice, scoring, scorecards, turn rotation and automated agents for a
five-dice, thirteen-category game. Presentation is left to callers, who
subscribe to change notifications and drive the command surface on
GameSession.
"""

__version__ = "1.0.0"
