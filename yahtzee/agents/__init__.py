"""
Yahtzee Agents.

Human and computer decision makers that take turns for a player.
"""

from yahtzee.agents.base import Agent, AgentKind, AutomatedAgent
from yahtzee.agents.human import HumanAgent
from yahtzee.agents.registry import AGENT_CLASSES, create_agent
from yahtzee.agents.strategies import (
    HoldAboveThresholdAgent,
    HoldRepeatsAgent,
    RandomAgent,
    UpperSectionAgent,
)

__all__ = [
    "AGENT_CLASSES",
    "Agent",
    "AgentKind",
    "AutomatedAgent",
    "HoldAboveThresholdAgent",
    "HoldRepeatsAgent",
    "HumanAgent",
    "RandomAgent",
    "UpperSectionAgent",
    "create_agent",
]
