"""
Yahtzee - Agent Registry

Builds agents from their AgentKind.
"""

from __future__ import annotations

import random

from yahtzee.agents.base import Agent, AgentKind
from yahtzee.agents.human import HumanAgent
from yahtzee.agents.strategies import (
    HoldAboveThresholdAgent,
    HoldRepeatsAgent,
    RandomAgent,
    UpperSectionAgent,
)

AGENT_CLASSES: dict[AgentKind, type[Agent]] = {
    AgentKind.HUMAN: HumanAgent,
    AgentKind.HOLD_ABOVE_THRESHOLD: HoldAboveThresholdAgent,
    AgentKind.HOLD_REPEATS: HoldRepeatsAgent,
    AgentKind.UPPER_SECTION: UpperSectionAgent,
    AgentKind.RANDOM: RandomAgent,
}


def create_agent(kind: AgentKind | str, rng: random.Random | None = None) -> Agent:
    """
    Build an agent.

    Args:
        kind: An AgentKind or its value, e.g. "of_a_kinder"
        rng: Random source for automated agents

    Raises:
        ValueError: If kind is unknown
    """
    kind = AgentKind(kind)
    agent_cls = AGENT_CLASSES[kind]
    if agent_cls is HumanAgent:
        return HumanAgent()
    return agent_cls(rng=rng)
