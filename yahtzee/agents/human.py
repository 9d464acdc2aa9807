"""
Yahtzee - Human Agent

Turns are driven from outside through the coordinator's roll, hold and
commit commands, so taking a turn only releases the gate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yahtzee.agents.base import Agent, AgentKind

if TYPE_CHECKING:
    from yahtzee.engine.coordinator import TurnCoordinator


class HumanAgent(Agent):
    """Placeholder agent for a person at the controls."""

    kind = AgentKind.HUMAN
    name = "Human"

    @property
    def is_automated(self) -> bool:
        return False

    def take_turn(self, coordinator: "TurnCoordinator") -> None:
        coordinator.end_agent_turn()
