"""Exposed interface and shared vocabulary for agent layer components."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

Percept = Any
"""One unit of sensory input delivered to an agent per decision cycle."""

Action = Any
"""The directive an agent emits in response to a percept."""

State = Any
"""An agent's internal belief about its environment."""


@dataclass(frozen=True)
class NoOpAction:
    """Directive where the agent takes no further action."""

    val: str = "NoOp"

    def __str__(self) -> str:
        return self.val


NO_OP = NoOpAction()


@runtime_checkable
class AgentInterface(Protocol):
    """Defines the decision contract shared by agents and agent programs."""

    def execute(self, percept: Percept) -> Action:
        """Maps one percept to exactly one action.

        Args:
            percept (Percept): The observation for the current decision cycle.

        Returns:
            Action: The action chosen for this cycle.
        """
        ...
