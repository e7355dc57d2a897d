"""Agent wrapper and the uniform ``execute`` entry point.

An agent perceives its environment through sensors and acts through actuators (Fig 2.1, AIMA 3ed).
Here the agent is only a holder for its program: all decision logic lives in the program.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from aima_agents.agent_layer.agent_interface import Action, Percept
from aima_agents.agent_layer.agent_program import AgentProgram

AP = TypeVar("AP", bound=AgentProgram)


class Agent(Generic[AP]):
    """Binds one agent program for the agent's lifetime and forwards decisions to it."""

    def __init__(self, program: AP):
        if not isinstance(program, AgentProgram):
            raise TypeError(f"Agent requires an AgentProgram, got {type(program).__name__}")
        self._program = program

    @property
    def program(self) -> AP:
        return self._program

    def execute(self, percept: Percept) -> Action:
        return self._program.execute(percept)

    def __repr__(self) -> str:
        return f"Agent({type(self._program).__name__})"


def execute(target: AgentProgram | Agent, percept: Percept) -> Action:
    """
    Given a percept, return the action chosen by an agent or agent program.

    The decision algorithm is whichever one the program's class implements; callers do not need to
    know which strategy is active.

    Args:
        target: An ``Agent`` or any concrete ``AgentProgram``.
        percept: The observation for the current decision cycle.

    Returns:
        Action: Exactly one action for the percept.

    Raises:
        TypeError: If ``target`` is neither an agent nor an agent program.
        UnresolvedLookupError: A table-driven program has no entry for its percept history.
        UnresolvedMatchError: A reflex program has no rule matching its state.
    """

    if isinstance(target, (Agent, AgentProgram)):
        return target.execute(percept)

    raise TypeError(f"Cannot execute percept on {type(target).__name__}; expected an agent program")
