"""Exposed interface for the environment an agent is situated in."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentInterface(Protocol):
    """Supplies percepts to agents and consumes the actions they emit.

    Concrete environments live outside this package. Any object exposing these two methods can
    drive an agent: pull a percept, hand it to ``execute``, and pass the result back.
    """

    def percept(self, agent: Any) -> Any:
        """Returns the percept the given agent senses for the current cycle.

        Args:
            agent (Any): The agent whose sensors are being read."""

        ...

    def execute_action(self, agent: Any, action: Any) -> None:
        """Applies an agent's action to the environment through its actuators.

        Args:
            agent (Any): The acting agent.
            action (Any): The action returned by the agent for the current cycle."""

        ...
