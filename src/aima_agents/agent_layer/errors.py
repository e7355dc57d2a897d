"""Failures raised when an agent program cannot resolve a percept to an action."""

from typing import Any


class AgentProgramError(Exception):
    """Base class for agent program resolution failures."""


class UnresolvedLookupError(AgentProgramError, LookupError):
    """The accumulated percept sequence has no entry in the lookup table."""

    def __init__(self, sequence: tuple[Any, ...]):
        super().__init__(f"No table entry for percept sequence {sequence!r}")
        self.sequence = sequence


class UnresolvedMatchError(AgentProgramError, LookupError):
    """No rule in the rule set matches the current state."""

    def __init__(self, state: Any):
        super().__init__(f"No rule matches state {state!r}")
        self.state = state
