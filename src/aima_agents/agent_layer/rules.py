"""Condition-action rules and first-match rule selection.

Rule matching is shared by the simple reflex and model-based reflex agent programs. A rule set is
any ordered iterable of ``Rule`` objects; the first rule whose condition holds for the state wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from aima_agents.agent_layer.agent_interface import Action, State
from aima_agents.agent_layer.errors import UnresolvedMatchError
from aima_agents.log import logger


class Rule(ABC):
    """Associates a state condition with the action to take when it holds.

    What counts as a condition is left to the concrete rule.
    """

    action: Action

    @abstractmethod
    def matches(self, state: State) -> bool:
        raise NotImplementedError("Subclasses must implement this method")


@dataclass(frozen=True)
class ConditionActionRule(Rule):
    """Rule whose condition is a predicate over the state."""

    condition: Callable[[State], bool]
    action: Action

    def __post_init__(self) -> None:
        if not callable(self.condition):
            raise TypeError(f"Rule condition must be callable, got {type(self.condition).__name__}")

    def matches(self, state: State) -> bool:
        return bool(self.condition(state))


def rule_match(state: State, rules: Iterable[Rule]) -> Rule:
    """Return the first rule in ``rules`` whose condition is satisfied by ``state``.

    Args:
        state (State): The state to test each rule against.
        rules (Iterable[Rule]): Rules in priority order. Consumed at most once.

    Returns:
        Rule: The first matching rule.

    Raises:
        UnresolvedMatchError: If no rule matches.
    """

    for rule in rules:
        if rule.matches(state):
            return rule

    logger.warning(f"No rule matched state {state!r}")
    raise UnresolvedMatchError(state)
