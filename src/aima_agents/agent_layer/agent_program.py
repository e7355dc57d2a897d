"""Agent programs: concrete strategies that turn a percept into an action.

An *agent program* is the concrete implementation of an agent function (Pg. 35, AIMA 3ed). Every
program exposes the same ``execute(percept) -> action`` call; which decision algorithm runs is
decided by the program's class, never by the caller.

Programs provided:

* ``TableDrivenAgentProgram`` (Fig 2.7) looks up the entire percept history in a table.
* ``SimpleReflexAgentProgram`` (Fig 2.10) matches rules against the current percept only.
* ``ModelBasedReflexAgentProgram`` (Fig 2.12) carries an internal state forward between cycles.

Programs are not thread safe. A single program must only be driven by one caller at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from aima_agents.agent_layer.agent_interface import NO_OP, Action, Percept, State
from aima_agents.agent_layer.errors import UnresolvedLookupError
from aima_agents.agent_layer.rules import Rule, rule_match
from aima_agents.log import logger

if TYPE_CHECKING:
    from aima_agents.input_layer.table_loader import TableLoaderParameters


def freeze_percept(percept: Percept) -> Percept:
    """Convert mutable sequence percepts into hashable tuples so they can key a lookup table."""

    if isinstance(percept, np.ndarray):
        return freeze_percept(percept.tolist())
    if isinstance(percept, list):
        return tuple(freeze_percept(item) for item in percept)
    return percept


class AgentProgram(ABC):
    """Abstract decision strategy. Subclasses must implement ``execute``."""

    @abstractmethod
    def execute(self, percept: Percept) -> Action:
        """Given a percept, return the action apt for the agent."""
        raise NotImplementedError("Subclasses must implement this method")


class TableDrivenAgentProgram(AgentProgram):
    """
    Agent program where every percept sequence is known ahead of time.

    Each call appends the percept to the history and looks up the *whole* history, so the table
    must be keyed by percept sequences. A history missing from the table is an error, not a NoOp.
    """

    def __init__(self, table: Mapping[Sequence[Percept], Action]):
        """
        Args:
            table: Mapping from percept sequences (any sequence type) to actions. Keys are
                   normalized to tuples so lists and tuples address the same entry.
        """

        self._table: dict[tuple[Percept, ...], Action] = {}
        for sequence, action in table.items():
            if isinstance(sequence, (str, bytes)) or not isinstance(
                sequence, (Sequence, np.ndarray)
            ):
                raise TypeError(f"Table keys must be percept sequences, got {sequence!r}")
            self._table[tuple(freeze_percept(p) for p in sequence)] = action

        self._percepts: list[Percept] = []
        """Every percept seen so far, in arrival order."""

    @classmethod
    def from_frame(
        cls, source: Any, parameters: TableLoaderParameters | None = None
    ) -> "TableDrivenAgentProgram":
        """Build a program from a DataFrame or table file, see ``TableLoader.load_table``."""

        from aima_agents.input_layer.table_loader import TableLoader

        return cls(TableLoader(parameters).load_table(source))

    @property
    def table(self) -> Mapping[tuple[Percept, ...], Action]:
        return dict(self._table)

    @property
    def percepts(self) -> tuple[Percept, ...]:
        return tuple(self._percepts)

    def execute(self, percept: Percept) -> Action:
        frozen = freeze_percept(percept)
        try:
            hash(frozen)
        except TypeError:
            # an unhashable percept can never key the table; keep it out of the history
            logger.warning(f"Percept of type {type(percept).__name__} cannot key the lookup table")
            raise UnresolvedLookupError((*self._percepts, frozen)) from None

        self._percepts.append(frozen)
        sequence = tuple(self._percepts)

        try:
            action = self._table[sequence]
        except KeyError:
            logger.warning(f"Lookup table has no entry for {len(sequence)} percept(s)")
            raise UnresolvedLookupError(sequence) from None

        logger.debug(f"table lookup: {percept!r} -> {action!r}")
        return action


class SimpleReflexAgentProgram(AgentProgram):
    """
    Reflex agent program that selects an action from the current percept alone.

    The percept is interpreted into a state with ``interpret_input`` and the first matching rule
    supplies the action. No information survives from one call to the next.
    """

    def __init__(self, rules: Iterable[Rule], interpret_input: Callable[[Percept], State]):
        if not callable(interpret_input):
            raise TypeError("interpret_input must be callable")

        self._rules: tuple[Rule, ...] = tuple(rules)
        self._interpret_input = interpret_input

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def interpret_input(self, percept: Percept) -> State:
        return self._interpret_input(percept)

    def execute(self, percept: Percept) -> Action:
        state = self.interpret_input(percept)
        rule = rule_match(state, self._rules)
        logger.debug(f"simple reflex: {percept!r} -> {state!r} -> {rule.action!r}")
        return rule.action


class ModelBasedReflexAgentProgram(AgentProgram):
    """
    Reflex agent program that keeps track of the world through an internal state.

    Every cycle the state is advanced with ``model(state, action, percept)``, using the state and
    action from the immediately preceding cycle, and the rules are matched against the updated
    state. The updated state and the chosen action become the "previous" values for the next cycle.

    If no rule matches, the updated state is kept and the previous action is left as it was.
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        model: Callable[[State, Action, Percept], State],
        initial_state: State = None,
        initial_action: Action = NO_OP,
    ):
        if not callable(model):
            raise TypeError("model must be callable")

        self._rules: tuple[Rule, ...] = tuple(rules)
        self._model = model
        self._state = initial_state
        self._action = initial_action

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def state(self) -> State:
        """The agent's current belief about the world."""
        return self._state

    @property
    def action(self) -> Action:
        """The action returned by the most recent successful cycle."""
        return self._action

    def update_state(self, state: State, action: Action, percept: Percept) -> State:
        return self._model(state, action, percept)

    def execute(self, percept: Percept) -> Action:
        self._state = self.update_state(self._state, self._action, percept)
        rule = rule_match(self._state, self._rules)
        self._action = rule.action
        logger.debug(f"model-based reflex: {percept!r} -> {self._state!r} -> {rule.action!r}")
        return self._action
