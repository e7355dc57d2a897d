"""
demo_driver.py

This script demonstrates the three agent programs of the aima_agents package on the two-square
vacuum world of AIMA chapter 2. The percepts are scripted rather than produced by an environment:
each percept is a ``(location, status)`` pair and every program answers with one action.

Run with DEBUG=1 to see each decision cycle logged.
"""

from aima_agents.agent_layer.agent import Agent, execute
from aima_agents.agent_layer.agent_interface import NO_OP
from aima_agents.agent_layer.agent_program import (
    ModelBasedReflexAgentProgram,
    SimpleReflexAgentProgram,
    TableDrivenAgentProgram,
)
from aima_agents.agent_layer.rules import ConditionActionRule

SCRIPTED_PERCEPTS = [("A", "Dirty"), ("A", "Clean"), ("B", "Dirty"), ("B", "Clean")]


def build_table_driven() -> TableDrivenAgentProgram:
    """Table covering exactly the scripted run."""

    table = {}
    for i, percept in enumerate(SCRIPTED_PERCEPTS):
        location, status = percept
        if status == "Dirty":
            action = "Suck"
        else:
            action = "Right" if location == "A" else "Left"
        table[tuple(SCRIPTED_PERCEPTS[: i + 1])] = action
    return TableDrivenAgentProgram(table)


def build_simple_reflex() -> SimpleReflexAgentProgram:
    """Reflex vacuum agent, Fig 2.8 AIMA 3ed."""

    rules = [
        ConditionActionRule(lambda state: state["status"] == "Dirty", "Suck"),
        ConditionActionRule(lambda state: state["location"] == "A", "Right"),
        ConditionActionRule(lambda state: state["location"] == "B", "Left"),
    ]
    return SimpleReflexAgentProgram(
        rules, lambda percept: {"location": percept[0], "status": percept[1]}
    )


def vacuum_model(state: dict, action, percept) -> dict:
    """Remember the last known status of every square and where the agent stands."""

    location, status = percept
    updated = dict(state)
    updated["location"] = location
    updated[location] = status
    return updated


def build_model_based() -> ModelBasedReflexAgentProgram:
    """Vacuum agent that stops once it believes both squares are clean."""

    rules = [
        ConditionActionRule(lambda s: s.get("A") == "Clean" and s.get("B") == "Clean", NO_OP),
        ConditionActionRule(lambda s: s[s["location"]] == "Dirty", "Suck"),
        ConditionActionRule(lambda s: s["location"] == "A", "Right"),
        ConditionActionRule(lambda s: s["location"] == "B", "Left"),
    ]
    return ModelBasedReflexAgentProgram(rules, vacuum_model, initial_state={})


def main():
    """
    Main driver function for the demo.

    - Builds one agent per agent program.
    - Feeds every agent the same scripted percepts.
    - Prints the action each agent picks for each percept.
    """

    print("Beginning Demo...")
    agents = {
        "table-driven": Agent(build_table_driven()),
        "simple reflex": Agent(build_simple_reflex()),
        "model-based reflex": Agent(build_model_based()),
    }

    for name, agent in agents.items():
        print(f"\n=== {name} ===")
        for percept in SCRIPTED_PERCEPTS:
            action = execute(agent, percept)
            print(f"{percept} -> {action}")


if __name__ == "__main__":
    main()
