"""Test suite for the table-driven agent program"""

import numpy as np
import pytest

from aima_agents.agent_layer.agent_interface import NO_OP
from aima_agents.agent_layer.agent_program import TableDrivenAgentProgram
from aima_agents.agent_layer.errors import UnresolvedLookupError


@pytest.fixture
def program():
    return TableDrivenAgentProgram({("A",): "X", ("A", "B"): "Y"})


def test_history_is_looked_up_as_a_whole(program):
    assert program.execute("A") == "X"
    assert program.execute("B") == "Y"
    assert program.percepts == ("A", "B")


def test_latest_percept_alone_is_not_looked_up():
    program = TableDrivenAgentProgram({("B",): "wrong", ("A", "B"): "right"})
    with pytest.raises(UnresolvedLookupError):
        program.execute("A")
    assert program.execute("B") == "right"


def test_order_of_history_matters():
    program = TableDrivenAgentProgram({("B",): "X", ("B", "A"): "Y", ("A", "B"): "Z"})
    program.execute("B")
    assert program.execute("A") == "Y"


def test_missing_sequence_raises_instead_of_noop(program):
    with pytest.raises(UnresolvedLookupError) as excinfo:
        program.execute("B")
    assert excinfo.value.sequence == ("B",)


def test_failed_lookup_still_records_percept(program):
    program.execute("A")
    with pytest.raises(UnresolvedLookupError):
        program.execute("C")
    assert program.percepts == ("A", "C")
    with pytest.raises(UnresolvedLookupError) as excinfo:
        program.execute("B")
    assert excinfo.value.sequence == ("A", "C", "B")


def test_noop_is_returned_only_when_tabled():
    program = TableDrivenAgentProgram({("A",): NO_OP, ("A", "B"): "Y"})
    assert program.execute("A") is NO_OP
    assert program.execute("B") == "Y"


def test_numpy_percepts_are_frozen():
    program = TableDrivenAgentProgram({((0, 1),): "Suck"})
    assert program.execute(np.array([0, 1])) == "Suck"
    assert program.percepts == ((0, 1),)


def test_grid_percepts_are_frozen_row_by_row():
    grid = ((0, 1), (1, 0))
    program = TableDrivenAgentProgram({(grid,): "Suck", (grid, 5): "Left"})
    assert program.execute(np.array([[0, 1], [1, 0]])) == "Suck"
    assert program.execute(np.array(5)) == "Left"
    assert program.percepts == (grid, 5)


def test_unhashable_percept_raises_lookup_error_and_is_not_recorded(program):
    with pytest.raises(UnresolvedLookupError) as excinfo:
        program.execute({"status": "Dirty"})
    assert excinfo.value.sequence == ({"status": "Dirty"},)
    assert program.percepts == ()
    assert program.execute("A") == "X"


def test_table_is_copied_on_construction():
    table = {("A",): "X"}
    program = TableDrivenAgentProgram(table)
    table[("A",)] = "changed"
    assert program.execute("A") == "X"


def test_string_keys_are_rejected():
    with pytest.raises(TypeError):
        TableDrivenAgentProgram({"AB": "X"})


def test_programs_do_not_share_history():
    table = {("A",): "X", ("A", "A"): "Y"}
    first = TableDrivenAgentProgram(table)
    second = TableDrivenAgentProgram(table)
    first.execute("A")
    assert second.execute("A") == "X"
    assert first.execute("A") == "Y"
