"""Test suite for log level selection and the levels decisions log at"""

import logging

import pandas as pd
import pytest

from aima_agents import log
from aima_agents.agent_layer.agent_program import (
    SimpleReflexAgentProgram,
    TableDrivenAgentProgram,
)
from aima_agents.agent_layer.errors import UnresolvedLookupError, UnresolvedMatchError
from aima_agents.input_layer.table_loader import TableLoader


@pytest.mark.parametrize(
    "env, expected",
    [
        ({}, logging.INFO),
        ({"DEBUG": "1"}, logging.DEBUG),
        ({"AIMA_AGENTS_LOG_LEVEL": "warning"}, logging.WARNING),
        ({"DEBUG": "1", "AIMA_AGENTS_LOG_LEVEL": "ERROR"}, logging.ERROR),
        ({"AIMA_AGENTS_LOG_LEVEL": "nonsense"}, logging.INFO),
    ],
)
def test_level_from_environment(monkeypatch, env, expected):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("AIMA_AGENTS_LOG_LEVEL", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)

    assert log._level_from_environment() == expected


def test_logger_name():
    assert log.logger.name == "aima_agents"


def test_unresolved_match_warns_before_raising(caplog):
    caplog.set_level(logging.WARNING, logger="aima_agents")
    program = SimpleReflexAgentProgram([], lambda percept: percept)

    with pytest.raises(UnresolvedMatchError):
        program.execute("wet")

    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert "No rule matched state 'wet'" in caplog.text


def test_unresolved_lookup_warns_before_raising(caplog):
    caplog.set_level(logging.WARNING, logger="aima_agents")
    program = TableDrivenAgentProgram({("A",): "X"})

    with pytest.raises(UnresolvedLookupError):
        program.execute("B")

    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert "no entry" in caplog.text


def test_decision_cycles_log_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="aima_agents")
    program = TableDrivenAgentProgram({("A",): "X"})

    program.execute("A")

    assert [r.levelno for r in caplog.records] == [logging.DEBUG]
    assert "'A' -> 'X'" in caplog.text


def test_table_loads_log_at_info(caplog):
    caplog.set_level(logging.INFO, logger="aima_agents")

    TableLoader().load_table(pd.DataFrame({"percepts": ["A"], "action": ["X"]}))

    assert "Loaded lookup table with 1 percept sequence(s)" in caplog.text
