#!/usr/bin/env python3
"""
Unit Tests for TransitionTable

Tests lookup, overwrite semantics and table queries.
"""

import logging

import pytest

from fsa.transitions import TransitionTable


class TestTransitionTable:

    @pytest.fixture
    def table(self):
        table = TransitionTable()
        table.add("S0", "0", "S0")
        table.add("S0", "1", "S1")
        table.add("S1", "0", "S2")
        return table

    def test_lookup(self, table):
        assert table.get_destination("S0", "1") == "S1"
        assert table.get_destination("S1", "0") == "S2"

    def test_missing_lookup_returns_none(self, table):
        assert table.get_destination("S1", "1") is None
        assert table.get_destination("UNKNOWN", "0") is None
        assert table.get_destination(None, "0") is None

    def test_is_valid_transition(self, table):
        assert table.is_valid_transition("S0", "0")
        assert not table.is_valid_transition("S2", "0")

    def test_valid_triggers(self, table):
        assert sorted(table.get_valid_triggers("S0")) == ["0", "1"]
        assert table.get_valid_triggers("S2") == []

    def test_overwrite_is_last_write_wins(self, table, caplog):
        with caplog.at_level(logging.DEBUG, logger="fsa.transitions"):
            table.add("S0", "1", "S2")

        assert table.get_destination("S0", "1") == "S2"
        assert table.get_transition_count() == 3
        assert "Overwriting transition" in caplog.text

    def test_same_rule_twice_is_silent(self, table, caplog):
        with caplog.at_level(logging.DEBUG, logger="fsa.transitions"):
            table.add("S0", "1", "S1")

        assert len(table) == 3
        assert "Overwriting" not in caplog.text

    def test_get_all_transitions_is_copy(self, table):
        snapshot = table.get_all_transitions()
        snapshot[("S9", "9")] = "S9"

        assert ("S9", "9") not in table.get_all_transitions()
        assert len(table) == 3
