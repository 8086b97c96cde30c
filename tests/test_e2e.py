#!/usr/bin/env python3
"""
End-to-end tests with the binary mod-3 automaton.

Feeds whole input strings symbol by symbol, the way the demo CLI does.
"""

import pytest

from fsa import InvalidAlphabetSymbol, NoTransitionRule, State, Transition
from fsa.presets import binary_mod_three


def feed(automaton, text):
    """Validate once, then process each character; stop at the first error"""
    for idx, symbol in enumerate(text):
        if idx == 0:
            automaton.validate()
        automaton.process_symbol(symbol)


class TestBinaryModThree:
    """End-to-end cases for the binary mod-3 table"""

    @pytest.mark.parametrize("text,expected", [
        ("110", "S0=0"),
        ("1010", "S1=1"),
        ("10100", "S2=2"),
    ])
    def test_valid_inputs(self, text, expected):
        automaton = binary_mod_three()
        feed(automaton, text)
        assert automaton.query_final_state() == expected

    def test_invalid_symbol_stops_input(self):
        """'11A' fails on 'A'; the state reached by '11' is kept"""
        automaton = binary_mod_three()

        with pytest.raises(InvalidAlphabetSymbol) as exc_info:
            feed(automaton, "11A")

        assert exc_info.value.symbol == "A"
        assert str(exc_info.value) == (
            "Invalid character within input string, A is not listed as part of the allowing alphabet"
        )
        # "1" -> S1, "1" -> S0
        assert automaton.current_state == "S0"
        assert automaton.previous_state == "S1"
        assert automaton.query_final_state() == "S0=0"

    def test_transition_log(self):
        automaton = binary_mod_three()
        feed(automaton, "1010")
        assert automaton.transition_log == [
            "S0 -> S1",
            "S1 -> S2",
            "S2 -> S2",
            "S2 -> S1",
        ]

    def test_run_matches_feed(self):
        assert binary_mod_three().run("10100") == "S2=2"

    def test_empty_input_rests_in_initial_state(self):
        assert binary_mod_three().run("") == "S0=0"

    def test_fresh_instances_are_independent(self):
        first = binary_mod_three()
        second = binary_mod_three()
        first.run("1")
        assert second.current_state == "S0"
        assert second.transition_log == []

    def test_duplicate_rule_changes_outcome(self):
        """Overwriting (S0, 1) redirects the run without raising"""
        automaton = binary_mod_three()
        automaton.define_transitions([Transition("S0", "S2", "1")])
        assert automaton.run("1") == "S2=2"

    def test_undeclared_initial_state(self):
        automaton = binary_mod_three()
        automaton.define_states("S9", [State("S0", 0, True)])

        with pytest.raises(NoTransitionRule) as exc_info:
            automaton.run("0")

        assert exc_info.value.state == "S9"
        assert exc_info.value.symbol == "0"
