"""
Ready-made automata.

binary_mod_three: reads a binary number most significant bit first and rests
in state S<n> where n is the number modulo 3.

    S0 --0--> S0    S0 --1--> S1
    S1 --0--> S2    S1 --1--> S0
    S2 --0--> S1    S2 --1--> S2
"""

from fsa.automaton import FiniteStateAutomaton
from fsa.state import State, Transition

BINARY_ALPHABET = ("0", "1")

BINARY_MOD_THREE_STATES = (
    State("S0", 0, True),
    State("S1", 1, True),
    State("S2", 2, True),
)

BINARY_MOD_THREE_TRANSITIONS = (
    Transition("S0", "S0", "0"),
    Transition("S0", "S1", "1"),
    Transition("S1", "S2", "0"),
    Transition("S1", "S0", "1"),
    Transition("S2", "S1", "0"),
    Transition("S2", "S2", "1"),
)


def binary_mod_three() -> FiniteStateAutomaton:
    """Build a fresh binary mod-3 automaton starting in S0"""
    automaton = FiniteStateAutomaton(name="binary_mod_three")
    automaton.define_alphabet(BINARY_ALPHABET)
    automaton.define_states("S0", BINARY_MOD_THREE_STATES)
    automaton.define_transitions(BINARY_MOD_THREE_TRANSITIONS)
    return automaton
