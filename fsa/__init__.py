"""
FSA (Finite State Automaton) library

Deterministic automaton runtime: callers declare an alphabet, states and a
transition table, feed symbols one at a time and query the final state.

Components:
- automaton.py: FiniteStateAutomaton runtime
- state.py: State, Transition and StateTransition records
- transitions.py: TransitionTable lookup
- exceptions.py: ErrorKind and the error classes
- definition.py: JSON definition documents
"""

from .automaton import FiniteStateAutomaton
from .exceptions import (
    DefinitionError,
    ErrorKind,
    FSAError,
    FSAInputError,
    FSAValidationError,
    InvalidAlphabetSymbol,
    NoAlphabetDefined,
    NoFinalState,
    NoStatesDefined,
    NoTransitionDefined,
    NoTransitionRule,
)
from .state import State, StateTransition, Transition

__version__ = "1.0.0"


def new_fsa(name=None) -> FiniteStateAutomaton:
    """Create a new, empty automaton"""
    return FiniteStateAutomaton(name=name)


__all__ = [
    'FiniteStateAutomaton',
    'new_fsa',
    'State',
    'Transition',
    'StateTransition',
    'ErrorKind',
    'FSAError',
    'FSAInputError',
    'FSAValidationError',
    'InvalidAlphabetSymbol',
    'NoTransitionRule',
    'NoAlphabetDefined',
    'NoStatesDefined',
    'NoTransitionDefined',
    'NoFinalState',
    'DefinitionError',
]
