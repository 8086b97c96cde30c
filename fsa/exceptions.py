#!/usr/bin/env python3
"""
FSA Exceptions

Error taxonomy for the automaton runtime.

Every error carries an ErrorKind tag so callers can branch on the kind
without matching on class or message text. Errors are raised at the call
site and propagated to the immediate caller; the runtime never retries.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of automaton error kinds"""
    INVALID_ALPHABET_SYMBOL = "invalid_alphabet_symbol"
    NO_TRANSITION_RULE = "no_transition_rule"
    NO_ALPHABET_DEFINED = "no_alphabet_defined"
    NO_STATES_DEFINED = "no_states_defined"
    NO_TRANSITION_DEFINED = "no_transition_defined"
    NO_FINAL_STATE = "no_final_state"
    INVALID_DEFINITION = "invalid_definition"


class FSAError(Exception):
    """
    Base class for all automaton errors.

    Attributes:
        kind: ErrorKind tag identifying the failure
    """

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# Input errors (raised by process_symbol)
# ============================================================================

class FSAInputError(FSAError):
    """Raised when an input symbol cannot be applied. State is left unchanged."""


class InvalidAlphabetSymbol(FSAInputError):
    """
    Symbol is not part of the automaton's alphabet.

    Attributes:
        symbol: The offending input symbol
    """

    kind = ErrorKind.INVALID_ALPHABET_SYMBOL

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(
            f"Invalid character within input string, {symbol} "
            f"is not listed as part of the allowing alphabet"
        )


class NoTransitionRule(FSAInputError):
    """
    No transition rule exists for (current state, symbol).

    Attributes:
        symbol: The input symbol
        state: Name of the state the automaton was in
    """

    kind = ErrorKind.NO_TRANSITION_RULE

    def __init__(self, symbol: str, state: Optional[str]):
        self.symbol = symbol
        self.state = state
        super().__init__(
            f"Invalid, no transition rules defined for event {symbol} from state {state}"
        )


# ============================================================================
# Readiness errors (raised by validate)
# ============================================================================

class FSAValidationError(FSAError):
    """Raised when the automaton is not ready to process input."""


class NoAlphabetDefined(FSAValidationError):
    kind = ErrorKind.NO_ALPHABET_DEFINED

    def __init__(self):
        super().__init__(
            "no alphabet defined, use define_alphabet method to define "
            "at least one acceptable event trigger"
        )


class NoStatesDefined(FSAValidationError):
    kind = ErrorKind.NO_STATES_DEFINED

    def __init__(self):
        super().__init__(
            "no state defined, use define_states method to define a minimum of two states"
        )


class NoTransitionDefined(FSAValidationError):
    kind = ErrorKind.NO_TRANSITION_DEFINED

    def __init__(self):
        super().__init__(
            "no transition rules defined, use define_transitions method to define "
            "at least one valid transition rule"
        )


# ============================================================================
# Result errors (raised by query_final_state)
# ============================================================================

class NoFinalState(FSAError):
    """
    Current state is not a final state (or is not registered at all).

    Attributes:
        state: Name of the state the automaton rests in
    """

    kind = ErrorKind.NO_FINAL_STATE

    def __init__(self, state: Optional[str] = None):
        self.state = state
        super().__init__("transitions did not end in a final state")


class DefinitionError(FSAError):
    """Raised when an automaton definition document is malformed."""

    kind = ErrorKind.INVALID_DEFINITION
