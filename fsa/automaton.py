#!/usr/bin/env python3
"""
Finite State Automaton - Deterministic runtime

Provides the automaton runtime with:
- Alphabet, state and transition registration (additive, last write wins)
- Single-step symbol processing with input validation
- Readiness validation
- Final state query with "<name>=<value>" label
- Transition log and history for introspection
"""

import logging
import threading
import uuid
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from fsa.audit import log_reset, log_transition
from fsa.exceptions import (
    InvalidAlphabetSymbol,
    NoAlphabetDefined,
    NoFinalState,
    NoStatesDefined,
    NoTransitionDefined,
    NoTransitionRule,
)
from fsa.state import State, StateTransition, Transition
from fsa.transitions import TransitionKey, TransitionTable

logger = logging.getLogger(__name__)

MIN_STATES = 2
MIN_TRANSITIONS = 1


class FiniteStateAutomaton:
    """
    Deterministic finite state automaton.

    Setup happens through define_alphabet(), define_states() and
    define_transitions(); input is fed one symbol at a time through
    process_symbol(). The run state is never reset implicitly: use reset()
    or a fresh instance for an independent run.

    Every public operation holds the instance lock, so one automaton may be
    shared between threads.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or str(uuid.uuid4())[:8]

        self._alphabet: Set[str] = set()
        self._states: Dict[str, State] = {}
        self._transitions = TransitionTable()

        # Run state
        self._initial_state: Optional[str] = None
        self._current_state: Optional[str] = None
        self._previous_state: Optional[str] = None
        self._history: List[StateTransition] = []

        self._lock = threading.RLock()

    # ========================================================================
    # Setup
    # ========================================================================

    def define_alphabet(self, symbols: Iterable[str]) -> None:
        """Merge symbols into the alphabet"""
        with self._lock:
            self._alphabet.update(symbols)

    def add_alphabet(self, *symbols: str) -> None:
        self.define_alphabet(symbols)

    def define_states(self, initial_state: str, states: Iterable[State]) -> None:
        """
        Register states and set the current state.

        Args:
            initial_state: Name the current state is set to. Not required to
                name one of the registered states.
            states: State declarations, keyed by name (last write wins)
        """
        with self._lock:
            for state in states:
                self._states[state.name] = state
            self._initial_state = initial_state
            self._current_state = initial_state

    def add_states(self, initial_state: str, *states: State) -> None:
        self.define_states(initial_state, states)

    def define_transitions(self, rules: Iterable[Transition]) -> None:
        """Register transition rules in order (last write wins per (source, trigger))"""
        with self._lock:
            for rule in rules:
                self._transitions.add(rule.source, rule.trigger, rule.destination)

    def add_transitions(self, *rules: Transition) -> None:
        self.define_transitions(rules)

    # ========================================================================
    # Run
    # ========================================================================

    def process_symbol(self, symbol: str) -> None:
        """
        Advance the automaton by one input symbol.

        Raises:
            InvalidAlphabetSymbol: symbol is not in the alphabet
            NoTransitionRule: no rule for (current state, symbol)

        The run state is unchanged when an error is raised.
        """
        with self._lock:
            if symbol not in self._alphabet:
                raise InvalidAlphabetSymbol(symbol)

            destination = self._transitions.get_destination(self._current_state, symbol)
            if destination is None:
                raise NoTransitionRule(symbol, self._current_state)

            self._set_state(destination, symbol)

    # Alias
    event = process_symbol

    def _set_state(self, state_name: str, trigger: str):
        """Update previous and current state and record the change"""
        self._previous_state = self._current_state
        self._current_state = state_name

        record = StateTransition(
            from_state=self._previous_state,
            to_state=self._current_state,
            trigger=trigger,
        )
        self._history.append(record)
        log_transition(self.name, record)

    def validate(self) -> None:
        """
        Check that the automaton is ready to process input.

        Raises (first failing check only):
            NoAlphabetDefined: alphabet is empty
            NoStatesDefined: fewer than two states registered
            NoTransitionDefined: no transition rule registered
        """
        with self._lock:
            if not self._alphabet:
                raise NoAlphabetDefined()

            if len(self._states) < MIN_STATES:
                raise NoStatesDefined()

            if len(self._transitions) < MIN_TRANSITIONS:
                raise NoTransitionDefined()

    def query_final_state(self) -> str:
        """
        Return the "<name>=<value>" label of the current state.

        Raises:
            NoFinalState: current state is unregistered or not final
        """
        with self._lock:
            state = self._states.get(self._current_state)
            if state is None or not state.final:
                raise NoFinalState(self._current_state)
            return state.label()

    final_state = query_final_state

    def run(self, symbols: Iterable[str]) -> str:
        """
        Feed a whole input sequence and return the final state label.

        validate() is called once before the first symbol. Processing stops
        at the first error, which is raised to the caller.
        """
        with self._lock:
            for idx, symbol in enumerate(symbols):
                if idx == 0:
                    self.validate()
                self.process_symbol(symbol)
            return self.query_final_state()

    def reset(self) -> None:
        """Return to the initial state and clear the transition log"""
        with self._lock:
            self._current_state = self._initial_state
            self._previous_state = None
            self._history.clear()
            log_reset(self.name, self._initial_state)

    # ========================================================================
    # Introspection
    # ========================================================================

    @property
    def alphabet(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._alphabet)

    @property
    def states(self) -> Dict[str, State]:
        with self._lock:
            return dict(self._states)

    @property
    def transitions(self) -> Dict[TransitionKey, str]:
        with self._lock:
            return self._transitions.get_all_transitions()

    @property
    def initial_state(self) -> Optional[str]:
        return self._initial_state

    @property
    def current_state(self) -> Optional[str]:
        return self._current_state

    @property
    def previous_state(self) -> Optional[str]:
        return self._previous_state

    @property
    def transition_log(self) -> List[str]:
        """State changes as "A -> B" strings, oldest first"""
        with self._lock:
            return [str(record) for record in self._history]

    @property
    def history(self) -> Tuple[StateTransition, ...]:
        with self._lock:
            return tuple(self._history)

    def valid_symbols(self) -> List[str]:
        """Symbols that have a rule leaving the current state"""
        with self._lock:
            return [
                trigger for trigger in self._transitions.get_valid_triggers(self._current_state)
                if trigger in self._alphabet
            ]

    def get_statistics(self) -> Dict[str, Any]:
        """Get automaton statistics"""
        with self._lock:
            return {
                'name': self.name,
                'alphabet_size': len(self._alphabet),
                'state_count': len(self._states),
                'final_state_count': sum(1 for s in self._states.values() if s.final),
                'transition_count': len(self._transitions),
                'initial_state': self._initial_state,
                'current_state': self._current_state,
                'previous_state': self._previous_state,
                'num_transitions': len(self._history),
            }

    def __repr__(self):
        return (f"<FiniteStateAutomaton {self.name}: {len(self._states)} states, "
                f"{len(self._transitions)} rules, current={self._current_state}>")
