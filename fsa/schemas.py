#!/usr/bin/env python3
"""
Definition Schemas - Pydantic Models for Automaton Definitions

Provides type-safe schemas for declaring an automaton in a document:
- StateSchema: one state declaration
- TransitionSchema: one transition rule
- AutomatonDefinition: alphabet, initial state, states and rules

Usage:
    from fsa.schemas import AutomatonDefinition

    definition = AutomatonDefinition.model_validate({
        "alphabet": ["0", "1"],
        "initial_state": "S0",
        "states": [{"name": "S0", "value": 0, "final": True}],
        "transitions": [{"source": "S0", "destination": "S0", "trigger": "0"}],
    })

The schema checks document shape only. Readiness (non-empty alphabet, at
least two states, at least one rule) stays with FiniteStateAutomaton.validate().
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fsa.state import State, Transition


class StateSchema(BaseModel):
    """State declaration."""
    model_config = ConfigDict(extra="forbid")

    name: str
    value: Any = None
    final: bool = False

    def to_state(self) -> State:
        return State(name=self.name, value=self.value, final=self.final)


class TransitionSchema(BaseModel):
    """Transition rule."""
    model_config = ConfigDict(extra="forbid")

    source: str
    destination: str
    trigger: str

    def to_transition(self) -> Transition:
        return Transition(source=self.source, destination=self.destination, trigger=self.trigger)


class AutomatonDefinition(BaseModel):
    """
    Complete automaton definition.

    Fields:
        name: Optional automaton name (used in logs)
        alphabet: Accepted input symbols
        initial_state: Name of the state a run starts in (null when never set)
        states: State declarations, in registration order
        transitions: Transition rules, in registration order
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    alphabet: List[str] = Field(default_factory=list)
    initial_state: Optional[str]
    states: List[StateSchema] = Field(default_factory=list)
    transitions: List[TransitionSchema] = Field(default_factory=list)
