#!/usr/bin/env python3
"""
FSA Data Model

State declarations, transition rules and the run-time transition records.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class State:
    """
    State declaration.

    Attributes:
        name: Unique state name within an automaton
        value: Output value attached to the state (any type)
        final: Whether input may validly end in this state
    """
    name: str
    value: Any = None
    final: bool = False

    def label(self) -> str:
        """Render as "<name>=<value>" """
        return f"{self.name}={self.value}"


@dataclass(frozen=True)
class Transition:
    """Transition rule: on `trigger` move from `source` to `destination`"""
    source: str
    destination: str
    trigger: str


@dataclass
class StateTransition:
    """Record of an accepted state change"""
    from_state: Optional[str]
    to_state: str
    trigger: str
    timestamp: float = field(default_factory=time.time)

    def __str__(self) -> str:
        return f"{self.from_state} -> {self.to_state}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'from': self.from_state,
            'to': self.to_state,
            'trigger': self.trigger,
            'timestamp': self.timestamp,
        }
