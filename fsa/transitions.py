#!/usr/bin/env python3
"""
FSA Transition Table

(SourceState, Trigger) → DestinationState

Deterministic: at most one destination per (source, trigger) pair. Adding a
rule for a pair that already has one replaces it (last write wins).
"""

import logging
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Type aliases
TransitionKey = Tuple[str, str]


class TransitionTable:
    """
    Transition Table: (SourceState, Trigger) → DestinationState

    Source and destination names are not checked against the registered
    states; an unknown source simply never matches a lookup.
    """

    def __init__(self):
        self._table: Dict[TransitionKey, str] = {}

    def add(self, source: str, trigger: str, destination: str):
        """Add a transition to the table, replacing any rule for the same pair"""
        key = (source, trigger)
        previous = self._table.get(key)
        if previous is not None and previous != destination:
            logger.debug(
                f"Overwriting transition {source} --{trigger}--> {previous} "
                f"with {destination}"
            )
        self._table[key] = destination

    def get_destination(self, source: str, trigger: str) -> Optional[str]:
        """
        Lookup transition for (source, trigger) pair.

        Returns:
            Destination state name or None if no rule exists
        """
        return self._table.get((source, trigger))

    def is_valid_transition(self, source: str, trigger: str) -> bool:
        """Check if transition is defined"""
        return (source, trigger) in self._table

    def get_valid_triggers(self, source: str) -> List[str]:
        """Get all triggers with a rule leaving `source`"""
        return [
            trigger for (state, trigger) in self._table.keys()
            if state == source
        ]

    def get_all_transitions(self) -> Dict[TransitionKey, str]:
        """Get all transitions (for debugging/testing)"""
        return self._table.copy()

    def get_transition_count(self) -> int:
        """Get total number of defined transitions"""
        return len(self._table)

    def __len__(self) -> int:
        return len(self._table)
