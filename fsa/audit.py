#!/usr/bin/env python3
"""
FSA Transition Audit Logging

Logs every accepted state change with its trigger for debugging.
"""

import logging

from fsa.state import StateTransition

logger = logging.getLogger(__name__)


def log_transition(automaton_id: str, record: StateTransition):
    """
    Log an accepted transition at DEBUG level.

    Captures:
    - State change (from → to)
    - Triggering symbol
    - Timestamp of the change
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug(
        f"FSA {automaton_id}: {record} on '{record.trigger}'",
        extra={
            'event_type': 'FSA_TRANSITION',
            'automaton_id': automaton_id,
            'state_from': record.from_state,
            'state_to': record.to_state,
            'trigger': record.trigger,
            'transition_ts': record.timestamp,
        }
    )


def log_reset(automaton_id: str, initial_state: str):
    """Log a run-state reset"""
    logger.debug(
        f"FSA {automaton_id}: reset to {initial_state}",
        extra={
            'event_type': 'FSA_RESET',
            'automaton_id': automaton_id,
            'initial_state': initial_state,
        }
    )
