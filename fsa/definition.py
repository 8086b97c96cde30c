#!/usr/bin/env python3
"""
Automaton Definition I/O

Loads JSON definition documents into automata and dumps automata back to
documents. Document shape is checked with the pydantic schemas in
fsa.schemas.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from fsa.automaton import FiniteStateAutomaton
from fsa.exceptions import DefinitionError
from fsa.schemas import AutomatonDefinition

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_definition(data: Dict[str, Any]) -> AutomatonDefinition:
    """
    Validate a raw definition mapping.

    Raises:
        DefinitionError: If the mapping does not match the schema
    """
    try:
        return AutomatonDefinition.model_validate(data)
    except ValidationError as e:
        raise DefinitionError(f"Invalid automaton definition: {e}") from e


def load_definition(path: PathLike) -> AutomatonDefinition:
    """
    Load and validate a JSON definition file.

    Raises:
        DefinitionError: If the file is missing, not JSON, or not a valid definition
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DefinitionError(f"Definition file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DefinitionError(f"Definition file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionError(f"Definition file {path} must contain a JSON object")

    definition = parse_definition(data)
    logger.info(
        f"Loaded automaton definition from {path}: "
        f"{len(definition.states)} states, {len(definition.transitions)} rules"
    )
    return definition


def build_automaton(definition: AutomatonDefinition) -> FiniteStateAutomaton:
    """Construct a fresh automaton from a definition"""
    automaton = FiniteStateAutomaton(name=definition.name)
    automaton.define_alphabet(definition.alphabet)
    automaton.define_states(
        definition.initial_state,
        [s.to_state() for s in definition.states]
    )
    automaton.define_transitions(t.to_transition() for t in definition.transitions)
    return automaton


def dump_definition(automaton: FiniteStateAutomaton) -> Dict[str, Any]:
    """
    Serialize an automaton's definition (not its run state) to a dict.

    Alphabet is sorted for stable output. Transition rules come out in
    registration order of their (source, trigger) keys.
    """
    definition = AutomatonDefinition(
        name=automaton.name,
        alphabet=sorted(automaton.alphabet),
        initial_state=automaton.initial_state,
        states=[
            {'name': s.name, 'value': s.value, 'final': s.final}
            for s in automaton.states.values()
        ],
        transitions=[
            {'source': source, 'destination': destination, 'trigger': trigger}
            for (source, trigger), destination in automaton.transitions.items()
        ],
    )
    return definition.model_dump()


def save_definition(automaton: FiniteStateAutomaton, path: PathLike) -> Path:
    """Write an automaton's definition to a JSON file"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write atomically (write to temp, then rename)
    temp_path = path.with_suffix('.tmp')
    try:
        with open(temp_path, 'w', encoding='utf-8') as f:
            json.dump(dump_definition(automaton), f, indent=2, default=str)
        temp_path.replace(path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Saved automaton definition to {path}")
    return path
