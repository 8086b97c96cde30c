#!/usr/bin/env python3
"""
Console UI - Rich-based Terminal Output for the FSA demo

Provides terminal output with:
- Final state result line
- Error line on stderr
- Automaton summary table
- Transition trace table
"""

from datetime import datetime
from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fsa.automaton import FiniteStateAutomaton
from fsa.state import StateTransition

# Global console instances
console = Console()
err_console = Console(stderr=True)


def ts() -> str:
    """Current timestamp string (HH:MM:SS)"""
    return datetime.now().strftime("%H:%M:%S")


def print_result(label: str):
    """Print the final state label as plain text"""
    console.print(Text(label), soft_wrap=True)


def print_error(message: str):
    """
    Print an error message on stderr.

    Args:
        message: Error message (printed verbatim, no markup)
    """
    text = Text.assemble(("✗ ", "red bold"), (message, "red"))
    err_console.print(text, soft_wrap=True)


def automaton_summary(automaton: FiniteStateAutomaton):
    """Display alphabet, states and rule count of an automaton"""
    stats = automaton.get_statistics()

    table = Table(
        show_header=True,
        header_style="bold magenta",
        border_style="magenta",
        expand=False,
        padding=(0, 2)
    )
    table.add_column("Metric", style="bold white", justify="left")
    table.add_column("Value", style="cyan", justify="left")

    table.add_row("Automaton", str(stats['name']))
    table.add_row("Alphabet", ", ".join(sorted(automaton.alphabet)))
    table.add_row("States", f"{stats['state_count']} ({stats['final_state_count']} final)")
    table.add_row("Rules", str(stats['transition_count']))
    table.add_row("Initial", str(stats['initial_state']))

    console.print(table)


def print_trace(history: Iterable[StateTransition]):
    """
    Print the transition history as a table.

    Args:
        history: StateTransition records, oldest first
    """
    table = Table(
        title=f"Transitions ({ts()})",
        show_header=True,
        header_style="bold cyan",
        border_style="cyan",
        expand=False,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Symbol", justify="center", style="bold yellow")
    table.add_column("From", style="white")
    table.add_column("To", style="bold green")

    for idx, record in enumerate(history, start=1):
        table.add_row(str(idx), record.trigger, str(record.from_state), record.to_state)

    console.print(table)
