from .console_ui import automaton_summary, print_error, print_result, print_trace

__all__ = [
    'automaton_summary',
    'print_error',
    'print_result',
    'print_trace',
]
