# main.py - Demo entry point: reads a binary string and drives the automaton
import argparse
import logging
import sys
from typing import List, Optional

from fsa import FSAError, config
from fsa.definition import build_automaton, load_definition
from fsa.logging.logger_setup import setup_logging
from fsa.presets import binary_mod_three
from fsa.ui.console_ui import automaton_summary, print_error, print_result, print_trace

logger = logging.getLogger("fsa.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run an input string through a finite state automaton "
                    "(default: binary number modulo 3)."
    )
    parser.add_argument("--input", "-i", default=None,
                        help="Input string; prompts on stdin when omitted")
    parser.add_argument("--definition", "-d", default=None,
                        help="JSON automaton definition (default: built-in binary mod-3)")
    parser.add_argument("--trace", action="store_true", default=None,
                        help="Print automaton summary and transition table")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", default=None,
                        help="Write JSON log lines to this file")
    parser.add_argument("--json-logs", action="store_true", default=None,
                        help="Console log output as JSON lines")
    return parser.parse_args(argv)


def read_input(prompt: str) -> str:
    """Read one whitespace-delimited token from stdin (empty on EOF)"""
    try:
        line = input(prompt)
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file, json_format=args.json_logs)

    show_trace = args.trace if args.trace is not None else config.get_config('SHOW_TRACE')
    definition_path = args.definition or config.get_config('DEFINITION_PATH')

    try:
        if definition_path:
            automaton = build_automaton(load_definition(definition_path))
        else:
            automaton = binary_mod_three()

        text = args.input if args.input is not None else read_input(config.get_config('INPUT_PROMPT'))

        if show_trace:
            automaton_summary(automaton)

        label = automaton.run(text)
    except FSAError as e:
        logger.error(f"Automaton run failed: {e}", extra={'event_type': 'FSA_RUN_FAILED', 'error_kind': e.kind.value})
        print_error(str(e))
        return 1

    logger.info(f"Automaton run finished in {label}", extra={'event_type': 'FSA_RUN_DONE'})
    print_result(label)
    if show_trace:
        print_trace(automaton.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
