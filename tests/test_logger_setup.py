#!/usr/bin/env python3
"""
Tests for logging setup and transition audit records.
"""

import json
import logging

import pytest

from fsa import InvalidAlphabetSymbol, config
from fsa.logging.logger_setup import (
    AddRunIdFilter,
    EnsureEventTypeFilter,
    UTCJsonFormatter,
    build_formatter,
    run_id,
    setup_logging,
    teardown_logging,
)
from fsa.presets import binary_mod_three


@pytest.fixture(autouse=True)
def clean_logging():
    yield
    teardown_logging()
    config.clear_config_overrides()


def make_record(msg="hello", **extra):
    record = logging.LogRecord("fsa.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFilters:

    def test_event_type_default(self):
        record = make_record()
        assert EnsureEventTypeFilter().filter(record) is True
        assert record.event_type == "GENERAL"

    def test_event_type_kept(self):
        record = make_record(event_type="FSA_TRANSITION")
        EnsureEventTypeFilter().filter(record)
        assert record.event_type == "FSA_TRANSITION"

    def test_run_id(self):
        record = make_record()
        AddRunIdFilter().filter(record)
        assert record.run_id == run_id


class TestFormatters:

    def test_json_formatter_output(self):
        formatter = build_formatter(json_format=True)
        assert isinstance(formatter, UTCJsonFormatter)

        record = make_record(msg="S0 -> S1", event_type="FSA_TRANSITION", run_id="abc12345", trigger="1")
        payload = json.loads(formatter.format(record))

        assert payload["message"] == "S0 -> S1"
        assert payload["level"] == "INFO"
        assert payload["event_type"] == "FSA_TRANSITION"
        assert payload["run_id"] == "abc12345"
        assert payload["trigger"] == "1"
        assert payload["timestamp"].endswith("Z")

    def test_text_formatter(self):
        formatter = build_formatter(json_format=False)
        line = formatter.format(make_record(msg="plain"))
        assert "| INFO" in line
        assert line.endswith("| fsa.test | plain")


class TestSetupLogging:

    def test_level_from_config_override(self):
        config.set_config_override('LOG_LEVEL', 'INFO')
        root = setup_logging()
        assert root.level == logging.INFO

    def test_repeated_setup_replaces_handlers(self):
        root = logging.getLogger()
        before = len(root.handlers)

        setup_logging(level="DEBUG")
        setup_logging(level="DEBUG")

        assert len(root.handlers) == before + 1

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "fsa.jsonl"
        setup_logging(level="DEBUG", log_file=str(log_file), json_format=False)

        automaton = binary_mod_three()
        automaton.run("10")
        automaton.reset()
        teardown_logging()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        events = [r["event_type"] for r in records]

        assert events.count("FSA_TRANSITION") == 2
        assert "FSA_RESET" in events
        transition = next(r for r in records if r["event_type"] == "FSA_TRANSITION")
        assert transition["automaton_id"] == "binary_mod_three"
        assert transition["run_id"] == run_id


class TestAuditLogging:

    def test_transitions_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fsa.audit"):
            binary_mod_three().run("1")

        records = [r for r in caplog.records if getattr(r, "event_type", None) == "FSA_TRANSITION"]
        assert len(records) == 1
        assert records[0].state_from == "S0"
        assert records[0].state_to == "S1"
        assert records[0].trigger == "1"

    def test_errors_are_not_logged(self, caplog):
        automaton = binary_mod_three()
        with caplog.at_level(logging.DEBUG, logger="fsa"):
            with pytest.raises(InvalidAlphabetSymbol):
                automaton.process_symbol("X")

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
