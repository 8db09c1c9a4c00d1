"""Tests for structured logging setup."""

import io
import json
import logging

import pytest
import structlog

from fuzzy_substring.config import Settings
from fuzzy_substring.services.monitoring import get_logger, setup_logging


def _install(config: Settings):
    """Install logging into a buffer and restore the previous state afterwards."""
    stream = io.StringIO()
    root_logger = logging.getLogger()
    previous_level = root_logger.level

    handler = setup_logging(config, stream=stream)
    yield stream

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)
    structlog.reset_defaults()


@pytest.fixture
def log_stream():
    yield from _install(Settings(service_name="fuzzy-test", environment="test", log_level="DEBUG"))


@pytest.fixture
def console_stream():
    yield from _install(Settings(log_json=False, log_level="DEBUG"))


def _records(stream: io.StringIO) -> list:
    return [json.loads(line) for line in stream.getvalue().strip().splitlines()]


class TestSetupLogging:

    def test_stdlib_records_are_json_with_service(self, log_stream):
        logging.getLogger("fuzzy_substring.test").warning("threshold_check")

        record = _records(log_stream)[-1]
        assert record["message"] == "threshold_check"
        assert record["level"] == "WARNING"
        assert record["service"] == "fuzzy-test"
        assert record["environment"] == "test"
        assert "timestamp" in record

    def test_structlog_fields_become_json_keys(self, log_stream):
        get_logger("fuzzy_substring.test").info("window_matched", offset=3)

        record = _records(log_stream)[-1]
        assert record["message"] == "window_matched"
        assert record["offset"] == 3
        assert record["level"] == "INFO"
        assert record["name"] == "fuzzy_substring.test"

    def test_level_filters_events(self):
        stream_gen = _install(Settings(log_level="WARNING"))
        stream = next(stream_gen)
        try:
            get_logger("fuzzy_substring.test").debug("window_matched", offset=3)
            assert stream.getvalue() == ""
        finally:
            next(stream_gen, None)

    def test_engine_debug_events_emitted(self, log_stream):
        from fuzzy_substring import fuzzy_search

        fuzzy_search("hellow", ["hello world"])

        events = [record["message"] for record in _records(log_stream)]
        assert "window_matched" in events
        assert "fuzzy_filter_complete" in events

    def test_invalid_settings_logged(self, log_stream):
        from fuzzy_substring import FuzzyMatchSettings, InvalidSettingError

        with pytest.raises(InvalidSettingError):
            FuzzyMatchSettings(percentage_allowed_mismatch=51)

        record = _records(log_stream)[-1]
        assert record["message"] == "fuzzy_settings_invalid"
        assert record["field"] == "percentage_allowed_mismatch"
        assert record["level"] == "WARNING"


class TestConsoleLogging:
    """log_json=False renders events as console text."""

    def test_events_rendered_as_text(self, console_stream):
        get_logger("fuzzy_substring.test").info("window_matched", offset=3)

        output = console_stream.getvalue()
        assert "window_matched" in output
        assert "offset" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output.strip().splitlines()[-1])

    def test_stdlib_records_plain(self, console_stream):
        logging.getLogger("fuzzy_substring.test").warning("threshold_check")

        assert console_stream.getvalue().strip().splitlines()[-1] == "threshold_check"


class TestLibraryIsSilent:
    """Without setup_logging the library writes nothing."""

    def test_search_writes_nothing(self, capsys):
        from fuzzy_substring import fuzzy_search

        assert fuzzy_search("hellow", ["hello world", "xx"]) == ["hello world"]

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_invalid_settings_write_nothing(self, capsys):
        from fuzzy_substring import FuzzyMatchSettings, InvalidSettingError

        with pytest.raises(InvalidSettingError):
            FuzzyMatchSettings(percentage_allowed_mismatch=51)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
