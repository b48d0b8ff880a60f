"""
Tests for structured logging utilities.
"""

import json
import logging

from listing_ai.utils.logging import (
    DevelopmentFormatter,
    JSONFormatter,
    RequestContextFilter,
    SensitiveDataFilter,
    Timer,
    clear_request_context,
    redact_sensitive_data,
    set_request_context,
    setup_logging,
)


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="listing_ai.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_redacts_keys_and_tokens():
    message = "connecting with api_key=abc123 and Bearer xyz.789"

    redacted = redact_sensitive_data(message)

    assert "abc123" not in redacted
    assert "xyz.789" not in redacted
    assert "[REDACTED]" in redacted


def test_sensitive_data_filter_rewrites_message():
    record = _record("token=secret-value")

    SensitiveDataFilter().filter(record)

    assert "secret-value" not in record.msg


def test_json_formatter_includes_listing_context():
    set_request_context(request_id="req-1", listing_id="42")
    try:
        record = _record("Saved compliance result", score=80)
        RequestContextFilter().filter(record)

        data = json.loads(JSONFormatter().format(record))
    finally:
        clear_request_context()

    assert data["message"] == "Saved compliance result"
    assert data["service"] == "listing-ai"
    assert data["request_id"] == "req-1"
    assert data["listing_id"] == "42"
    assert data["extra"] == {"score": 80}


def test_development_formatter_without_context():
    record = _record("Analysis complete")
    RequestContextFilter().filter(record)

    formatted = DevelopmentFormatter().format(record)

    assert "Analysis complete" in formatted
    assert "listing_ai.test" in formatted


def test_timer_logs_duration(caplog):
    logger = logging.getLogger("listing_ai.test.timer")

    with caplog.at_level(logging.DEBUG, logger="listing_ai.test.timer"):
        with Timer("compliance_analysis", logger) as timer:
            pass

    assert timer.elapsed_ms >= 0
    assert "compliance_analysis completed" in caplog.text


def test_setup_logging_reports_configuration(capsys):
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]

    try:
        setup_logging(log_level=logging.DEBUG, force_json=True)
        logging.getLogger("listing_ai.test").debug("after setup")
    finally:
        for handler in root.handlers[:]:
            if handler not in previous_handlers:
                root.removeHandler(handler)
        for handler in previous_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(previous_level)

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    summary = next(line for line in lines if line["message"] == "Configuration loaded")

    assert summary["extra"]["supabase_configured"] is False
    assert summary["extra"]["max_text_length"] == 20000
    assert summary["extra"]["environment"] == "development"
