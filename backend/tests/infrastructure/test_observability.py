"""Structured logging — JSON formatter fields and setup_logging wiring."""

import json
import logging

from devregistry.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="devregistry.services.developer_service",
        level=logging.INFO, pathname=__file__, lineno=1,
        msg="Developer created", args=(), exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "devregistry.services.developer_service"
    assert out["message"] == "Developer created"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras():
    out = json.loads(JSONFormatter().format(
        _record(developer_id=7, error_code="DEVELOPER_NOT_FOUND", unrelated="x"),
    ))
    assert out["developer_id"] == 7
    assert out["error_code"] == "DEVELOPER_NOT_FOUND"
    assert "unrelated" not in out


def test_json_formatter_skips_none_extras():
    out = json.loads(JSONFormatter().format(_record(developer_id=None)))
    assert "developer_id" not in out


def test_setup_logging_installs_handler():
    original_level = logging.root.level
    handler = setup_logging("debug", "text")
    try:
        assert handler in logging.root.handlers
        assert not isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(original_level)


def test_json_formatter_surfaces_access_fields():
    out = json.loads(JSONFormatter().format(
        _record(method="GET", path="/api/v1/developers", status_code=200, duration_ms=1.5),
    ))
    assert out["method"] == "GET"
    assert out["path"] == "/api/v1/developers"
    assert out["status_code"] == 200
    assert out["duration_ms"] == 1.5
