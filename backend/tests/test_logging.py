"""Structured logging tests."""

import json
import logging

from app.core.logging import JSONFormatter, RequestIdFilter
from app.core.request_context import set_request_id


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.ERROR, __file__, 1, "Error %s", ("here",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    record = make_record(request_id="abc12345", context={"error": "boom"})
    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "ERROR"
    assert data["message"] == "Error here"
    assert data["logger"] == "app.test"
    assert data["requestId"] == "abc12345"
    assert data["context"] == {"error": "boom"}


def test_request_id_filter_uses_context():
    set_request_id("ctx00001")
    try:
        record = make_record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "ctx00001"
    finally:
        set_request_id(None)

    record = make_record()
    RequestIdFilter().filter(record)
    assert not hasattr(record, "request_id")
