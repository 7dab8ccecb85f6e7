"""
Unit tests for structured logging
"""

import io
import json
import logging
import sys

from paymongo_sdk.logging_setup import JsonFormatter, setup_structured_logger


def make_record(**extra):
    record = logging.LogRecord(
        name="paymongo_sdk.http",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="Network error: %s",
        args=("connection refused",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    record = make_record(endpoint="create_checkout", method="POST")

    payload = json.loads(JsonFormatter().format(record))

    assert payload["logger"] == "paymongo_sdk.http"
    assert payload["level"] == "ERROR"
    assert payload["message"] == "Network error: connection refused"
    assert payload["endpoint"] == "create_checkout"
    assert payload["method"] == "POST"
    assert isinstance(payload["ts"], int)
    assert "status_code" not in payload


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = make_record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exc"]


def test_setup_structured_logger():
    stream = io.StringIO()
    sdk_logger = logging.getLogger("paymongo_sdk")
    saved = (sdk_logger.level, sdk_logger.handlers[:], sdk_logger.propagate)
    try:
        handler = setup_structured_logger(logging.DEBUG, stream=stream)

        assert sdk_logger.level == logging.DEBUG
        assert sdk_logger.handlers == [handler]
        assert sdk_logger.propagate is False

        logging.getLogger("paymongo_sdk.http").debug(
            "Response (%s) for %s", 200, "retrieve_link", extra={"status_code": 200}
        )
        line = json.loads(stream.getvalue().splitlines()[-1])
        assert line["message"] == "Response (200) for retrieve_link"
        assert line["status_code"] == 200
    finally:
        sdk_logger.setLevel(saved[0])
        sdk_logger.handlers = saved[1]
        sdk_logger.propagate = saved[2]
