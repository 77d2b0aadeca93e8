import json
import logging
import uuid

import pytest
from rest_framework.test import APIClient

from core.logging import JsonFormatter, RequestIdFilter, REQUEST_ID_HEADER, request_id_ctx


def _record(message="hello", exc_info=None):
    return logging.LogRecord(
        name="apps.exchange.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=exc_info,
    )


class TestRequestIdFilter:

    def test_without_request_context(self):
        record = _record()

        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "-"

    def test_with_request_context(self):
        token = request_id_ctx.set("abc-123")
        try:
            record = _record()
            RequestIdFilter().filter(record)
        finally:
            request_id_ctx.reset(token)

        assert record.request_id == "abc-123"


class TestJsonFormatter:

    def test_formats_as_json(self):
        record = _record("converted %s")
        record.request_id = "rid-1"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["message"] == "converted %s"
        assert payload["logger"] == "apps.exchange.test"
        assert payload["request_id"] == "rid-1"

    def test_includes_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            import sys
            record = _record(exc_info=sys.exc_info())

        payload = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad" in payload["exc_info"]


@pytest.mark.django_db(transaction=True)
def test_middleware_sets_request_id_header():
    response = APIClient().get("/api/conversions/by-id", {"transactionId": str(uuid.uuid4())})

    rid = response[REQUEST_ID_HEADER]
    assert uuid.UUID(rid)
    assert request_id_ctx.get() is None
