"""
Logging helpers: a request-id filter, a JSON formatter, and the middleware
that stamps each request with an id.
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        rid = request_id_ctx.get()
        record.request_id = rid or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "request_id": getattr(record, "request_id", "-"),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


class RequestIdMiddleware:
    """Bind a fresh request id for the duration of each request."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.logger = logging.getLogger("core.request")

    def __call__(self, request):
        rid = str(uuid.uuid4())
        token = request_id_ctx.set(rid)
        self.logger.debug("request start %s %s", request.method, request.path)
        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = rid
            return response
        finally:
            self.logger.debug("request end")
            request_id_ctx.reset(token)
