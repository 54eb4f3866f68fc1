# src/blog_api/core/logging/filters.py
"""
Logging filters

- RequestIdFilter: guarantees every LogRecord has a `request_id` attribute, read from
  a `contextvars.ContextVar` that `RequestIDMiddleware` sets per HTTP request. A
  ContextVar (rather than threading.local) follows the request across awaits.
- RedactFilter: masks sensitive attributes passed through `extra={...}`.

Both filters only annotate records; they always return True.

Usage (dictConfig):
     "filters": {"request_id": {"()": RequestIdFilter}, "redact": {"()": RedactFilter}},
     "handlers": {"console": {..., "filters": ["request_id", "redact"]}}
"""

import logging
from logging import LogRecord
import contextvars

# Default None means "no request id set" (outside of a request, e.g. startup logs)
_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context.

    Returns:
        token: pass it to reset_request_id(token) to restore the previous value.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Sets `record.request_id` to, in order of preference:
      - a request_id passed explicitly via `extra`
      - the contextvar value set by the middleware
      - the sentinel "-" so `%(request_id)s` never raises KeyError
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """Replace the value of any record attribute whose name is in SENSITIVE."""

    SENSITIVE = {"password", "secret", "token", "access_token", "refresh_token", "authorization", "api_key"}
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
