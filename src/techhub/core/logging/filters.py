# src/techhub/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter: guarantees every LogRecord has a `request_id` attribute, read
  from a contextvar set by RequestIDMiddleware. Using a ContextVar (rather than
  threading.local) keeps the id correct across awaits and for handlers that FastAPI
  runs in its threadpool, since the context is copied into the worker thread.
- RedactFilter: masks record attributes whose name looks sensitive.

Outside a request (startup, CLI, tests) the request id is the sentinel "-".
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Set `record.request_id` to, in order of preference:
      - a request_id passed explicitly via `extra`
      - the contextvar value set by the middleware
      - "-"
    Always returns True; the filter only annotates.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Mask record attributes whose name looks sensitive. Dict-valued extras (e.g. a
    logged payload) are scrubbed one level deep, on a copy.
    """

    SENSITIVE = {"password", "secret", "token", "access_token", "refresh_token", "authorization", "api_key"}
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
            elif isinstance(value, dict) and any(str(k).lower() in self.SENSITIVE for k in value):
                record.__dict__[key] = {
                    k: self.MASK if str(k).lower() in self.SENSITIVE else v for k, v in value.items()
                }
        return True
