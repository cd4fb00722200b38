# src/techhub/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

For every request:
  1. take the incoming `X-Request-ID` when it looks sane (short, no control
     characters, so it cannot inject lines into the logs), otherwise generate a UUID4;
  2. store it in the request contextvar so RequestIdFilter stamps it on every record
     emitted while the request is handled (routes, repository, exception handlers);
  3. echo it back in the `X-Request-ID` response header;
  4. log one `http.request` line with method, path, status and duration.

Unhandled exceptions are logged as a 500 `http.request` line (still carrying the
request id) and re-raised to Starlette's ServerErrorMiddleware, which sits
outside this middleware and answers with the INTERNAL error. That response is
built after this middleware returns, so it has no `X-Request-ID` header.
"""

import logging
import re
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)
        start = time.perf_counter()

        try:
            try:
                response = await call_next(request)
            except Exception:
                # ServerErrorMiddleware, outside this one, answers with the 500
                self._log_request(request, 500, start)
                raise
            response.headers[REQUEST_ID_HEADER] = rid
            self._log_request(request, response.status_code, start)
            return response
        finally:
            reset_request_id(token)

    @staticmethod
    def _log_request(request: Request, status_code: int, start: float) -> None:
        logger.info(
            "http.request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
