# src/blog_api/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

For each request:
1. Take the incoming `X-Request-ID` header when it is a safe token (letters, digits,
   '.', '_', '-', at most 128 chars); otherwise generate a UUID4. Arbitrary header
   values are never copied into logs (log injection via newlines, huge values).
2. Store it in the request-id contextvar so RequestIdFilter stamps it on every log
   record emitted while handling the request.
3. Return it to the client in the `X-Request-ID` response header.

Register it early so every router log line is covered:
      app.add_middleware(RequestIDMiddleware)
"""

import re
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")


def resolve_request_id(incoming: str | None) -> str:
    """Return `incoming` if it is a safe request id, else a fresh UUID4 string."""
    if incoming and _SAFE_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)

        try:
            # exceptions propagate to the framework's error handlers
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)
