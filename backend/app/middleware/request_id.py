"""
Game Reviews Backend — Request ID Middleware
==============================================

What:  Tags every request with a short correlation id.
How:   Reuses a client-supplied X-Request-ID when it looks sane, otherwise
       generates one; stores it in a ContextVar and echoes it back in the
       X-Request-ID response header.
Who:   Read by the access logger and the global exception handlers.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client ids are echoed into logs and headers; keep them short and printable
_VALID_CLIENT_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id and returns it in the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get(REQUEST_ID_HEADER, "")
        rid = supplied if _VALID_CLIENT_ID.match(supplied) else new_request_id()

        # request.state lives on the scope, so handlers outside this task see it
        request.state.request_id = rid
        request_id_var.set(rid)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
