"""Request ID middleware.

Every HTTP response carries a request id header. A client-supplied id is
reused when it is short and limited to [A-Za-z0-9_-]; anything else is
replaced with a fresh UUID4 so it is safe to write to logs.

The id is bound to task_api.shared.context for the duration of the request,
which is how log lines pick it up.
"""

import re
import uuid
from typing import Any, Awaitable, Callable

from task_api.shared.context import bind_request_id, unbind_request_id

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(rf"[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}")

Scope = dict[str, Any]
Message = dict[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client id when it is safe, otherwise a new UUID4."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Raw ASGI middleware that assigns and echoes a request id."""

    def __init__(
        self, app: Callable[..., Awaitable[None]], header_name: str = "X-Request-ID"
    ) -> None:
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode("latin-1")

    def _client_value(self, scope: Scope) -> str | None:
        for key, value in scope.get("headers", []):
            if key.lower() == self._header_key:
                return value.decode("latin-1")
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = sanitize_request_id(self._client_value(scope))
        scope.setdefault("state", {})["request_id"] = request_id
        header = (self.header_name.encode("latin-1"), request_id.encode("latin-1"))

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), header]
            await send(message)

        token = bind_request_id(request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            unbind_request_id(token)
