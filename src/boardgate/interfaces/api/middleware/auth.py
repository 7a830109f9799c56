"""Auth middleware - takes the caller identity from a trusted gateway header."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Sets req.context.user from the configured user header, or None."""

    def __init__(self, user_header: str = "X-User-Id") -> None:
        self._user_header = user_header

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from header."""
        user_id = (req.get_header(self._user_header) or "").strip()
        req.context.user = RequestUser(user_id=user_id) if user_id else None
