"""Helpers shared by API resources."""

from uuid import UUID

import falcon.asgi

from boardgate.domain.exceptions import ValidationError


def current_user_id(req: falcon.asgi.Request) -> str | None:
    user = getattr(req.context, "user", None)
    return user.user_id if user else None


def parse_uuid(value: str, name: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {name}") from None


async def read_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}
