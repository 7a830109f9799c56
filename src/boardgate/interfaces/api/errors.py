"""Map domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from boardgate.domain.exceptions import (
    MembershipConflict,
    PermissionDenied,
    ResourceNotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def _permission_denied(req, resp, ex: PermissionDenied, params) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Permission denied", "action": ex.action}


async def _not_found(req, resp, ex: ResourceNotFound, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": f"{ex.resource_kind.capitalize()} not found"}


async def _conflict(req, resp, ex: MembershipConflict, params) -> None:
    resp.status = falcon.HTTP_409
    resp.media = {"error": str(ex)}


async def _validation(req, resp, ex: ValidationError, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


async def _unhandled(req, resp, ex: Exception, params) -> None:
    logger.exception("Unhandled exception on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install domain error handlers on app."""
    app.add_error_handler(Exception, _unhandled)
    app.add_error_handler(PermissionDenied, _permission_denied)
    app.add_error_handler(ResourceNotFound, _not_found)
    app.add_error_handler(MembershipConflict, _conflict)
    app.add_error_handler(ValidationError, _validation)
