"""Application entry point and composition root."""

import logging

import falcon.asgi

from boardgate import __version__
from boardgate.config import get_settings
from boardgate.infrastructure.audit.logging_observer import LoggingAuditObserver
from boardgate.infrastructure.permission.authorization_gate import AuthorizationGate
from boardgate.infrastructure.persistence.postgres.connection import create_pool_from_settings
from boardgate.infrastructure.persistence.postgres.unit_of_work import (
    create_store_factory,
    create_uow_factory,
)
from boardgate.interfaces.api.app import create_app
from boardgate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from boardgate.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("BoardGate v%s (%s)", __version__, settings.environment)
    uvicorn.run(
        "boardgate.main:create_boardgate_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )


def create_boardgate_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool_from_settings(settings)
    gate = AuthorizationGate(
        membership_store_factory=create_store_factory(pool),
        observer=LoggingAuditObserver(
            log_denials=settings.audit_log_denials,
            log_grants=settings.audit_log_grants,
        ),
    )
    return create_app(
        unit_of_work_factory=create_uow_factory(pool),
        authorization_gate=gate,
        user_header=settings.user_header,
        pool=pool,
        middleware=[PoolLifespanMiddleware(pool)],
    )
