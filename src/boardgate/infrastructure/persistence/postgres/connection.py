"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from boardgate.config import Settings


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via PoolLifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


def create_pool_from_settings(settings: Settings) -> AsyncConnectionPool:
    """Create the pool sized from settings."""
    return create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
