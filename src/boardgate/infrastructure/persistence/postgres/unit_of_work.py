"""PostgreSQL Unit of Work and membership store factories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from boardgate.infrastructure.persistence.postgres.board_member_repository import (
    PostgresBoardMemberRepository,
)
from boardgate.infrastructure.persistence.postgres.membership_store import (
    PostgresMembershipStore,
)
from boardgate.infrastructure.persistence.postgres.workspace_member_repository import (
    PostgresWorkspaceMemberRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._workspace_members = PostgresWorkspaceMemberRepository(self._conn)
        self._board_members = PostgresBoardMemberRepository(self._conn)
        self._memberships = PostgresMembershipStore(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def workspace_members(self) -> PostgresWorkspaceMemberRepository:
        return self._workspace_members

    @property
    def board_members(self) -> PostgresBoardMemberRepository:
        return self._board_members

    @property
    def memberships(self) -> PostgresMembershipStore:
        return self._memberships

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory


def create_store_factory(pool: AsyncConnectionPool) -> object:
    """Create read-only MembershipStore factory (async context manager).

    Each handle borrows one pooled connection for the duration of a single
    authorization decision.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresMembershipStore]:
        async with pool.connection() as conn:
            yield PostgresMembershipStore(conn)

    return factory
