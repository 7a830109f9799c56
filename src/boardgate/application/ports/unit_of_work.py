"""Unit of Work port - transactional boundary for membership mutations."""

from collections.abc import AsyncIterator
from typing import Protocol

from boardgate.application.ports.membership_store import MembershipStore
from boardgate.application.ports.repositories.board_member_repository import (
    BoardMemberRepository,
)
from boardgate.application.ports.repositories.workspace_member_repository import (
    WorkspaceMemberRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def workspace_members(self) -> WorkspaceMemberRepository: ...

    @property
    def board_members(self) -> BoardMemberRepository: ...

    @property
    def memberships(self) -> MembershipStore: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...


class MembershipStoreFactory(Protocol):
    """Factory for read-only MembershipStore handles (async context manager)."""

    async def __call__(self) -> AsyncIterator[MembershipStore]: ...
