"""Workspace member repository port."""

from typing import Protocol
from uuid import UUID

from boardgate.domain.entities import WorkspaceMembership
from boardgate.domain.value_objects import WorkspaceRole


class WorkspaceMemberRepository(Protocol):
    """Port for workspace membership persistence."""

    async def get(self, workspace_id: UUID, user_id: str) -> WorkspaceMembership | None: ...

    async def list_by_workspace(self, workspace_id: UUID) -> list[WorkspaceMembership]: ...

    async def create(self, membership: WorkspaceMembership) -> WorkspaceMembership: ...

    async def update_role(self, workspace_id: UUID, user_id: str, role: WorkspaceRole) -> None: ...

    async def delete(self, workspace_id: UUID, user_id: str) -> None: ...
