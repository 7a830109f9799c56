"""Authorizer port - the gate operations membership use cases rely on."""

from typing import Protocol
from uuid import UUID

from boardgate.domain.resolution import DirectRole, InheritedRole
from boardgate.domain.value_objects import ResourceAction, WorkspaceRole


class Authorizer(Protocol):
    """Port for authorizing membership operations."""

    async def assert_board_permission(
        self, user_id: str, board_id: UUID, action: ResourceAction | str
    ) -> DirectRole | InheritedRole: ...

    async def assert_workspace_permission(
        self, user_id: str, workspace_id: UUID, action: ResourceAction | str
    ) -> WorkspaceRole: ...

    async def assert_workspace_ownership(self, user_id: str, workspace_id: UUID) -> None: ...

    async def is_workspace_owner(self, user_id: str, workspace_id: UUID) -> bool: ...
