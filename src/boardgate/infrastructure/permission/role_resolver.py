"""Role resolver - effective role lookup with workspace-to-board inheritance."""

from uuid import UUID

from boardgate.application.ports import MembershipStore
from boardgate.domain.exceptions import ResourceNotFound
from boardgate.domain.resolution import (
    DirectRole,
    InheritedRole,
    NoRelationship,
    ResolvedRole,
)
from boardgate.domain.value_objects import WorkspaceRole


class RoleResolver:
    """Reads the membership store and applies the inheritance rule. Read-only.

    Lookups within one resolution depend on each other and run in order.
    """

    def __init__(self, store: MembershipStore) -> None:
        self._store = store

    async def resolve_workspace_role(
        self, user_id: str, workspace_id: UUID
    ) -> WorkspaceRole | str | None:
        """Direct workspace role. Workspaces are the top of the hierarchy."""
        membership = await self._store.find_workspace_membership(user_id, workspace_id)
        if not membership:
            return None
        return membership.role

    async def resolve_board_role(self, user_id: str, board_id: UUID) -> ResolvedRole:
        """Effective board role.

        A direct board row wins outright; the workspace role is consulted
        only when there is none. Raises ResourceNotFound if the board does
        not exist.
        """
        direct = await self._store.find_board_membership(user_id, board_id)
        if direct:
            return DirectRole(direct.role)

        workspace_id = await self._store.find_board_workspace_id(board_id)
        if workspace_id is None:
            raise ResourceNotFound("board", board_id)

        workspace_role = await self.resolve_workspace_role(user_id, workspace_id)
        if workspace_role is None:
            return NoRelationship()
        return InheritedRole(workspace_role)

    async def resolve_list_board_id(self, list_id: UUID) -> UUID:
        """Board that owns the list."""
        board_id = await self._store.find_list_board_id(list_id)
        if board_id is None:
            raise ResourceNotFound("list", list_id)
        return board_id

    async def resolve_card_board_id(self, card_id: UUID) -> UUID:
        """Board that owns the card's list."""
        board_id = await self._store.find_card_board_id(card_id)
        if board_id is None:
            raise ResourceNotFound("card", card_id)
        return board_id
