"""Membership store port - read-only lookups the authorization engine needs."""

from typing import Protocol
from uuid import UUID

from boardgate.domain.entities import BoardMembership, WorkspaceMembership


class MembershipStore(Protocol):
    """Port for membership and resource-linkage lookups. Never writes."""

    async def find_workspace_membership(
        self, user_id: str, workspace_id: UUID
    ) -> WorkspaceMembership | None: ...

    async def find_board_membership(
        self, user_id: str, board_id: UUID
    ) -> BoardMembership | None: ...

    async def find_workspace_owner_id(self, workspace_id: UUID) -> str | None: ...

    async def find_board_workspace_id(self, board_id: UUID) -> UUID | None: ...

    async def find_list_board_id(self, list_id: UUID) -> UUID | None: ...

    async def find_card_board_id(self, card_id: UUID) -> UUID | None: ...
