"""PostgreSQL membership store - read-only lookups for authorization."""

from uuid import UUID

from psycopg import AsyncConnection

from boardgate.domain.entities import BoardMembership, WorkspaceMembership
from boardgate.infrastructure.persistence.postgres.rows import (
    BOARD_MEMBER_COLUMNS,
    WORKSPACE_MEMBER_COLUMNS,
    board_membership_from_row,
    workspace_membership_from_row,
)


class PostgresMembershipStore:
    """Membership store implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_workspace_membership(
        self, user_id: str, workspace_id: UUID
    ) -> WorkspaceMembership | None:
        """Get user's membership row in workspace."""
        cur = await self._conn.execute(
            f"SELECT {WORKSPACE_MEMBER_COLUMNS} FROM workspace_member "
            "WHERE user_id = %s AND workspace_id = %s",
            (user_id, workspace_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return workspace_membership_from_row(r)

    async def find_board_membership(
        self, user_id: str, board_id: UUID
    ) -> BoardMembership | None:
        """Get user's direct membership row on board."""
        cur = await self._conn.execute(
            f"SELECT {BOARD_MEMBER_COLUMNS} FROM board_member "
            "WHERE user_id = %s AND board_id = %s",
            (user_id, board_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return board_membership_from_row(r)

    async def find_workspace_owner_id(self, workspace_id: UUID) -> str | None:
        """Get workspace owner id."""
        return await self._scalar("SELECT owner_id FROM workspace WHERE id = %s", workspace_id)

    async def find_board_workspace_id(self, board_id: UUID) -> UUID | None:
        """Get workspace id of board; None if the board does not exist."""
        return await self._scalar("SELECT workspace_id FROM board WHERE id = %s", board_id)

    async def find_list_board_id(self, list_id: UUID) -> UUID | None:
        """Get board id of list."""
        return await self._scalar("SELECT board_id FROM board_list WHERE id = %s", list_id)

    async def find_card_board_id(self, card_id: UUID) -> UUID | None:
        """Get board id of card via its list."""
        return await self._scalar(
            "SELECT l.board_id FROM card c JOIN board_list l ON l.id = c.list_id "
            "WHERE c.id = %s",
            card_id,
        )

    async def _scalar(self, query: str, param: UUID) -> object | None:
        cur = await self._conn.execute(query, (param,))
        r = await cur.fetchone()
        return r[0] if r else None
