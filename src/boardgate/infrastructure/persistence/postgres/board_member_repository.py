"""PostgreSQL board member repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from boardgate.domain.entities import BoardMembership
from boardgate.domain.value_objects import BoardRole
from boardgate.infrastructure.persistence.postgres.rows import (
    BOARD_MEMBER_COLUMNS,
    board_membership_from_row,
)


class PostgresBoardMemberRepository:
    """Direct board member repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, board_id: UUID, user_id: str) -> BoardMembership | None:
        """Get direct membership of user on board."""
        cur = await self._conn.execute(
            f"SELECT {BOARD_MEMBER_COLUMNS} FROM board_member "
            "WHERE board_id = %s AND user_id = %s",
            (board_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return board_membership_from_row(r)

    async def list_by_board(self, board_id: UUID) -> list[BoardMembership]:
        """List direct board members, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {BOARD_MEMBER_COLUMNS} FROM board_member "
            "WHERE board_id = %s ORDER BY joined_at",
            (board_id,),
        )
        rows = await cur.fetchall()
        return [board_membership_from_row(r) for r in rows]

    async def create(self, membership: BoardMembership) -> BoardMembership:
        """Create direct membership."""
        await self._conn.execute(
            "INSERT INTO board_member (user_id, board_id, role, joined_at) "
            "VALUES (%s, %s, %s, %s)",
            (
                membership.user_id,
                membership.board_id,
                str(membership.role),
                membership.joined_at,
            ),
        )
        return membership

    async def update_role(self, board_id: UUID, user_id: str, role: BoardRole) -> None:
        """Update direct member role."""
        await self._conn.execute(
            "UPDATE board_member SET role = %s WHERE board_id = %s AND user_id = %s",
            (str(role), board_id, user_id),
        )

    async def delete(self, board_id: UUID, user_id: str) -> None:
        """Delete direct membership."""
        await self._conn.execute(
            "DELETE FROM board_member WHERE board_id = %s AND user_id = %s",
            (board_id, user_id),
        )

    async def delete_in_workspace(self, workspace_id: UUID, user_id: str) -> None:
        """Delete user's direct memberships on every board of workspace."""
        await self._conn.execute(
            "DELETE FROM board_member WHERE user_id = %s AND board_id IN "
            "(SELECT id FROM board WHERE workspace_id = %s)",
            (user_id, workspace_id),
        )
