"""PostgreSQL workspace member repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from boardgate.domain.entities import WorkspaceMembership
from boardgate.domain.value_objects import WorkspaceRole
from boardgate.infrastructure.persistence.postgres.rows import (
    WORKSPACE_MEMBER_COLUMNS,
    workspace_membership_from_row,
)


class PostgresWorkspaceMemberRepository:
    """Workspace member repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, workspace_id: UUID, user_id: str) -> WorkspaceMembership | None:
        """Get membership of user in workspace."""
        cur = await self._conn.execute(
            f"SELECT {WORKSPACE_MEMBER_COLUMNS} FROM workspace_member "
            "WHERE workspace_id = %s AND user_id = %s",
            (workspace_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return workspace_membership_from_row(r)

    async def list_by_workspace(self, workspace_id: UUID) -> list[WorkspaceMembership]:
        """List workspace members, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {WORKSPACE_MEMBER_COLUMNS} FROM workspace_member "
            "WHERE workspace_id = %s ORDER BY joined_at",
            (workspace_id,),
        )
        rows = await cur.fetchall()
        return [workspace_membership_from_row(r) for r in rows]

    async def create(self, membership: WorkspaceMembership) -> WorkspaceMembership:
        """Create membership."""
        await self._conn.execute(
            "INSERT INTO workspace_member (user_id, workspace_id, role, joined_at) "
            "VALUES (%s, %s, %s, %s)",
            (
                membership.user_id,
                membership.workspace_id,
                str(membership.role),
                membership.joined_at,
            ),
        )
        return membership

    async def update_role(self, workspace_id: UUID, user_id: str, role: WorkspaceRole) -> None:
        """Update member role."""
        await self._conn.execute(
            "UPDATE workspace_member SET role = %s WHERE workspace_id = %s AND user_id = %s",
            (str(role), workspace_id, user_id),
        )

    async def delete(self, workspace_id: UUID, user_id: str) -> None:
        """Delete membership."""
        await self._conn.execute(
            "DELETE FROM workspace_member WHERE workspace_id = %s AND user_id = %s",
            (workspace_id, user_id),
        )
