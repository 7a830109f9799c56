"""Board member repository port."""

from typing import Protocol
from uuid import UUID

from boardgate.domain.entities import BoardMembership
from boardgate.domain.value_objects import BoardRole


class BoardMemberRepository(Protocol):
    """Port for direct board membership persistence."""

    async def get(self, board_id: UUID, user_id: str) -> BoardMembership | None: ...

    async def list_by_board(self, board_id: UUID) -> list[BoardMembership]: ...

    async def create(self, membership: BoardMembership) -> BoardMembership: ...

    async def update_role(self, board_id: UUID, user_id: str, role: BoardRole) -> None: ...

    async def delete(self, board_id: UUID, user_id: str) -> None: ...

    async def delete_in_workspace(self, workspace_id: UUID, user_id: str) -> None: ...
