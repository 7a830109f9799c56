"""List board members use case - direct and inherited, with role source."""

from uuid import UUID

from boardgate.domain.entities import BoardMemberView
from boardgate.domain.exceptions import ResourceNotFound
from boardgate.domain.permissions import map_workspace_role_to_board_role
from boardgate.domain.value_objects import BoardRole, ResourceAction, RoleSource, WorkspaceRole
from boardgate.application.ports import Authorizer


class ListBoardMembersUseCase:
    """Who has what role on a board and why."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_gate: Authorizer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = authorization_gate

    async def execute(self, actor_id: str, board_id: UUID) -> list[BoardMemberView]:
        """Direct members first, then workspace members without a direct row."""
        await self._gate.assert_board_permission(actor_id, board_id, ResourceAction.READ)

        async with self._uow_factory() as uow:
            direct = await uow.board_members.list_by_board(board_id)
            workspace_id = await uow.memberships.find_board_workspace_id(board_id)
            if workspace_id is None:
                raise ResourceNotFound("board", board_id)
            workspace_members = await uow.workspace_members.list_by_workspace(workspace_id)

        direct_ids = {m.user_id for m in direct}
        items = [
            BoardMemberView(
                user_id=m.user_id,
                role=BoardRole.parse(m.role) or BoardRole.VIEWER,
                source=RoleSource.BOARD,
                joined_at=m.joined_at,
            )
            for m in direct
        ]
        items.extend(
            BoardMemberView(
                user_id=m.user_id,
                role=map_workspace_role_to_board_role(m.role),
                source=RoleSource.WORKSPACE,
                joined_at=m.joined_at,
                inherited_from=WorkspaceRole.parse(m.role),
            )
            for m in workspace_members
            if m.user_id not in direct_ids
        )
        return items
