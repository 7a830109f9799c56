"""Add board member use case."""

import logging
from uuid import UUID

from boardgate.domain.entities import BoardMembership
from boardgate.domain.exceptions import MembershipConflict, ResourceNotFound, ValidationError
from boardgate.domain.value_objects import BoardRole, ResourceAction
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class AddBoardMemberUseCase:
    """Give a workspace member a direct role on a board."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_gate: Authorizer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = authorization_gate

    async def execute(
        self,
        actor_id: str,
        board_id: UUID,
        user_id: str,
        role_name: str = BoardRole.MEMBER,
    ) -> BoardMembership:
        """Add direct member. Actor needs admin on the board."""
        await self._gate.assert_board_permission(actor_id, board_id, ResourceAction.ADMIN)

        role = BoardRole.parse(role_name)
        if role is None:
            raise ValidationError(f"Unknown board role: {role_name}")

        async with self._uow_factory() as uow:
            workspace_id = await uow.memberships.find_board_workspace_id(board_id)
            if workspace_id is None:
                raise ResourceNotFound("board", board_id)
            if not await uow.workspace_members.get(workspace_id, user_id):
                raise MembershipConflict("Only workspace members can be added to a board")
            if await uow.board_members.get(board_id, user_id):
                raise MembershipConflict("User is already a direct board member")

            membership = BoardMembership(user_id=user_id, board_id=board_id, role=role)
            await uow.board_members.create(membership)

        logger.info(
            "Board member added",
            extra={
                "event": "add_board_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "board_id": str(board_id),
                "role": str(role),
            },
        )
        return membership
