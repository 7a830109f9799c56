"""Update board member role use case."""

import logging
from uuid import UUID

from boardgate.domain.exceptions import ResourceNotFound, ValidationError
from boardgate.domain.value_objects import BoardRole, ResourceAction
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class UpdateBoardMemberRoleUseCase:
    """Change the role on a direct board membership row."""

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
        role_name: str,
    ) -> BoardRole:
        """Set new direct role. Inherited members have no row to update."""
        await self._gate.assert_board_permission(actor_id, board_id, ResourceAction.ADMIN)

        role = BoardRole.parse(role_name)
        if role is None:
            raise ValidationError(f"Unknown board role: {role_name}")

        async with self._uow_factory() as uow:
            member = await uow.board_members.get(board_id, user_id)
            if not member:
                raise ResourceNotFound("board member", f"{board_id}/{user_id}")
            await uow.board_members.update_role(board_id, user_id, role)

        logger.info(
            "Board member role updated",
            extra={
                "event": "update_board_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "board_id": str(board_id),
                "role": str(role),
                "previous_role": str(member.role),
            },
        )
        return role
