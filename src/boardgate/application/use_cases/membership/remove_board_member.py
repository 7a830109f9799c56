"""Remove board member use case."""

import logging
from uuid import UUID

from boardgate.domain.exceptions import ResourceNotFound
from boardgate.domain.value_objects import ResourceAction
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class RemoveBoardMemberUseCase:
    """Delete a direct board membership row.

    The user falls back to whatever their workspace role implies.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_gate: Authorizer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = authorization_gate

    async def execute(self, actor_id: str, board_id: UUID, user_id: str) -> None:
        await self._gate.assert_board_permission(actor_id, board_id, ResourceAction.ADMIN)

        async with self._uow_factory() as uow:
            member = await uow.board_members.get(board_id, user_id)
            if not member:
                raise ResourceNotFound("board member", f"{board_id}/{user_id}")
            await uow.board_members.delete(board_id, user_id)

        logger.info(
            "Board member removed",
            extra={
                "event": "remove_board_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "board_id": str(board_id),
                "previous_role": str(member.role),
            },
        )
