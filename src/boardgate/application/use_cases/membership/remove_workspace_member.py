"""Remove workspace member use case."""

import logging
from uuid import UUID

from boardgate.domain.exceptions import PermissionDenied, ResourceNotFound
from boardgate.domain.value_objects import ResourceAction
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class RemoveWorkspaceMemberUseCase:
    """Remove a member from a workspace together with their direct board rows."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_gate: Authorizer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = authorization_gate

    async def execute(self, actor_id: str, workspace_id: UUID, user_id: str) -> None:
        """Remove user. Actor must be the owner; the owner cannot be removed."""
        await self._gate.assert_workspace_ownership(actor_id, workspace_id)

        if await self._gate.is_workspace_owner(user_id, workspace_id):
            raise PermissionDenied(
                ResourceAction.DELETE, "workspace", workspace_id,
                message="The workspace owner cannot be removed",
            )

        async with self._uow_factory() as uow:
            member = await uow.workspace_members.get(workspace_id, user_id)
            if not member:
                raise ResourceNotFound("workspace member", f"{workspace_id}/{user_id}")
            await uow.board_members.delete_in_workspace(workspace_id, user_id)
            await uow.workspace_members.delete(workspace_id, user_id)

        logger.info(
            "Workspace member removed",
            extra={
                "event": "remove_workspace_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "workspace_id": str(workspace_id),
                "previous_role": str(member.role),
            },
        )
