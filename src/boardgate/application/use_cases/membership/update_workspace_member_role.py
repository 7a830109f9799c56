"""Update workspace member role use case."""

import logging
from uuid import UUID

from boardgate.domain.exceptions import PermissionDenied, ResourceNotFound, ValidationError
from boardgate.domain.value_objects import ResourceAction, WorkspaceRole
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class UpdateWorkspaceMemberRoleUseCase:
    """Change a member's workspace role. The owner's role is immutable."""

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
        workspace_id: UUID,
        user_id: str,
        role_name: str,
    ) -> WorkspaceRole:
        """Set new role for user. Actor must be the workspace owner."""
        await self._gate.assert_workspace_ownership(actor_id, workspace_id)

        role = WorkspaceRole.parse(role_name)
        if role is None:
            raise ValidationError(f"Unknown workspace role: {role_name}")
        if role == WorkspaceRole.OWNER:
            raise ValidationError("Workspace ownership cannot be granted by role update")

        if await self._gate.is_workspace_owner(user_id, workspace_id):
            raise PermissionDenied(
                ResourceAction.ADMIN, "workspace", workspace_id,
                message="The workspace owner's role cannot be changed",
            )

        async with self._uow_factory() as uow:
            member = await uow.workspace_members.get(workspace_id, user_id)
            if not member:
                raise ResourceNotFound("workspace member", f"{workspace_id}/{user_id}")
            await uow.workspace_members.update_role(workspace_id, user_id, role)

        logger.info(
            "Workspace member role updated",
            extra={
                "event": "update_workspace_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "workspace_id": str(workspace_id),
                "role": str(role),
                "previous_role": str(member.role),
            },
        )
        return role
