"""Invite workspace member use case."""

import logging
from uuid import UUID

from boardgate.domain.entities import WorkspaceMembership
from boardgate.domain.exceptions import MembershipConflict, ValidationError
from boardgate.domain.value_objects import WorkspaceRole
from boardgate.application.ports import Authorizer

logger = logging.getLogger(__name__)


class InviteWorkspaceMemberUseCase:
    """Add a user to a workspace with a non-owner role."""

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
        role_name: str = WorkspaceRole.MEMBER,
    ) -> WorkspaceMembership:
        """Invite user. Only the workspace owner may invite."""
        await self._gate.assert_workspace_ownership(actor_id, workspace_id)

        role = WorkspaceRole.parse(role_name)
        if role is None:
            raise ValidationError(f"Unknown workspace role: {role_name}")
        if role == WorkspaceRole.OWNER:
            raise ValidationError("Workspace ownership cannot be granted by invitation")

        async with self._uow_factory() as uow:
            existing = await uow.workspace_members.get(workspace_id, user_id)
            if existing:
                raise MembershipConflict("User is already a workspace member")
            membership = WorkspaceMembership(
                user_id=user_id,
                workspace_id=workspace_id,
                role=role,
            )
            await uow.workspace_members.create(membership)

        logger.info(
            "Workspace member invited",
            extra={
                "event": "invite_workspace_member",
                "actor_id": actor_id,
                "user_id": user_id,
                "workspace_id": str(workspace_id),
                "role": str(role),
            },
        )
        return membership
