"""Workspace membership API resources."""

import falcon.asgi

from boardgate.application.use_cases.membership.invite_workspace_member import (
    InviteWorkspaceMemberUseCase,
)
from boardgate.application.use_cases.membership.list_workspace_members import (
    ListWorkspaceMembersUseCase,
)
from boardgate.application.use_cases.membership.remove_workspace_member import (
    RemoveWorkspaceMemberUseCase,
)
from boardgate.application.use_cases.membership.update_workspace_member_role import (
    UpdateWorkspaceMemberRoleUseCase,
)
from boardgate.domain.exceptions import ValidationError
from boardgate.interfaces.api.resources.common import (
    current_user_id,
    parse_uuid,
    read_body,
    unauthorized,
)


class WorkspaceMembersResource:
    """GET/POST /v1/workspaces/{id}/members - list and invite members."""

    def __init__(
        self,
        list_members: ListWorkspaceMembersUseCase,
        invite_member: InviteWorkspaceMemberUseCase,
    ) -> None:
        self._list = list_members
        self._invite = invite_member

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
    ) -> None:
        """List members of workspace. Any member may read."""
        user_id = current_user_id(req)
        if not user_id:
            return unauthorized(resp)
        ws_id = parse_uuid(workspace_id, "workspace ID")

        members = await self._list.execute(user_id, ws_id)

        resp.media = {
            "items": [
                {
                    "user_id": m.user_id,
                    "role": str(m.role),
                    "joined_at": m.joined_at.isoformat(),
                }
                for m in members
            ]
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
    ) -> None:
        """Invite user to workspace."""
        user_id = current_user_id(req)
        if not user_id:
            return unauthorized(resp)
        ws_id = parse_uuid(workspace_id, "workspace ID")

        body = await read_body(req)
        try:
            target = body["user_id"]
        except KeyError as e:
            raise ValidationError(f"Missing required field: {e}") from None
        role = body.get("role", "MEMBER")

        membership = await self._invite.execute(user_id, ws_id, target, role)
        resp.media = {"user_id": membership.user_id, "role": str(membership.role)}
        resp.status = falcon.HTTP_201


class WorkspaceMemberResource:
    """PATCH/DELETE /v1/workspaces/{id}/members/{user_id}."""

    def __init__(
        self,
        update_role: UpdateWorkspaceMemberRoleUseCase,
        remove_member: RemoveWorkspaceMemberUseCase,
    ) -> None:
        self._update = update_role
        self._remove = remove_member

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        user_id: str,
    ) -> None:
        """Change member role."""
        actor_id = current_user_id(req)
        if not actor_id:
            return unauthorized(resp)
        ws_id = parse_uuid(workspace_id, "workspace ID")

        body = await read_body(req)
        if "role" not in body:
            raise ValidationError("Missing required field: 'role'")

        role = await self._update.execute(actor_id, ws_id, user_id, body["role"])
        resp.media = {"user_id": user_id, "role": str(role)}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        workspace_id: str,
        user_id: str,
    ) -> None:
        """Remove member from workspace."""
        actor_id = current_user_id(req)
        if not actor_id:
            return unauthorized(resp)
        ws_id = parse_uuid(workspace_id, "workspace ID")

        await self._remove.execute(actor_id, ws_id, user_id)
        resp.status = falcon.HTTP_204
