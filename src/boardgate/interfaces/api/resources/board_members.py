"""Board membership API resources."""

import falcon.asgi

from boardgate.application.use_cases.membership.add_board_member import AddBoardMemberUseCase
from boardgate.application.use_cases.membership.list_board_members import (
    ListBoardMembersUseCase,
)
from boardgate.application.use_cases.membership.remove_board_member import (
    RemoveBoardMemberUseCase,
)
from boardgate.application.use_cases.membership.update_board_member_role import (
    UpdateBoardMemberRoleUseCase,
)
from boardgate.domain.exceptions import ValidationError
from boardgate.infrastructure.permission.authorization_gate import AuthorizationGate
from boardgate.interfaces.api.resources.common import (
    current_user_id,
    parse_uuid,
    read_body,
    unauthorized,
)


class BoardMembersResource:
    """GET/POST /v1/boards/{id}/members - list (direct + inherited) and add."""

    def __init__(
        self,
        list_members: ListBoardMembersUseCase,
        add_member: AddBoardMemberUseCase,
    ) -> None:
        self._list = list_members
        self._add = add_member

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        board_id: str,
    ) -> None:
        """List board members with role source."""
        user_id = current_user_id(req)
        if not user_id:
            return unauthorized(resp)
        b_id = parse_uuid(board_id, "board ID")

        members = await self._list.execute(user_id, b_id)
        resp.media = {
            "items": [
                {
                    "user_id": m.user_id,
                    "role": str(m.role),
                    "source": str(m.source),
                    "inherited_from": str(m.inherited_from) if m.inherited_from else None,
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
        board_id: str,
    ) -> None:
        """Add a workspace member to the board with a direct role."""
        user_id = current_user_id(req)
        if not user_id:
            return unauthorized(resp)
        b_id = parse_uuid(board_id, "board ID")

        body = await read_body(req)
        try:
            target = body["user_id"]
        except KeyError as e:
            raise ValidationError(f"Missing required field: {e}") from None
        role = body.get("role", "MEMBER")

        membership = await self._add.execute(user_id, b_id, target, role)
        resp.media = {
            "user_id": membership.user_id,
            "role": str(membership.role),
            "source": "board",
        }
        resp.status = falcon.HTTP_201


class BoardMemberResource:
    """PATCH/DELETE /v1/boards/{id}/members/{user_id} - direct rows only."""

    def __init__(
        self,
        update_role: UpdateBoardMemberRoleUseCase,
        remove_member: RemoveBoardMemberUseCase,
    ) -> None:
        self._update = update_role
        self._remove = remove_member

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        board_id: str,
        user_id: str,
    ) -> None:
        actor_id = current_user_id(req)
        if not actor_id:
            return unauthorized(resp)
        b_id = parse_uuid(board_id, "board ID")

        body = await read_body(req)
        if "role" not in body:
            raise ValidationError("Missing required field: 'role'")

        role = await self._update.execute(actor_id, b_id, user_id, body["role"])
        resp.media = {"user_id": user_id, "role": str(role), "source": "board"}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        board_id: str,
        user_id: str,
    ) -> None:
        actor_id = current_user_id(req)
        if not actor_id:
            return unauthorized(resp)
        b_id = parse_uuid(board_id, "board ID")

        await self._remove.execute(actor_id, b_id, user_id)
        resp.status = falcon.HTTP_204


class BoardRoleResource:
    """GET /v1/boards/{id}/role - caller's effective role and where it comes from."""

    def __init__(self, authorization_gate: AuthorizationGate) -> None:
        self._gate = authorization_gate

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        board_id: str,
    ) -> None:
        user_id = current_user_id(req)
        if not user_id:
            return unauthorized(resp)
        b_id = parse_uuid(board_id, "board ID")

        resolved = await self._gate.get_user_board_role(user_id, b_id)
        resp.media = {
            "role": str(resolved.role) if resolved.role is not None else None,
            "source": str(resolved.source),
            "board_role": str(resolved.board_role) if resolved.board_role else None,
        }
        resp.status = falcon.HTTP_200
