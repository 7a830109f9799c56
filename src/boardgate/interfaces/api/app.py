"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from psycopg_pool import AsyncConnectionPool

from boardgate.application.use_cases.membership.add_board_member import AddBoardMemberUseCase
from boardgate.application.use_cases.membership.invite_workspace_member import (
    InviteWorkspaceMemberUseCase,
)
from boardgate.application.use_cases.membership.list_board_members import (
    ListBoardMembersUseCase,
)
from boardgate.application.use_cases.membership.list_workspace_members import (
    ListWorkspaceMembersUseCase,
)
from boardgate.application.use_cases.membership.remove_board_member import (
    RemoveBoardMemberUseCase,
)
from boardgate.application.use_cases.membership.remove_workspace_member import (
    RemoveWorkspaceMemberUseCase,
)
from boardgate.application.use_cases.membership.update_board_member_role import (
    UpdateBoardMemberRoleUseCase,
)
from boardgate.application.use_cases.membership.update_workspace_member_role import (
    UpdateWorkspaceMemberRoleUseCase,
)
from boardgate.infrastructure.permission.authorization_gate import AuthorizationGate
from boardgate.interfaces.api.errors import register_error_handlers
from boardgate.interfaces.api.middleware.auth import AuthMiddleware
from boardgate.interfaces.api.resources.board_members import (
    BoardMemberResource,
    BoardMembersResource,
    BoardRoleResource,
)
from boardgate.interfaces.api.resources.health import HealthResource
from boardgate.interfaces.api.resources.workspace_members import (
    WorkspaceMemberResource,
    WorkspaceMembersResource,
)


def create_app(
    unit_of_work_factory: type,
    authorization_gate: AuthorizationGate,
    user_header: str = "X-User-Id",
    pool: AsyncConnectionPool | None = None,
    middleware: Sequence[object] = (),
) -> falcon.asgi.App:
    """Create Falcon ASGI app with membership routes and error mapping."""
    uow = unit_of_work_factory
    gate = authorization_gate

    workspace_members = WorkspaceMembersResource(
        ListWorkspaceMembersUseCase(uow, gate),
        InviteWorkspaceMemberUseCase(uow, gate),
    )
    workspace_member = WorkspaceMemberResource(
        UpdateWorkspaceMemberRoleUseCase(uow, gate),
        RemoveWorkspaceMemberUseCase(uow, gate),
    )
    board_members = BoardMembersResource(
        ListBoardMembersUseCase(uow, gate),
        AddBoardMemberUseCase(uow, gate),
    )
    board_member = BoardMemberResource(
        UpdateBoardMemberRoleUseCase(uow, gate),
        RemoveBoardMemberUseCase(uow, gate),
    )
    health = HealthResource(pool)

    app = falcon.asgi.App(middleware=[*middleware, AuthMiddleware(user_header)])
    register_error_handlers(app)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/workspaces/{workspace_id}/members", workspace_members)
    app.add_route("/v1/workspaces/{workspace_id}/members/{user_id}", workspace_member)
    app.add_route("/v1/boards/{board_id}/members", board_members)
    app.add_route("/v1/boards/{board_id}/members/{user_id}", board_member)
    app.add_route("/v1/boards/{board_id}/role", BoardRoleResource(gate))
    return app
