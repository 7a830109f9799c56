"""Authorization gate - check/assert contract used by every resource service."""

import logging
from collections.abc import Collection
from uuid import UUID

from boardgate.application.dto.authorization import (
    AuthorizationDecision,
    BoardDecision,
    WorkspaceDecision,
)
from boardgate.application.ports import AuthorizationObserver, MembershipStoreFactory
from boardgate.domain.exceptions import InvalidRole, PermissionDenied, ResourceNotFound
from boardgate.domain.permissions import (
    evaluate_board_permission,
    evaluate_workspace_permission,
)
from boardgate.domain.resolution import DirectRole, InheritedRole, ResolvedRole
from boardgate.domain.value_objects import BoardRole, ResourceAction, WorkspaceRole
from boardgate.infrastructure.permission.role_resolver import RoleResolver

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """Authorizes actions on workspaces, boards, lists and cards.

    check_* methods return a decision and never raise for a denial or a
    missing board. assert_* methods raise PermissionDenied (InvalidRole for
    unrecognized stored roles) or ResourceNotFound. Store failures always
    propagate. Every decision is reported to the observer after it is made;
    an observer that raises is logged and does not affect the decision.
    """

    def __init__(
        self,
        membership_store_factory: MembershipStoreFactory,
        observer: AuthorizationObserver | None = None,
    ) -> None:
        self._store_factory = membership_store_factory
        self._observer = observer

    # --- Workspace ---

    async def check_workspace_permission(
        self, user_id: str, workspace_id: UUID, action: ResourceAction | str
    ) -> WorkspaceDecision:
        """Check action on workspace; returns allowed flag and the user's role."""
        async with self._store_factory() as store:
            role = await RoleResolver(store).resolve_workspace_role(user_id, workspace_id)

        allowed = evaluate_workspace_permission(role, action)
        self._notify(user_id, "workspace", workspace_id, action, allowed, role=role)
        return WorkspaceDecision(allowed=allowed, role=role)

    async def assert_workspace_permission(
        self, user_id: str, workspace_id: UUID, action: ResourceAction | str
    ) -> WorkspaceRole:
        """Return the user's workspace role or raise PermissionDenied."""
        decision = await self.check_workspace_permission(user_id, workspace_id, action)
        if not decision.allowed:
            raise self._denial(
                action, "workspace", workspace_id,
                decision.role is not None and WorkspaceRole.parse(decision.role) is None,
            )
        return WorkspaceRole(decision.role)

    async def get_user_workspace_role(
        self, user_id: str, workspace_id: UUID
    ) -> WorkspaceRole | str | None:
        """Informational lookup; never denies."""
        async with self._store_factory() as store:
            return await RoleResolver(store).resolve_workspace_role(user_id, workspace_id)

    async def assert_workspace_role(
        self,
        user_id: str,
        workspace_id: UUID,
        required_roles: Collection[WorkspaceRole],
    ) -> WorkspaceRole:
        """Require one of the given workspace roles."""
        role = WorkspaceRole.parse(await self.get_user_workspace_role(user_id, workspace_id))
        if role is None or role not in required_roles:
            raise PermissionDenied(
                "access", "workspace", workspace_id,
                message="Insufficient workspace role for this operation",
            )
        return role

    # --- Board ---

    async def check_board_permission(
        self, user_id: str, board_id: UUID, action: ResourceAction | str
    ) -> BoardDecision:
        """Check action on board. A missing board is a plain denial here."""
        return await self._check_board_scoped(user_id, "board", board_id, action)

    async def assert_board_permission(
        self, user_id: str, board_id: UUID, action: ResourceAction | str
    ) -> DirectRole | InheritedRole:
        """Return the resolved role or raise ResourceNotFound / PermissionDenied."""
        return await self._assert_board_scoped(user_id, "board", board_id, action)

    async def get_user_board_role(self, user_id: str, board_id: UUID) -> ResolvedRole:
        """Informational lookup; never denies. Raises ResourceNotFound for a missing board."""
        async with self._store_factory() as store:
            return await RoleResolver(store).resolve_board_role(user_id, board_id)

    async def assert_board_role(
        self,
        user_id: str,
        board_id: UUID,
        required_roles: Collection[BoardRole],
    ) -> DirectRole | InheritedRole:
        """Require one of the given board roles.

        Direct roles are compared as stored; inherited workspace roles are
        compared by their board equivalent.
        """
        resolved = await self.get_user_board_role(user_id, board_id)
        match resolved:
            case DirectRole() | InheritedRole() if resolved.board_role in required_roles:
                return resolved
            case _:
                raise PermissionDenied(
                    "access", "board", board_id,
                    message="Insufficient board role for this operation",
                )

    # --- Lists and cards (authorized through their board) ---

    async def check_list_permission(
        self, user_id: str, list_id: UUID, action: ResourceAction | str
    ) -> BoardDecision:
        return await self._check_board_scoped(user_id, "list", list_id, action)

    async def assert_list_permission(
        self, user_id: str, list_id: UUID, action: ResourceAction | str
    ) -> DirectRole | InheritedRole:
        return await self._assert_board_scoped(user_id, "list", list_id, action)

    async def check_card_permission(
        self, user_id: str, card_id: UUID, action: ResourceAction | str
    ) -> BoardDecision:
        return await self._check_board_scoped(user_id, "card", card_id, action)

    async def assert_card_permission(
        self, user_id: str, card_id: UUID, action: ResourceAction | str
    ) -> DirectRole | InheritedRole:
        return await self._assert_board_scoped(user_id, "card", card_id, action)

    # --- Ownership predicates ---

    async def is_workspace_owner(self, user_id: str, workspace_id: UUID) -> bool:
        """Identity check against the workspace owner_id, not the role table."""
        async with self._store_factory() as store:
            owner_id = await store.find_workspace_owner_id(workspace_id)
        return owner_id is not None and owner_id == user_id

    async def is_board_admin(self, user_id: str, board_id: UUID) -> bool:
        """Direct ADMIN row, or owner of the board's workspace.

        Workspace ownership wins over any direct board row, VIEWER included.
        """
        async with self._store_factory() as store:
            direct = await store.find_board_membership(user_id, board_id)
            if direct and BoardRole.parse(direct.role) == BoardRole.ADMIN:
                return True
            workspace_id = await store.find_board_workspace_id(board_id)
            if workspace_id is None:
                return False
            owner_id = await store.find_workspace_owner_id(workspace_id)
        return owner_id is not None and owner_id == user_id

    async def assert_workspace_ownership(self, user_id: str, workspace_id: UUID) -> None:
        if not await self.is_workspace_owner(user_id, workspace_id):
            raise PermissionDenied(
                ResourceAction.ADMIN, "workspace", workspace_id,
                message="Only the workspace owner can perform this operation",
            )

    async def assert_board_admin(self, user_id: str, board_id: UUID) -> None:
        if not await self.is_board_admin(user_id, board_id):
            raise PermissionDenied(
                ResourceAction.ADMIN, "board", board_id,
                message="Only a board admin can perform this operation",
            )

    # --- Internals ---

    async def _decide_board_scoped(
        self, user_id: str, kind: str, resource_id: UUID, action: ResourceAction | str
    ) -> tuple[ResolvedRole, bool]:
        try:
            async with self._store_factory() as store:
                resolver = RoleResolver(store)
                match kind:
                    case "list":
                        board_id = await resolver.resolve_list_board_id(resource_id)
                    case "card":
                        board_id = await resolver.resolve_card_board_id(resource_id)
                    case _:
                        board_id = resource_id
                resolved = await resolver.resolve_board_role(user_id, board_id)
        except ResourceNotFound:
            self._notify(user_id, kind, resource_id, action, False)
            raise

        allowed = self._evaluate_resolved(resolved, action)
        self._notify(
            user_id, kind, resource_id, action, allowed,
            role=resolved.role, source=resolved.source,
        )
        return resolved, allowed

    async def _check_board_scoped(
        self, user_id: str, kind: str, resource_id: UUID, action: ResourceAction | str
    ) -> BoardDecision:
        try:
            resolved, allowed = await self._decide_board_scoped(user_id, kind, resource_id, action)
        except ResourceNotFound:
            return BoardDecision(allowed=False)
        return BoardDecision(allowed=allowed, resolved=resolved)

    async def _assert_board_scoped(
        self, user_id: str, kind: str, resource_id: UUID, action: ResourceAction | str
    ) -> DirectRole | InheritedRole:
        resolved, allowed = await self._decide_board_scoped(user_id, kind, resource_id, action)
        if not allowed:
            raise self._denial(action, kind, resource_id, _is_unrecognized(resolved))
        return resolved

    @staticmethod
    def _evaluate_resolved(resolved: ResolvedRole, action: ResourceAction | str) -> bool:
        # Inherited grants are decided by the workspace evaluator on the raw
        # workspace role, not by the board evaluator on the mapped role.
        match resolved:
            case DirectRole(role=role):
                return evaluate_board_permission(role, action)
            case InheritedRole(role=role):
                return evaluate_workspace_permission(role, action)
            case _:
                return False

    @staticmethod
    def _denial(
        action: ResourceAction | str, kind: str, resource_id: UUID, unrecognized: bool
    ) -> PermissionDenied:
        if unrecognized:
            logger.warning("Unrecognized role value on %s %s; access denied", kind, resource_id)
            return InvalidRole(action, kind, resource_id)
        return PermissionDenied(action, kind, resource_id)

    def _notify(
        self,
        user_id: str,
        kind: str,
        resource_id: UUID,
        action: ResourceAction | str,
        allowed: bool,
        role: object = None,
        source: object = None,
    ) -> None:
        if self._observer is None:
            return
        decision = AuthorizationDecision(
            user_id=user_id,
            resource_kind=kind,
            resource_id=resource_id,
            action=action,
            allowed=allowed,
            role=str(role) if role is not None else None,
            source=str(source) if source is not None else None,
        )
        try:
            self._observer.on_decision(decision)
        except Exception:
            # An observer failure never changes the decision.
            logger.exception("Authorization observer failed for %s %s", kind, resource_id)


def _is_unrecognized(resolved: ResolvedRole) -> bool:
    match resolved:
        case DirectRole(role=role):
            return BoardRole.parse(role) is None
        case InheritedRole(role=role):
            return WorkspaceRole.parse(role) is None
        case _:
            return False
