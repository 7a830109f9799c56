"""Pytest fixtures for BoardGate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from uuid import UUID, uuid4

import pytest

from boardgate.application.dto.authorization import AuthorizationDecision
from boardgate.domain.entities import BoardMembership, WorkspaceMembership
from boardgate.domain.value_objects import BoardRole, WorkspaceRole
from boardgate.infrastructure.permission.authorization_gate import AuthorizationGate


# --- In-memory data ---


class InMemoryMemberships:
    """Workspaces, boards, lists, cards and membership rows shared by the fakes."""

    def __init__(self) -> None:
        self.workspace_owners: dict[UUID, str] = {}  # workspace_id -> owner_id
        self.board_workspaces: dict[UUID, UUID] = {}  # board_id -> workspace_id
        self.list_boards: dict[UUID, UUID] = {}  # list_id -> board_id
        self.card_lists: dict[UUID, UUID] = {}  # card_id -> list_id
        self.workspace_members: dict[tuple[UUID, str], WorkspaceMembership] = {}
        self.board_members: dict[tuple[UUID, str], BoardMembership] = {}

    def add_workspace(self, owner_id: str) -> UUID:
        """Create workspace with its owner's OWNER membership row."""
        workspace_id = uuid4()
        self.workspace_owners[workspace_id] = owner_id
        self.set_workspace_role(workspace_id, owner_id, WorkspaceRole.OWNER)
        return workspace_id

    def add_board(self, workspace_id: UUID) -> UUID:
        board_id = uuid4()
        self.board_workspaces[board_id] = workspace_id
        return board_id

    def add_list(self, board_id: UUID) -> UUID:
        list_id = uuid4()
        self.list_boards[list_id] = board_id
        return list_id

    def add_card(self, list_id: UUID) -> UUID:
        card_id = uuid4()
        self.card_lists[card_id] = list_id
        return card_id

    def set_workspace_role(self, workspace_id: UUID, user_id: str, role: WorkspaceRole | str) -> None:
        self.workspace_members[(workspace_id, user_id)] = WorkspaceMembership(
            user_id=user_id, workspace_id=workspace_id, role=role
        )

    def set_board_role(self, board_id: UUID, user_id: str, role: BoardRole | str) -> None:
        self.board_members[(board_id, user_id)] = BoardMembership(
            user_id=user_id, board_id=board_id, role=role
        )


# --- Fake store and repositories ---


class FakeMembershipStore:
    """In-memory membership store. Records every lookup in calls."""

    def __init__(self, data: InMemoryMemberships) -> None:
        self._data = data
        self.calls: list[str] = []

    async def find_workspace_membership(
        self, user_id: str, workspace_id: UUID
    ) -> WorkspaceMembership | None:
        self.calls.append("find_workspace_membership")
        return self._data.workspace_members.get((workspace_id, user_id))

    async def find_board_membership(self, user_id: str, board_id: UUID) -> BoardMembership | None:
        self.calls.append("find_board_membership")
        return self._data.board_members.get((board_id, user_id))

    async def find_workspace_owner_id(self, workspace_id: UUID) -> str | None:
        self.calls.append("find_workspace_owner_id")
        return self._data.workspace_owners.get(workspace_id)

    async def find_board_workspace_id(self, board_id: UUID) -> UUID | None:
        self.calls.append("find_board_workspace_id")
        return self._data.board_workspaces.get(board_id)

    async def find_list_board_id(self, list_id: UUID) -> UUID | None:
        self.calls.append("find_list_board_id")
        return self._data.list_boards.get(list_id)

    async def find_card_board_id(self, card_id: UUID) -> UUID | None:
        self.calls.append("find_card_board_id")
        list_id = self._data.card_lists.get(card_id)
        return self._data.list_boards.get(list_id) if list_id else None


class FakeWorkspaceMemberRepository:
    """In-memory workspace member repository."""

    def __init__(self, data: InMemoryMemberships) -> None:
        self._data = data

    async def get(self, workspace_id: UUID, user_id: str) -> WorkspaceMembership | None:
        return self._data.workspace_members.get((workspace_id, user_id))

    async def list_by_workspace(self, workspace_id: UUID) -> list[WorkspaceMembership]:
        return sorted(
            (m for m in self._data.workspace_members.values() if m.workspace_id == workspace_id),
            key=lambda m: m.joined_at,
        )

    async def create(self, membership: WorkspaceMembership) -> WorkspaceMembership:
        self._data.workspace_members[(membership.workspace_id, membership.user_id)] = membership
        return membership

    async def update_role(self, workspace_id: UUID, user_id: str, role: WorkspaceRole) -> None:
        key = (workspace_id, user_id)
        self._data.workspace_members[key] = replace(self._data.workspace_members[key], role=role)

    async def delete(self, workspace_id: UUID, user_id: str) -> None:
        self._data.workspace_members.pop((workspace_id, user_id), None)


class FakeBoardMemberRepository:
    """In-memory direct board member repository."""

    def __init__(self, data: InMemoryMemberships) -> None:
        self._data = data

    async def get(self, board_id: UUID, user_id: str) -> BoardMembership | None:
        return self._data.board_members.get((board_id, user_id))

    async def list_by_board(self, board_id: UUID) -> list[BoardMembership]:
        return sorted(
            (m for m in self._data.board_members.values() if m.board_id == board_id),
            key=lambda m: m.joined_at,
        )

    async def create(self, membership: BoardMembership) -> BoardMembership:
        self._data.board_members[(membership.board_id, membership.user_id)] = membership
        return membership

    async def update_role(self, board_id: UUID, user_id: str, role: BoardRole) -> None:
        key = (board_id, user_id)
        self._data.board_members[key] = replace(self._data.board_members[key], role=role)

    async def delete(self, board_id: UUID, user_id: str) -> None:
        self._data.board_members.pop((board_id, user_id), None)

    async def delete_in_workspace(self, workspace_id: UUID, user_id: str) -> None:
        for key, m in list(self._data.board_members.items()):
            if m.user_id == user_id and self._data.board_workspaces.get(m.board_id) == workspace_id:
                del self._data.board_members[key]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self, data: InMemoryMemberships) -> None:
        self.workspace_members = FakeWorkspaceMemberRepository(data)
        self.board_members = FakeBoardMemberRepository(data)
        self.memberships = FakeMembershipStore(data)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class RecordingObserver:
    """Collects authorization decisions."""

    def __init__(self) -> None:
        self.decisions: list[AuthorizationDecision] = []

    def on_decision(self, decision: AuthorizationDecision) -> None:
        self.decisions.append(decision)


@dataclass
class Scenario:
    """Workspace W owned by U1 with member U2, board B, list L and card C."""

    data: InMemoryMemberships
    workspace_id: UUID
    board_id: UUID
    list_id: UUID
    card_id: UUID
    owner: str = "U1"
    member: str = "U2"


# --- Fixtures ---


@pytest.fixture
def memberships() -> InMemoryMemberships:
    """Fresh in-memory membership data for each test."""
    return InMemoryMemberships()


@pytest.fixture
def store_factory(memberships):
    """Factory returning async context manager with a FakeMembershipStore.

    Every store handed out is appended to store_factory.stores.
    """
    stores: list[FakeMembershipStore] = []

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeMembershipStore]:
        store = FakeMembershipStore(memberships)
        stores.append(store)
        yield store

    _factory.stores = stores
    return _factory


@pytest.fixture
def uow_factory(memberships):
    """Factory returning async context manager with FakeUnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield FakeUnitOfWork(memberships)

    return _factory


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def gate(store_factory, observer) -> AuthorizationGate:
    """Gate over the in-memory store, reporting to a recording observer."""
    return AuthorizationGate(membership_store_factory=store_factory, observer=observer)


@pytest.fixture
def scenario(memberships) -> Scenario:
    """U1 owns W, U2 is a workspace MEMBER, board B has no membership rows."""
    workspace_id = memberships.add_workspace(owner_id="U1")
    memberships.set_workspace_role(workspace_id, "U2", WorkspaceRole.MEMBER)
    board_id = memberships.add_board(workspace_id)
    list_id = memberships.add_list(board_id)
    card_id = memberships.add_card(list_id)
    return Scenario(
        data=memberships,
        workspace_id=workspace_id,
        board_id=board_id,
        list_id=list_id,
        card_id=card_id,
    )
