"""Unit tests for RoleResolver."""

import pytest

from boardgate.domain.exceptions import ResourceNotFound
from boardgate.domain.resolution import DirectRole, InheritedRole, NoRelationship
from boardgate.domain.value_objects import BoardRole, RoleSource, WorkspaceRole
from boardgate.infrastructure.permission.role_resolver import RoleResolver

from tests.conftest import FakeMembershipStore


@pytest.mark.asyncio
async def test_workspace_role_direct_lookup(scenario) -> None:
    resolver = RoleResolver(FakeMembershipStore(scenario.data))

    assert await resolver.resolve_workspace_role("U1", scenario.workspace_id) == WorkspaceRole.OWNER
    assert await resolver.resolve_workspace_role("U2", scenario.workspace_id) == WorkspaceRole.MEMBER
    assert await resolver.resolve_workspace_role("U3", scenario.workspace_id) is None


@pytest.mark.asyncio
async def test_direct_board_row_short_circuits(scenario) -> None:
    """Direct row is returned without consulting board linkage or workspace."""
    scenario.data.set_board_role(scenario.board_id, "U2", BoardRole.VIEWER)
    store = FakeMembershipStore(scenario.data)

    resolved = await RoleResolver(store).resolve_board_role("U2", scenario.board_id)

    assert resolved == DirectRole(BoardRole.VIEWER)
    assert resolved.source == RoleSource.BOARD
    assert store.calls == ["find_board_membership"]


@pytest.mark.asyncio
async def test_direct_viewer_wins_over_inherited_owner(scenario) -> None:
    scenario.data.set_board_role(scenario.board_id, "U1", BoardRole.VIEWER)

    resolved = await RoleResolver(FakeMembershipStore(scenario.data)).resolve_board_role(
        "U1", scenario.board_id
    )

    assert resolved.role == BoardRole.VIEWER
    assert resolved.source == RoleSource.BOARD


@pytest.mark.asyncio
async def test_inherited_role_is_raw_workspace_role(scenario) -> None:
    store = FakeMembershipStore(scenario.data)

    resolved = await RoleResolver(store).resolve_board_role("U1", scenario.board_id)

    assert isinstance(resolved, InheritedRole)
    assert resolved.role == WorkspaceRole.OWNER
    assert resolved.board_role == BoardRole.ADMIN
    assert resolved.source == RoleSource.WORKSPACE
    assert store.calls == [
        "find_board_membership",
        "find_board_workspace_id",
        "find_workspace_membership",
    ]


@pytest.mark.asyncio
async def test_no_relationship_keeps_workspace_source(scenario) -> None:
    resolved = await RoleResolver(FakeMembershipStore(scenario.data)).resolve_board_role(
        "stranger", scenario.board_id
    )

    assert isinstance(resolved, NoRelationship)
    assert resolved.role is None
    assert resolved.source == RoleSource.WORKSPACE


@pytest.mark.asyncio
async def test_missing_board_raises_not_found(memberships) -> None:
    from uuid import uuid4

    missing = uuid4()
    with pytest.raises(ResourceNotFound) as exc_info:
        await RoleResolver(FakeMembershipStore(memberships)).resolve_board_role("U1", missing)
    assert exc_info.value.resource_kind == "board"
    assert exc_info.value.resource_id == missing


@pytest.mark.asyncio
async def test_list_and_card_resolve_to_board(scenario) -> None:
    resolver = RoleResolver(FakeMembershipStore(scenario.data))

    assert await resolver.resolve_list_board_id(scenario.list_id) == scenario.board_id
    assert await resolver.resolve_card_board_id(scenario.card_id) == scenario.board_id


@pytest.mark.asyncio
async def test_missing_list_and_card_raise_not_found(memberships) -> None:
    from uuid import uuid4

    resolver = RoleResolver(FakeMembershipStore(memberships))
    with pytest.raises(ResourceNotFound, match="list"):
        await resolver.resolve_list_board_id(uuid4())
    with pytest.raises(ResourceNotFound, match="card"):
        await resolver.resolve_card_board_id(uuid4())
