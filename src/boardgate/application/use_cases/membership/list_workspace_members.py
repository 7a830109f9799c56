"""List workspace members use case."""

from uuid import UUID

from boardgate.domain.entities import WorkspaceMembership
from boardgate.domain.value_objects import ResourceAction
from boardgate.application.ports import Authorizer


class ListWorkspaceMembersUseCase:
    """Workspace membership rows, oldest first. Any member may read."""

    def __init__(
        self,
        unit_of_work_factory: type,
        authorization_gate: Authorizer,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gate = authorization_gate

    async def execute(self, actor_id: str, workspace_id: UUID) -> list[WorkspaceMembership]:
        await self._gate.assert_workspace_permission(actor_id, workspace_id, ResourceAction.READ)

        async with self._uow_factory() as uow:
            return await uow.workspace_members.list_by_workspace(workspace_id)
