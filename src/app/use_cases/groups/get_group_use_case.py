from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.libs.result import Error, Result, Return

from .dtos import GroupResponse


class GetGroupUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, group_id: UUID) -> Result[GroupResponse]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))
            return Return.ok(GroupResponse.model_validate(group))
