from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.libs.result import Result, Return

from .dtos import GroupResponse


class ListGroupsUseCase:
    """All groups as a flat list ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self) -> Result[List[GroupResponse]]:
        async with self.uow:
            groups = await self.uow.groups.list_all()
            return Return.ok([GroupResponse.model_validate(g) for g in groups])
