"""
Set Parent Use Case

Moves a group below another group or turns it into a root.
"""

from typing import Optional
from uuid import UUID

from src.app.services.group_tree import GroupTreeService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups.dtos import GroupResponse
from src.app.use_cases.store_guard import store_guard
from src.libs.result import Error, Result, Return


class SetParentUseCase:
    """
    Use case for re-parenting a group.

    Business Rules:
    - The group must exist (GROUP_NOT_FOUND)
    - A non-null parent must exist (PARENT_NOT_FOUND)
    - The parent cannot be the group itself or one of its descendants
      (CYCLE_REJECTED); nothing is written in that case
    - parent edge, parent_id and the levels of the moved subtree change together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, group_id: UUID, parent_id: Optional[UUID]
    ) -> Result[GroupResponse]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            parent = None
            if parent_id is not None:
                parent = await self.uow.groups.get_by_id(parent_id)
                if parent is None:
                    return Return.err(Error("PARENT_NOT_FOUND", "Parent group not found"))

            result = await GroupTreeService(self.uow).attach(group, parent)
            if result.is_err():
                return result

            await self.uow.commit()

            return Return.ok(GroupResponse.model_validate(result.value))
