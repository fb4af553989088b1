"""
Create Group Use Case

Creates a group, optionally below an existing parent.
"""

from typing import Optional
from uuid import UUID

from src.app.services.group_tree import GroupTreeService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import Group
from src.libs.result import Error, Result, Return

from .dtos import GroupResponse


class CreateGroupUseCase:
    """
    Use case for creating groups.

    Business Rules:
    - Without parent_id the group is a root at level 0
    - With parent_id the parent must exist (PARENT_NOT_FOUND); the group row
      and its parent edge are written in one transaction and level is
      parent.level + 1
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, name: str, parent_id: Optional[UUID] = None
    ) -> Result[GroupResponse]:
        """
        Execute create group use case.

        Args:
            name: Group name
            parent_id: Optional parent group

        Returns:
            Result with GroupResponse DTO, or Error
        """
        async with self.uow:
            parent = None
            if parent_id is not None:
                parent = await self.uow.groups.get_by_id(parent_id)
                if parent is None:
                    return Return.err(
                        Error("PARENT_NOT_FOUND", "Parent group not found")
                    )

            group = await self.uow.groups.create(Group(name=name))

            if parent is not None:
                result = await GroupTreeService(self.uow).attach(group, parent)
                if result.is_err():
                    return result
                group = result.value

            await self.uow.commit()

            return Return.ok(GroupResponse.model_validate(group))
