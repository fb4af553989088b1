"""
Update Group Use Case

Partial update of a group. A parent_id change is routed through the tree
service so the parent edge and levels stay in sync.
"""

from datetime import UTC, datetime
from typing import Any, Dict
from uuid import UUID

from src.app.services.group_tree import GroupTreeService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.libs.result import Error, Result, Return

from .dtos import GroupResponse


class UpdateGroupUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, group_id: UUID, changes: Dict[str, Any]) -> Result[GroupResponse]:
        """
        Execute update group use case.

        Args:
            group_id: Group to update
            changes: Subset of name, parent_id

        Returns:
            Result with GroupResponse DTO, or Error
        """
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            if "name" in changes:
                group.name = changes["name"]

            if "parent_id" in changes and changes["parent_id"] != group.parent_id:
                parent = None
                if changes["parent_id"] is not None:
                    parent = await self.uow.groups.get_by_id(changes["parent_id"])
                    if parent is None:
                        return Return.err(
                            Error("PARENT_NOT_FOUND", "Parent group not found")
                        )
                result = await GroupTreeService(self.uow).attach(group, parent)
                if result.is_err():
                    return result
                group = result.value

            group.updated_at = datetime.now(UTC)
            group = await self.uow.groups.update(group)

            await self.uow.commit()

            return Return.ok(GroupResponse.model_validate(group))
