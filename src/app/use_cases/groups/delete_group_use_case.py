"""
Delete Group Use Case

Deletes a leaf group together with every membership edge touching it.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return


class DeleteGroupUseCase:
    """
    Use case for deleting groups.

    Business Rules:
    - A group that still has child groups is not deleted (GROUP_HAS_CHILDREN);
      children have to be moved or deleted first so no edge is left dangling
    - The group's own edges (its users) and the edge from its parent are
      removed in the same transaction as the group row
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, group_id: UUID) -> Result[None]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            children = await self.uow.groups.get_children(group.id)
            if children:
                return Return.err(
                    Error(
                        "GROUP_HAS_CHILDREN",
                        "Group still contains child groups",
                        reason=f"{len(children)} child group(s)",
                    )
                )

            await self.uow.memberships.delete_by_group_id(group.id)
            await self.uow.memberships.delete_by_member(group.id, MemberType.group)
            await self.uow.groups.delete(group)

            await self.uow.commit()

            return Return.ok(None)
