"""
Remove Group Member Use Case

Deletes one membership edge. Removing a group member turns that group into a
root, so its parent_id and the levels of its subtree are reset as well.
"""

from uuid import UUID

from src.app.services.group_tree import GroupTreeService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return


class RemoveGroupMemberUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, group_id: UUID, member_id: UUID, member_type: MemberType
    ) -> Result[None]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            edge = await self.uow.memberships.get_edge(group.id, member_id, member_type)
            if edge is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "Member does not belong to this group")
                )

            if member_type == MemberType.group:
                member = await self.uow.groups.get_by_id(member_id)
                if member is not None:
                    result = await GroupTreeService(self.uow).attach(member, None)
                    if result.is_err():
                        return result
                else:
                    await self.uow.memberships.delete(edge)
            else:
                await self.uow.memberships.delete(edge)

            await self.uow.commit()

            return Return.ok(None)
