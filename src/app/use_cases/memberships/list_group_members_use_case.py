from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return

from .dtos import MembershipResponse


class ListGroupMembersUseCase:
    """Direct members of one group (no recursion), groups first then users"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, group_id: UUID) -> Result[List[MembershipResponse]]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            edges = await self.uow.memberships.get_by_group_id(group.id)

            user_ids = [e.member_id for e in edges if e.member_type == MemberType.user]
            group_ids = [e.member_id for e in edges if e.member_type == MemberType.group]
            names = {
                (MemberType.user, u.id): u.name
                for u in await self.uow.users.get_by_ids(user_ids)
            }
            names.update(
                {
                    (MemberType.group, g.id): g.name
                    for g in await self.uow.groups.get_by_ids(group_ids)
                }
            )

            members = [
                MembershipResponse(
                    id=e.id,
                    group_id=e.group_id,
                    member_id=e.member_id,
                    member_type=e.member_type,
                    name=names.get((e.member_type, e.member_id)),
                    created_at=e.created_at,
                )
                for e in edges
            ]
            members.sort(
                key=lambda m: (
                    m.member_type != MemberType.group,
                    m.name or "",
                    str(m.member_id),
                )
            )
            return Return.ok(members)
