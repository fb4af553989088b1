"""
Get User Groups Use Case

Lists every group a user is inside of: the groups holding a direct edge to
the user plus all their ancestors.
"""

from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return

from .dtos import UserGroupResponse


class GetUserGroupsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, user_id: UUID) -> Result[List[UserGroupResponse]]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            edges = await self.uow.memberships.get_by_member(user.id, MemberType.user)
            direct_ids = {edge.group_id for edge in edges}

            all_ids = set(direct_ids)
            for group_id in direct_ids:
                all_ids.update(await self.uow.groups.get_ancestor_ids(group_id))

            groups = await self.uow.groups.get_by_ids(all_ids)
            groups.sort(key=lambda g: (g.level, g.name, str(g.id)))

            return Return.ok(
                [
                    UserGroupResponse(
                        id=g.id,
                        name=g.name,
                        parent_id=g.parent_id,
                        level=g.level,
                        direct=g.id in direct_ids,
                    )
                    for g in groups
                ]
            )
