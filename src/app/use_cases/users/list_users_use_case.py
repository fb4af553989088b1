"""
List Users Use Case

Returns every user together with the group it currently sits in.
"""

from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Result, Return

from .current_group import edge_order, to_response
from .dtos import UserResponse


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self) -> Result[List[UserResponse]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            edges = await self.uow.memberships.list_by_type(MemberType.user)
            groups = {g.id: g for g in await self.uow.groups.list_all()}

            latest = {}
            for edge in edges:
                current = latest.get(edge.member_id)
                if current is None or edge_order(edge) > edge_order(current):
                    latest[edge.member_id] = edge

            return Return.ok(
                [
                    to_response(
                        user,
                        groups.get(latest[user.id].group_id) if user.id in latest else None,
                    )
                    for user in users
                ]
            )
