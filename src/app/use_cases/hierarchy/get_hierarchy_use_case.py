"""
Get Hierarchy Use Case

Loads groups, users and user edges and builds the nested tree in memory.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.domain.hierarchy import GroupHierarchy, build_hierarchy
from src.libs.result import Result, Return


class GetHierarchyUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self) -> Result[GroupHierarchy]:
        async with self.uow:
            groups = await self.uow.groups.list_all()
            edges = await self.uow.memberships.list_by_type(MemberType.user)
            users = await self.uow.users.list_all()

            return Return.ok(build_hierarchy(groups, edges, users))
