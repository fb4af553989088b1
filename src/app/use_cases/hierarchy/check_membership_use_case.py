"""
Check Membership Use Case

Decides whether a member sits inside a group's hierarchy.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return

from .dtos import MembershipCheckResponse


class CheckMembershipUseCase:
    """
    Climb from the member's attachment points towards the roots.

    The member is inside `group_id` iff one of the groups holding a direct
    edge to it is `group_id` or has `group_id` among its ancestors. Only real
    edges count, so a group is never a member of itself, and a member without
    any edge is simply not a member. Only a missing target group is an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, group_id: UUID, member_id: UUID, member_type: MemberType
    ) -> Result[MembershipCheckResponse]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            edges = await self.uow.memberships.get_by_member(member_id, member_type)

            is_member = False
            for edge in edges:
                if edge.group_id == group.id:
                    is_member = True
                    break
                ancestors = await self.uow.groups.get_ancestor_ids(edge.group_id)
                if group.id in ancestors:
                    is_member = True
                    break

            return Return.ok(
                MembershipCheckResponse(
                    group_id=group.id,
                    member_id=member_id,
                    member_type=member_type,
                    is_member=is_member,
                )
            )
