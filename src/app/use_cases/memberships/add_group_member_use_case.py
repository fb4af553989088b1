"""
Add Group Member Use Case

Writes a membership edge from a group to a user or to another group.
"""

from uuid import UUID

from src.app.services.group_tree import GroupTreeService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import GroupMember, MemberType
from src.libs.result import Error, Result, Return

from .dtos import MembershipResponse


class AddGroupMemberUseCase:
    """
    Use case for adding members to a group.

    Business Rules:
    - The group must exist (GROUP_NOT_FOUND)
    - The member must exist as the stated type (MEMBER_NOT_FOUND)
    - A group cannot contain itself (SELF_MEMBERSHIP)
    - The same edge cannot be written twice (MEMBERSHIP_ALREADY_EXISTS)
    - Adding a group member re-parents that group: its previous parent edge is
      replaced, parent_id/level are recomputed, and a move below one of its
      own descendants is refused (CYCLE_REJECTED)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, group_id: UUID, member_id: UUID, member_type: MemberType
    ) -> Result[MembershipResponse]:
        """
        Execute add group member use case.

        Args:
            group_id: Group receiving the member
            member_id: User or group ID
            member_type: user or group

        Returns:
            Result with MembershipResponse DTO, or Error
        """
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            if member_type == MemberType.group and member_id == group_id:
                return Return.err(
                    Error("SELF_MEMBERSHIP", "A group cannot be a member of itself")
                )

            if member_type == MemberType.user:
                member = await self.uow.users.get_by_id(member_id)
            else:
                member = await self.uow.groups.get_by_id(member_id)
            if member is None:
                return Return.err(
                    Error(
                        "MEMBER_NOT_FOUND",
                        f"No {member_type.value} with this ID",
                    )
                )

            existing = await self.uow.memberships.get_edge(group.id, member.id, member_type)
            if existing is not None:
                return Return.err(
                    Error(
                        "MEMBERSHIP_ALREADY_EXISTS",
                        "Member already belongs to this group",
                    )
                )

            if member_type == MemberType.group:
                result = await GroupTreeService(self.uow).attach(member, group)
                if result.is_err():
                    return result
                edge = await self.uow.memberships.get_edge(group.id, member.id, member_type)
            else:
                edge = await self.uow.memberships.create(
                    GroupMember(
                        group_id=group.id,
                        member_id=member.id,
                        member_type=member_type,
                    )
                )

            await self.uow.commit()

            return Return.ok(
                MembershipResponse(
                    id=edge.id,
                    group_id=edge.group_id,
                    member_id=edge.member_id,
                    member_type=edge.member_type,
                    name=member.name,
                    created_at=edge.created_at,
                )
            )
