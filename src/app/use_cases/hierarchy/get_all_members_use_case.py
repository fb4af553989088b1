"""
Get All Members Use Case

Collects every member of a group's subtree.
"""

from typing import Dict, List, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import GroupMember, MemberType
from src.domain.hierarchy import path_from
from src.libs.result import Error, Result, Return

from .dtos import AllMembersResponse, SubtreeMember


class GetAllMembersUseCase:
    """
    Use case for listing the members of a whole subtree.

    Business Rules:
    - The subtree is the group plus all groups reachable downward through
      parent links
    - The direct edges of every subtree group are merged and deduplicated by
      (member_id, member_type); when a member is attached in several places
      the attachment closest to the top wins
    - Each member carries the path of group names from the requested group
      down to its attachment point
    - Both lists are ordered by name, then ID
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, group_id: UUID) -> Result[AllMembersResponse]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            subtree = await self.uow.groups.get_subtree(group.id)
            groups_by_id = {g.id: g for g in subtree}
            groups_by_id[group.id] = group

            edges = await self.uow.memberships.get_by_group_ids(groups_by_id.keys())
            edges.sort(
                key=lambda e: (
                    groups_by_id[e.group_id].level if e.group_id in groups_by_id else 0,
                    str(e.group_id),
                )
            )

            attached: Dict[Tuple[UUID, MemberType], GroupMember] = {}
            for edge in edges:
                attached.setdefault((edge.member_id, edge.member_type), edge)

            user_ids = [mid for mid, mtype in attached if mtype == MemberType.user]
            users = await self.uow.users.get_by_ids(user_ids)

            member_group_ids = [mid for mid, mtype in attached if mtype == MemberType.group]
            member_groups = {g.id: g for g in subtree if g.id in member_group_ids}
            missing = [mid for mid in member_group_ids if mid not in member_groups]
            if missing:
                for g in await self.uow.groups.get_by_ids(missing):
                    member_groups[g.id] = g

            user_members: List[SubtreeMember] = []
            for user in users:
                edge = attached[(user.id, MemberType.user)]
                user_members.append(
                    SubtreeMember(
                        id=user.id,
                        name=user.name,
                        type=MemberType.user,
                        email=user.email,
                        group_id=edge.group_id,
                        path=path_from(group, edge.group_id, groups_by_id),
                    )
                )

            group_members: List[SubtreeMember] = []
            for member in member_groups.values():
                edge = attached[(member.id, MemberType.group)]
                group_members.append(
                    SubtreeMember(
                        id=member.id,
                        name=member.name,
                        type=MemberType.group,
                        group_id=edge.group_id,
                        path=path_from(group, edge.group_id, groups_by_id),
                    )
                )

            user_members.sort(key=lambda m: (m.name, str(m.id)))
            group_members.sort(key=lambda m: (m.name, str(m.id)))

            return Return.ok(AllMembersResponse(groups=group_members, users=user_members))
