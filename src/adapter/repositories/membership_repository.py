from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.membership_repository import IGroupMemberRepository
from src.domain.entities import GroupMember, MemberType


class GroupMemberRepository(IGroupMemberRepository):
    """Group membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_edge(
        self, group_id: UUID, member_id: UUID, member_type: MemberType
    ) -> Optional[GroupMember]:
        """Get a single membership edge"""
        stmt = select(GroupMember).where(
            GroupMember.group_id == group_id,
            GroupMember.member_id == member_id,
            GroupMember.member_type == member_type,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_group_id(self, group_id: UUID) -> List[GroupMember]:
        """Get direct memberships of a group"""
        stmt = (
            select(GroupMember)
            .where(GroupMember.group_id == group_id)
            .order_by(GroupMember.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_group_ids(self, group_ids: Iterable[UUID]) -> List[GroupMember]:
        """Get direct memberships of several groups"""
        group_ids = list(group_ids)
        if not group_ids:
            return []
        stmt = select(GroupMember).where(GroupMember.group_id.in_(group_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_member(
        self, member_id: UUID, member_type: MemberType
    ) -> List[GroupMember]:
        """Get all edges pointing at a member"""
        stmt = select(GroupMember).where(
            GroupMember.member_id == member_id,
            GroupMember.member_type == member_type,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_type(self, member_type: MemberType) -> List[GroupMember]:
        """Get all edges of one member type"""
        stmt = select(GroupMember).where(GroupMember.member_type == member_type)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: GroupMember) -> GroupMember:
        """Create a new membership edge"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def delete(self, membership: GroupMember) -> None:
        """Delete a membership edge"""
        await self.session.delete(membership)
        await self.session.flush()

    async def delete_by_member(self, member_id: UUID, member_type: MemberType) -> int:
        """Delete all edges pointing at a member"""
        stmt = delete(GroupMember).where(
            GroupMember.member_id == member_id,
            GroupMember.member_type == member_type,
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_group_id(self, group_id: UUID) -> int:
        """Delete all edges owned by a group"""
        stmt = delete(GroupMember).where(GroupMember.group_id == group_id)
        result = await self.session.execute(stmt)
        return result.rowcount
