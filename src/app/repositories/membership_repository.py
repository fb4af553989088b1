from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import GroupMember, MemberType


class IGroupMemberRepository(ABC):
    """Group membership repository interface - application layer"""

    @abstractmethod
    async def get_edge(
        self, group_id: UUID, member_id: UUID, member_type: MemberType
    ) -> Optional[GroupMember]:
        """Get a single membership edge"""
        pass

    @abstractmethod
    async def get_by_group_id(self, group_id: UUID) -> List[GroupMember]:
        """Get direct memberships of a group"""
        pass

    @abstractmethod
    async def get_by_group_ids(self, group_ids: Iterable[UUID]) -> List[GroupMember]:
        """Get direct memberships of several groups"""
        pass

    @abstractmethod
    async def get_by_member(
        self, member_id: UUID, member_type: MemberType
    ) -> List[GroupMember]:
        """Get all edges pointing at a member"""
        pass

    @abstractmethod
    async def list_by_type(self, member_type: MemberType) -> List[GroupMember]:
        """Get all edges of one member type"""
        pass

    @abstractmethod
    async def create(self, membership: GroupMember) -> GroupMember:
        """Create a new membership edge"""
        pass

    @abstractmethod
    async def delete(self, membership: GroupMember) -> None:
        """Delete a membership edge"""
        pass

    @abstractmethod
    async def delete_by_member(self, member_id: UUID, member_type: MemberType) -> int:
        """Delete all edges pointing at a member, returns the number removed"""
        pass

    @abstractmethod
    async def delete_by_group_id(self, group_id: UUID) -> int:
        """Delete all edges owned by a group, returns the number removed"""
        pass
