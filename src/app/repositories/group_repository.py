from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import Group


class IGroupRepository(ABC):
    """Group repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, group_ids: Iterable[UUID]) -> List[Group]:
        """Get groups for a set of IDs, missing IDs are skipped"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Group]:
        """Get all groups ordered by name"""
        pass

    @abstractmethod
    async def get_children(self, group_id: UUID) -> List[Group]:
        """Get direct child groups"""
        pass

    @abstractmethod
    async def get_ancestor_ids(self, group_id: UUID) -> List[UUID]:
        """Get the group ID and the IDs of all its ancestors (recursive)"""
        pass

    @abstractmethod
    async def get_subtree(self, group_id: UUID) -> List[Group]:
        """Get the group and all its descendant groups (recursive)"""
        pass

    @abstractmethod
    async def create(self, group: Group) -> Group:
        """Create a new group"""
        pass

    @abstractmethod
    async def update(self, group: Group) -> Group:
        """Update existing group"""
        pass

    @abstractmethod
    async def delete(self, group: Group) -> None:
        """Delete a group"""
        pass
