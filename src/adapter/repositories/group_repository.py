from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select as sa_select
from sqlalchemy.orm import aliased
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.group_repository import IGroupRepository
from src.domain.entities import Group


class GroupRepository(IGroupRepository):
    """Group repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, group_id: UUID) -> Optional[Group]:
        """Get group by ID"""
        stmt = select(Group).where(Group.id == group_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, group_ids: Iterable[UUID]) -> List[Group]:
        """Get groups for a set of IDs, missing IDs are skipped"""
        group_ids = list(group_ids)
        if not group_ids:
            return []
        stmt = select(Group).where(Group.id.in_(group_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self) -> List[Group]:
        """Get all groups ordered by name"""
        stmt = select(Group).order_by(Group.name, Group.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_children(self, group_id: UUID) -> List[Group]:
        """Get direct child groups"""
        stmt = select(Group).where(Group.parent_id == group_id).order_by(Group.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_ancestor_ids(self, group_id: UUID) -> List[UUID]:
        """
        Get the group ID and the IDs of all its ancestors.

        Walks parent_id upward with a recursive CTE. UNION (not UNION ALL)
        stops the walk if the data ever contains a loop.
        """
        ancestors = (
            sa_select(Group.id, Group.parent_id)
            .where(Group.id == group_id)
            .cte(name="ancestors", recursive=True)
        )
        parent = aliased(Group)
        ancestors = ancestors.union(
            sa_select(parent.id, parent.parent_id).where(
                parent.id == ancestors.c.parent_id
            )
        )
        result = await self.session.execute(sa_select(ancestors.c.id))
        return [row[0] for row in result.all()]

    async def get_subtree(self, group_id: UUID) -> List[Group]:
        """Get the group and all its descendant groups (recursive CTE)"""
        subtree = (
            sa_select(Group.id)
            .where(Group.id == group_id)
            .cte(name="subtree", recursive=True)
        )
        child = aliased(Group)
        subtree = subtree.union(
            sa_select(child.id).where(child.parent_id == subtree.c.id)
        )
        stmt = (
            select(Group)
            .where(Group.id.in_(sa_select(subtree.c.id)))
            .order_by(Group.level, Group.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, group: Group) -> Group:
        """Create a new group"""
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group

    async def update(self, group: Group) -> Group:
        """Update existing group"""
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group

    async def delete(self, group: Group) -> None:
        """Delete a group"""
        await self.session.delete(group)
        await self.session.flush()
