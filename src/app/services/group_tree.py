"""
Parent link maintenance for groups.

The group-typed GroupMember edge is the source of truth for the parent link;
Group.parent_id and Group.level are derived from it. Every parent change goes
through GroupTreeService so the three never drift apart.
"""

import logging
from datetime import UTC, datetime
from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Group, GroupMember, MemberType
from src.domain.hierarchy import assign_levels
from src.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class GroupTreeService:
    """Moves groups inside the tree. Callers own the transaction."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def attach(self, group: Group, parent: Optional[Group]) -> Result[Group]:
        """
        Make `parent` the parent of `group`, or turn `group` into a root
        when `parent` is None.

        Fails with CYCLE_REJECTED before any write if `parent` is the group
        itself or one of its descendants.
        """
        subtree = await self.uow.groups.get_subtree(group.id)

        if parent is not None:
            subtree_ids = {g.id for g in subtree} | {group.id}
            if parent.id in subtree_ids:
                return Return.err(
                    Error(
                        "CYCLE_REJECTED",
                        "A group cannot be moved under itself or one of its descendants",
                        reason=f"group={group.id} parent={parent.id}",
                    )
                )

        # Single parent: drop whatever edge currently points at the group
        await self.uow.memberships.delete_by_member(group.id, MemberType.group)

        if parent is not None:
            await self.uow.memberships.create(
                GroupMember(
                    group_id=parent.id,
                    member_id=group.id,
                    member_type=MemberType.group,
                )
            )

        group.parent_id = parent.id if parent is not None else None
        group.level = parent.level + 1 if parent is not None else 0
        group.updated_at = datetime.now(UTC)
        group = await self.uow.groups.update(group)

        for descendant in assign_levels(group, subtree):
            await self.uow.groups.update(descendant)

        logger.info(
            f"Group {group.id} attached to {group.parent_id or 'root'} at level {group.level}"
        )
        return Return.ok(group)
