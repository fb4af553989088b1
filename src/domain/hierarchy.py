"""
Group Hierarchy Algorithms

Pure functions over snapshots of groups, users and membership edges.
Nothing here touches the database; use cases load the snapshot through the
UnitOfWork and hand it over.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Group, GroupMember, MemberType, User

logger = logging.getLogger(__name__)


class HierarchyUser(BaseModel):
    """User attached to a hierarchy node"""

    id: UUID
    name: str
    email: str


class HierarchyNode(BaseModel):
    """One group of the tree with its child groups and directly attached users"""

    id: UUID
    name: str
    parent_id: Optional[UUID] = None
    level: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    children: List["HierarchyNode"] = Field(default_factory=list)
    users: List[HierarchyUser] = Field(default_factory=list)
    user_count: int = 0
    group_count: int = 0
    total_count: int = 0


class GroupHierarchy(BaseModel):
    """Whole tree: every node by id plus the ordered roots"""

    nodes: Dict[UUID, HierarchyNode]
    roots: List[HierarchyNode]


def _sort_key(item) -> tuple:
    return (item.name, str(item.id))


def build_hierarchy(
    groups: Iterable[Group],
    memberships: Iterable[GroupMember],
    users: Iterable[User],
) -> GroupHierarchy:
    """
    Build the nested group tree.

    Pass 1 creates a node per group holding the users attached to it through
    user-typed edges. Pass 2 links every group under its parent; a group whose
    parent is missing is kept as a root so that each group shows up exactly
    once. A parent cycle in stored data is cut above its first group by name,
    which is then listed as a root. Counts are filled bottom-up:

        total_count = user_count + sum(child.total_count)
    """
    groups = list(groups)
    users_by_id = {user.id: user for user in users}

    nodes: Dict[UUID, HierarchyNode] = {}
    for group in groups:
        nodes[group.id] = HierarchyNode(
            id=group.id,
            name=group.name,
            parent_id=group.parent_id,
            level=group.level,
            created_at=group.created_at,
            updated_at=group.updated_at,
        )

    seen_edges: Set[tuple] = set()
    for membership in memberships:
        if membership.member_type != MemberType.user:
            continue
        node = nodes.get(membership.group_id)
        user = users_by_id.get(membership.member_id)
        if node is None or user is None:
            continue
        edge = (membership.group_id, membership.member_id)
        if edge in seen_edges:
            continue
        seen_edges.add(edge)
        node.users.append(HierarchyUser(id=user.id, name=user.name, email=user.email))

    roots: List[HierarchyNode] = []
    for group in groups:
        node = nodes[group.id]
        parent = nodes.get(group.parent_id) if group.parent_id is not None else None
        if parent is None or parent.id == node.id:
            roots.append(node)
        else:
            parent.children.append(node)

    for node in nodes.values():
        node.users.sort(key=_sort_key)
        node.children.sort(key=_sort_key)
    roots.sort(key=_sort_key)

    visited: Set[UUID] = set()
    for root in roots:
        _fill_counts(root, visited)

    # Only a parent cycle leaves nodes unreachable from the roots. Cut the
    # cycle above its first node by name so each group still appears once.
    for node in sorted(nodes.values(), key=_sort_key):
        if node.id in visited:
            continue
        logger.warning(f"Group {node.id} is part of a parent cycle, listed as a root")
        parent = nodes.get(node.parent_id)
        if parent is not None:
            parent.children = [child for child in parent.children if child is not node]
        roots.append(node)
        _fill_counts(node, visited)
    roots.sort(key=_sort_key)

    return GroupHierarchy(nodes=nodes, roots=roots)


def _fill_counts(root: HierarchyNode, visited: Set[UUID]) -> None:
    # Iterative post-order; a node already visited is not entered twice.
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            node.user_count = len(node.users)
            node.group_count = len(node.children)
            node.total_count = node.user_count + sum(
                child.total_count for child in node.children
            )
            continue
        if node.id in visited:
            continue
        visited.add(node.id)
        stack.append((node, True))
        for child in node.children:
            stack.append((child, False))


def children_index(groups: Iterable[Group]) -> Dict[UUID, List[Group]]:
    """Map every parent id to its direct child groups"""
    index: Dict[UUID, List[Group]] = {}
    for group in groups:
        if group.parent_id is not None:
            index.setdefault(group.parent_id, []).append(group)
    return index


def assign_levels(group: Group, descendants: Iterable[Group]) -> List[Group]:
    """
    Recompute level for every group below `group`.

    `group.level` must already be correct. Returns the descendants whose
    level changed.
    """
    index = children_index(descendants)
    changed: List[Group] = []
    queue = [group]
    visited = {group.id}
    while queue:
        current = queue.pop(0)
        for child in index.get(current.id, []):
            if child.id in visited:
                continue
            visited.add(child.id)
            if child.level != current.level + 1:
                child.level = current.level + 1
                changed.append(child)
            queue.append(child)
    return changed


def path_from(top: Group, target_id: UUID, groups_by_id: Dict[UUID, Group]) -> List[str]:
    """
    Group names from `top` down to `target_id`, both included.

    Climbs parent links from the target until `top` is reached; returns an
    empty list if `top` is not an ancestor of the target.
    """
    names: List[str] = []
    current = groups_by_id.get(target_id)
    visited: Set[UUID] = set()
    while current is not None and current.id not in visited:
        visited.add(current.id)
        names.append(current.name)
        if current.id == top.id:
            names.reverse()
            return names
        current = groups_by_id.get(current.parent_id) if current.parent_id else None
    return []
