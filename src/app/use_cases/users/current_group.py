from typing import Optional, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Group, MemberType, User

from .dtos import UserResponse


async def current_group(uow: UnitOfWork, user_id: UUID) -> Optional[Group]:
    """The group a user currently sits in: the most recently written edge wins"""
    edges = await uow.memberships.get_by_member(user_id, MemberType.user)
    if not edges:
        return None
    latest = max(edges, key=edge_order)
    return await uow.groups.get_by_id(latest.group_id)


def edge_order(edge) -> Tuple:
    return (edge.created_at is not None, edge.created_at, str(edge.id))


def to_response(user: User, group: Optional[Group]) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        group_id=group.id if group else None,
        group_name=group.name if group else None,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
