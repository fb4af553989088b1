"""
Hierarchy Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import MemberType


class MembershipCheckResponse(BaseModel):
    """Answer to "is this member inside the group's hierarchy?" """

    group_id: UUID
    member_id: UUID
    member_type: MemberType
    is_member: bool


class SubtreeMember(BaseModel):
    """Member found somewhere in a group's subtree"""

    id: UUID
    name: str
    type: MemberType
    email: Optional[str] = None
    group_id: UUID
    path: List[str]


class AllMembersResponse(BaseModel):
    """Every member of a subtree, split by type"""

    groups: List[SubtreeMember]
    users: List[SubtreeMember]
