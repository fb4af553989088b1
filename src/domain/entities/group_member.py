"""
GroupMember Entity

Polymorphic edge from a group to a user or another group.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import MemberType


class GroupMember(SQLModel, table=True):
    """
    GroupMember entity - links a Group to a member.

    Business Rules:
    - (group_id, member_id, member_type) must be unique
    - member_id has no foreign key since it points at users or groups
      depending on member_type; existence is checked by the use case on write
    - A group can have at most one group-typed edge pointing at it (its parent)
    - A group cannot be a member of itself
    """

    __tablename__ = "group_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    group_id: UUID = Field(foreign_key="groups.id", nullable=False, index=True)
    member_id: UUID = Field(nullable=False, index=True)
    member_type: MemberType = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index(
            "idx_group_member_unique",
            "group_id",
            "member_id",
            "member_type",
            unique=True,
        ),
        Index("idx_group_member_member", "member_id", "member_type"),
        CheckConstraint("group_id != member_id", name="chk_no_self_membership"),
    )
