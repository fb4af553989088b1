"""
Group Entity

A named node of the group tree.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Group(SQLModel, table=True):
    """
    Group entity - node of the group hierarchy.

    Business Rules:
    - The group-typed GroupMember edge from the parent is the source of truth
      for the parent link; parent_id and level are derived from it and are
      rewritten in the same transaction whenever that edge changes
    - level is 0 for roots, parent.level + 1 otherwise
    - parent_id can never point at the group itself or one of its descendants
    """

    __tablename__ = "groups"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    parent_id: Optional[UUID] = Field(default=None, foreign_key="groups.id", index=True)
    level: int = Field(default=0, ge=0)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_group_name", "name"),)
