"""
User Use Case DTOs (Data Transfer Objects)

Response classes for the user domain.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User with its current group, if any"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    group_id: Optional[UUID] = None
    group_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserGroupResponse(BaseModel):
    """Group containing a user, directly or through an ancestor chain"""

    id: UUID
    name: str
    parent_id: Optional[UUID] = None
    level: int
    direct: bool
