"""
Group Use Case DTOs (Data Transfer Objects)

Response classes for the group domain.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class GroupResponse(BaseModel):
    """Flat group record"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    parent_id: Optional[UUID] = None
    level: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
