"""
Membership Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import MemberType


class MembershipResponse(BaseModel):
    """Direct membership edge, with the member's display name"""

    id: UUID
    group_id: UUID
    member_id: UUID
    member_type: MemberType
    name: Optional[str] = None
    created_at: Optional[datetime] = None
