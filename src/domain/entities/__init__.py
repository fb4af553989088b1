"""
Group Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import MemberType

# Export all entities
from .user import User
from .group import Group
from .group_member import GroupMember

__all__ = [
    # Enums
    "MemberType",
    # Entities
    "User",
    "Group",
    "GroupMember",
]
