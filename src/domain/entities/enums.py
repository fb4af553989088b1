"""
Group Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MemberType(str, Enum):
    """Kind of entity a group membership edge points at"""

    user = "user"
    group = "group"
