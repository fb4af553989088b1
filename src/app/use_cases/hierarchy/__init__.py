"""
Group Hierarchy Use Cases

Tree building, membership checks and subtree queries.
"""

from .check_membership_use_case import CheckMembershipUseCase
from .dtos import AllMembersResponse, MembershipCheckResponse, SubtreeMember
from .get_all_members_use_case import GetAllMembersUseCase
from .get_hierarchy_use_case import GetHierarchyUseCase
from .get_parent_use_case import GetParentUseCase
from .set_parent_use_case import SetParentUseCase

__all__ = [
    "GetHierarchyUseCase",
    "CheckMembershipUseCase",
    "GetAllMembersUseCase",
    "GetParentUseCase",
    "SetParentUseCase",
    "MembershipCheckResponse",
    "SubtreeMember",
    "AllMembersResponse",
]
