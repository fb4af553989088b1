"""
Group Membership Use Cases

Direct membership edges between groups and their members.
"""

from .add_group_member_use_case import AddGroupMemberUseCase
from .dtos import MembershipResponse
from .list_group_members_use_case import ListGroupMembersUseCase
from .remove_group_member_use_case import RemoveGroupMemberUseCase

__all__ = [
    "ListGroupMembersUseCase",
    "AddGroupMemberUseCase",
    "RemoveGroupMemberUseCase",
    "MembershipResponse",
]
