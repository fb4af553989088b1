"""
Group Management Use Cases

CRUD over groups.
"""

from .create_group_use_case import CreateGroupUseCase
from .delete_group_use_case import DeleteGroupUseCase
from .dtos import GroupResponse
from .get_group_use_case import GetGroupUseCase
from .list_groups_use_case import ListGroupsUseCase
from .update_group_use_case import UpdateGroupUseCase

__all__ = [
    "ListGroupsUseCase",
    "CreateGroupUseCase",
    "GetGroupUseCase",
    "UpdateGroupUseCase",
    "DeleteGroupUseCase",
    "GroupResponse",
]
