"""
User Management Use Cases

All user-related business logic.
"""

from .create_user_use_case import CreateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import UserGroupResponse, UserResponse
from .get_user_groups_use_case import GetUserGroupsUseCase
from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "ListUsersUseCase",
    "CreateUserUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "GetUserGroupsUseCase",
    "UserResponse",
    "UserGroupResponse",
]
