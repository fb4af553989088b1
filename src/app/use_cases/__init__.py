"""
Use Cases

Organized into domain folders:
- users/: User management
- groups/: Group CRUD
- memberships/: Direct membership edges
- hierarchy/: Tree, membership checks, subtree members and parent links

Import from subdirectories for better organization.
"""

from .groups import (
    CreateGroupUseCase,
    DeleteGroupUseCase,
    GetGroupUseCase,
    ListGroupsUseCase,
    UpdateGroupUseCase,
)
from .hierarchy import (
    CheckMembershipUseCase,
    GetAllMembersUseCase,
    GetHierarchyUseCase,
    GetParentUseCase,
    SetParentUseCase,
)
from .memberships import (
    AddGroupMemberUseCase,
    ListGroupMembersUseCase,
    RemoveGroupMemberUseCase,
)
from .users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserGroupsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)

__all__ = [
    # Users
    "ListUsersUseCase",
    "CreateUserUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "GetUserGroupsUseCase",
    # Groups
    "ListGroupsUseCase",
    "CreateGroupUseCase",
    "GetGroupUseCase",
    "UpdateGroupUseCase",
    "DeleteGroupUseCase",
    # Memberships
    "ListGroupMembersUseCase",
    "AddGroupMemberUseCase",
    "RemoveGroupMemberUseCase",
    # Hierarchy
    "GetHierarchyUseCase",
    "CheckMembershipUseCase",
    "GetAllMembersUseCase",
    "GetParentUseCase",
    "SetParentUseCase",
]
