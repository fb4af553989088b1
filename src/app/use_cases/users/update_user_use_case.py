"""
Update User Use Case

Partial update of a user, including moving it to another group.
"""

from datetime import UTC, datetime
from typing import Any, Dict
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import GroupMember, MemberType
from src.libs.result import Error, Result, Return

from .current_group import current_group, to_response
from .dtos import UserResponse


class UpdateUserUseCase:
    """
    Use case for patching a user.

    Business Rules:
    - Only fields present in `changes` are touched; updated_at is refreshed
    - A new email must not belong to another user (EMAIL_ALREADY_EXISTS)
    - `group_id` in changes moves the user: every previous user edge is
      removed before the new one is written; None detaches the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, user_id: UUID, changes: Dict[str, Any]) -> Result[UserResponse]:
        """
        Execute update user use case.

        Args:
            user_id: User to update
            changes: Subset of name, email, group_id

        Returns:
            Result with UserResponse DTO, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if "email" in changes and changes["email"] != user.email:
                other = await self.uow.users.get_by_email(changes["email"])
                if other is not None and other.id != user.id:
                    return Return.err(
                        Error(
                            "EMAIL_ALREADY_EXISTS",
                            "A user with this email already exists",
                        )
                    )
                user.email = changes["email"]

            if "name" in changes:
                user.name = changes["name"]

            if "group_id" in changes:
                group_id = changes["group_id"]
                group = None
                if group_id is not None:
                    group = await self.uow.groups.get_by_id(group_id)
                    if group is None:
                        return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

                await self.uow.memberships.delete_by_member(user.id, MemberType.user)
                if group is not None:
                    await self.uow.memberships.create(
                        GroupMember(
                            group_id=group.id,
                            member_id=user.id,
                            member_type=MemberType.user,
                        )
                    )

            user.updated_at = datetime.now(UTC)
            user = await self.uow.users.update(user)

            group = await current_group(self.uow, user.id)

            await self.uow.commit()

            return Return.ok(to_response(user, group))
