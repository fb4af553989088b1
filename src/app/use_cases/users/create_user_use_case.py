"""
Create User Use Case

Creates a user and, optionally, places it in a group in the same transaction.
"""

from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import GroupMember, MemberType, User
from src.libs.result import Error, Result, Return

from .current_group import to_response
from .dtos import UserResponse


class CreateUserUseCase:
    """
    Use case for creating users.

    Business Rules:
    - Email must be unique (EMAIL_ALREADY_EXISTS)
    - When group_id is given the group must exist (GROUP_NOT_FOUND) and the
      user edge is inserted together with the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(
        self, name: str, email: str, group_id: Optional[UUID] = None
    ) -> Result[UserResponse]:
        """
        Execute create user use case.

        Args:
            name: Display name
            email: Unique email address
            group_id: Optional group to place the user in

        Returns:
            Result with UserResponse DTO, or Error
        """
        async with self.uow:
            existing = await self.uow.users.get_by_email(email)
            if existing is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists")
                )

            group = None
            if group_id is not None:
                group = await self.uow.groups.get_by_id(group_id)
                if group is None:
                    return Return.err(Error("GROUP_NOT_FOUND", "Group not found"))

            user = await self.uow.users.create(User(name=name, email=email))

            if group is not None:
                await self.uow.memberships.create(
                    GroupMember(
                        group_id=group.id,
                        member_id=user.id,
                        member_type=MemberType.user,
                    )
                )

            await self.uow.commit()

            return Return.ok(to_response(user, group))
