from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.libs.result import Error, Result, Return

from .current_group import current_group, to_response
from .dtos import UserResponse


class GetUserUseCase:
    """Load one user with its current group"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            group = await current_group(self.uow, user.id)
            return Return.ok(to_response(user, group))
