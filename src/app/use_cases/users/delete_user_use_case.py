from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.store_guard import store_guard
from src.domain.entities import MemberType
from src.libs.result import Error, Result, Return


class DeleteUserUseCase:
    """
    Delete a user and every membership edge pointing at it.

    Both deletes run in one transaction so no edge outlives its user.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @store_guard
    async def execute(self, user_id: UUID) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            await self.uow.memberships.delete_by_member(user.id, MemberType.user)
            await self.uow.users.delete(user)

            await self.uow.commit()

            return Return.ok(None)
