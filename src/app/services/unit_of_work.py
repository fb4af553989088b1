from abc import ABC, abstractmethod

from src.app.repositories.group_repository import IGroupRepository
from src.app.repositories.membership_repository import IGroupMemberRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    groups: IGroupRepository
    memberships: IGroupMemberRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    async def ping(self):
        """Round-trip to the backing store, raises if it is unreachable"""
        pass
