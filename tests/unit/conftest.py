import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_ids = AsyncMock(return_value=[])
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.groups = MagicMock()
    uow.groups.get_by_id = AsyncMock(return_value=None)
    uow.groups.get_by_ids = AsyncMock(return_value=[])
    uow.groups.list_all = AsyncMock(return_value=[])
    uow.groups.get_children = AsyncMock(return_value=[])
    uow.groups.get_ancestor_ids = AsyncMock(return_value=[])
    uow.groups.get_subtree = AsyncMock(return_value=[])
    uow.groups.create = AsyncMock(side_effect=lambda group: group)
    uow.groups.update = AsyncMock(side_effect=lambda group: group)
    uow.groups.delete = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_edge = AsyncMock(return_value=None)
    uow.memberships.get_by_group_id = AsyncMock(return_value=[])
    uow.memberships.get_by_group_ids = AsyncMock(return_value=[])
    uow.memberships.get_by_member = AsyncMock(return_value=[])
    uow.memberships.list_by_type = AsyncMock(return_value=[])
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)
    uow.memberships.delete = AsyncMock()
    uow.memberships.delete_by_member = AsyncMock(return_value=0)
    uow.memberships.delete_by_group_id = AsyncMock(return_value=0)
    return uow
