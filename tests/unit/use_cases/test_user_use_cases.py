from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserGroupsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from src.domain.entities import Group, GroupMember, MemberType, User


@pytest.fixture
def user():
    return User(id=uuid4(), name="Alice", email="alice@example.com")


@pytest.mark.asyncio
async def test_create_user_without_group(mock_uow):
    result = await CreateUserUseCase(mock_uow).execute("Alice", "alice@example.com")

    assert result.is_ok()
    assert result.value.email == "alice@example.com"
    assert result.value.group_id is None
    mock_uow.memberships.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_user_in_group(mock_uow):
    group = Group(id=uuid4(), name="Engineering", level=0)
    mock_uow.groups.get_by_id.return_value = group

    result = await CreateUserUseCase(mock_uow).execute("Alice", "alice@example.com", group.id)

    assert result.is_ok()
    assert result.value.group_id == group.id
    assert result.value.group_name == "Engineering"
    edge = mock_uow.memberships.create.await_args.args[0]
    assert edge.member_type == MemberType.user
    assert edge.member_id == result.value.id


@pytest.mark.asyncio
async def test_create_user_duplicate_email(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user

    result = await CreateUserUseCase(mock_uow).execute("Other", user.email)

    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_user_in_missing_group(mock_uow):
    result = await CreateUserUseCase(mock_uow).execute("Alice", "alice@example.com", uuid4())

    assert result.error.code == "GROUP_NOT_FOUND"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_user_returns_latest_group(mock_uow, user):
    old = Group(id=uuid4(), name="Old", level=0)
    new = Group(id=uuid4(), name="New", level=0)
    now = datetime(2024, 1, 1)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_member.return_value = [
        GroupMember(id=uuid4(), group_id=new.id, member_id=user.id,
                    member_type=MemberType.user, created_at=now + timedelta(days=1)),
        GroupMember(id=uuid4(), group_id=old.id, member_id=user.id,
                    member_type=MemberType.user, created_at=now),
    ]
    mock_uow.groups.get_by_id.side_effect = lambda gid: {old.id: old, new.id: new}.get(gid)

    result = await GetUserUseCase(mock_uow).execute(user.id)

    assert result.value.group_id == new.id
    assert result.value.group_name == "New"


@pytest.mark.asyncio
async def test_get_missing_user(mock_uow):
    result = await GetUserUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_user_moves_group(mock_uow, user):
    target = Group(id=uuid4(), name="Target", level=0)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.groups.get_by_id.return_value = target

    result = await UpdateUserUseCase(mock_uow).execute(user.id, {"group_id": target.id})

    assert result.is_ok()
    mock_uow.memberships.delete_by_member.assert_awaited_once_with(user.id, MemberType.user)
    edge = mock_uow.memberships.create.await_args.args[0]
    assert edge.group_id == target.id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_user_null_group_detaches(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateUserUseCase(mock_uow).execute(user.id, {"group_id": None})

    assert result.is_ok()
    mock_uow.memberships.delete_by_member.assert_awaited_once_with(user.id, MemberType.user)
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_user_fields_keeps_memberships(mock_uow, user):
    before = user.updated_at
    mock_uow.users.get_by_id.return_value = user

    result = await UpdateUserUseCase(mock_uow).execute(
        user.id, {"name": "Alice B", "email": "alice.b@example.com"}
    )

    assert result.value.name == "Alice B"
    assert result.value.email == "alice.b@example.com"
    assert user.updated_at >= before
    mock_uow.memberships.delete_by_member.assert_not_called()


@pytest.mark.asyncio
async def test_update_user_email_taken(mock_uow, user):
    other = User(id=uuid4(), name="Bob", email="bob@example.com")
    mock_uow.users.get_by_id.return_value = user
    mock_uow.users.get_by_email.return_value = other

    result = await UpdateUserUseCase(mock_uow).execute(user.id, {"email": other.email})

    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_removes_edges(mock_uow, user):
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteUserUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    mock_uow.memberships.delete_by_member.assert_awaited_once_with(user.id, MemberType.user)
    mock_uow.users.delete.assert_awaited_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_missing_user(mock_uow):
    result = await DeleteUserUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.memberships.delete_by_member.assert_not_called()


@pytest.mark.asyncio
async def test_list_users_with_groups(mock_uow, user):
    lonely = User(id=uuid4(), name="Bob", email="bob@example.com")
    group = Group(id=uuid4(), name="Engineering", level=0)
    mock_uow.users.list_all.return_value = [user, lonely]
    mock_uow.memberships.list_by_type.return_value = [
        GroupMember(id=uuid4(), group_id=group.id, member_id=user.id, member_type=MemberType.user)
    ]
    mock_uow.groups.list_all.return_value = [group]

    result = await ListUsersUseCase(mock_uow).execute()

    by_name = {u.name: u for u in result.value}
    assert by_name["Alice"].group_name == "Engineering"
    assert by_name["Bob"].group_id is None


@pytest.mark.asyncio
async def test_user_groups_include_ancestors(mock_uow, user):
    a = Group(id=uuid4(), name="A", level=0)
    b = Group(id=uuid4(), name="B", parent_id=a.id, level=1)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_by_member.return_value = [
        GroupMember(id=uuid4(), group_id=b.id, member_id=user.id, member_type=MemberType.user)
    ]
    mock_uow.groups.get_ancestor_ids.return_value = [b.id, a.id]
    mock_uow.groups.get_by_ids.return_value = [b, a]

    result = await GetUserGroupsUseCase(mock_uow).execute(user.id)

    assert [(g.name, g.direct) for g in result.value] == [("A", False), ("B", True)]
