from uuid import uuid4

import pytest

from src.app.use_cases.memberships import (
    AddGroupMemberUseCase,
    ListGroupMembersUseCase,
    RemoveGroupMemberUseCase,
)
from src.domain.entities import Group, GroupMember, MemberType, User


@pytest.fixture
def group():
    return Group(id=uuid4(), name="Engineering", level=0)


@pytest.mark.asyncio
async def test_add_user_member(mock_uow, group):
    user = User(id=uuid4(), name="Alice", email="alice@example.com")
    mock_uow.groups.get_by_id.return_value = group
    mock_uow.users.get_by_id.return_value = user

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, user.id, MemberType.user)

    assert result.is_ok()
    assert result.value.group_id == group.id
    assert result.value.member_id == user.id
    assert result.value.member_type == MemberType.user
    assert result.value.name == "Alice"
    mock_uow.memberships.create.assert_awaited_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_add_member_to_missing_group(mock_uow):
    result = await AddGroupMemberUseCase(mock_uow).execute(uuid4(), uuid4(), MemberType.user)

    assert result.error.code == "GROUP_NOT_FOUND"


@pytest.mark.asyncio
async def test_add_missing_user(mock_uow, group):
    mock_uow.groups.get_by_id.return_value = group

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, uuid4(), MemberType.user)

    assert result.error.code == "MEMBER_NOT_FOUND"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_member_type_must_match_entity(mock_uow, group):
    """A user ID sent as member_type=group is looked up among groups"""
    user_id = uuid4()
    mock_uow.groups.get_by_id.side_effect = lambda gid: group if gid == group.id else None

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, user_id, MemberType.group)

    assert result.error.code == "MEMBER_NOT_FOUND"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_group_cannot_contain_itself(mock_uow, group):
    mock_uow.groups.get_by_id.return_value = group

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, group.id, MemberType.group)

    assert result.error.code == "SELF_MEMBERSHIP"


@pytest.mark.asyncio
async def test_duplicate_edge_rejected(mock_uow, group):
    user = User(id=uuid4(), name="Alice", email="alice@example.com")
    mock_uow.groups.get_by_id.return_value = group
    mock_uow.users.get_by_id.return_value = user
    mock_uow.memberships.get_edge.return_value = GroupMember(
        id=uuid4(), group_id=group.id, member_id=user.id, member_type=MemberType.user
    )

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, user.id, MemberType.user)

    assert result.error.code == "MEMBERSHIP_ALREADY_EXISTS"
    mock_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_add_group_member_reparents_child(mock_uow, group):
    child = Group(id=uuid4(), name="Platform", level=0)
    index = {group.id: group, child.id: child}
    mock_uow.groups.get_by_id.side_effect = lambda gid: index.get(gid)
    mock_uow.groups.get_subtree.return_value = [child]
    written = GroupMember(
        id=uuid4(), group_id=group.id, member_id=child.id, member_type=MemberType.group
    )
    mock_uow.memberships.get_edge.side_effect = [None, written]

    result = await AddGroupMemberUseCase(mock_uow).execute(group.id, child.id, MemberType.group)

    assert result.is_ok()
    assert result.value.id == written.id
    assert child.parent_id == group.id
    assert child.level == 1
    mock_uow.memberships.delete_by_member.assert_awaited_once_with(child.id, MemberType.group)


@pytest.mark.asyncio
async def test_add_ancestor_as_member_is_rejected(mock_uow):
    a = Group(id=uuid4(), name="A", level=0)
    b = Group(id=uuid4(), name="B", parent_id=a.id, level=1)
    index = {a.id: a, b.id: b}
    mock_uow.groups.get_by_id.side_effect = lambda gid: index.get(gid)
    mock_uow.groups.get_subtree.return_value = [a, b]

    result = await AddGroupMemberUseCase(mock_uow).execute(b.id, a.id, MemberType.group)

    assert result.error.code == "CYCLE_REJECTED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_remove_user_member(mock_uow, group):
    user_id = uuid4()
    membership = GroupMember(
        id=uuid4(), group_id=group.id, member_id=user_id, member_type=MemberType.user
    )
    mock_uow.groups.get_by_id.return_value = group
    mock_uow.memberships.get_edge.return_value = membership

    result = await RemoveGroupMemberUseCase(mock_uow).execute(group.id, user_id, MemberType.user)

    assert result.is_ok()
    mock_uow.memberships.delete.assert_awaited_once_with(membership)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_remove_group_member_makes_it_root(mock_uow, group):
    child = Group(id=uuid4(), name="Platform", parent_id=group.id, level=1)
    index = {group.id: group, child.id: child}
    mock_uow.groups.get_by_id.side_effect = lambda gid: index.get(gid)
    mock_uow.groups.get_subtree.return_value = [child]
    mock_uow.memberships.get_edge.return_value = GroupMember(
        id=uuid4(), group_id=group.id, member_id=child.id, member_type=MemberType.group
    )

    result = await RemoveGroupMemberUseCase(mock_uow).execute(group.id, child.id, MemberType.group)

    assert result.is_ok()
    assert child.parent_id is None
    assert child.level == 0
    mock_uow.memberships.delete_by_member.assert_awaited_once_with(child.id, MemberType.group)


@pytest.mark.asyncio
async def test_remove_unknown_membership(mock_uow, group):
    mock_uow.groups.get_by_id.return_value = group

    result = await RemoveGroupMemberUseCase(mock_uow).execute(group.id, uuid4(), MemberType.user)

    assert result.error.code == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_members_groups_first(mock_uow, group):
    user = User(id=uuid4(), name="Aaron", email="aaron@example.com")
    child = Group(id=uuid4(), name="Zeta", parent_id=group.id, level=1)
    mock_uow.groups.get_by_id.return_value = group
    mock_uow.memberships.get_by_group_id.return_value = [
        GroupMember(id=uuid4(), group_id=group.id, member_id=user.id, member_type=MemberType.user),
        GroupMember(id=uuid4(), group_id=group.id, member_id=child.id, member_type=MemberType.group),
    ]
    mock_uow.users.get_by_ids.return_value = [user]
    mock_uow.groups.get_by_ids.return_value = [child]

    result = await ListGroupMembersUseCase(mock_uow).execute(group.id)

    assert [(m.member_type, m.name) for m in result.value] == [
        (MemberType.group, "Zeta"),
        (MemberType.user, "Aaron"),
    ]
