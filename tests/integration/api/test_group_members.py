import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_add_and_list_user_member(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    alice = await api.create_user("alice")

    created = await api.add_member(engineering, alice, "user")

    assert created["group_id"] == engineering["id"]
    assert created["member_id"] == alice["id"]
    assert created["member_type"] == "user"
    assert created["name"] == "Alice Example"

    response = await client.get(f"/api/groups/{engineering['id']}/members")
    assert response.status_code == 200
    assert [m["member_id"] for m in response.json()] == [alice["id"]]


@pytest.mark.asyncio
async def test_add_member_errors(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    alice = await api.create_user("alice")
    missing = "00000000-0000-0000-0000-000000000999"

    response = await client.post(
        f"/api/groups/{missing}/members",
        json={"member_id": alice["id"], "member_type": "user"},
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "GROUP_NOT_FOUND"

    response = await client.post(
        f"/api/groups/{engineering['id']}/members",
        json={"member_id": missing, "member_type": "user"},
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MEMBER_NOT_FOUND"

    response = await client.post(
        f"/api/groups/{engineering['id']}/members",
        json={"member_id": alice["id"], "member_type": "robot"},
    )
    assert response.status_code == 422

    response = await client.post(
        f"/api/groups/{engineering['id']}/members",
        json={"member_id": engineering["id"], "member_type": "group"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SELF_MEMBERSHIP"


@pytest.mark.asyncio
async def test_duplicate_member_conflict(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    alice = await api.create_user("alice")
    await api.add_member(engineering, alice, "user")

    response = await client.post(
        f"/api/groups/{engineering['id']}/members",
        json={"member_id": alice["id"], "member_type": "user"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "MEMBERSHIP_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_adding_group_member_reparents_it(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    sales = await api.create_group("sales")
    platform = await api.create_group("platform", parent=engineering)

    await api.add_member(sales, platform, "group")

    moved = (await client.get(f"/api/groups/{platform['id']}")).json()
    assert moved["parent_id"] == sales["id"]
    assert moved["level"] == 1

    old_members = await client.get(f"/api/groups/{engineering['id']}/members")
    assert old_members.json() == []


@pytest.mark.asyncio
async def test_remove_user_member(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    alice = await api.create_user("alice")
    await api.add_member(engineering, alice, "user")

    response = await client.delete(f"/api/groups/{engineering['id']}/members/{alice['id']}")
    assert response.status_code == 204

    response = await client.delete(f"/api/groups/{engineering['id']}/members/{alice['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_remove_group_member_turns_it_into_root(client: AsyncClient, api):
    engineering = await api.create_group("engineering")
    platform = await api.create_group("platform", parent=engineering)
    storage = await api.create_group("storage", parent=platform)

    response = await client.delete(
        f"/api/groups/{engineering['id']}/members/{platform['id']}",
        params={"member_type": "group"},
    )
    assert response.status_code == 204

    platform_now = (await client.get(f"/api/groups/{platform['id']}")).json()
    storage_now = (await client.get(f"/api/groups/{storage['id']}")).json()
    assert platform_now["parent_id"] is None
    assert platform_now["level"] == 0
    assert storage_now["level"] == 1
