import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def api(client, test_data):
    """Small helpers for building trees through the HTTP API"""

    class Api:
        async def create_user(self, key: str, **extra) -> dict:
            payload = test_data.user(key)
            payload.update(extra)
            response = await client.post("/api/users", json=payload)
            assert response.status_code == 201, response.text
            return response.json()

        async def create_group(self, key: str, parent: dict = None) -> dict:
            payload = test_data.group(key)
            payload["parent_id"] = parent["id"] if parent else None
            response = await client.post("/api/groups", json=payload)
            assert response.status_code == 201, response.text
            return response.json()

        async def add_member(self, group: dict, member: dict, member_type: str):
            response = await client.post(
                f"/api/groups/{group['id']}/members",
                json={"member_id": member["id"], "member_type": member_type},
            )
            assert response.status_code == 201, response.text
            return response.json()

    return Api()
