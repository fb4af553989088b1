import pytest
from httpx import AsyncClient
from sqlmodel import SQLModel


@pytest.mark.asyncio
async def test_store_failure_returns_503_without_details(client: AsyncClient, engine):
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    response = await client.get("/api/groups/hierarchy")

    assert response.status_code == 503
    assert response.json() == {
        "error": {
            "code": "STORE_UNAVAILABLE",
            "message": "Service temporarily unavailable",
        }
    }
