"""
Smoke tests for the test configuration.
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.config import settings


@pytest.mark.asyncio
async def test_app_exists(client: AsyncClient):
    assert client is not None
    assert app.title == settings.APP_NAME


@pytest.mark.asyncio
async def test_database_session(async_session: AsyncSession):
    result = await async_session.execute(text("SELECT 1"))
    assert result.scalar() == 1


@pytest.mark.asyncio
async def test_openapi_lists_employee_routes(client: AsyncClient):
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    prefix = settings.API_V1_EMPLOYEES_PREFIX
    assert set(paths[prefix]) == {"get", "post"}
    assert set(paths[prefix + "/{id}"]) == {"get", "put", "delete"}
