"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator, Dict, List, Optional
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.repository.base import IRepository
from apps.employees.api.router import get_db, get_employee_repository
from apps.employees.models import Employee


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class InMemoryEmployeeRepository(IRepository[Employee]):
    """Dict-backed storage with auto-increment ids."""

    def __init__(self):
        self.rows: Dict[int, Employee] = {}
        self._next_id = 1

    async def find_all(self) -> List[Employee]:
        return [self.rows[key] for key in sorted(self.rows)]

    async def find_by_id(self, id: int) -> Optional[Employee]:
        return self.rows.get(id)

    async def save(self, entity: Employee) -> Employee:
        if entity.id is None:
            entity.id = self._next_id
            self._next_id += 1
        self.rows[entity.id] = entity
        return entity

    async def delete_by_id(self, id: int) -> None:
        self.rows.pop(id, None)


@pytest.fixture
def employee_data() -> dict:
    return {"firstName": "John", "lastName": "Doe", "emailId": "john.doe@example.com"}


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database per test."""
    import apps.models  # noqa: F401

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def fake_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def mock_repository() -> AsyncMock:
    """Mocked data-access object; configure return values per test."""
    return AsyncMock(spec=IRepository)


async def _client_with_overrides(overrides) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(fake_repository: InMemoryEmployeeRepository) -> AsyncGenerator[AsyncClient, None]:
    """Client whose storage is the in-memory fake."""
    async for ac in _client_with_overrides({get_employee_repository: lambda: fake_repository}):
        yield ac


@pytest.fixture
async def mock_client(mock_repository: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """Client whose storage is the mocked repository."""
    async for ac in _client_with_overrides({get_employee_repository: lambda: mock_repository}):
        yield ac


@pytest.fixture
async def db_client(async_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Client backed by the real repository on SQLite."""
    async def _get_db():
        yield async_session

    async for ac in _client_with_overrides({get_db: _get_db}):
        yield ac


@pytest.fixture
async def sample_employee(async_session: AsyncSession) -> Employee:
    employee = Employee(first_name="John", last_name="Doe", email_id="john.doe@example.com")
    async_session.add(employee)
    await async_session.commit()
    await async_session.refresh(employee)
    return employee
