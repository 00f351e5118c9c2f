"""
Employee Directory — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── db_engine:          In-memory SQLite engine with tables created
    ├── session_factory:    async_sessionmaker bound to db_engine
    ├── db_session:         One open session (sliced persistence tests)
    ├── repository:         EmployeeRepository over db_session
    ├── fake_repository:    InMemoryEmployeeRepository (service unit tests)
    ├── mock_service:       AsyncMock with EmployeeService's spec (sliced HTTP tests)
    ├── app:                Fresh FastAPI instance from create_app()
    ├── test_client:        HTTPX client, full stack on the in-memory database
    └── web_client:         HTTPX client, service replaced by mock_service
"""

import os

# Override settings BEFORE any employee_api import reads them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.database import Base, get_db_session
from employee_api.dependencies import get_employee_service
from employee_api.main import create_app
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService

from tests.fakes import InMemoryEmployeeRepository


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    In-memory SQLite engine shared by every session in one test.

    StaticPool keeps a single connection open; without it each new
    connection would see its own empty :memory: database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session) -> EmployeeRepository:
    return EmployeeRepository(db_session)


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_repository() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def mock_service() -> AsyncMock:
    """
    AsyncMock shaped like EmployeeService.

    Usage:
        mock_service.get_all_employees.return_value = [make_employee(1, "alex")]
    """
    return AsyncMock(spec=EmployeeService)


@pytest.fixture
def make_employee():
    """Builds detached Employee instances that look persisted."""
    def _make(employee_id: int, name: str, email: str | None = None) -> Employee:
        employee = Employee(name, email=email)
        employee.id = employee_id
        employee.created_at = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        return employee
    return _make


# ══════════════════════════════════════════════════════════════════════════
# HTTP Clients
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app():
    return create_app()


@pytest_asyncio.fixture
async def test_client(app, session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Full-stack client: routes → service → repository → in-memory SQLite.

    Only the session dependency is replaced; everything above it is the real
    wiring from employee_api.dependencies.
    """

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def web_client(app, mock_service) -> AsyncGenerator[AsyncClient, None]:
    """
    Web-layer-only client: the service is mock_service, no database involved.
    """
    app.dependency_overrides[get_employee_service] = lambda: mock_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
