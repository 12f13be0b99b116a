# tests/conftest.py
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_DEPARTMENTS", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from emp_crud import crud
from emp_crud.database import create_db_and_tables, get_async_session
from emp_crud.main import app
from emp_crud.schemas import EmployeeCreate


@pytest.fixture
async def engine():
    """Fresh in-memory database per test, one shared connection."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_db_and_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def departments(db):
    return [
        await crud.insert_department(db, "Development"),
        await crud.insert_department(db, "Testing"),
    ]


@pytest.fixture
def make_employees(db):
    """Insert ``count`` employees named worker01, worker02, ..."""
    async def _make(count, department_id=None):
        created = []
        for i in range(1, count + 1):
            name = f"worker{i:02d}"
            created.append(await crud.insert_employee(db, EmployeeCreate(
                name=name,
                gender="M",
                email=f"{name}@example.com",
                department_id=department_id,
            )))
        return created

    return _make
