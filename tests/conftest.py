"""Pytest configuration and fixtures."""

import itertools
import os
from collections.abc import AsyncGenerator

# Log at INFO during tests; must be set before the app reads its settings
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from storefront.database import (  # noqa: E402
    build_engine,
    build_session_factory,
    create_tables,
    get_db,
)
from storefront.main import app  # noqa: E402
from storefront.models import Role, User  # noqa: E402
from storefront.repositories import IdFactory  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    test_engine = build_engine(TEST_DATABASE_URL)
    await create_tables(test_engine)
    try:
        yield test_engine
    finally:
        await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session bound to the test database."""
    async with build_session_factory(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client sharing the test database session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield db_session
        finally:
            # Next request loads fresh rows, as it would with its own session
            db_session.expunge_all()

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def fresh_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Independent session for reading what requests committed."""
    async with build_session_factory(engine)() as session:
        yield session


@pytest.fixture
def sequential_ids() -> IdFactory:
    """Deterministic identifier factory yielding id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


async def create_test_role(db_session: AsyncSession, name: str = "admin") -> Role:
    """Persist a role directly through the session."""
    role = Role(id=f"role-{name}", name=name)
    db_session.add(role)
    await db_session.commit()
    return role


async def create_test_user(
    db_session: AsyncSession,
    role: Role,
    user_id: str = "user-1",
    email: str = "zxc@gmail.com",
) -> User:
    """Persist a user directly through the session."""
    user = User(
        id=user_id,
        name="Zxc",
        surname="Asd",
        email=email,
        password="zxc123",
        phone_number="1234567",
        role=role,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def test_role(db_session: AsyncSession) -> Role:
    return await create_test_role(db_session)


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, test_role: Role) -> User:
    return await create_test_user(db_session, test_role)
