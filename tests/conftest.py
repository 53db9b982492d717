"""Pytest configuration and shared fixtures for user service tests."""
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from domain.entities.user import User
from infrastructure.database.connection import create_tables
from infrastructure.database.user_repository_impl import UserRepositoryImpl
from infrastructure.memory.in_memory_user_repository import InMemoryUserRepository
from application.use_cases.user_use_cases import UserUseCases


@pytest.fixture
def sample_user():
    """Fixture for a sample unsaved User."""
    return User(username="alice", email="alice@example.com", full_name="Alice Smith")


@pytest.fixture
def other_user():
    """Fixture for a second unsaved User."""
    return User(username="bob", email="bob@example.com", full_name="Bob Jones")


@pytest_asyncio.fixture
async def db_session():
    """AsyncSession bound to a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    session_factory = sessionmaker(bind=engine, class_=AsyncSession, autoflush=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def memory_repository():
    return InMemoryUserRepository()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def user_repository(request, db_session):
    """Each repository implementation, so service tests run against both."""
    if request.param == "memory":
        return InMemoryUserRepository()
    return UserRepositoryImpl(db_session)


@pytest.fixture
def user_service(user_repository):
    return UserUseCases(user_repository)
