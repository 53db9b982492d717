from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from core.config.settings import settings
from infrastructure.database.user_repository_impl import UserRepositoryImpl
from infrastructure.memory.in_memory_user_repository import InMemoryUserRepository
from application.use_cases.user_use_cases import UserUseCases

# Shared across requests when USER_STORE=memory
memory_user_repository = InMemoryUserRepository()


def get_user_use_cases(session: Optional[AsyncSession] = None) -> UserUseCases:
    if settings.user_store == "memory":
        return UserUseCases(memory_user_repository)
    if session is None:
        raise ValueError("A database session is required for the sql user store")
    user_repository = UserRepositoryImpl(session)
    return UserUseCases(user_repository)
