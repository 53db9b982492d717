from abc import ABC, abstractmethod
from typing import List
from domain.entities.user import User


class UserService(ABC):
    """Operations available on User records.

    Lookups by a missing id raise ``UserNotFoundError``; clashes on a
    unique field raise ``UserAlreadyExistsError``.
    """

    @abstractmethod
    async def save_user(self, user: User) -> User:
        """Create the user, or replace it when ``user.id`` is already stored"""
        pass

    @abstractmethod
    async def get_all_users(self) -> List[User]:
        pass

    @abstractmethod
    async def update_user(self, user: User) -> User:
        pass

    @abstractmethod
    async def delete_user(self, user_id: int) -> None:
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> User:
        pass
