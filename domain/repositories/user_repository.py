from abc import ABC, abstractmethod
from typing import List, Optional
from domain.entities.user import User


class UserRepository(ABC):
    """Persistence collaborator that owns the canonical user records."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Store a new user, keeping ``user.id`` when one is supplied"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Return every stored user ordered by id"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace the stored fields of ``user.id``; raises UserNotFoundError if absent"""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Remove a user, returning False when nothing was stored under the id"""
        pass
