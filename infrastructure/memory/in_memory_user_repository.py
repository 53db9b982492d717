"""
Process-local user store.

Keeps users in a dict keyed by id. Every operation runs under a single
``asyncio.Lock`` so a uniqueness check and the write that follows it
cannot interleave with another request. Records are copied on the way in
and out; callers never hold the stored instance.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional

from domain.entities.user import User
from domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: Dict[int, User] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def create(self, user: User) -> User:
        async with self._lock:
            if user.id is not None and user.id in self._users:
                raise UserAlreadyExistsError("id", str(user.id))
            self._check_unique(user)

            if user.id is None:
                user_id = self._last_id + 1
            else:
                user_id = user.id
            self._last_id = max(self._last_id, user_id)

            now = datetime.utcnow()
            stored = user.model_copy(update={"id": user_id, "created_at": now, "updated_at": now})
            self._users[user_id] = stored
            return stored.model_copy()

    async def get_by_id(self, user_id: int) -> Optional[User]:
        async with self._lock:
            stored = self._users.get(user_id)
            return stored.model_copy() if stored else None

    async def get_by_email(self, email: str) -> Optional[User]:
        async with self._lock:
            for stored in self._users.values():
                if stored.email == email:
                    return stored.model_copy()
            return None

    async def get_all(self) -> List[User]:
        async with self._lock:
            return [self._users[user_id].model_copy() for user_id in sorted(self._users)]

    async def update(self, user: User) -> User:
        async with self._lock:
            stored = self._users.get(user.id)
            if stored is None:
                raise UserNotFoundError(user.id)
            self._check_unique(user)

            updated = user.model_copy(update={
                "created_at": stored.created_at,
                "updated_at": datetime.utcnow(),
            })
            self._users[user.id] = updated
            return updated.model_copy()

    async def delete(self, user_id: int) -> bool:
        async with self._lock:
            return self._users.pop(user_id, None) is not None

    def _check_unique(self, user: User) -> None:
        for stored in self._users.values():
            if stored.id == user.id:
                continue
            if stored.email == user.email:
                raise UserAlreadyExistsError("email", user.email)
            if stored.username == user.username:
                raise UserAlreadyExistsError("username", user.username)
