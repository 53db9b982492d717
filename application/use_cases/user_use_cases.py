import logging
from typing import List
from domain.entities.user import User
from domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from domain.repositories.user_repository import UserRepository
from domain.services.user_service import UserService

logger = logging.getLogger(__name__)


class UserUseCases(UserService):
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def save_user(self, user: User) -> User:
        await self._ensure_email_available(user)

        if user.id is not None and await self.user_repository.get_by_id(user.id):
            saved_user = await self.user_repository.update(user)
            logger.info(f"User {saved_user.id} replaced")
            return saved_user

        created_user = await self.user_repository.create(user)
        logger.info(f"User {created_user.id} created")
        return created_user

    async def get_all_users(self) -> List[User]:
        return await self.user_repository.get_all()

    async def update_user(self, user: User) -> User:
        if user.id is None:
            logger.warning("Update rejected: user has no id")
            raise UserNotFoundError()
        await self._require_existing(user.id)
        await self._ensure_email_available(user)

        updated_user = await self.user_repository.update(user)
        logger.info(f"User {updated_user.id} updated")
        return updated_user

    async def delete_user(self, user_id: int) -> None:
        await self._require_existing(user_id)
        if not await self.user_repository.delete(user_id):
            # removed concurrently between the lookup and the delete
            raise UserNotFoundError(user_id)
        logger.info(f"User {user_id} deleted")

    async def get_user_by_id(self, user_id: int) -> User:
        return await self._require_existing(user_id)

    async def _require_existing(self, user_id: int) -> User:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return existing_user

    async def _ensure_email_available(self, user: User) -> None:
        existing_user = await self.user_repository.get_by_email(user.email)
        if existing_user and existing_user.id != user.id:
            logger.warning(f"Email already registered to user {existing_user.id}")
            raise UserAlreadyExistsError("email", user.email)
