from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from domain.repositories.user_repository import UserRepository
from domain.entities.user import User
from domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from infrastructure.database.models import UserModel

# SQLite INTEGER is a signed 64-bit value
MIN_USER_ID = -2 ** 63
MAX_USER_ID = 2 ** 63 - 1


class UserRepositoryImpl(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        db_user = UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            is_active=user.is_active
        )
        self.session.add(db_user)
        await self._commit(user)
        await self.session.refresh(db_user)
        return User.model_validate(db_user)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        db_user = await self._get_model(user_id)
        return User.model_validate(db_user) if db_user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        db_user = result.scalar_one_or_none()
        return User.model_validate(db_user) if db_user else None

    async def get_all(self) -> List[User]:
        result = await self.session.execute(select(UserModel).order_by(UserModel.id))
        db_users = result.scalars().all()
        return [User.model_validate(db_user) for db_user in db_users]

    async def update(self, user: User) -> User:
        db_user = await self._get_model(user.id)
        if not db_user:
            raise UserNotFoundError(user.id)
        db_user.username = user.username
        db_user.email = user.email
        db_user.full_name = user.full_name
        db_user.is_active = user.is_active
        db_user.updated_at = datetime.utcnow()
        await self._commit(user)
        await self.session.refresh(db_user)
        return User.model_validate(db_user)

    async def delete(self, user_id: int) -> bool:
        db_user = await self._get_model(user_id)
        if db_user:
            await self.session.delete(db_user)
            await self.session.commit()
            return True
        return False

    async def _get_model(self, user_id: int) -> Optional[UserModel]:
        if user_id is None or not MIN_USER_ID <= user_id <= MAX_USER_ID:
            return None
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        return result.scalar_one_or_none()

    async def _commit(self, user: User) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            # SQLite reports "UNIQUE constraint failed: users.<column>"
            message = str(e.orig)
            if "email" in message:
                raise UserAlreadyExistsError("email", user.email) from e
            if "username" in message:
                raise UserAlreadyExistsError("username", user.username) from e
            raise UserAlreadyExistsError("id", str(user.id)) from e
