from fastapi import APIRouter, Depends, HTTPException
from typing import AsyncIterator, List
from core.config.settings import settings
from infrastructure.database.connection import AsyncSessionLocal
from application.services.dependency_injection import get_user_use_cases
from domain.entities.user import User
from domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from domain.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


async def get_user_service() -> AsyncIterator[UserService]:
    # the memory store needs no database session
    if settings.user_store == "memory":
        yield get_user_use_cases()
        return
    async with AsyncSessionLocal() as session:
        yield get_user_use_cases(session)


@router.post("/", response_model=User)
async def create_user(
    user: User,
    user_service: UserService = Depends(get_user_service)
):
    try:
        return await user_service.save_user(user)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=List[User])
async def get_all_users(
    user_service: UserService = Depends(get_user_service)
):
    return await user_service.get_all_users()


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service)
):
    try:
        return await user_service.get_user_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: int,
    user: User,
    user_service: UserService = Depends(get_user_service)
):
    try:
        user.id = user_id
        return await user_service.update_user(user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service)
):
    try:
        await user_service.delete_user(user_id)
        return {"message": "User deleted successfully"}
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
