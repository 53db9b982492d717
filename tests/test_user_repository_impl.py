"""Tests for the SQLAlchemy user store."""
import asyncio
import pytest

from domain.entities.user import User
from domain.exceptions import UserAlreadyExistsError, UserNotFoundError
from application.use_cases.user_use_cases import UserUseCases
from infrastructure.database.user_repository_impl import UserRepositoryImpl


@pytest.mark.asyncio
async def test_create_sets_id_and_timestamps(db_session, sample_user):
    repository = UserRepositoryImpl(db_session)

    created = await repository.create(sample_user)

    assert created.id == 1
    assert created.created_at is not None
    assert created.updated_at is not None
    assert (await repository.get_by_email("alice@example.com")).id == created.id


@pytest.mark.asyncio
async def test_get_all_is_ordered_by_id(db_session, sample_user, other_user):
    repository = UserRepositoryImpl(db_session)
    await repository.create(other_user.model_copy(update={"id": 5}))
    await repository.create(sample_user.model_copy(update={"id": 2}))

    users = await repository.get_all()

    assert [user.id for user in users] == [2, 5]


@pytest.mark.asyncio
async def test_unique_violation_rolls_back(db_session, sample_user):
    repository = UserRepositoryImpl(db_session)
    await repository.create(sample_user)

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        await repository.create(User(username="alice2", email="alice@example.com"))
    assert exc_info.value.field == "email"

    # the session is usable again after the rollback
    users = await repository.get_all()
    assert [user.username for user in users] == ["alice"]


@pytest.mark.asyncio
async def test_update_and_delete_missing(db_session):
    repository = UserRepositoryImpl(db_session)

    with pytest.raises(UserNotFoundError):
        await repository.update(User(id=9, username="x", email="x@example.com"))
    assert await repository.delete(9) is False
    assert await repository.get_by_id(9) is None


@pytest.mark.asyncio
async def test_ids_outside_sqlite_integer_range_are_not_found(db_session, sample_user):
    repository = UserRepositoryImpl(db_session)
    service = UserUseCases(repository)
    await service.save_user(sample_user)

    for user_id in (2 ** 70, -2 ** 70):
        assert await repository.get_by_id(user_id) is None
        assert await repository.delete(user_id) is False
        with pytest.raises(UserNotFoundError):
            await service.get_user_by_id(user_id)
        with pytest.raises(UserNotFoundError):
            await service.update_user(User(id=user_id, username="ghost", email="ghost@example.com"))
        with pytest.raises(UserNotFoundError):
            await service.delete_user(user_id)

    assert len(await repository.get_all()) == 1


@pytest.mark.asyncio
async def test_update_always_bumps_updated_at(db_session, sample_user):
    repository = UserRepositoryImpl(db_session)
    created = await repository.create(sample_user)
    await asyncio.sleep(0.01)

    # no field changes, so only the explicit timestamp forces the UPDATE
    updated = await repository.update(created)

    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at
