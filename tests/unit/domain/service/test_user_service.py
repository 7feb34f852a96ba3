"""Unit tests for UserService."""

import pytest

from lens.domain.error import NotFoundError
from lens.domain.repository import UserRepository
from lens.domain.service import UserService
from lens.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_get_by_id_returns_seeded_user(unit_env):
    user_service = await unit_env.get(UserService)

    user = await user_service.get_by_id(UserId(2))

    assert user.username == "bob"


@pytest.mark.asyncio
async def test_unknown_user_raises_not_found(unit_env):
    user_service = await unit_env.get(UserService)

    with pytest.raises(NotFoundError):
        await user_service.get_by_id(UserId(404))


@pytest.mark.asyncio
async def test_deleted_user_raises_not_found(unit_env):
    user_service = await unit_env.get(UserService)
    user_repo = await unit_env.get(UserRepository)
    carol = await user_service.get_by_id(UserId(3))
    await user_repo.save(carol.model_copy(update={"is_deleted": True}))

    with pytest.raises(NotFoundError):
        await user_service.get_by_id(UserId(3))
