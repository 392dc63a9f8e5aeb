"""Tests for the user repository and admin service."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from app.core.exceptions import AuthenticationError, AuthorizationError
from app.services.admin_service import require_admin, list_users
from app.services.user_service import UserRepository


@pytest.fixture
def repository(users_collection):
    return UserRepository(lambda: users_collection)


@pytest.mark.asyncio
async def test_find_by_telegram_id(repository):
    user = await repository.find_by_telegram_id(1001)

    assert user.telegramId == 1001
    assert user.isAdmin is True
    assert isinstance(user.id, str)


@pytest.mark.asyncio
async def test_find_by_telegram_id_missing(repository):
    assert await repository.find_by_telegram_id(9999) is None


@pytest.mark.asyncio
async def test_record_without_admin_flag_is_not_admin(base_time):
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value={"telegramId": 5, "createdAt": base_time})
    repository = UserRepository(lambda: collection)

    user = await repository.find_by_telegram_id(5)

    assert user.isAdmin is False
    collection.find_one.assert_awaited_once_with({"telegramId": 5})


@pytest.mark.asyncio
async def test_find_all_sorted_descending(repository):
    users = await repository.find_all_sorted("createdAt", descending=True)

    assert [user["telegramId"] for user in users] == [1003, 1002, 1001]
    assert all(isinstance(user["_id"], str) for user in users)


@pytest.mark.asyncio
async def test_find_all_sorted_ascending(repository):
    users = await repository.find_all_sorted("createdAt", descending=False)

    assert [user["telegramId"] for user in users] == [1001, 1002, 1003]


@pytest.mark.asyncio
async def test_collection_is_acquired_lazily():
    getter = MagicMock(side_effect=RuntimeError("Database not initialized"))

    repository = UserRepository(getter)

    getter.assert_not_called()
    with pytest.raises(RuntimeError):
        await repository.find_by_telegram_id(1)


def resolver_returning(session_user):
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=session_user)
    return resolver


@pytest.mark.asyncio
async def test_require_admin_without_identity(repository, users_collection):
    with pytest.raises(AuthenticationError):
        await require_admin(MagicMock(), resolver_returning(None), repository)

    assert users_collection.queries == []


@pytest.mark.asyncio
async def test_require_admin_rejects_regular_user(repository):
    request = MagicMock()
    request.url.path = "/api/admin/users"

    with pytest.raises(AuthorizationError):
        await require_admin(request, resolver_returning(MagicMock(id=1002)), repository)


@pytest.mark.asyncio
async def test_list_users_for_admin(repository, users_collection):
    request = MagicMock()
    request.url.path = "/api/admin/users"

    users = await list_users(request, resolver_returning(MagicMock(id=1001)), repository)

    assert len(users) == 3
    assert users_collection.queries[0] == ("find_one", {"telegramId": 1001})
    assert users_collection.queries[1] == ("find", {})


@pytest.mark.asyncio
async def test_find_all_sorted_renders_dates_as_utc_iso(repository):
    users = await repository.find_all_sorted("createdAt", descending=True)

    assert [user["createdAt"] for user in users] == [
        "2024-01-03T12:00:00.000Z",
        "2024-01-02T12:00:00.000Z",
        "2024-01-01T12:00:00.000Z",
    ]


def test_user_record_keeps_extra_fields_and_stringifies_object_id():
    from bson import ObjectId
    from app.models.user import UserRecord

    oid = ObjectId()
    user = UserRecord.model_validate(
        {"_id": oid, "telegramId": 7, "isAdmin": None, "username": "trader"}
    )

    assert user.id == str(oid)
    assert user.isAdmin is False
    assert user.model_extra == {"username": "trader"}
    assert UserRecord(id="abc", telegramId=8).id == "abc"
