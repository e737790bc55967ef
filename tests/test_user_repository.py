"""
Tests for UserRepository against a temporary SQLite database.
"""
import asyncio
import sqlite3
import pytest
import pytest_asyncio
from databases import Database
from userhub.modules.database import connect_to_db, disconnect_from_db, init_db
from userhub.modules.users.repositories.user_repository import UserRepository
from userhub.modules.users.services.user_service import UserService


@pytest_asyncio.fixture
async def db(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'users.db'}")
    await connect_to_db(database)
    await init_db(database)
    yield database
    await disconnect_from_db(database)


@pytest.fixture
def repository(db):
    return UserRepository(db)


@pytest.mark.asyncio
async def test_insert_and_fetch(repository):
    assert await repository.insert("u1", "A", "a@x.com", "hash-1") is True

    by_id = await repository.get_by_id("u1")
    by_email = await repository.get_by_email("a@x.com")

    assert by_id["name"] == "A"
    assert by_email["id"] == "u1"
    assert await repository.get_password_hash("u1") == "hash-1"


@pytest.mark.asyncio
async def test_insert_duplicate_email_reports_false(repository):
    await repository.insert("u1", "A", "a@x.com", "h")

    assert await repository.insert("u2", "B", "a@x.com", "h") is False
    assert await repository.get_by_id("u2") is None


@pytest.mark.asyncio
async def test_list_all(repository):
    await repository.insert("u1", "A", "a@x.com", "h")
    await repository.insert("u2", "B", "b@x.com", "h")

    rows = await repository.list_all()

    assert {r["email"] for r in rows} == {"a@x.com", "b@x.com"}


@pytest.mark.asyncio
async def test_list_all_orders_by_creation_time(db, repository):
    await repository.insert("zzz", "Older", "old@x.com", "h")
    await repository.insert("aaa", "Newer", "new@x.com", "h")
    await db.execute("UPDATE users SET created_at = :ts WHERE id = :id", {"ts": "2024-01-01 00:00:00", "id": "zzz"})
    await db.execute("UPDATE users SET created_at = :ts WHERE id = :id", {"ts": "2024-01-01 00:00:05", "id": "aaa"})

    rows = await repository.list_all()

    assert [r["id"] for r in rows] == ["zzz", "aaa"]


@pytest.mark.asyncio
async def test_update_and_missing_update(repository):
    await repository.insert("u1", "A", "a@x.com", "h")

    assert await repository.update("u1", "A2", "a2@x.com") is True
    assert (await repository.get_by_id("u1"))["email"] == "a2@x.com"
    assert await repository.update("ghost", "X", "x@x.com") is False


@pytest.mark.asyncio
async def test_update_to_email_held_by_another_user_reports_false(repository):
    await repository.insert("u1", "A", "a@x.com", "h")
    await repository.insert("u2", "B", "b@x.com", "h")

    assert await repository.update("u1", "A", "b@x.com") is False
    assert (await repository.get_by_id("u1"))["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_concurrent_inserts_with_same_email_one_wins(repository):
    results = await asyncio.gather(
        repository.insert("u1", "A", "a@x.com", "h"),
        repository.insert("u2", "B", "a@x.com", "h"),
    )

    assert sorted(results) == [False, True]
    assert len(await repository.list_all()) == 1


@pytest.mark.asyncio
async def test_update_password(repository):
    await repository.insert("u1", "A", "a@x.com", "old")

    assert await repository.update_password("u1", "new") is True
    assert await repository.get_password_hash("u1") == "new"
    assert await repository.update_password("ghost", "new") is False


@pytest.mark.asyncio
async def test_delete(repository):
    await repository.insert("u1", "A", "a@x.com", "h")

    assert await repository.delete("u1") is True
    assert await repository.get_by_id("u1") is None
    assert await repository.delete("u1") is False


@pytest.mark.asyncio
async def test_service_round_trip_on_real_database(repository):
    service = UserService(repository)

    assert await service.create_user("A", "a@x.com", "a") is True
    [user] = await service.list_users()
    assert set(user) == {"id", "name", "email"}

    assert await service.check_old_password_and_update(user["id"], "wrong", "b") is False
    assert await service.check_old_password_and_update(user["id"], "a", "b") is True
    assert await service.check_old_password_and_update(user["id"], "a", "c") is False


@pytest.mark.asyncio
async def test_service_update_to_taken_email_is_false(repository):
    service = UserService(repository)
    await repository.insert("u1", "A", "a@x.com", "h")
    await repository.insert("u2", "B", "b@x.com", "h")

    assert await service.update_user("u1", "A", "b@x.com") is False


@pytest.mark.asyncio
async def test_missing_required_column_still_raises(repository):
    with pytest.raises(sqlite3.IntegrityError):
        await repository.insert("u1", "A", "a@x.com", None)
