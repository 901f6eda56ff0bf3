"""Tests for UserRepository against the SQLite pool double."""

import pytest

from app.core.errors import NotFoundError, StorageError
from app.core.pool import PoolManager
from app.models import User, UserCreate, UserPatch
from app.repositories import Repository, UserRepository
from tests.utils.sqlite_pool import SqlitePool
from tests.utils.user import create_random_user


def test_create_returns_persisted_row(user_repo: UserRepository) -> None:
    user = user_repo.create(UserCreate(name="A", email="a@x.com"))
    assert user == User(id=1, name="A", email="a@x.com")


def test_get_by_id_matches_create(user_repo: UserRepository) -> None:
    created = create_random_user(user_repo)
    assert user_repo.get_by_id(created.id) == created


def test_list_all_empty(user_repo: UserRepository) -> None:
    assert user_repo.list_all() == []


def test_list_all_ascending_by_id(user_repo: UserRepository) -> None:
    created = [create_random_user(user_repo) for _ in range(4)]
    listed = user_repo.list_all()
    assert [u.id for u in listed] == sorted(u.id for u in created)
    assert listed == created


def test_get_missing_raises_not_found(user_repo: UserRepository) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        user_repo.get_by_id(999)
    assert exc_info.value.id == 999
    assert str(exc_info.value) == "User with id 999 not found"


def test_delete_missing_raises_not_found(user_repo: UserRepository) -> None:
    with pytest.raises(NotFoundError):
        user_repo.delete(999)


def test_delete_then_get_not_found(user_repo: UserRepository) -> None:
    user = create_random_user(user_repo)
    user_repo.delete(user.id)
    with pytest.raises(NotFoundError):
        user_repo.get_by_id(user.id)
    with pytest.raises(NotFoundError):
        user_repo.delete(user.id)


def test_update_empty_patch_leaves_row_unchanged(user_repo: UserRepository) -> None:
    user = create_random_user(user_repo)
    assert user_repo.update(user.id, UserPatch()) == user
    assert user_repo.get_by_id(user.id) == user


def test_update_name_keeps_email(user_repo: UserRepository) -> None:
    user = user_repo.create(UserCreate(name="A", email="e@x.com"))
    updated = user_repo.update(user.id, UserPatch(name="X"))
    assert updated == User(id=user.id, name="X", email="e@x.com")
    assert user_repo.get_by_id(user.id) == updated


def test_update_email_keeps_name(user_repo: UserRepository) -> None:
    user = user_repo.create(UserCreate(name="A", email="e@x.com"))
    updated = user_repo.update(user.id, UserPatch(email="new@x.com"))
    assert updated == User(id=user.id, name="A", email="new@x.com")


def test_update_all_fields(user_repo: UserRepository) -> None:
    user = create_random_user(user_repo)
    updated = user_repo.update(user.id, UserPatch(name="B", email="b@x.com"))
    assert updated == User(id=user.id, name="B", email="b@x.com")


def test_update_missing_raises_not_found(user_repo: UserRepository) -> None:
    with pytest.raises(NotFoundError):
        user_repo.update(42, UserPatch(name="X"))
    with pytest.raises(NotFoundError):
        user_repo.update(42, UserPatch())


def test_update_does_not_touch_other_rows(user_repo: UserRepository) -> None:
    a = create_random_user(user_repo)
    b = create_random_user(user_repo)
    user_repo.update(a.id, UserPatch(name="changed"))
    assert user_repo.get_by_id(b.id) == b


def test_duplicate_email_is_storage_error(user_repo: UserRepository) -> None:
    user_repo.create(UserCreate(name="A", email="dup@x.com"))
    with pytest.raises(StorageError):
        user_repo.create(UserCreate(name="B", email="dup@x.com"))
    # failed insert was rolled back, nothing else changed
    assert len(user_repo.list_all()) == 1


def test_unreachable_store_is_storage_error(
    user_repo: UserRepository, sqlite_pool: SqlitePool
) -> None:
    sqlite_pool.unreachable = True
    with pytest.raises(StorageError):
        user_repo.list_all()
    with pytest.raises(StorageError):
        user_repo.get_by_id(1)
    with pytest.raises(StorageError):
        user_repo.update(1, UserPatch(name="X"))
    with pytest.raises(StorageError):
        user_repo.create(UserCreate(name="X", email="x@x.com"))
    with pytest.raises(StorageError):
        user_repo.delete(1)


def test_pool_timeout_is_storage_error(
    user_repo: UserRepository, sqlite_pool: SqlitePool
) -> None:
    sqlite_pool.exhausted = True
    with pytest.raises(StorageError, match="couldn't get a connection"):
        user_repo.create(UserCreate(name="A", email="a@x.com"))


def test_base_repository_requires_row_mapper(pool: PoolManager) -> None:
    with pytest.raises(TypeError, match="from_row"):
        Repository(pool)  # type: ignore[abstract]
