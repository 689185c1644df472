import pytest

from users_api.core.errors import NotFoundError, UserNotFoundError
from users_api.features.users import crud
from users_api.features.users.schemas import UserCreate


def test_create_assigns_id(db):
    user = crud.create_user(db, UserCreate(name="alice", age=31))

    assert user.id == 1
    assert crud.get_user(db, 1).name == "alice"


def test_get_missing_user_raises(db):
    with pytest.raises(UserNotFoundError) as exc_info:
        crud.get_user(db, 99)

    assert isinstance(exc_info.value, NotFoundError)
    assert str(exc_info.value) == "User not found"


def test_get_user_outside_storage_range_raises(db):
    with pytest.raises(UserNotFoundError):
        crud.get_user(db, 10**20)
    with pytest.raises(UserNotFoundError):
        crud.get_user(db, 0)


def test_get_users_offset_limit(db, add_users):
    add_users(5)

    users = crud.get_users(db, start=1, count=2)

    assert [u.name for u in users] == ["User 2", "User 3"]
    assert crud.get_users(db, start=10, count=10) == []


def test_update_replaces_fields_and_keeps_id(db, add_users):
    add_users(1)

    user = crud.update_user(db, 1, UserCreate(name="renamed", age=99))

    assert (user.id, user.name, user.age) == (1, "renamed", 99)


def test_update_missing_user_raises(db):
    with pytest.raises(UserNotFoundError):
        crud.update_user(db, 5, UserCreate(name="x", age=1))


def test_delete_user(db, add_users):
    add_users(2)

    crud.delete_user(db, 1)

    assert [u.id for u in crud.get_users(db)] == [2]
    with pytest.raises(UserNotFoundError):
        crud.delete_user(db, 1)
