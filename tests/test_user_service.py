# File: tests/test_user_service.py

"""
UserService against both the SQLAlchemy repository and an in-memory one.
"""

from itertools import count

import pytest

from app.core.security import verify_password
from app.repositories.sql import SqlUserRepository
from app.schemas.user import UserCreate, UserInDB, UserUpdate
from app.services.user_service import INVALID_CREDENTIALS, UserService


class MemoryUserRepository:
    def __init__(self):
        self.rows = {}
        self.written = []
        self._ids = count(1)

    def find_all(self):
        return list(self.rows.values())

    def find_by_id(self, user_id):
        return self.rows.get(user_id)

    def find_by_email(self, email):
        return next((u for u in self.rows.values() if u.email == email), None)

    def create(self, values):
        self.written.append(dict(values))
        user = UserInDB(id=next(self._ids), **values)
        self.rows[user.id] = user
        return user

    def update(self, values, user_id):
        self.written.append(dict(values))
        if user_id not in self.rows:
            return None
        user = self.rows[user_id].model_copy(update=dict(values))
        self.rows[user_id] = user
        return user

    def delete(self, user_id):
        return self.rows.pop(user_id, None) is not None


@pytest.fixture
def service(db):
    return UserService(SqlUserRepository(db), salt_rounds=4)


def test_create_user_stores_a_hash(service):
    service.create_user(UserCreate(email="a@x.com", password="p"))

    stored = service.get_user_by_email("a@x.com")
    assert stored is not None
    assert stored.password != "p"
    assert verify_password("p", stored.password)


def test_check_credentials(service):
    created = service.create_user(UserCreate(email="a@x.com", password="p"))

    bad = service.check_user_credentials("a@x.com", "wrong")
    assert not bad.ok
    assert bad.user is None
    assert bad.error == INVALID_CREDENTIALS

    good = service.check_user_credentials("a@x.com", "p")
    assert good.ok
    assert good.user.id == created.id
    assert good.error is None


def test_unknown_email_fails_like_wrong_password(service):
    service.create_user(UserCreate(email="a@x.com", password="p"))
    assert service.check_user_credentials("b@x.com", "p") == service.check_user_credentials("a@x.com", "nope")


def test_update_password_rehashes(service):
    user = service.create_user(UserCreate(email="a@x.com", password="p"))

    updated = service.update_user(UserUpdate(password="q"), user.id)
    assert updated is not None

    assert not service.check_user_credentials("a@x.com", "p").ok
    assert service.check_user_credentials("a@x.com", "q").ok


def test_update_missing_user_returns_none(service):
    assert service.update_user(UserUpdate(password="q"), 999) is None


def test_delete_user(service):
    user = service.create_user(UserCreate(email="a@x.com", password="p"))

    assert service.delete_user(user.id) is True
    assert service.get_user_by_id(user.id) is None
    assert service.delete_user(user.id) is False


def test_get_all_users(service):
    service.create_user(UserCreate(email="a@x.com", password="p"))
    service.create_user(UserCreate(email="b@x.com", password="p"))
    assert {u.email for u in service.get_all_users()} == {"a@x.com", "b@x.com"}


def test_store_never_sees_plaintext():
    repo = MemoryUserRepository()
    service = UserService(repo, salt_rounds=4)

    user = service.create_user(UserCreate(email="a@x.com", password="p"))
    service.update_user(UserUpdate(password="q"), user.id)
    service.update_user(UserUpdate(email="c@x.com"), user.id)

    assert repo.written[0]["password"] != "p"
    assert repo.written[1]["password"] != "q"
    assert "password" not in repo.written[2]
    assert service.check_user_credentials("c@x.com", "q").ok


def test_user_without_stored_hash_cannot_log_in():
    repo = MemoryUserRepository()
    repo.create({"email": "a@x.com"})
    service = UserService(repo, salt_rounds=4)

    assert not service.check_user_credentials("a@x.com", "").ok


def test_lookup_by_email_matches_stored_normalization(service):
    created = service.create_user(UserCreate(email="Foo@Example.COM", password="p"))
    assert created.email == "Foo@example.com"

    assert service.get_user_by_email("Foo@Example.COM").id == created.id
    assert service.check_user_credentials("Foo@Example.COM", "p").ok
    assert not service.check_user_credentials("not an email", "p").ok
