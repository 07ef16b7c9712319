"""Tests for the user and session repositories."""

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from memberzone.models.session import SessionUser
from memberzone.models.user import User, UserRole
from memberzone.repositories.session_repo import SessionRepository
from memberzone.repositories.user_repo import UserRepository


@pytest.fixture
def user_repo(db):
    repo = UserRepository(db)
    repo.ensure_indexes()
    return repo


@pytest.fixture
def session_repo(db):
    repo = SessionRepository(db)
    repo.ensure_indexes()
    return repo


def _user(name="Ann", email="ann@x.com", role=UserRole.USER):
    return User(name=name, email=email, role=role, password_hash="hash")


class TestUserRepository:
    def test_email_index_is_unique(self, db, user_repo):
        assert (["email"], True, {}) in db["users"].indexes

    def test_create_assigns_object_id(self, user_repo):
        user = user_repo.create(_user())
        assert user.id is not None
        assert ObjectId.is_valid(user.id)

    def test_get_by_email(self, user_repo):
        created = user_repo.create(_user())
        found = user_repo.get_by_email("ann@x.com")
        assert found.id == created.id
        assert found.name == "Ann"
        assert found.password_hash == "hash"

    def test_get_by_email_unknown(self, user_repo):
        assert user_repo.get_by_email("nobody@x.com") is None

    def test_get_by_id(self, user_repo):
        created = user_repo.create(_user())
        assert user_repo.get_by_id(created.id).email == "ann@x.com"

    @pytest.mark.parametrize("bad_id", ["", "not-an-id", "123", None])
    def test_get_by_malformed_id(self, user_repo, bad_id):
        assert user_repo.get_by_id(bad_id) is None

    def test_duplicate_email_rejected(self, user_repo):
        user_repo.create(_user())
        with pytest.raises(DuplicateKeyError):
            user_repo.create(_user(name="Other Ann"))

    def test_list_all(self, user_repo):
        user_repo.create(_user())
        user_repo.create(_user(name="Bob", email="bob@x.com"))
        assert sorted(u.email for u in user_repo.list_all()) == ["ann@x.com", "bob@x.com"]

    def test_set_role(self, user_repo):
        user = user_repo.create(_user())
        assert user_repo.set_role(user.id, UserRole.ADMIN) is True
        assert user_repo.get_by_id(user.id).role == UserRole.ADMIN

    def test_promote_then_demote(self, user_repo):
        user = user_repo.create(_user())
        user_repo.set_role(user.id, UserRole.ADMIN)
        user_repo.set_role(user.id, UserRole.USER)
        assert user_repo.get_by_id(user.id).role == UserRole.USER

    def test_set_role_unknown_id_is_noop(self, user_repo):
        user = user_repo.create(_user())
        assert user_repo.set_role(str(ObjectId()), UserRole.ADMIN) is False
        assert user_repo.set_role("garbage", UserRole.ADMIN) is False
        assert user_repo.get_by_id(user.id).role == UserRole.USER

    def test_count_admins(self, user_repo):
        user_repo.create(_user())
        user_repo.create(_user(name="Root", email="root@mail.com", role=UserRole.ADMIN))
        assert user_repo.count_admins() == 1


class TestSessionRepository:
    def test_ttl_index(self, db, session_repo):
        assert (["expires_at"], False, {"expireAfterSeconds": 0}) in db["sessions"].indexes

    def test_create_and_get(self, session_repo):
        snapshot = SessionUser(name="Ann", email="ann@x.com", role=UserRole.USER)
        session = session_repo.create(snapshot)
        assert session.expires_at - session.created_at == timedelta(hours=1)

        loaded = session_repo.get(session.id)
        assert loaded is not None
        assert loaded.user == snapshot

    def test_tokens_are_unique_and_opaque(self, session_repo):
        snapshot = SessionUser(name="Ann", email="ann@x.com", role=UserRole.USER)
        ids = {session_repo.create(snapshot).id for _ in range(20)}
        assert len(ids) == 20
        assert all("ann" not in sid for sid in ids)

    @pytest.mark.parametrize("sid", ["", None, "unknown"])
    def test_get_unknown(self, session_repo, sid):
        assert session_repo.get(sid) is None

    def test_delete(self, session_repo):
        session = session_repo.create(SessionUser(name="Ann", email="ann@x.com", role=UserRole.USER))
        assert session_repo.delete(session.id) is True
        assert session_repo.get(session.id) is None
        assert session_repo.delete(session.id) is False

    def test_expired_session_is_absent_and_removed(self, db, session_repo):
        session = session_repo.create(SessionUser(name="Ann", email="ann@x.com", role=UserRole.USER))
        past = datetime.now(timezone.utc) - timedelta(seconds=1)
        db["sessions"].update_one({"_id": session.id}, {"$set": {"expires_at": past}})

        assert session_repo.get(session.id) is None
        assert db["sessions"].count_documents({"_id": session.id}) == 0

    def test_malformed_session_document_is_discarded(self, db, session_repo):
        db["sessions"].insert_one({"_id": "broken", "user": {"name": "Ann"}})
        assert session_repo.get("broken") is None
        assert db["sessions"].count_documents({"_id": "broken"}) == 0
