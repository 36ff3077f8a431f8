import pytest

from webstudio.api.models import InsertUser, UserUpdate
from webstudio.database.daos import UserDao
from webstudio.database.exceptions import DuplicateValueError


@pytest.mark.repository
class TestUserDao:
    """Test suite for UserDao."""

    def test_create_user_populates_generated_fields(self, db_session):
        dao = UserDao()
        user = dao.createUser(
            db_session,
            InsertUser(email="rita@example.pt", username="rita", display_name="Rita"),
        )

        assert user.id is not None
        assert user.created_at is not None
        assert user.is_admin is False
        assert user.google_id is None
        assert dao.getUser(db_session, user.id) is user

    def test_ids_are_never_reused(self, db_session, sample_user):
        dao = UserDao()
        second = dao.createUser(
            db_session,
            InsertUser(email="rui@example.pt", username="rui", display_name="Rui"),
        )
        assert second.id != sample_user.id

    def test_get_missing_user_returns_none(self, db_session):
        assert UserDao().getUser(db_session, 4242) is None

    def test_lookup_by_email_and_google_id(self, db_session, sample_user):
        dao = UserDao()
        assert dao.getUserByEmail(db_session, "ana.silva@example.pt").id == sample_user.id
        assert dao.getUserByGoogleId(db_session, "google-1001").id == sample_user.id
        assert dao.getUserByEmail(db_session, "nobody@example.pt") is None
        assert dao.getUserByGoogleId(db_session, "google-9999") is None

    def test_duplicate_email_is_identified(self, db_session, sample_user):
        with pytest.raises(DuplicateValueError) as exc_info:
            UserDao().createUser(
                db_session,
                InsertUser(email="ana.silva@example.pt", username="ana2", display_name="Ana"),
            )
        assert "email" in exc_info.value.constraint
        db_session.rollback()

    def test_duplicate_username_is_identified(self, db_session, sample_user):
        with pytest.raises(DuplicateValueError) as exc_info:
            UserDao().createUser(
                db_session,
                InsertUser(email="outra@example.pt", username="anasilva", display_name="Ana"),
            )
        assert "username" in exc_info.value.constraint
        db_session.rollback()

    def test_update_user_changes_only_supplied_fields(self, db_session, sample_user):
        dao = UserDao()
        updated = dao.updateUser(
            db_session, sample_user.id, UserUpdate(avatar_url="https://cdn.example.pt/ana.png")
        )

        assert updated.avatar_url == "https://cdn.example.pt/ana.png"
        assert updated.display_name == "Ana Silva"
        assert updated.email == "ana.silva@example.pt"

    def test_update_missing_user_returns_none(self, db_session):
        assert UserDao().updateUser(db_session, 77, UserUpdate(is_admin=True)) is None

    def test_get_all_users_newest_first(self, db_session, sample_user, other_user):
        users = UserDao().getAllUsers(db_session)
        assert [u.id for u in users] == [other_user.id, sample_user.id]

    def test_get_all_users_empty(self, db_session):
        assert UserDao().getAllUsers(db_session) == []
