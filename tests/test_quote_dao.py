import pytest

from webstudio.api.models import InsertQuote
from webstudio.database.daos import QuoteDao
from webstudio.database.exceptions import InvalidValueError, MissingReferenceError


def make_quote(**overrides):
    fields = {
        "first_name": "Ana",
        "last_name": "Silva",
        "email": "ana.silva@example.pt",
        "phone": "912345678",
        "service_type": "app",
        "business_segment": "Saúde",
    }
    fields.update(overrides)
    return InsertQuote(**fields)


@pytest.mark.repository
class TestQuoteDao:
    """Test suite for QuoteDao."""

    def test_anonymous_quote_gets_defaults(self, db_session):
        quote = QuoteDao().createQuote(db_session, make_quote())

        assert quote.id is not None
        assert quote.user_id is None
        assert quote.country_code == "+351"
        assert quote.status == "pending"
        assert quote.additionals is None

    def test_additionals_round_trip_as_list(self, db_session):
        dao = QuoteDao()
        quote = dao.createQuote(db_session, make_quote(additionals=["chat", "admin_panel"]))
        db_session.commit()
        db_session.expire_all()

        assert dao.getQuote(db_session, quote.id).additionals == ["chat", "admin_panel"]

    def test_quote_for_unknown_user_is_rejected(self, db_session):
        with pytest.raises(MissingReferenceError):
            QuoteDao().createQuote(db_session, make_quote(user_id=999))
        db_session.rollback()

    def test_quotes_by_user_newest_first(self, db_session, sample_user, other_user):
        dao = QuoteDao()
        first = dao.createQuote(db_session, make_quote(user_id=sample_user.id))
        dao.createQuote(db_session, make_quote(user_id=other_user.id))
        second = dao.createQuote(db_session, make_quote(user_id=sample_user.id))

        assert [q.id for q in dao.getQuotesByUser(db_session, sample_user.id)] == [second.id, first.id]
        assert len(dao.getAllQuotes(db_session)) == 3
        assert dao.getQuotesByUser(db_session, 12345) == []

    def test_update_status(self, db_session):
        dao = QuoteDao()
        quote = dao.createQuote(db_session, make_quote())

        updated = dao.updateQuoteStatus(db_session, quote.id, "in_progress")

        assert updated.status == "in_progress"
        assert dao.getQuote(db_session, quote.id).status == "in_progress"

    def test_update_status_of_missing_quote(self, db_session):
        assert QuoteDao().updateQuoteStatus(db_session, 31, "completed") is None

    def test_unknown_status_hits_check_constraint(self, db_session):
        dao = QuoteDao()
        quote = dao.createQuote(db_session, make_quote())
        with pytest.raises(InvalidValueError) as exc_info:
            dao.updateQuoteStatus(db_session, quote.id, "archived")
        assert "status" in exc_info.value.constraint
        db_session.rollback()

    def test_get_missing_quote(self, db_session):
        assert QuoteDao().getQuote(db_session, 1) is None
