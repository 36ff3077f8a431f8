from decimal import Decimal

import pytest

from webstudio.api.models import InsertChatMessage, InsertMonthlyReport
from webstudio.database.daos import ChatMessageDao, MonthlyReportDao
from webstudio.database.exceptions import DuplicateValueError


@pytest.mark.repository
class TestMonthlyReportDao:
    """Test suite for MonthlyReportDao."""

    def test_counters_default_to_zero(self, db_session):
        report = MonthlyReportDao().createMonthlyReport(db_session, InsertMonthlyReport(month=9, year=2026))

        assert report.total_revenue == Decimal("0")
        assert report.total_clients == 0
        assert report.active_subscriptions == 0
        assert report.past_due_subscriptions == 0
        assert report.new_quotes == 0
        assert report.completed_projects == 0

    def test_get_by_period(self, db_session):
        dao = MonthlyReportDao()
        dao.createMonthlyReport(
            db_session, InsertMonthlyReport(month=8, year=2026, total_revenue=Decimal("1250.50"), new_quotes=7)
        )

        report = dao.getMonthlyReport(db_session, 8, 2026)
        assert report.total_revenue == Decimal("1250.50")
        assert report.new_quotes == 7
        assert dao.getMonthlyReport(db_session, 8, 2025) is None

    def test_one_report_per_period(self, db_session):
        dao = MonthlyReportDao()
        dao.createMonthlyReport(db_session, InsertMonthlyReport(month=1, year=2026))
        with pytest.raises(DuplicateValueError):
            dao.createMonthlyReport(db_session, InsertMonthlyReport(month=1, year=2026))
        db_session.rollback()

    def test_all_reports_latest_period_first(self, db_session):
        dao = MonthlyReportDao()
        for month, year in [(12, 2025), (2, 2026), (11, 2025), (1, 2026)]:
            dao.createMonthlyReport(db_session, InsertMonthlyReport(month=month, year=year))

        periods = [(r.month, r.year) for r in dao.getAllMonthlyReports(db_session)]
        assert periods == [(2, 2026), (1, 2026), (12, 2025), (11, 2025)]


@pytest.mark.repository
class TestChatMessageDao:
    """Test suite for ChatMessageDao."""

    def test_session_history_oldest_first(self, db_session):
        dao = ChatMessageDao()
        dao.createChatMessage(db_session, InsertChatMessage(session_id="s-1", user_message="Olá"))
        dao.createChatMessage(db_session, InsertChatMessage(session_id="s-2", user_message="Hi"))
        dao.createChatMessage(
            db_session, InsertChatMessage(session_id="s-1", user_message="Preço?", bot_response="Depende do projeto")
        )

        history = dao.getChatMessagesBySession(db_session, "s-1")

        assert [m.user_message for m in history] == ["Olá", "Preço?"]
        assert history[1].bot_response == "Depende do projeto"
        assert dao.getChatMessagesBySession(db_session, "s-404") == []
