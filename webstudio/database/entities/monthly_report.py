"""
MonthlyReport ORM Model
=======================

Aggregate counters for one calendar month. ``(month, year)`` is unique, so a
second report for the same period is rejected with ``DuplicateValueError``.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import Money, utc_now


class MonthlyReport(declarativeBase):
    """ORM model for the `monthly_reports` table."""

    __tablename__ = "monthly_reports"
    __table_args__ = (
        UniqueConstraint("month", "year", name="uq_monthly_reports_period"),
        CheckConstraint("month BETWEEN 1 AND 12", name="month_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    total_revenue: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0"))
    total_clients: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active_subscriptions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    past_due_subscriptions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    new_quotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed_projects: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"MonthlyReport: {self.month:02d}/{self.year}, revenue: {self.total_revenue}"
