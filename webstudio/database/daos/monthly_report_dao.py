"""
MonthlyReport DAO

Purpose
-------
Create and read `MonthlyReport` rows. A period (month, year) can only be
stored once: a second `createMonthlyReport` for the same period raises
`DuplicateValueError` (constraint `uq_monthly_reports_period`).
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertMonthlyReport
from webstudio.database.entities.monthly_report import MonthlyReport
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class MonthlyReportDao:
    """
    Data Access Object (DAO) for managing MonthlyReport entities.
    """

    def createMonthlyReport(self, session: Session, report: InsertMonthlyReport) -> MonthlyReport:
        entity = MonthlyReport(**report.model_dump())
        session.add(entity)
        flush_or_raise(session, "MonthlyReportDao.createMonthlyReport", refresh=entity)
        return entity

    def getMonthlyReport(self, session: Session, month: int, year: int) -> Optional[MonthlyReport]:
        """
        Fetch the report for one period.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        month : int
            Month number, 1–12.
        year : int
            Four-digit year.

        Returns
        -------
        MonthlyReport | None
            The report, or None if that period has no report.
        """
        try:
            return (
                session.query(MonthlyReport)
                .filter(MonthlyReport.month == month)
                .filter(MonthlyReport.year == year)
                .one_or_none()
            )
        except SQLAlchemyError as e:
            logger.error("Error in MonthlyReportDao.getMonthlyReport. Error Message: %s", e)
            raise

    def getAllMonthlyReports(self, session: Session) -> List[MonthlyReport]:
        """All reports, latest period first."""
        try:
            return (
                session.query(MonthlyReport)
                .order_by(desc(MonthlyReport.year), desc(MonthlyReport.month))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in MonthlyReportDao.getAllMonthlyReports. Error Message: %s", e)
            raise
