"""
Quote DAO

Purpose
-------
Data-access layer for `Quote` requests:
- Create a quote from a complete `InsertQuote`
- Read one quote, all quotes, or the quotes of one user (newest first)
- Move a quote through its status workflow

Design
------
- Requires an active SQLAlchemy `Session` supplied by the caller.
- Status updates fetch the row, mutate `status` and flush; the database CHECK
  constraint rejects values outside pending / in_progress / completed / rejected.
- Quotes are never deleted.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertQuote, QuoteStatus
from webstudio.database.entities.quote import Quote
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class QuoteDao:
    """
    Data Access Object (DAO) for managing Quote entities.
    """

    def createQuote(self, session: Session, quote: InsertQuote) -> Quote:
        """
        Insert a new quote request.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        quote : InsertQuote
            Complete quote fields (usually composed from the five form steps).

        Returns
        -------
        Quote
            The inserted row.

        Raises
        ------
        MissingReferenceError
            If `user_id` does not reference an existing user.
        """
        entity = Quote(**quote.model_dump())
        session.add(entity)
        flush_or_raise(session, "QuoteDao.createQuote", refresh=entity)
        return entity

    def getQuote(self, session: Session, quote_id: int) -> Optional[Quote]:
        try:
            return session.get(Quote, quote_id)
        except SQLAlchemyError as e:
            logger.error("Error in QuoteDao.getQuote. Error Message: %s", e)
            raise

    def getAllQuotes(self, session: Session) -> List[Quote]:
        """All quotes, newest first."""
        try:
            return (
                session.query(Quote)
                .order_by(desc(Quote.created_at), desc(Quote.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in QuoteDao.getAllQuotes. Error Message: %s", e)
            raise

    def getQuotesByUser(self, session: Session, user_id: int) -> List[Quote]:
        """Quotes submitted by one user, newest first."""
        try:
            return (
                session.query(Quote)
                .filter(Quote.user_id == user_id)
                .order_by(desc(Quote.created_at), desc(Quote.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in QuoteDao.getQuotesByUser. Error Message: %s", e)
            raise

    def updateQuoteStatus(self, session: Session, quote_id: int, status: QuoteStatus) -> Optional[Quote]:
        """
        Set the status of a quote.

        Returns
        -------
        Quote | None
            The updated quote, or None if the id does not exist.

        Raises
        ------
        InvalidValueError
            If `status` is not one of the allowed values.
        """
        quote = self.getQuote(session, quote_id)
        if quote is None:
            return None
        quote.status = status
        flush_or_raise(session, "QuoteDao.updateQuoteStatus")
        return quote
