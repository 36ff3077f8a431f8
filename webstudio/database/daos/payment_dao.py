"""
Payment DAO

Purpose
-------
Data-access layer for one-time `Payment` rows recorded from the payment
provider. Status strings are stored as received (pending / succeeded / failed);
payments are never deleted.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertPayment, PaymentStatus
from webstudio.database.entities.payment import Payment
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class PaymentDao:
    """
    Data Access Object (DAO) for managing Payment entities.
    """

    def createPayment(self, session: Session, payment: InsertPayment) -> Payment:
        """
        Insert a payment.

        Raises
        ------
        MissingReferenceError
            If `user_id` or `payment_code_id` does not reference an existing row.
        """
        entity = Payment(**payment.model_dump())
        session.add(entity)
        flush_or_raise(session, "PaymentDao.createPayment", refresh=entity)
        return entity

    def getPayment(self, session: Session, payment_id: int) -> Optional[Payment]:
        try:
            return session.get(Payment, payment_id)
        except SQLAlchemyError as e:
            logger.error("Error in PaymentDao.getPayment. Error Message: %s", e)
            raise

    def getPaymentsByUser(self, session: Session, user_id: int) -> List[Payment]:
        try:
            return (
                session.query(Payment)
                .filter(Payment.user_id == user_id)
                .order_by(desc(Payment.created_at), desc(Payment.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentDao.getPaymentsByUser. Error Message: %s", e)
            raise

    def getAllPayments(self, session: Session) -> List[Payment]:
        try:
            return (
                session.query(Payment)
                .order_by(desc(Payment.created_at), desc(Payment.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentDao.getAllPayments. Error Message: %s", e)
            raise

    def updatePaymentStatus(self, session: Session, payment_id: int, status: PaymentStatus) -> Optional[Payment]:
        """Set the provider status of a payment; None if the id does not exist."""
        payment = self.getPayment(session, payment_id)
        if payment is None:
            return None
        payment.status = status
        flush_or_raise(session, "PaymentDao.updatePaymentStatus")
        return payment
