"""
PaymentCode DAO

Purpose
-------
Data-access layer for single-use `PaymentCode` rows:
- Create codes (always unused)
- Look up by code, list all (newest first) or used ones (latest use first)
- Redeem a code (`markPaymentCodeAsUsed`)
- Delete codes

Redemption
----------
`markPaymentCodeAsUsed` issues a single conditional UPDATE::

    UPDATE payment_codes
       SET is_used = true, used_by_email = ?, used_by_name = ?,
           stripe_payment_id = ?, used_at = now
     WHERE code = ? AND is_used = false

so two concurrent redemptions of one code cannot both succeed. When no row is
affected, the code is looked up again to tell "unknown code" (returns None)
from "already used" (`PaymentCodeAlreadyUsedError`).
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, false
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertPaymentCode
from webstudio.database.entities.columns import utc_now
from webstudio.database.entities.payment_code import PaymentCode
from webstudio.database.exceptions import PaymentCodeAlreadyUsedError
from webstudio.database.helpers.integrity import flush_or_raise, translate_integrity_error

logger = logging.getLogger(__name__)


class PaymentCodeDao:
    """
    Data Access Object (DAO) for managing PaymentCode entities.
    """

    def createPaymentCode(self, session: Session, payment_code: InsertPaymentCode) -> PaymentCode:
        """
        Insert a new, unused payment code.

        Raises
        ------
        DuplicateValueError
            If the code already exists.
        """
        entity = PaymentCode(**payment_code.model_dump())
        session.add(entity)
        flush_or_raise(session, "PaymentCodeDao.createPaymentCode", refresh=entity)
        return entity

    def getPaymentCodeByCode(self, session: Session, code: str) -> Optional[PaymentCode]:
        try:
            return session.query(PaymentCode).filter(PaymentCode.code == code).one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.getPaymentCodeByCode. Error Message: %s", e)
            raise

    def getAllPaymentCodes(self, session: Session) -> List[PaymentCode]:
        try:
            return (
                session.query(PaymentCode)
                .order_by(desc(PaymentCode.created_at), desc(PaymentCode.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.getAllPaymentCodes. Error Message: %s", e)
            raise

    def getUsedPaymentCodes(self, session: Session) -> List[PaymentCode]:
        """Redeemed codes, most recently used first."""
        try:
            return (
                session.query(PaymentCode)
                .filter(PaymentCode.is_used.is_(True))
                .order_by(desc(PaymentCode.used_at), desc(PaymentCode.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.getUsedPaymentCodes. Error Message: %s", e)
            raise

    def markPaymentCodeAsUsed(
        self, session: Session, code: str, email: str, name: str, stripe_payment_id: str
    ) -> Optional[PaymentCode]:
        """
        Redeem a payment code.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        code : str
            The six-character code.
        email : str
            Redeemer email.
        name : str
            Redeemer name.
        stripe_payment_id : str
            External payment reference of the redemption.

        Returns
        -------
        PaymentCode | None
            The redeemed code with all usage fields set, or None if the code
            does not exist.

        Raises
        ------
        PaymentCodeAlreadyUsedError
            If the code exists but was already redeemed.
        """
        try:
            updated = (
                session.query(PaymentCode)
                .filter(PaymentCode.code == code, PaymentCode.is_used == false())
                .update(
                    {
                        PaymentCode.is_used: True,
                        PaymentCode.used_by_email: email,
                        PaymentCode.used_by_name: name,
                        PaymentCode.stripe_payment_id: stripe_payment_id,
                        PaymentCode.used_at: utc_now(),
                    },
                    synchronize_session=False,
                )
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.markPaymentCodeAsUsed. Error Message: %s", e)
            raise

        if updated == 0:
            if self.getPaymentCodeByCode(session, code) is None:
                return None
            logger.warning("Rejected second redemption of payment code %s", code)
            raise PaymentCodeAlreadyUsedError(code)

        try:
            return (
                session.query(PaymentCode)
                .filter(PaymentCode.code == code)
                .populate_existing()
                .one()
            )
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.markPaymentCodeAsUsed. Error Message: %s", e)
            raise

    def deletePaymentCode(self, session: Session, payment_code_id: int) -> bool:
        """
        Physically delete a payment code.

        Returns
        -------
        bool
            True if a row was removed, False if the id did not exist.

        Raises
        ------
        MissingReferenceError
            If a payment still references the code.
        """
        try:
            deleted = session.query(PaymentCode).filter(PaymentCode.id == payment_code_id).delete()
        except IntegrityError as e:
            logger.error("Error in PaymentCodeDao.deletePaymentCode. Error Message: %s", e.orig)
            raise translate_integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error("Error in PaymentCodeDao.deletePaymentCode. Error Message: %s", e)
            raise
        return deleted > 0
