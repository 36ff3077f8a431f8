"""
PaymentCode ORM Model
=====================

Six-character single-use codes handed out to clients for ad-hoc payments.

Key features
~~~~~~~~~~~~
- Unique ``code`` (varchar(6)) and a decimal ``amount``
- Usage metadata (``used_by_email``, ``used_by_name``, ``stripe_payment_id``,
  ``used_at``) written together with ``is_used`` by a single conditional
  update in ``PaymentCodeDao.markPaymentCodeAsUsed``
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import PAYMENT_CODE_LENGTH, Money, utc_now


class PaymentCode(declarativeBase):
    """
    ORM model for the `payment_codes` table.

    Attributes
    ----------
    id : int
        Primary key.
    code : str
        Unique six-character code.
    amount : Decimal
        Amount charged when the code is redeemed (2 decimal places).
    description : str | None
        What the payment is for.
    is_used : bool
        False until the code is redeemed.
    used_by_email, used_by_name : str | None
        Redeemer details.
    stripe_payment_id : str | None
        External payment reference of the redemption.
    created_at : datetime
        Insertion time (UTC).
    used_at : datetime | None
        Redemption time (UTC).
    """

    __tablename__ = "payment_codes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(PAYMENT_CODE_LENGTH), unique=True, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_used: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    used_by_email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    used_by_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    stripe_payment_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    used_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __str__(self) -> str:
        return f"PaymentCode: id:{self.id}, code: {self.code}, amount: {self.amount}, used: {self.is_used}"
