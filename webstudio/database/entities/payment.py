"""
Payment ORM Model
=================

One-time payments recorded from the payment provider. The provider reference
(``stripe_payment_id``) and the status string are stored as received.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import (
    DEFAULT_CURRENCY,
    PAYMENT_STATUSES,
    PAYMENT_TYPES,
    Money,
    one_of,
    utc_now,
)


class Payment(declarativeBase):
    """ORM model for the `payments` table."""

    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint(one_of("status", PAYMENT_STATUSES), name="status"),
        CheckConstraint(one_of("payment_type", PAYMENT_TYPES), name="payment_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("users.id"), nullable=True)
    stripe_payment_id: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    currency: Mapped[str] = mapped_column(Text, nullable=False, default=DEFAULT_CURRENCY)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    payment_type: Mapped[str] = mapped_column(Text, nullable=False)
    payment_code_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("payment_codes.id"), nullable=True)
    """Code that authorized this payment, for ``code_payment`` rows."""
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"Payment: id:{self.id}, {self.amount} {self.currency}, type: {self.payment_type}, status: {self.status}"
