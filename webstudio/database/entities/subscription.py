"""
Subscription ORM Model
======================

Recurring maintenance plans billed by the payment provider. Status strings
mirror the provider's subscription states.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import (
    SUBSCRIPTION_PLAN_TYPES,
    SUBSCRIPTION_STATUSES,
    Money,
    one_of,
    utc_now,
)


class Subscription(declarativeBase):
    """
    ORM model for the `subscriptions` table.

    Attributes
    ----------
    id : int
        Primary key.
    user_id : int
        Subscriber (required foreign key to `users.id`).
    stripe_subscription_id, stripe_customer_id : str
        Provider references.
    plan_type : str
        "site_maintenance" or "app_maintenance".
    amount : Decimal
        Recurring amount (2 decimal places).
    status : str
        "active", "past_due", "canceled" or "unpaid".
    current_period_start, current_period_end : datetime | None
        Current billing period.
    created_at : datetime
        Insertion time (UTC).
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        CheckConstraint(one_of("plan_type", SUBSCRIPTION_PLAN_TYPES), name="plan_type"),
        CheckConstraint(one_of("status", SUBSCRIPTION_STATUSES), name="status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    stripe_subscription_id: Mapped[str] = mapped_column(Text, nullable=False)
    stripe_customer_id: Mapped[str] = mapped_column(Text, nullable=False)
    plan_type: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False)
    current_period_start: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    current_period_end: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"Subscription: id:{self.id}, user: {self.user_id}, plan: {self.plan_type}, status: {self.status}"
