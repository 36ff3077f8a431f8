"""
Quote ORM Model
===============

A quote request collected by the five-step form on the website. Submissions may
be anonymous (``user_id`` is nullable).

Key features
~~~~~~~~~~~~
- Contact fields (name parts, email, phone, country code defaulting to "+351")
- Service type: ``website`` or ``app``
- Free-text business segment and optional additional-feature tags
  (e.g. ``payment_online``, ``scheduling``, ``admin_panel``, ``chat``)
- Status workflow string: ``pending`` → ``in_progress`` → ``completed`` | ``rejected``
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import (
    DEFAULT_COUNTRY_CODE,
    QUOTE_SERVICE_TYPES,
    QUOTE_STATUSES,
    TextArray,
    one_of,
    utc_now,
)


class Quote(declarativeBase):
    """
    ORM model for the `quotes` table.

    Attributes
    ----------
    id : int
        Primary key.
    user_id : int | None
        Owning user, when the visitor was signed in.
    first_name, last_name, email, phone : str
        Contact details.
    country_code : str
        Phone country prefix, defaults to "+351".
    service_type : str
        "website" or "app".
    business_segment : str
        Free-text business segment.
    additionals : list[str] | None
        Additional feature tags.
    project_description : str | None
        Free-text description.
    status : str
        "pending", "in_progress", "completed" or "rejected".
    created_at : datetime
        Insertion time (UTC).
    """

    __tablename__ = "quotes"
    __table_args__ = (
        CheckConstraint(one_of("service_type", QUOTE_SERVICE_TYPES), name="service_type"),
        CheckConstraint(one_of("status", QUOTE_STATUSES), name="status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("users.id"), nullable=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    country_code: Mapped[str] = mapped_column(Text, nullable=False, default=DEFAULT_COUNTRY_CODE)
    service_type: Mapped[str] = mapped_column(Text, nullable=False)
    business_segment: Mapped[str] = mapped_column(Text, nullable=False)
    additionals: Mapped[Optional[List[str]]] = mapped_column(TextArray, nullable=True)
    project_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="pending")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"Quote: id:{self.id}, {self.first_name} {self.last_name}, service: {self.service_type}, status: {self.status}"
