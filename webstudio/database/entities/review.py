"""
Review ORM Model
================

A customer rating (1–5) with an optional comment. Reviews are hidden until an
admin approves them; approval only happens through ``ReviewDao.approveReview``.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import utc_now


class Review(declarativeBase):
    """
    ORM model for the `reviews` table.

    Attributes
    ----------
    id : int
        Primary key.
    user_id : int
        Author (required foreign key to `users.id`).
    rating : int
        Integer rating between 1 and 5.
    comment : str | None
        Optional comment.
    is_approved : bool
        Moderation flag, False on creation.
    created_at : datetime
        Insertion time (UTC).
    """

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_approved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"Review: id:{self.id}, user: {self.user_id}, rating: {self.rating}, approved: {self.is_approved}"
