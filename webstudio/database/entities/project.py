"""
Project ORM Model
=================

A portfolio item shown on the public site, sorted by ``display_order``.
Inactive projects stay in the table but are hidden by ``getActiveProjects``.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import PROJECT_MEDIA_TYPES, one_of, utc_now


class Project(declarativeBase):
    """ORM model for the `projects` table."""

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(one_of("media_type", PROJECT_MEDIA_TYPES), name="media_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    project_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    media_type: Mapped[str] = mapped_column(Text, nullable=False, default="image")
    """Kind of media behind ``image_url``: "image" or "video"."""
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    """Ascending sort key used by the portfolio listing."""
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"Project: id:{self.id}, title: {self.title}, order: {self.display_order}"
