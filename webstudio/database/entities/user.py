"""
User ORM Model
==============

The ``User`` ORM model represents a site account created through Google OAuth.
It maps to the ``users`` table.

Key features
~~~~~~~~~~~~
- Auto-incrementing integer primary key (``id``)
- Unique Google identity token (``google_id``, nullable), email and username
- Display name and optional avatar URL
- Admin flag (stored only; enforcement happens in the request layer)

Users own quotes, reviews, payments and subscriptions through foreign keys on
those tables. There is no delete operation for users.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import utc_now


class User(declarativeBase):
    """
    ORM model for the `users` table.

    Attributes
    ----------
    id : int
        Primary key.
    google_id : str | None
        External identity token from Google OAuth (unique when present).
    email : str
        Email address (unique).
    username : str
        Username (unique).
    display_name : str
        Name shown on reviews and in the admin panel.
    avatar_url : str | None
        Profile picture URL.
    is_admin : bool
        Admin flag, defaults to False.
    created_at : datetime
        Insertion time (UTC).
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    google_id: Mapped[Optional[str]] = mapped_column(Text, unique=True, nullable=True)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    display_name: Mapped[str] = mapped_column(Text, nullable=False)
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"User: id:{self.id}, username: {self.username}, email: {self.email}"
