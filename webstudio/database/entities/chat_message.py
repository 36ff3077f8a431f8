"""
ChatMessage ORM Model
=====================

One exchange with the website chatbot, kept for analytics. ``session_id`` is a
free-text browser session key, not a foreign key.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from webstudio.database.config.connection_engine import declarativeBase
from webstudio.database.entities.columns import utc_now


class ChatMessage(declarativeBase):
    """ORM model for the `chat_messages` table."""

    __tablename__ = "chat_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    user_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    bot_response: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

    def __str__(self) -> str:
        return f"ChatMessage: session: {self.session_id}, time_created: {self.created_at}"
