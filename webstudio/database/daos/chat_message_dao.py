"""
ChatMessage DAO

Stores chatbot exchanges and returns them per session in chronological order,
so a conversation can be reconstructed.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertChatMessage
from webstudio.database.entities.chat_message import ChatMessage
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class ChatMessageDao:
    """
    Data Access Object (DAO) for managing ChatMessage entities.
    """

    def createChatMessage(self, session: Session, message: InsertChatMessage) -> ChatMessage:
        entity = ChatMessage(**message.model_dump())
        session.add(entity)
        flush_or_raise(session, "ChatMessageDao.createChatMessage", refresh=entity)
        return entity

    def getChatMessagesBySession(self, session: Session, session_id: str) -> List[ChatMessage]:
        """Messages of one chat session, oldest first."""
        try:
            return (
                session.query(ChatMessage)
                .filter(ChatMessage.session_id == session_id)
                .order_by(ChatMessage.created_at, ChatMessage.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in ChatMessageDao.getChatMessagesBySession. Error Message: %s", e)
            raise
