"""
User DAO

Purpose
-------
Thin data-access layer for the `User` ORM entity. Provides:
- Creation from an OAuth profile (`InsertUser`)
- Lookup by id, email or Google identity
- Partial updates (`UserUpdate`)
- Listing, newest first

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller.
- Writes are flushed (so generated ids and defaults are available) but never
  committed here; commit/rollback belongs to the caller or `@transactional`.
- There is no delete operation for users.

Usage
-----
.. code-block:: python

    from webstudio.database.helpers.transactionManagement import SessionFactory
    from webstudio.api.models import InsertUser, UserUpdate
    from webstudio.database.daos.user_dao import UserDao

    dao = UserDao()
    with SessionFactory() as session:
        user = dao.createUser(session, InsertUser(
            google_id="1093", email="ana@example.pt", username="ana", display_name="Ana Silva",
        ))
        session.commit()

        dao.getUserByEmail(session, "ana@example.pt")      # -> User
        dao.getUser(session, 9999)                         # -> None
        dao.updateUser(session, user.id, UserUpdate(avatar_url="https://cdn.example.pt/ana.png"))

Error Handling
--------------
- Unique violations (email, username, google_id) raise `DuplicateValueError`
  with the constraint identified.
- Query failures are logged and re-raised unchanged.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertUser, UserUpdate
from webstudio.database.entities.user import User
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class UserDao:
    """
    Data Access Object (DAO) for managing User entities.
    """

    def getUser(self, session: Session, user_id: int) -> Optional[User]:
        """
        Fetch a user by id.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        user_id : int
            Primary key of the user.

        Returns
        -------
        User | None
            The user, or None if no row has that id.
        """
        try:
            return session.get(User, user_id)
        except SQLAlchemyError as e:
            logger.error("Error in UserDao.getUser. Error Message: %s", e)
            raise

    def getUserByEmail(self, session: Session, email: str) -> Optional[User]:
        """Fetch a user by email, or None."""
        try:
            return session.query(User).filter(User.email == email).one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error in UserDao.getUserByEmail. Error Message: %s", e)
            raise

    def getUserByGoogleId(self, session: Session, google_id: str) -> Optional[User]:
        """Fetch a user by Google OAuth identity, or None."""
        try:
            return session.query(User).filter(User.google_id == google_id).one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error in UserDao.getUserByGoogleId. Error Message: %s", e)
            raise

    def createUser(self, session: Session, user: InsertUser) -> User:
        """
        Insert a new user.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        user : InsertUser
            Validated creation fields.

        Returns
        -------
        User
            The inserted row with generated `id` and `created_at`.

        Raises
        ------
        DuplicateValueError
            If the email, username or Google id is already taken.
        """
        entity = User(**user.model_dump())
        session.add(entity)
        flush_or_raise(session, "UserDao.createUser", refresh=entity)
        logger.debug("Created user %s", entity.id)
        return entity

    def updateUser(self, session: Session, user_id: int, changes: UserUpdate) -> Optional[User]:
        """
        Apply a partial update to a user.

        Only the fields explicitly set on `changes` are written.

        Returns
        -------
        User | None
            The updated user, or None if the id does not exist.

        Raises
        ------
        DuplicateValueError
            If the new email, username or Google id is already taken.
        """
        user = self.getUser(session, user_id)
        if user is None:
            return None
        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        flush_or_raise(session, "UserDao.updateUser")
        return user

    def getAllUsers(self, session: Session) -> List[User]:
        """All users, newest first."""
        try:
            return (
                session.query(User)
                .order_by(desc(User.created_at), desc(User.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in UserDao.getAllUsers. Error Message: %s", e)
            raise
