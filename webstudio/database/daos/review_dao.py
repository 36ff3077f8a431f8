"""
Review DAO

Purpose
-------
Data-access layer for the `Review` entity:
- Create reviews (always unapproved)
- Read one review, all reviews, or one user's reviews (newest first)
- List approved reviews with their author attached
- Approve and delete reviews

Design
------
- `approveReview` is the only way `is_approved` changes; it is idempotent.
- `getApprovedReviews` fetches the approved reviews, then looks up each author
  by id. The two reads are not atomic; an author that no longer exists yields
  `user=None` instead of failing the whole listing.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertReview, ReviewRead, ReviewWithUser, UserRead
from webstudio.database.entities.review import Review
from webstudio.database.entities.user import User
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class ReviewDao:
    """
    Data Access Object (DAO) for managing Review entities.
    """

    def createReview(self, session: Session, review: InsertReview) -> Review:
        """
        Insert a new, unapproved review.

        Raises
        ------
        MissingReferenceError
            If `user_id` does not reference an existing user.
        InvalidValueError
            If the rating is outside 1–5 (database check).
        """
        entity = Review(**review.model_dump())
        session.add(entity)
        flush_or_raise(session, "ReviewDao.createReview", refresh=entity)
        return entity

    def getReview(self, session: Session, review_id: int) -> Optional[Review]:
        try:
            return session.get(Review, review_id)
        except SQLAlchemyError as e:
            logger.error("Error in ReviewDao.getReview. Error Message: %s", e)
            raise

    def getAllReviews(self, session: Session) -> List[Review]:
        try:
            return (
                session.query(Review)
                .order_by(desc(Review.created_at), desc(Review.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in ReviewDao.getAllReviews. Error Message: %s", e)
            raise

    def getReviewsByUser(self, session: Session, user_id: int) -> List[Review]:
        try:
            return (
                session.query(Review)
                .filter(Review.user_id == user_id)
                .order_by(desc(Review.created_at), desc(Review.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in ReviewDao.getReviewsByUser. Error Message: %s", e)
            raise

    def getApprovedReviews(self, session: Session) -> List[ReviewWithUser]:
        """
        Approved reviews, newest first, each with its author.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.

        Returns
        -------
        list[ReviewWithUser]
            One entry per approved review; `user` is None when the author row
            cannot be found.
        """
        try:
            reviews = (
                session.query(Review)
                .filter(Review.is_approved.is_(True))
                .order_by(desc(Review.created_at), desc(Review.id))
                .all()
            )
            result = []
            for review in reviews:
                author = session.get(User, review.user_id)
                if author is None:
                    logger.warning("Review %s references missing user %s", review.id, review.user_id)
                result.append(
                    ReviewWithUser(
                        **ReviewRead.model_validate(review).model_dump(),
                        user=UserRead.model_validate(author) if author is not None else None,
                    )
                )
            return result
        except SQLAlchemyError as e:
            logger.error("Error in ReviewDao.getApprovedReviews. Error Message: %s", e)
            raise

    def approveReview(self, session: Session, review_id: int) -> Optional[Review]:
        """
        Mark a review as approved. Other fields are left unchanged.

        Returns
        -------
        Review | None
            The approved review, or None if the id does not exist.
        """
        review = self.getReview(session, review_id)
        if review is None:
            return None
        review.is_approved = True
        flush_or_raise(session, "ReviewDao.approveReview")
        return review

    def deleteReview(self, session: Session, review_id: int) -> bool:
        """Physically delete a review; True only if a row was removed."""
        try:
            deleted = session.query(Review).filter(Review.id == review_id).delete()
        except SQLAlchemyError as e:
            logger.error("Error in ReviewDao.deleteReview. Error Message: %s", e)
            raise
        return deleted > 0
