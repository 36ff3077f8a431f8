"""
Subscription DAO

Purpose
-------
Data-access layer for recurring `Subscription` rows:
- Create, read one, list per user or all (newest first)
- List all subscriptions with their subscriber attached
- Update the provider status

Design
------
`getAllSubscriptionsWithUsers` runs a single LEFT OUTER JOIN between
`subscriptions` and `users`, so a subscription whose user cannot be resolved
is still returned with `user=None`.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import (
    InsertSubscription,
    SubscriptionRead,
    SubscriptionStatus,
    SubscriptionWithUser,
    UserRead,
)
from webstudio.database.entities.subscription import Subscription
from webstudio.database.entities.user import User
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class SubscriptionDao:
    """
    Data Access Object (DAO) for managing Subscription entities.
    """

    def createSubscription(self, session: Session, subscription: InsertSubscription) -> Subscription:
        """
        Insert a subscription.

        Raises
        ------
        MissingReferenceError
            If `user_id` does not reference an existing user.
        """
        entity = Subscription(**subscription.model_dump())
        session.add(entity)
        flush_or_raise(session, "SubscriptionDao.createSubscription", refresh=entity)
        return entity

    def getSubscription(self, session: Session, subscription_id: int) -> Optional[Subscription]:
        try:
            return session.get(Subscription, subscription_id)
        except SQLAlchemyError as e:
            logger.error("Error in SubscriptionDao.getSubscription. Error Message: %s", e)
            raise

    def getSubscriptionsByUser(self, session: Session, user_id: int) -> List[Subscription]:
        try:
            return (
                session.query(Subscription)
                .filter(Subscription.user_id == user_id)
                .order_by(desc(Subscription.created_at), desc(Subscription.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in SubscriptionDao.getSubscriptionsByUser. Error Message: %s", e)
            raise

    def getAllSubscriptions(self, session: Session) -> List[Subscription]:
        try:
            return (
                session.query(Subscription)
                .order_by(desc(Subscription.created_at), desc(Subscription.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in SubscriptionDao.getAllSubscriptions. Error Message: %s", e)
            raise

    def getAllSubscriptionsWithUsers(self, session: Session) -> List[SubscriptionWithUser]:
        """
        All subscriptions, newest first, joined with their subscriber.

        Returns
        -------
        list[SubscriptionWithUser]
            `user` is None when the join finds no matching user.
        """
        try:
            rows = (
                session.query(Subscription, User)
                .outerjoin(User, Subscription.user_id == User.id)
                .order_by(desc(Subscription.created_at), desc(Subscription.id))
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in SubscriptionDao.getAllSubscriptionsWithUsers. Error Message: %s", e)
            raise
        return [
            SubscriptionWithUser(
                **SubscriptionRead.model_validate(subscription).model_dump(),
                user=UserRead.model_validate(user) if user is not None else None,
            )
            for subscription, user in rows
        ]

    def updateSubscriptionStatus(
        self, session: Session, subscription_id: int, status: SubscriptionStatus
    ) -> Optional[Subscription]:
        """Set the provider status of a subscription; None if the id does not exist."""
        subscription = self.getSubscription(session, subscription_id)
        if subscription is None:
            return None
        subscription.status = status
        flush_or_raise(session, "SubscriptionDao.updateSubscriptionStatus")
        return subscription
