from datetime import datetime
from decimal import Decimal

import pytest

from webstudio.api.models import InsertPayment, InsertSubscription, SubscriptionWithUser
from webstudio.database.daos import PaymentDao, SubscriptionDao
from webstudio.database.exceptions import MissingReferenceError


@pytest.mark.repository
class TestPaymentDao:
    """Test suite for PaymentDao."""

    def test_create_payment_defaults_to_euro(self, db_session, sample_user):
        payment = PaymentDao().createPayment(
            db_session,
            InsertPayment(
                user_id=sample_user.id,
                stripe_payment_id="pi_001",
                amount=Decimal("49.99"),
                status="pending",
                payment_type="maintenance_site",
            ),
        )
        assert payment.currency == "EUR"
        assert payment.amount == Decimal("49.99")
        assert payment.payment_code_id is None

    def test_payment_with_unknown_code_is_rejected(self, db_session):
        with pytest.raises(MissingReferenceError):
            PaymentDao().createPayment(
                db_session,
                InsertPayment(
                    stripe_payment_id="pi_002",
                    amount=Decimal("10.00"),
                    status="pending",
                    payment_type="code_payment",
                    payment_code_id=321,
                ),
            )
        db_session.rollback()

    def test_payments_by_user_and_status_update(self, db_session, sample_user, other_user):
        dao = PaymentDao()
        mine = dao.createPayment(
            db_session,
            InsertPayment(user_id=sample_user.id, stripe_payment_id="pi_a", amount=Decimal("5.00"),
                          status="pending", payment_type="custom"),
        )
        dao.createPayment(
            db_session,
            InsertPayment(user_id=other_user.id, stripe_payment_id="pi_b", amount=Decimal("6.00"),
                          status="pending", payment_type="custom"),
        )

        assert [p.id for p in dao.getPaymentsByUser(db_session, sample_user.id)] == [mine.id]
        assert len(dao.getAllPayments(db_session)) == 2

        updated = dao.updatePaymentStatus(db_session, mine.id, "succeeded")
        assert updated.status == "succeeded"
        assert dao.updatePaymentStatus(db_session, 999, "failed") is None
        assert dao.getPayment(db_session, 999) is None


@pytest.mark.repository
class TestSubscriptionDao:
    """Test suite for SubscriptionDao."""

    def test_create_and_get(self, db_session, sample_subscription):
        dao = SubscriptionDao()
        fetched = dao.getSubscription(db_session, sample_subscription.id)
        assert fetched is sample_subscription
        assert fetched.amount == Decimal("29.90")
        assert fetched.current_period_end is None

    def test_subscription_requires_user(self, db_session):
        with pytest.raises(MissingReferenceError):
            SubscriptionDao().createSubscription(
                db_session,
                InsertSubscription(
                    user_id=77,
                    stripe_subscription_id="sub_x",
                    stripe_customer_id="cus_x",
                    plan_type="app_maintenance",
                    amount=Decimal("59.00"),
                    status="active",
                ),
            )
        db_session.rollback()

    def test_update_status(self, db_session, sample_subscription):
        dao = SubscriptionDao()
        updated = dao.updateSubscriptionStatus(db_session, sample_subscription.id, "past_due")
        assert updated.status == "past_due"
        assert dao.updateSubscriptionStatus(db_session, 404, "canceled") is None

    def test_by_user_newest_first(self, db_session, sample_user, sample_subscription):
        dao = SubscriptionDao()
        newer = dao.createSubscription(
            db_session,
            InsertSubscription(
                user_id=sample_user.id,
                stripe_subscription_id="sub_456",
                stripe_customer_id="cus_123",
                plan_type="app_maintenance",
                amount=Decimal("59.00"),
                status="active",
                current_period_start=datetime(2026, 10, 1),
                current_period_end=datetime(2026, 11, 1),
            ),
        )
        assert [s.id for s in dao.getSubscriptionsByUser(db_session, sample_user.id)] == [
            newer.id,
            sample_subscription.id,
        ]
        assert len(dao.getAllSubscriptions(db_session)) == 2

    def test_subscriptions_with_users(self, db_session, sample_user, sample_subscription):
        rows = SubscriptionDao().getAllSubscriptionsWithUsers(db_session)

        assert len(rows) == 1
        assert isinstance(rows[0], SubscriptionWithUser)
        assert rows[0].id == sample_subscription.id
        assert rows[0].user.email == sample_user.email

    def test_subscription_with_missing_user_keeps_the_row(self, loose_session):
        dao = SubscriptionDao()
        dao.createSubscription(
            loose_session,
            InsertSubscription(
                user_id=900,
                stripe_subscription_id="sub_orphan",
                stripe_customer_id="cus_orphan",
                plan_type="site_maintenance",
                amount=Decimal("19.00"),
                status="unpaid",
            ),
        )

        rows = dao.getAllSubscriptionsWithUsers(loose_session)

        assert len(rows) == 1
        assert rows[0].stripe_subscription_id == "sub_orphan"
        assert rows[0].user is None
