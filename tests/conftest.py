"""
Pytest configuration and shared fixtures for the data layer tests.

Every test gets its own in-memory SQLite database. Foreign keys are enforced
through ``PRAGMA foreign_keys=ON`` except on the ``loose_session`` engine, which
lets tests plant rows whose references are missing.
"""

import os

os.environ.setdefault("DB_DRIVER_NAME", "sqlite")
os.environ.setdefault("DB_DATABASE_NAME", ":memory:")

from decimal import Decimal

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

import webstudio.database.entities  # noqa: F401  registers every table
from webstudio.api.models import InsertPaymentCode, InsertSubscription, InsertUser
from webstudio.database.config.connection_engine import connection_engine, declarativeBase
from webstudio.database.daos import PaymentCodeDao, SubscriptionDao, UserDao
from webstudio.database.helpers.transactionManagement import SessionFactory


def build_engine(enforce_foreign_keys: bool = True):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if enforce_foreign_keys:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    declarativeBase.metadata.create_all(engine)
    return engine


@pytest.fixture
def engine():
    engine = build_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """A session on a fresh database; rolled back and closed after the test."""
    session = Session(bind=engine, expire_on_commit=False)
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def loose_session():
    """A session on a database that does not enforce foreign keys."""
    engine = build_engine(enforce_foreign_keys=False)
    session = Session(bind=engine, expire_on_commit=False)
    yield session
    session.rollback()
    session.close()
    engine.dispose()


@pytest.fixture
def bound_session_factory(engine):
    """Point `@transactional` at the test engine for the duration of a test."""
    SessionFactory.configure(bind=engine)
    yield SessionFactory
    SessionFactory.configure(bind=connection_engine)


@pytest.fixture
def sample_user(db_session):
    """A signed-in Google user."""
    user = UserDao().createUser(
        db_session,
        InsertUser(
            google_id="google-1001",
            email="ana.silva@example.pt",
            username="anasilva",
            display_name="Ana Silva",
        ),
    )
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    user = UserDao().createUser(
        db_session,
        InsertUser(
            google_id="google-1002",
            email="joao.costa@example.pt",
            username="joaocosta",
            display_name="João Costa",
        ),
    )
    db_session.commit()
    return user


@pytest.fixture
def sample_payment_code(db_session):
    """An unused 6-character code worth 150.00."""
    code = PaymentCodeDao().createPaymentCode(
        db_session,
        InsertPaymentCode(code="A1B2C3", amount=Decimal("150.00"), description="Landing page"),
    )
    db_session.commit()
    return code


@pytest.fixture
def sample_subscription(db_session, sample_user):
    subscription = SubscriptionDao().createSubscription(
        db_session,
        InsertSubscription(
            user_id=sample_user.id,
            stripe_subscription_id="sub_123",
            stripe_customer_id="cus_123",
            plan_type="site_maintenance",
            amount=Decimal("29.90"),
            status="active",
        ),
    )
    db_session.commit()
    return subscription


@pytest.fixture
def quote_steps():
    """Valid payloads for the five quote wizard steps."""
    return {
        "step1": {
            "first_name": "Ana",
            "last_name": "Silva",
            "email": "ana.silva@example.pt",
            "phone": "912345678",
        },
        "step2": {"service_type": "website"},
        "step3": {"business_segment": "Restauração"},
        "step4": {"additionals": ["payment_online", "scheduling"]},
        "step5": {"project_description": "Site com reservas online"},
    }
