"""
Entities Package — SQLAlchemy 2.0 ORM Models
============================================

The `entities` package maps the site's tables to Python classes using
SQLAlchemy 2.0-typed mappings. The DAOs (`daos` package) consume these
classes to perform CRUD operations.

Conventions
-----------
- Integer auto-incrementing primary keys
- Timezone-aware ``created_at`` defaulted to insertion time (UTC)
- Amounts as numeric(10, 2) (`Decimal` in Python)
- Enumerated string fields and ranges enforced with named CHECK constraints
- No ORM relationships: related rows are looked up explicitly by the DAOs

Contents
--------
- User:           OAuth account; owns quotes, reviews, payments, subscriptions
- Quote:          multi-step quote request, optional owner
- Project:        portfolio item ordered by ``display_order``
- Review:         rating 1–5 with moderation flag
- PaymentCode:    single-use six-character payment code
- Payment:        one-time payment, optionally authorized by a PaymentCode
- Subscription:   recurring maintenance plan
- MonthlyReport:  aggregate counters, unique per (month, year)
- ChatMessage:    chatbot exchange keyed by a free-text session id

Importing this package registers every table on the shared metadata.
"""

from webstudio.database.entities.user import User
from webstudio.database.entities.quote import Quote
from webstudio.database.entities.project import Project
from webstudio.database.entities.review import Review
from webstudio.database.entities.payment_code import PaymentCode
from webstudio.database.entities.payment import Payment
from webstudio.database.entities.subscription import Subscription
from webstudio.database.entities.monthly_report import MonthlyReport
from webstudio.database.entities.chat_message import ChatMessage

__all__ = [
    "User",
    "Quote",
    "Project",
    "Review",
    "PaymentCode",
    "Payment",
    "Subscription",
    "MonthlyReport",
    "ChatMessage",
]
