"""
Shared column types, defaults and enumerated values for the ORM models.
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, Numeric, Text
from sqlalchemy.dialects.postgresql import ARRAY

QUOTE_SERVICE_TYPES = ("website", "app")
QUOTE_STATUSES = ("pending", "in_progress", "completed", "rejected")
PROJECT_MEDIA_TYPES = ("image", "video")
PAYMENT_STATUSES = ("pending", "succeeded", "failed")
PAYMENT_TYPES = ("maintenance_site", "maintenance_app", "code_payment", "custom")
SUBSCRIPTION_PLAN_TYPES = ("site_maintenance", "app_maintenance")
SUBSCRIPTION_STATUSES = ("active", "past_due", "canceled", "unpaid")

DEFAULT_COUNTRY_CODE = "+351"
DEFAULT_CURRENCY = "EUR"
PAYMENT_CODE_LENGTH = 6

Money = Numeric(precision=10, scale=2, asdecimal=True)
"""Amounts are stored with two decimal places."""

TextArray = ARRAY(Text).with_variant(JSON(), "sqlite")
"""Native text[] on PostgreSQL, JSON list on SQLite."""


def utc_now() -> datetime:
    """Insertion-time default for ``created_at`` / ``used_at`` columns."""
    return datetime.now(timezone.utc)


def one_of(column: str, values) -> str:
    """SQL for a CHECK constraint restricting ``column`` to ``values``."""
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"
