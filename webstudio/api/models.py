"""
Pydantic models used as data contracts for the data access layer.

- ``Insert*`` models are the field sets a caller may supply when creating a row.
  They never carry ``id``, ``created_at`` or server-controlled fields
  (``Review.is_approved``, ``PaymentCode.is_used``, ``PaymentCode.used_at``).
  Defaults mirror the column defaults of the matching entity.
- ``*Update`` models describe partial updates; only fields explicitly set are written.
- ``*Read`` models are built from ORM rows (``from_attributes``) for the
  composite results that attach a related user.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from webstudio.database.entities.columns import (
    DEFAULT_COUNTRY_CODE,
    DEFAULT_CURRENCY,
    PAYMENT_CODE_LENGTH,
)

QuoteServiceType = Literal["website", "app"]
QuoteStatus = Literal["pending", "in_progress", "completed", "rejected"]
MediaType = Literal["image", "video"]
PaymentStatus = Literal["pending", "succeeded", "failed"]
PaymentType = Literal["maintenance_site", "maintenance_app", "code_payment", "custom"]
PlanType = Literal["site_maintenance", "app_maintenance"]
SubscriptionStatus = Literal["active", "past_due", "canceled", "unpaid"]

Amount = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]


class InsertUser(BaseModel):
    """Fields required to create a user from an OAuth profile."""
    google_id: Optional[str] = Field(None, description="Google OAuth subject identifier.")
    email: str
    username: str
    display_name: str
    avatar_url: Optional[str] = None
    is_admin: bool = False


class UserUpdate(BaseModel):
    """Partial update of a user; unset fields are left untouched."""
    google_id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    is_admin: Optional[bool] = None


class InsertQuote(BaseModel):
    """A complete quote request, usually composed from the five form steps."""
    user_id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    phone: str
    country_code: str = DEFAULT_COUNTRY_CODE
    service_type: QuoteServiceType
    business_segment: str
    additionals: Optional[List[str]] = None
    project_description: Optional[str] = None
    status: QuoteStatus = "pending"


class InsertProject(BaseModel):
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    project_url: Optional[str] = None
    media_type: MediaType = "image"
    is_active: bool = True
    display_order: int = 0


class ProjectUpdate(BaseModel):
    """Partial update of a portfolio project."""
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    project_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class InsertReview(BaseModel):
    user_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class InsertPaymentCode(BaseModel):
    code: str = Field(..., min_length=PAYMENT_CODE_LENGTH, max_length=PAYMENT_CODE_LENGTH)
    amount: Amount
    description: Optional[str] = None


class InsertPayment(BaseModel):
    user_id: Optional[int] = None
    stripe_payment_id: str
    amount: Amount
    currency: str = DEFAULT_CURRENCY
    status: PaymentStatus
    payment_type: PaymentType
    payment_code_id: Optional[int] = None


class InsertSubscription(BaseModel):
    user_id: int
    stripe_subscription_id: str
    stripe_customer_id: str
    plan_type: PlanType
    amount: Amount
    status: SubscriptionStatus
    current_period_start: Optional[datetime] = None
    current_period_end: Optional[datetime] = None


class InsertMonthlyReport(BaseModel):
    month: int = Field(..., ge=1, le=12)
    year: int
    total_revenue: Amount = Decimal("0")
    total_clients: int = 0
    active_subscriptions: int = 0
    past_due_subscriptions: int = 0
    new_quotes: int = 0
    completed_projects: int = 0


class InsertChatMessage(BaseModel):
    session_id: str
    user_message: Optional[str] = None
    bot_response: Optional[str] = None


class UserRead(BaseModel):
    """User as attached to composite results."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    google_id: Optional[str]
    email: str
    username: str
    display_name: str
    avatar_url: Optional[str]
    is_admin: bool
    created_at: Optional[datetime]


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    rating: int
    comment: Optional[str]
    is_approved: bool
    created_at: Optional[datetime]


class ReviewWithUser(ReviewRead):
    """An approved review with its author, or ``user=None`` if the author row is gone."""
    user: Optional[UserRead] = None


class SubscriptionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    stripe_subscription_id: str
    stripe_customer_id: str
    plan_type: str
    amount: Decimal
    status: str
    current_period_start: Optional[datetime]
    current_period_end: Optional[datetime]
    created_at: Optional[datetime]


class SubscriptionWithUser(SubscriptionRead):
    """A subscription joined with its subscriber, ``user=None`` when the join finds no row."""
    user: Optional[UserRead] = None
