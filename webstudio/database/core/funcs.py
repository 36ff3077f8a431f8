"""
Service-layer operations composing the DAOs.

All functions are wrapped with the `@transactional` decorator, which manages
SQLAlchemy sessions and transactions automatically. Each function receives an
injected `session: Session` from the decorator; callers pass everything else
by keyword.

Form payloads are validated before any DAO is called, so a
`FormValidationError` never leaves a partial write behind.
"""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy.orm import Session

from webstudio.api.forms import (
    PaymentCodeForm,
    QuoteFormStep1,
    QuoteFormStep2,
    QuoteFormStep3,
    QuoteFormStep4,
    QuoteFormStep5,
    ReviewForm,
    validate_form,
)
from webstudio.api.models import InsertChatMessage, InsertPayment, InsertQuote, InsertReview
from webstudio.database.daos.chat_message_dao import ChatMessageDao
from webstudio.database.daos.payment_code_dao import PaymentCodeDao
from webstudio.database.daos.payment_dao import PaymentDao
from webstudio.database.daos.quote_dao import QuoteDao
from webstudio.database.daos.review_dao import ReviewDao
from webstudio.database.entities.chat_message import ChatMessage
from webstudio.database.entities.payment import Payment
from webstudio.database.entities.quote import Quote
from webstudio.database.entities.review import Review
from webstudio.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)


def build_quote(
    step1: Mapping[str, Any],
    step2: Mapping[str, Any],
    step3: Mapping[str, Any],
    step4: Optional[Mapping[str, Any]] = None,
    step5: Optional[Mapping[str, Any]] = None,
    user_id: Optional[int] = None,
) -> InsertQuote:
    """
    Validate the five quote wizard steps and merge them into one quote.

    Steps 4 and 5 are optional on the site and may be omitted.

    Raises
    ------
    FormValidationError
        From the first step that fails validation.
    """
    contact = validate_form(QuoteFormStep1, step1)
    service = validate_form(QuoteFormStep2, step2)
    segment = validate_form(QuoteFormStep3, step3)
    extras = validate_form(QuoteFormStep4, step4 or {})
    description = validate_form(QuoteFormStep5, step5 or {})
    return InsertQuote(
        user_id=user_id,
        **contact.model_dump(),
        **service.model_dump(),
        **segment.model_dump(),
        **extras.model_dump(),
        **description.model_dump(),
    )


@transactional
def submit_quote(
    session: Session,
    step1: Mapping[str, Any],
    step2: Mapping[str, Any],
    step3: Mapping[str, Any],
    step4: Optional[Mapping[str, Any]] = None,
    step5: Optional[Mapping[str, Any]] = None,
    user_id: Optional[int] = None,
) -> Quote:
    """
    Store a quote request submitted through the wizard.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    step1 … step5 : Mapping
        Raw payloads of each wizard step.
    user_id : int | None
        Signed-in visitor, or None for an anonymous request.

    Returns
    -------
    Quote
        The stored quote, status "pending".
    """
    quote = build_quote(step1, step2, step3, step4, step5, user_id=user_id)
    stored = QuoteDao().createQuote(session, quote)
    logger.info("Stored quote %s (%s)", stored.id, stored.service_type)
    return stored


@transactional
def submit_review(session: Session, user_id: int, payload: Mapping[str, Any]) -> Review:
    """
    Validate the review form and store an unapproved review for `user_id`.

    Raises
    ------
    FormValidationError
        If the rating or comment is invalid.
    MissingReferenceError
        If the user does not exist.
    """
    form = validate_form(ReviewForm, payload)
    review = ReviewDao().createReview(
        session, InsertReview(user_id=user_id, rating=form.rating, comment=form.comment)
    )
    logger.info("Stored review %s awaiting approval", review.id)
    return review


@transactional
def redeem_payment_code(
    session: Session,
    payload: Mapping[str, Any],
    stripe_payment_id: str,
    user_id: Optional[int] = None,
) -> Optional[Payment]:
    """
    Redeem a payment code and record the matching payment in one transaction.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    payload : Mapping
        Redemption form values: name, email, code.
    stripe_payment_id : str
        Provider reference of the successful charge.
    user_id : int | None
        Signed-in visitor, if any.

    Returns
    -------
    Payment | None
        The recorded `code_payment`, or None if the code does not exist.

    Raises
    ------
    FormValidationError
        If the form is invalid.
    PaymentCodeAlreadyUsedError
        If the code was already redeemed; nothing is written.
    """
    form = validate_form(PaymentCodeForm, payload)
    payment_code = PaymentCodeDao().markPaymentCodeAsUsed(
        session, form.code, str(form.email), form.name, stripe_payment_id
    )
    if payment_code is None:
        logger.info("Unknown payment code %s", form.code)
        return None

    payment = PaymentDao().createPayment(
        session,
        InsertPayment(
            user_id=user_id,
            stripe_payment_id=stripe_payment_id,
            amount=payment_code.amount,
            status="succeeded",
            payment_type="code_payment",
            payment_code_id=payment_code.id,
        ),
    )
    logger.info("Payment code %s redeemed by %s", payment_code.code, payment_code.used_by_email)
    return payment


@transactional
def record_chat_exchange(
    session: Session,
    session_id: str,
    user_message: Optional[str] = None,
    bot_response: Optional[str] = None,
) -> ChatMessage:
    """Store one chatbot exchange."""
    return ChatMessageDao().createChatMessage(
        session,
        InsertChatMessage(session_id=session_id, user_message=user_message, bot_response=bot_response),
    )


@transactional
def get_chat_history(session: Session, session_id: str) -> List[ChatMessage]:
    """Exchanges of one chat session, oldest first."""
    return ChatMessageDao().getChatMessagesBySession(session, session_id)
