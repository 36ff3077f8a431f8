"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package encapsulates all interactions with the ORM entities and
exposes one method per read/write operation needed by the site.

Conventions
-----------
- Every method takes the active SQLAlchemy `Session` as its first argument
- Writes flush (generated ids and defaults are populated) but never commit;
  session lifecycle belongs to callers or `@transactional`
- Point lookups return None when nothing matches; listings return lists
- Deletes are physical and return True only when a row was removed
- Constraint failures surface as `DuplicateValueError`, `MissingReferenceError`
  or `InvalidValueError`; other database errors are logged and re-raised

Contents
--------
- UserDao            getUser, getUserByEmail, getUserByGoogleId, createUser, updateUser, getAllUsers
- QuoteDao           createQuote, getQuote, getAllQuotes, getQuotesByUser, updateQuoteStatus
- ProjectDao         createProject, getProject, getAllProjects, getActiveProjects, updateProject, deleteProject
- ReviewDao          createReview, getReview, getAllReviews, getReviewsByUser, getApprovedReviews,
                     approveReview, deleteReview
- PaymentCodeDao     createPaymentCode, getPaymentCodeByCode, getAllPaymentCodes, getUsedPaymentCodes,
                     markPaymentCodeAsUsed, deletePaymentCode
- PaymentDao         createPayment, getPayment, getPaymentsByUser, getAllPayments, updatePaymentStatus
- SubscriptionDao    createSubscription, getSubscription, getSubscriptionsByUser, getAllSubscriptions,
                     getAllSubscriptionsWithUsers, updateSubscriptionStatus
- MonthlyReportDao   createMonthlyReport, getMonthlyReport, getAllMonthlyReports
- ChatMessageDao     createChatMessage, getChatMessagesBySession
"""

from webstudio.database.daos.user_dao import UserDao
from webstudio.database.daos.quote_dao import QuoteDao
from webstudio.database.daos.project_dao import ProjectDao
from webstudio.database.daos.review_dao import ReviewDao
from webstudio.database.daos.payment_code_dao import PaymentCodeDao
from webstudio.database.daos.payment_dao import PaymentDao
from webstudio.database.daos.subscription_dao import SubscriptionDao
from webstudio.database.daos.monthly_report_dao import MonthlyReportDao
from webstudio.database.daos.chat_message_dao import ChatMessageDao

__all__ = [
    "UserDao",
    "QuoteDao",
    "ProjectDao",
    "ReviewDao",
    "PaymentCodeDao",
    "PaymentDao",
    "SubscriptionDao",
    "MonthlyReportDao",
    "ChatMessageDao",
]
