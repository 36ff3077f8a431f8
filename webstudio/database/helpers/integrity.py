"""
Integrity error translation
===========================

Maps SQLAlchemy ``IntegrityError`` instances onto the storage exception
taxonomy so callers can tell a duplicate value from a dangling reference
without parsing driver messages themselves.

PostgreSQL (psycopg2) exposes a SQLSTATE (``pgcode``) and the violated
constraint name (``diag.constraint_name``). SQLite only provides a message such
as ``UNIQUE constraint failed: users.email``; the part after the colon is used
as the constraint target.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.database.exceptions import (
    ConstraintViolationError,
    DuplicateValueError,
    InvalidValueError,
    MissingReferenceError,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"

_SQLITE_PREFIXES = {
    "UNIQUE constraint failed": DuplicateValueError,
    "FOREIGN KEY constraint failed": MissingReferenceError,
    "CHECK constraint failed": InvalidValueError,
    "NOT NULL constraint failed": InvalidValueError,
}

_SQLSTATES = {
    UNIQUE_VIOLATION: DuplicateValueError,
    FOREIGN_KEY_VIOLATION: MissingReferenceError,
    CHECK_VIOLATION: InvalidValueError,
    NOT_NULL_VIOLATION: InvalidValueError,
}


def _sqlite_target(message: str) -> Optional[str]:
    _, sep, target = message.partition(":")
    target = target.strip()
    return target if sep and target else None


def translate_integrity_error(error: IntegrityError) -> ConstraintViolationError:
    """
    Build the storage exception matching an ``IntegrityError``.

    Parameters
    ----------
    error : IntegrityError
        The exception raised by SQLAlchemy on flush or execute.

    Returns
    -------
    ConstraintViolationError
        A `DuplicateValueError`, `MissingReferenceError` or `InvalidValueError`
        when the kind of violation is recognised, the base class otherwise.
    """
    orig = error.orig
    message = str(orig).strip()

    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in _SQLSTATES:
        diag = getattr(orig, "diag", None)
        constraint = getattr(diag, "constraint_name", None)
        return _SQLSTATES[sqlstate](constraint, message)

    for prefix, exc_type in _SQLITE_PREFIXES.items():
        if message.startswith(prefix):
            return exc_type(_sqlite_target(message), message)

    return ConstraintViolationError(None, message)


def flush_or_raise(session: Session, operation: str, refresh: Optional[object] = None) -> None:
    """
    Flush pending changes, translating integrity failures.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session.
    operation : str
        ``Dao.method`` label used in the log line.
    refresh : object | None
        A just-inserted row to reload after the flush, so server-side defaults
        are populated.

    Raises
    ------
    ConstraintViolationError
        If the database rejects the pending changes. The session must be
        rolled back by the caller afterwards.
    SQLAlchemyError
        Any other database failure, logged and re-raised unchanged.
    """
    try:
        session.flush()
        if refresh is not None:
            session.refresh(refresh)
    except IntegrityError as e:
        logger.error("Error in %s. Error Message: %s", operation, e.orig)
        raise translate_integrity_error(e) from e
    except SQLAlchemyError as e:
        logger.error("Error in %s. Error Message: %s", operation, e)
        raise
