"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy database sessions
using Python context variables and a decorator-based transaction wrapper.

It allows a database session to propagate across function calls without
explicitly threading it through arguments. Functions decorated with
``@transactional`` run inside a managed transactional context.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of an existing session (nested service calls share one transaction)
- Automatic commit and rollback handling
- Clean session closure after execution

``SessionFactory`` is bound to the application engine; tests rebind it with
``SessionFactory.configure(bind=...)``.
"""

import contextvars
import logging
from functools import wraps

from sqlalchemy.orm import sessionmaker

from webstudio.database.config.connection_engine import connection_engine

logger = logging.getLogger(__name__)

SessionFactory = sessionmaker(bind=connection_engine, expire_on_commit=False)
"""Session factory. ``expire_on_commit=False`` keeps returned rows readable after the session closes."""

db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy session."""


def transactional(func):
    """
    Decorator to wrap functions in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused and left open.
    - Otherwise, a new session is created, committed, and closed.
    - On errors, the session is rolled back and closed, and the error re-raised.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    callable
        The wrapped function, executed within a database transaction.

    Example
    -------
    >>> @transactional
    ... def count_users(session=None):
    ...     return len(UserDao().getAllUsers(session))
    ...
    >>> count_users()
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        session = db_session_context.get()
        if session is not None:
            return func(*args, session=session, **kwargs)

        session = SessionFactory()
        token = db_session_context.set(session)

        try:
            result = func(*args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            logger.debug("Rolling back transaction for %s", func.__qualname__)
            session.rollback()
            raise
        finally:
            session.close()
            db_session_context.reset(token)

        return result

    return wrap_func
