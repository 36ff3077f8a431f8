"""
The `helpers` package provides utilities that support database operations
and cross-cutting concerns.

Contents
--------
- transactionManagement
    Session factory, the `db_session_context` context variable and the
    `@transactional` decorator:
        - Reuses an existing session if one is active in context
        - Creates, commits, and closes a new session otherwise
        - Rolls back the session on errors

- integrity
    Translation of SQLAlchemy `IntegrityError` into `DuplicateValueError`,
    `MissingReferenceError` and `InvalidValueError`, and `flush_or_raise`
    used by every DAO write.
"""
