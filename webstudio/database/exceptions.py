"""
Storage exceptions raised by the DAOs.

Absence is never an exception: point lookups return ``None``. Connectivity and
query execution errors are SQLAlchemy's own exceptions, propagated unchanged.
"""

from typing import Optional


class StorageError(Exception):
    """Base class for errors raised by the data access layer."""


class ConstraintViolationError(StorageError):
    """
    A database constraint rejected an insert, update or delete.

    Attributes
    ----------
    constraint : str | None
        Constraint name reported by the database (PostgreSQL), or the
        ``table.column`` / constraint target reported by SQLite.
    detail : str
        Raw driver message.
    """

    def __init__(self, constraint: Optional[str], detail: str):
        self.constraint = constraint
        self.detail = detail
        super().__init__(f"{type(self).__name__}: {constraint or 'unknown constraint'} ({detail})")


class DuplicateValueError(ConstraintViolationError):
    """A unique constraint was violated (e.g., duplicate email or payment code)."""


class MissingReferenceError(ConstraintViolationError):
    """A foreign key points to a row that does not exist, or a referenced row was deleted."""


class InvalidValueError(ConstraintViolationError):
    """A check or not-null constraint was violated."""


class PaymentCodeAlreadyUsedError(StorageError):
    """The payment code exists but was already redeemed."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Payment code {code!r} has already been used")
