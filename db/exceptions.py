"""
db/exceptions.py
----------------
Error types raised by the data-access layer.
Driver-level exceptions (psycopg2.Error) never leave a repository unwrapped.
"""

from typing import Any, Optional


class TollDataError(Exception):
    """Base exception for the toll data-access layer."""


class ConfigurationError(TollDataError):
    """Raised when an operation runs before a connection has been bound."""


class DataAccessError(TollDataError):
    """
    Raised when a statement fails in the store, or when a mutating
    statement affects no rows.

    Attributes:
        operation: Name of the gateway operation that failed.
        key: The id the operation targeted.
        cause: The original driver exception, if any.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Any = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.key = key
        self.cause = cause
