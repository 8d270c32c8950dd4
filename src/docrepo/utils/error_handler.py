"""
Error Handler Module for the Document Repository

Only the not-found signal and transaction misuse are raised here.
Driver failures (pymongo.errors.PyMongoError and friends) are never
translated and reach the caller as raised by pymongo.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional


class RepositoryError(Exception):
    """Base exception for repository errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)


class DocumentNotFoundError(RepositoryError):
    """Raised when a filter matches no document"""

    def __init__(self, filter_query: Optional[Mapping[str, Any]] = None, message: str = "Document not found"):
        super().__init__(message, error_code="NOT_FOUND")
        self.filter_query = dict(filter_query) if filter_query is not None else None


class TransactionError(RepositoryError):
    """Raised when a transaction scope is used outside its lifecycle"""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, error_code="TRANSACTION_ERROR")
        self.operation = operation


__all__ = [
    "RepositoryError",
    "DocumentNotFoundError",
    "TransactionError",
]
