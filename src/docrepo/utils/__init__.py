"""
Utilities Package for the Document Repository

This package provides the error types raised by the repository layer.
"""

from .error_handler import (
    RepositoryError,
    DocumentNotFoundError,
    TransactionError,
)

__all__ = [
    "RepositoryError",
    "DocumentNotFoundError",
    "TransactionError",
]
