"""
Generic Document Repository Package

A reusable data-access layer over MongoDB. Concrete entity repositories
supply a CollectionModel and a connection and get create, find, update,
upsert and transaction operations for free.

The package is organized into logical modules:
- docrepo.database: repository, collection model, transactions, connection
- docrepo.schema: base document model
- docrepo.config: configuration management
- docrepo.utils: error types
- docrepo.api: optional FastAPI error mapping
"""

__version__ = "1.0.0"

from docrepo.database import AbstractRepository, CollectionModel, SaveOptions, TransactionScope
from docrepo.schema import AbstractDocument
from docrepo.utils import DocumentNotFoundError, RepositoryError

__all__ = [
    "AbstractDocument",
    "AbstractRepository",
    "CollectionModel",
    "DocumentNotFoundError",
    "RepositoryError",
    "SaveOptions",
    "TransactionScope",
]
