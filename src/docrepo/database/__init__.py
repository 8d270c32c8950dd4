"""
Database Package for the Document Repository

This package provides the generic repository, the collection model handle,
transaction scoping and the MongoDB connection helper.
"""

from .abstract import AbstractRepository, SaveOptions
from .model import CollectionModel
from .mongo import MongoConnection
from .transaction import TransactionScope

__all__ = [
    "AbstractRepository",
    "SaveOptions",
    "CollectionModel",
    "MongoConnection",
    "TransactionScope",
]
