"""
Services Package for the Document Repository

This package provides service interfaces used by the database layer.
"""

from .abstract import DatabaseService

__all__ = [
    "DatabaseService",
]
