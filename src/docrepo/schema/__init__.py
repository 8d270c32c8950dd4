"""
Schema Package for the Document Repository

This package contains the base document model shared by all entities.
"""

from .base import AbstractDocument

__all__ = [
    "AbstractDocument",
]
