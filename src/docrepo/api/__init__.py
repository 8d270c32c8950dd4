"""
API Package for the Document Repository

Optional FastAPI integration; the repository core does not import it.
"""

from .errors import register_exception_handlers

__all__ = [
    "register_exception_handlers",
]
