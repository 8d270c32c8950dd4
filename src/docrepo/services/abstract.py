"""
Service Interfaces

Lifecycle contract for the database connection handed to repositories.
"""

from abc import ABC, abstractmethod


class DatabaseService(ABC):
    """Interface for a database connection lifecycle"""

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection and verify the server answers"""

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the connection; safe to call when already closed"""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the server is reachable"""
