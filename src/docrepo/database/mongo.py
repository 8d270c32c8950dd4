"""
MongoDB Connection for Document Repositories

This module wires pymongo's async client from Config and hands out
CollectionModel handles. Pooling, retries and query execution stay with
the driver.
"""

import logging
from typing import Any, Optional, Type

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from docrepo.config import Config, ConfigurationError
from docrepo.database.model import CollectionModel, TDocument
from docrepo.services.abstract import DatabaseService

logger = logging.getLogger(__name__)


class MongoConnection(DatabaseService):
    """Process-wide MongoDB connection"""

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database_name: Optional[str] = None,
        server_selection_timeout_ms: Optional[int] = None,
        app_name: Optional[str] = None,
    ):
        """
        Initialize connection settings

        Args:
            mongo_uri: MongoDB connection URI (Config.MONGODB_URI by default)
            database_name: Name of the database (Config.DATABASE_NAME by default)
            server_selection_timeout_ms: Server selection timeout
            app_name: Application name reported to the server
        """
        self.mongo_uri = mongo_uri or Config.MONGODB_URI
        self.database_name = database_name or Config.DATABASE_NAME
        self.server_selection_timeout_ms = server_selection_timeout_ms or Config.MONGODB_SERVER_SELECTION_TIMEOUT_MS
        self.app_name = app_name or Config.MONGODB_APP_NAME
        self.client: Optional[AsyncMongoClient] = None

    async def connect(self) -> None:
        """Create the client and verify the server is reachable"""
        if self.client is not None:
            return

        client = AsyncMongoClient(
            self.mongo_uri,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            appname=self.app_name,
        )
        try:
            await client.admin.command("ping")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            await client.close()
            raise

        self.client = client
        logger.info(f"Connected to MongoDB database {self.database_name}")

    async def disconnect(self) -> None:
        """Close the client if it is open"""
        if self.client is None:
            return
        await self.client.close()
        self.client = None
        logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """Health check; False when closed or the server does not answer"""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    @property
    def database(self) -> AsyncDatabase:
        return self._require_client()[self.database_name]

    def model(self, collection_name: str, document_class: Type[TDocument]) -> CollectionModel[TDocument]:
        """Bind collection_name to document_class"""
        return CollectionModel(self.database[collection_name], document_class)

    def start_session(self, **kwargs: Any) -> Any:
        """Start a driver session; lets a MongoConnection serve as a repository's connection"""
        return self._require_client().start_session(**kwargs)

    def _require_client(self) -> AsyncMongoClient:
        if self.client is None:
            raise ConfigurationError("MongoDB connection is not open. Call connect() first.")
        return self.client

    async def __aenter__(self) -> "MongoConnection":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()
