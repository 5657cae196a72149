"""
MongoDB Connection
==================

Builds the MongoDB client for the note store and hands out database handles.
The DI container owns one manager; repositories receive a Database from it.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from notekeeper.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Lazily connects using the configured URI and database name.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[MongoClient] = None):
        self._settings = settings or get_settings()
        self._client: Optional[MongoClient] = client
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is None:
            if not self._settings.mongo_uri:
                raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
            self._client = MongoClient(
                self._settings.mongo_uri,
                serverSelectionTimeoutMS=self._settings.mongo_timeout_ms,
            )

        db_name = self._settings.mongo_database_name
        self._database = self._client[db_name]
        logger.info("Connected to MongoDB database %s", db_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
